"""
Environment + JSON config loader for review scraping.
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from itertools import chain
from pathlib import Path

import soupsieve

from review_scraper.config import (
    get_bool_env,
    get_float_env,
    get_int_env,
    get_optional_str_env,
    get_str_env,
    project_root,
)
from review_scraper.scraping.catalog import (
    DEFAULT_SELECTOR_CATALOG,
    SelectorBundle,
    SelectorCatalog,
    normalize_selector,
)
from review_scraper.scraping.config.models import DEFAULT_USER_AGENT, ReviewScrapingSettings
from review_scraper.scraping.logging_utils import log_event

logger = logging.getLogger(__name__)

_SELECTOR_FIELDS = ("review_title", "review_text", "rating", "author")


def _resolve_config_path(raw_path: str) -> Path:
    candidate = Path(raw_path)
    if candidate.is_absolute():
        return candidate
    return (project_root() / candidate).resolve()


def _invalid_selectors(selectors: tuple[str, ...]) -> list[str]:
    invalid: list[str] = []
    for selector in selectors:
        try:
            soupsieve.compile(selector)
        except soupsieve.SelectorSyntaxError:
            invalid.append(selector)
    return invalid


@lru_cache(maxsize=1)
def get_review_scraping_settings() -> ReviewScrapingSettings:
    """
    Return cached scraper settings from environment variables.
    """

    catalog_path = get_optional_str_env("REVIEW_SCRAPE_CATALOG_PATH")
    return ReviewScrapingSettings(
        headless=get_bool_env("REVIEW_SCRAPE_HEADLESS", True),
        user_agent=get_str_env("REVIEW_SCRAPE_USER_AGENT", DEFAULT_USER_AGENT),
        default_timeout_ms=max(
            1_000,
            get_int_env("REVIEW_SCRAPE_DEFAULT_TIMEOUT_MS", 60_000),
        ),
        viewport_width=max(320, get_int_env("REVIEW_SCRAPE_VIEWPORT_WIDTH", 1920)),
        viewport_height=max(240, get_int_env("REVIEW_SCRAPE_VIEWPORT_HEIGHT", 1080)),
        navigation_retry_delay_seconds=max(
            0.0,
            get_float_env("REVIEW_SCRAPE_NAVIGATION_RETRY_DELAY_SECONDS", 2.0),
        ),
        settle_delay_seconds=max(
            0.0,
            get_float_env("REVIEW_SCRAPE_SETTLE_DELAY_SECONDS", 3.0),
        ),
        scroll_step_px=max(1, get_int_env("REVIEW_SCRAPE_SCROLL_STEP_PX", 100)),
        scroll_interval_seconds=max(
            0.0,
            get_float_env("REVIEW_SCRAPE_SCROLL_INTERVAL_SECONDS", 0.1),
        ),
        scroll_max_steps=max(1, get_int_env("REVIEW_SCRAPE_SCROLL_MAX_STEPS", 500)),
        post_scroll_delay_seconds=max(
            0.0,
            get_float_env("REVIEW_SCRAPE_POST_SCROLL_DELAY_SECONDS", 2.0),
        ),
        screenshot_path=get_str_env("REVIEW_SCRAPE_SCREENSHOT_PATH", "error-screenshot.png"),
        catalog_path=str(_resolve_config_path(catalog_path)) if catalog_path else None,
    )


@lru_cache(maxsize=1)
def get_selector_catalog() -> SelectorCatalog:
    """
    Return the configured selector catalog, or the built-in one.
    """

    settings = get_review_scraping_settings()
    if settings.catalog_path is None:
        return DEFAULT_SELECTOR_CATALOG
    return load_selector_catalog(config_path=settings.catalog_path)


def load_selector_catalog(*, config_path: str) -> SelectorCatalog:
    """
    Load an ordered selector catalog from a JSON file.

    Entries without a name or a container selector, entries with a selector
    that does not compile, and repeated platform names are skipped; a file
    with no usable entry is rejected.
    """

    path = _resolve_config_path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Selector catalog file not found: {path}")

    raw_data = json.loads(path.read_text(encoding="utf-8"))
    platforms = raw_data.get("platforms", []) if isinstance(raw_data, dict) else None
    if not isinstance(platforms, list):
        raise ValueError("Invalid selector catalog: 'platforms' must be a list.")

    bundles: list[SelectorBundle] = []
    seen: set[str] = set()
    for entry in platforms:
        if not isinstance(entry, dict):
            continue

        name = str(entry.get("name", "")).strip().lower()
        container = normalize_selector(entry.get("review_container"))
        if not name or not container:
            continue

        fields = {field: normalize_selector(entry.get(field)) for field in _SELECTOR_FIELDS}
        invalid = _invalid_selectors(tuple(chain(container, *fields.values())))
        if invalid:
            log_event(
                logger,
                logging.WARNING,
                "catalog_entry_skipped",
                platform=name,
                reason="invalid_selector",
                selectors=invalid,
            )
            continue
        if name in seen:
            log_event(logger, logging.WARNING, "catalog_entry_skipped", platform=name, reason="duplicate_name")
            continue

        seen.add(name)
        bundles.append(SelectorBundle(platform_name=name, review_container=container, **fields))

    if not bundles:
        raise ValueError(f"Selector catalog {path} does not define any usable platform.")
    return SelectorCatalog(bundles=tuple(bundles))
