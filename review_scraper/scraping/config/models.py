"""
Scraping configuration models.
"""

from __future__ import annotations

from dataclasses import dataclass

WAIT_CONDITIONS = ("domcontentloaded", "load", "networkidle")
DEFAULT_USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) Chrome/120.0.0.0 Safari/537.36"
DEFAULT_BLOCKED_RESOURCE_TYPES = frozenset({"image", "stylesheet", "font", "media"})


@dataclass(frozen=True)
class NavigationStrategy:
    """
    One page-load completion condition plus its timeout.
    """

    wait_until: str
    timeout_ms: int

    def __post_init__(self) -> None:
        if self.wait_until not in WAIT_CONDITIONS:
            raise ValueError(
                f"Unknown wait condition '{self.wait_until}'. "
                f"Allowed values: {', '.join(WAIT_CONDITIONS)}."
            )
        if self.timeout_ms <= 0:
            raise ValueError("Navigation timeout must be positive.")


# Cheapest signal first; network idle is only waited for on slow pages.
DEFAULT_NAVIGATION_STRATEGIES = (
    NavigationStrategy(wait_until="domcontentloaded", timeout_ms=30_000),
    NavigationStrategy(wait_until="load", timeout_ms=45_000),
    NavigationStrategy(wait_until="networkidle", timeout_ms=60_000),
)


@dataclass(frozen=True)
class ReviewScrapingSettings:
    """
    Runtime settings for browser-driven review scraping.
    """

    headless: bool = True
    user_agent: str = DEFAULT_USER_AGENT
    default_timeout_ms: int = 60_000
    viewport_width: int = 1920
    viewport_height: int = 1080
    blocked_resource_types: frozenset[str] = DEFAULT_BLOCKED_RESOURCE_TYPES
    navigation_strategies: tuple[NavigationStrategy, ...] = DEFAULT_NAVIGATION_STRATEGIES
    navigation_retry_delay_seconds: float = 2.0
    settle_delay_seconds: float = 3.0
    scroll_step_px: int = 100
    scroll_interval_seconds: float = 0.1
    scroll_max_steps: int = 500
    post_scroll_delay_seconds: float = 2.0
    screenshot_path: str = "error-screenshot.png"
    catalog_path: str | None = None
