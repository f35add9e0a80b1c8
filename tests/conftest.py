"""
Shared pytest fixtures for review scraper tests.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from browser_fakes import FakeSessionManager
from review_scraper.scraping.catalog import DEFAULT_SELECTOR_CATALOG, SelectorCatalog
from review_scraper.scraping.config.models import ReviewScrapingSettings
from review_scraper.scraping.engine import ReviewScrapingEngine
from review_scraper.scraping.extractor import ReviewExtractor
from review_scraper.scraping.navigation import NavigationExecutor
from review_scraper.scraping.scrolling import ContentSettler


# ============================================================================
# Settings and engine fixtures
# ============================================================================


@pytest.fixture
def fast_settings(tmp_path: Path) -> ReviewScrapingSettings:
    """Settings with every delay set to zero and a temp screenshot path."""
    return ReviewScrapingSettings(
        navigation_retry_delay_seconds=0.0,
        settle_delay_seconds=0.0,
        scroll_interval_seconds=0.0,
        post_scroll_delay_seconds=0.0,
        screenshot_path=str(tmp_path / "error-screenshot.png"),
    )


@pytest.fixture
def build_engine(fast_settings: ReviewScrapingSettings):
    """Factory wiring a real engine to a fake session manager."""

    def _build(
        manager: FakeSessionManager,
        *,
        catalog: SelectorCatalog = DEFAULT_SELECTOR_CATALOG,
        extractor: ReviewExtractor | None = None,
    ) -> ReviewScrapingEngine:
        return ReviewScrapingEngine(
            settings=fast_settings,
            catalog=catalog,
            session_manager=manager,
            navigator=NavigationExecutor(
                strategies=fast_settings.navigation_strategies,
                retry_delay_seconds=fast_settings.navigation_retry_delay_seconds,
            ),
            settler=ContentSettler(settings=fast_settings),
            extractor=extractor,
        )

    return _build


# ============================================================================
# HTML fixtures
# ============================================================================


YOTPO_PAGE = """
<html>
<body>
  <h1>Trail Runner 2</h1>
  <div class="yotpo-reviews">
    <div class="yotpo-review">
      <span class="yotpo-user-name">Dana K.</span>
      <div class="yotpo-stars" data-score="10"></div>
      <div class="yotpo-review-title">Best shoes</div>
      <div class="content-review"> Comfortable from the first mile. </div>
    </div>
    <div class="yotpo-review">
      <span class="yotpo-user-name">Lee</span>
      <div class="yotpo-stars" data-score="6"></div>
      <div class="yotpo-review-title">Decent</div>
      <div class="content-review">Runs a bit small.</div>
    </div>
    <div class="yotpo-review">
      <span class="yotpo-user-name">Sam</span>
      <div class="yotpo-stars" data-score="2"></div>
      <div class="yotpo-review-title">Not for me</div>
      <div class="content-review">Sole wore out quickly.</div>
    </div>
  </div>
  <div class="review"><p>Generic review block that must not be used.</p></div>
</body>
</html>
"""

GENERIC_TEXT_PAGE = """
<html>
<body>
  <div class="info">Great rating, 5 stars, review was excellent and detailed enough</div>
</body>
</html>
"""

EMPTY_PAGE = "<html><body><p>Nothing here.</p></body></html>"


@pytest.fixture
def yotpo_page_html() -> str:
    return YOTPO_PAGE


@pytest.fixture
def generic_text_page_html() -> str:
    return GENERIC_TEXT_PAGE


@pytest.fixture
def empty_page_html() -> str:
    return EMPTY_PAGE
