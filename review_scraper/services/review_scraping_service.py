"""
review_scraper/services/review_scraping_service.py

Service orchestration for product review scraping.
"""

from __future__ import annotations

from functools import lru_cache

from review_scraper.domain.reviews import ReviewRecord
from review_scraper.scraping.catalog import SelectorCatalog
from review_scraper.scraping.config import get_review_scraping_settings, get_selector_catalog
from review_scraper.scraping.config.models import ReviewScrapingSettings
from review_scraper.scraping.engine import ReviewScrapingEngine


class ReviewScrapingService:
    """
    Runs the review scraping pipeline for one product page at a time.
    """

    def __init__(
        self,
        *,
        settings: ReviewScrapingSettings | None = None,
        catalog: SelectorCatalog | None = None,
        engine: ReviewScrapingEngine | None = None,
    ) -> None:
        self._settings = settings or get_review_scraping_settings()
        self._engine = engine or ReviewScrapingEngine.from_settings(
            settings=self._settings,
            catalog=catalog or get_selector_catalog(),
        )

    async def fetch_reviews(self, *, url: str) -> list[ReviewRecord]:
        return await self._engine.scrape(url)


@lru_cache(maxsize=1)
def get_review_scraping_service() -> ReviewScrapingService:
    """
    Build and cache the review scraping service.
    """

    return ReviewScrapingService()
