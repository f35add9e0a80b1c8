"""
Review scraping engine.
"""

from __future__ import annotations

import logging

from review_scraper.domain.reviews import ReviewRecord
from review_scraper.scraping.browser import BrowserSession, BrowserSessionManager
from review_scraper.scraping.catalog import SelectorCatalog
from review_scraper.scraping.config.models import ReviewScrapingSettings
from review_scraper.scraping.errors import ReviewScrapingError, ScrapeFailed
from review_scraper.scraping.extractor import ReviewExtractor
from review_scraper.scraping.logging_utils import log_event
from review_scraper.scraping.navigation import NavigationExecutor
from review_scraper.scraping.scrolling import ContentSettler

logger = logging.getLogger(__name__)


class ReviewScrapingEngine:
    """
    Runs one scrape: load the page, settle it, then try each selector bundle.

    Bundles are evaluated sequentially in catalog order and the first one
    yielding reviews wins. The generic text scan runs only when no bundle
    matched.
    """

    def __init__(
        self,
        *,
        settings: ReviewScrapingSettings,
        catalog: SelectorCatalog,
        session_manager: BrowserSessionManager,
        navigator: NavigationExecutor,
        settler: ContentSettler,
        extractor: ReviewExtractor | None = None,
    ) -> None:
        self._settings = settings
        self._catalog = catalog
        self._session_manager = session_manager
        self._navigator = navigator
        self._settler = settler
        self._extractor = extractor or ReviewExtractor()

    @classmethod
    def from_settings(
        cls,
        *,
        settings: ReviewScrapingSettings,
        catalog: SelectorCatalog,
    ) -> "ReviewScrapingEngine":
        return cls(
            settings=settings,
            catalog=catalog,
            session_manager=BrowserSessionManager(settings=settings),
            navigator=NavigationExecutor(
                strategies=settings.navigation_strategies,
                retry_delay_seconds=settings.navigation_retry_delay_seconds,
            ),
            settler=ContentSettler(settings=settings),
        )

    async def scrape(self, url: str) -> list[ReviewRecord]:
        """
        Scrape reviews from `url`; the browser session is always released.

        NavigationFailed and ExtractionError propagate unchanged; any other
        failure is wrapped in ScrapeFailed.
        """

        try:
            session = await self._session_manager.acquire()
        except Exception as exc:
            log_event(logger, logging.ERROR, "session_acquire_failed", url=url, error=str(exc))
            raise ScrapeFailed(f"Unable to start browser session: {exc}") from exc

        try:
            try:
                reviews = await self._collect(session, url)
            except Exception as exc:
                log_event(
                    logger,
                    logging.ERROR,
                    "scrape_failed",
                    url=url,
                    error_type=type(exc).__name__,
                    error=str(exc),
                )
                await self._capture_screenshot(session, url)
                if isinstance(exc, ReviewScrapingError):
                    raise
                raise ScrapeFailed(f"Failed to scrape reviews from {url}: {exc}") from exc
        finally:
            await session.release()

        log_event(logger, logging.INFO, "scrape_completed", url=url, reviews_count=len(reviews))
        return reviews

    async def _collect(self, session: BrowserSession, url: str) -> list[ReviewRecord]:
        await self._navigator.load(session, url)
        await self._settler.settle(session)

        for bundle in self._catalog:
            reviews = await self._extractor.extract(session, bundle)
            if reviews:
                log_event(
                    logger,
                    logging.INFO,
                    "platform_matched",
                    url=url,
                    platform=bundle.platform_name,
                    reviews_count=len(reviews),
                )
                return reviews

        log_event(logger, logging.INFO, "generic_fallback_used", url=url)
        return await self._extractor.extract_generic(session)

    async def _capture_screenshot(self, session: BrowserSession, url: str) -> None:
        path = self._settings.screenshot_path
        try:
            await session.page.screenshot(path=path, full_page=True)
        except Exception as exc:
            log_event(logger, logging.WARNING, "screenshot_failed", url=url, path=path, error=str(exc))
            return
        log_event(logger, logging.INFO, "screenshot_saved", url=url, path=path)
