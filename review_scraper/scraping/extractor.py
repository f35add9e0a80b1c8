"""
Review extraction against a live browser session.
"""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup
from playwright.async_api import Error as PlaywrightError

from review_scraper.domain.reviews import ReviewRecord
from review_scraper.scraping.browser import BrowserSession
from review_scraper.scraping.catalog import SelectorBundle
from review_scraper.scraping.errors import ExtractionError
from review_scraper.scraping.logging_utils import log_event
from review_scraper.scraping.parsing import ReviewParsingLayer

logger = logging.getLogger(__name__)


class ReviewExtractor:
    """
    Reads the rendered document from a session and applies selector bundles.

    The only browser call is a snapshot of the current DOM; selector
    resolution runs in-process on that snapshot.
    """

    async def extract(self, session: BrowserSession, bundle: SelectorBundle) -> list[ReviewRecord]:
        soup = await self._snapshot(session)
        records = ReviewParsingLayer.extract_reviews(soup=soup, bundle=bundle)
        log_event(
            logger,
            logging.DEBUG,
            "bundle_evaluated",
            platform=bundle.platform_name,
            reviews_found=len(records),
        )
        return records

    async def extract_generic(self, session: BrowserSession) -> list[ReviewRecord]:
        soup = await self._snapshot(session)
        return ReviewParsingLayer.extract_generic_reviews(soup=soup)

    @staticmethod
    async def _snapshot(session: BrowserSession) -> BeautifulSoup:
        try:
            html = await session.page.content()
        except PlaywrightError as exc:
            raise ExtractionError(f"Unable to read page content: {exc}") from exc
        return ReviewParsingLayer.parse_document(html)
