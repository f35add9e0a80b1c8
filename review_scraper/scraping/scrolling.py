"""
Scroll-based triggering of lazy-loaded review widgets.
"""

from __future__ import annotations

import asyncio
import logging

from playwright.async_api import Page

from review_scraper.scraping.browser import BrowserSession
from review_scraper.scraping.config.models import ReviewScrapingSettings
from review_scraper.scraping.logging_utils import log_event

logger = logging.getLogger(__name__)

SCROLL_HEIGHT_QUERY = "() => document.body.scrollHeight"
SCROLL_BY_SCRIPT = "(step) => window.scrollBy(0, step)"


class ContentSettler:
    """
    Waits for the page to settle and scrolls it to the bottom.

    Best effort: failures are logged and extraction proceeds on whatever
    content is already present.
    """

    def __init__(self, *, settings: ReviewScrapingSettings) -> None:
        self._settings = settings

    async def settle(self, session: BrowserSession) -> None:
        try:
            await asyncio.sleep(self._settings.settle_delay_seconds)
            scrolled = await self._scroll_to_bottom(session.page)
            await asyncio.sleep(self._settings.post_scroll_delay_seconds)
        except Exception as exc:
            log_event(logger, logging.WARNING, "settle_failed", error=str(exc))
            return
        log_event(logger, logging.DEBUG, "settle_completed", scrolled_px=scrolled)

    async def _scroll_to_bottom(self, page: Page) -> int:
        step = self._settings.scroll_step_px
        scrolled = 0
        # Height is re-read every step since lazy widgets grow the document.
        for _ in range(self._settings.scroll_max_steps):
            await page.evaluate(SCROLL_BY_SCRIPT, step)
            scrolled += step
            scroll_height = await page.evaluate(SCROLL_HEIGHT_QUERY)
            if scrolled >= int(scroll_height or 0):
                break
            await asyncio.sleep(self._settings.scroll_interval_seconds)
        return scrolled
