"""
Page loading with an ordered list of load-completion strategies.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence

from playwright.async_api import Error as PlaywrightError

from review_scraper.scraping.browser import BrowserSession
from review_scraper.scraping.config.models import NavigationStrategy
from review_scraper.scraping.errors import NavigationFailed
from review_scraper.scraping.logging_utils import log_event

logger = logging.getLogger(__name__)


class NavigationExecutor:
    """
    Tries each navigation strategy in order until one loads the page.

    Sites finish "loading" by different signals, so cheap conditions go first
    and the slow network-idle wait is only reached when they fail.
    """

    def __init__(
        self,
        *,
        strategies: Sequence[NavigationStrategy],
        retry_delay_seconds: float,
    ) -> None:
        if not strategies:
            raise ValueError("At least one navigation strategy is required.")
        self._strategies = tuple(strategies)
        self._retry_delay_seconds = retry_delay_seconds

    async def load(self, session: BrowserSession, url: str) -> NavigationStrategy:
        """
        Navigate `session.page` to `url` and return the strategy that worked.

        Raises NavigationFailed with the last underlying error once every
        strategy has failed.
        """

        last_error: str | None = None
        for index, strategy in enumerate(self._strategies):
            log_event(
                logger,
                logging.INFO,
                "navigation_attempt",
                url=url,
                wait_until=strategy.wait_until,
                timeout_ms=strategy.timeout_ms,
            )
            try:
                await session.page.goto(url, wait_until=strategy.wait_until, timeout=strategy.timeout_ms)
            except PlaywrightError as exc:
                last_error = str(exc)
                log_event(
                    logger,
                    logging.WARNING,
                    "navigation_attempt_failed",
                    url=url,
                    wait_until=strategy.wait_until,
                    error=last_error,
                )
                # No wait after the final strategy; NavigationFailed follows at once.
                if index < len(self._strategies) - 1:
                    await asyncio.sleep(self._retry_delay_seconds)
                continue

            log_event(logger, logging.INFO, "navigation_succeeded", url=url, wait_until=strategy.wait_until)
            return strategy

        raise NavigationFailed(url=url, last_error=last_error)
