"""
Headless browser session lifecycle for review scraping.

Every scrape request gets its own Playwright driver and Chromium process, so
sessions share no state and need no locking.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from playwright.async_api import Browser, BrowserContext, Page, Playwright, Route, async_playwright

from review_scraper.scraping.config.models import ReviewScrapingSettings
from review_scraper.scraping.logging_utils import log_event

logger = logging.getLogger(__name__)

CHROMIUM_ARGS = (
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-web-security",
    "--disable-features=IsolateOrigins",
    "--disable-site-isolation-trials",
    "--disable-dev-shm-usage",
)


class BrowserSession:
    """
    One browser process with a single page, owned by one request.
    """

    def __init__(
        self,
        *,
        playwright: Playwright,
        browser: Browser,
        context: BrowserContext,
        page: Page,
    ) -> None:
        self.playwright = playwright
        self.browser = browser
        self.context = context
        self.page = page
        self._released = False

    @property
    def released(self) -> bool:
        return self._released

    async def release(self) -> None:
        """
        Close the browser and stop the driver. Safe to call more than once.
        """

        if self._released:
            return
        self._released = True

        try:
            await self.browser.close()
        except Exception as exc:
            log_event(logger, logging.WARNING, "session_release_failed", stage="browser", error=str(exc))
        try:
            await self.playwright.stop()
        except Exception as exc:
            log_event(logger, logging.WARNING, "session_release_failed", stage="driver", error=str(exc))
        log_event(logger, logging.DEBUG, "session_released")


class BrowserSessionManager:
    """
    Launches and configures isolated headless Chromium sessions.
    """

    def __init__(self, *, settings: ReviewScrapingSettings) -> None:
        self._settings = settings

    async def acquire(self) -> BrowserSession:
        """
        Launch a browser, open one page and apply blocking and identity.

        Anything already started is torn down if a later launch step fails.
        """

        settings = self._settings
        playwright = await async_playwright().start()
        browser: Browser | None = None
        try:
            browser = await playwright.chromium.launch(
                headless=settings.headless,
                args=[
                    *CHROMIUM_ARGS,
                    f"--window-size={settings.viewport_width},{settings.viewport_height}",
                ],
                timeout=settings.default_timeout_ms,
            )
            context = await browser.new_context(
                viewport={"width": settings.viewport_width, "height": settings.viewport_height},
                user_agent=settings.user_agent,
            )
            page = await context.new_page()
            page.set_default_timeout(settings.default_timeout_ms)
            page.set_default_navigation_timeout(settings.default_timeout_ms)
            await page.route("**/*", self._route_request)
        except Exception:
            await self._abandon_launch(playwright, browser)
            raise

        log_event(
            logger,
            logging.DEBUG,
            "session_acquired",
            headless=settings.headless,
            viewport=f"{settings.viewport_width}x{settings.viewport_height}",
        )
        return BrowserSession(playwright=playwright, browser=browser, context=context, page=page)

    @asynccontextmanager
    async def session(self) -> AsyncIterator[BrowserSession]:
        session = await self.acquire()
        try:
            yield session
        finally:
            await session.release()

    async def _abandon_launch(self, playwright: Playwright, browser: Browser | None) -> None:
        # Cleanup errors are logged only; the launch error is what the caller sees.
        if browser is not None:
            try:
                await browser.close()
            except Exception as exc:
                log_event(logger, logging.WARNING, "session_launch_cleanup_failed", stage="browser", error=str(exc))
        try:
            await playwright.stop()
        except Exception as exc:
            log_event(logger, logging.WARNING, "session_launch_cleanup_failed", stage="driver", error=str(exc))

    async def _route_request(self, route: Route) -> None:
        # Text extraction never needs images, styles, fonts or media.
        if route.request.resource_type in self._settings.blocked_resource_types:
            await route.abort()
        else:
            await route.continue_()
