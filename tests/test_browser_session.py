"""
tests/test_browser_session.py

Lifecycle guarantees of BrowserSession and request blocking rules.
"""

from __future__ import annotations

import pytest

from review_scraper.scraping import browser as browser_module
from review_scraper.scraping.browser import CHROMIUM_ARGS, BrowserSession, BrowserSessionManager
from review_scraper.scraping.config.models import DEFAULT_USER_AGENT, ReviewScrapingSettings


class _FakeBrowser:
    def __init__(self, error: Exception | None = None) -> None:
        self.close_calls = 0
        self.error = error

    async def close(self) -> None:
        self.close_calls += 1
        if self.error is not None:
            raise self.error


class _FakeDriver:
    def __init__(self) -> None:
        self.stop_calls = 0

    async def stop(self) -> None:
        self.stop_calls += 1


class _FakeRequest:
    def __init__(self, resource_type: str) -> None:
        self.resource_type = resource_type


class _FakeRoute:
    def __init__(self, resource_type: str) -> None:
        self.request = _FakeRequest(resource_type)
        self.outcome: str | None = None

    async def abort(self) -> None:
        self.outcome = "aborted"

    async def continue_(self) -> None:
        self.outcome = "continued"


class _LaunchPage:
    def __init__(self, route_error: Exception | None = None) -> None:
        self.route_error = route_error
        self.default_timeout: float | None = None
        self.default_navigation_timeout: float | None = None
        self.routes: list[tuple[str, object]] = []

    def set_default_timeout(self, timeout: float) -> None:
        self.default_timeout = timeout

    def set_default_navigation_timeout(self, timeout: float) -> None:
        self.default_navigation_timeout = timeout

    async def route(self, pattern: str, handler) -> None:
        if self.route_error is not None:
            raise self.route_error
        self.routes.append((pattern, handler))


class _LaunchContext:
    def __init__(self, page: _LaunchPage, new_page_error: Exception | None = None) -> None:
        self.page = page
        self.new_page_error = new_page_error

    async def new_page(self) -> _LaunchPage:
        if self.new_page_error is not None:
            raise self.new_page_error
        return self.page


class _LaunchBrowser(_FakeBrowser):
    def __init__(self, context: _LaunchContext, error: Exception | None = None) -> None:
        super().__init__(error=error)
        self.context = context
        self.context_options: dict | None = None

    async def new_context(self, **options) -> _LaunchContext:
        self.context_options = options
        return self.context


class _Chromium:
    def __init__(self, browser: _LaunchBrowser, launch_error: Exception | None = None) -> None:
        self.browser = browser
        self.launch_error = launch_error
        self.launch_options: dict | None = None

    async def launch(self, **options) -> _LaunchBrowser:
        self.launch_options = options
        if self.launch_error is not None:
            raise self.launch_error
        return self.browser


class _LaunchDriver(_FakeDriver):
    def __init__(self, chromium: _Chromium) -> None:
        super().__init__()
        self.chromium = chromium


class _DriverStarter:
    def __init__(self, driver: _LaunchDriver) -> None:
        self.driver = driver

    async def start(self) -> _LaunchDriver:
        return self.driver


def _install_driver(
    monkeypatch,
    *,
    launch_error: Exception | None = None,
    new_page_error: Exception | None = None,
    route_error: Exception | None = None,
    close_error: Exception | None = None,
) -> _LaunchDriver:
    page = _LaunchPage(route_error=route_error)
    context = _LaunchContext(page, new_page_error=new_page_error)
    chromium = _Chromium(_LaunchBrowser(context, error=close_error), launch_error=launch_error)
    driver = _LaunchDriver(chromium)
    monkeypatch.setattr(browser_module, "async_playwright", lambda: _DriverStarter(driver))
    return driver


def _session(browser: _FakeBrowser, driver: _FakeDriver) -> BrowserSession:
    return BrowserSession(playwright=driver, browser=browser, context=None, page=None)


class TestBrowserSessionRelease:
    @pytest.mark.asyncio
    async def test_release_closes_browser_and_stops_driver(self) -> None:
        browser, driver = _FakeBrowser(), _FakeDriver()
        session = _session(browser, driver)

        await session.release()

        assert session.released
        assert browser.close_calls == 1
        assert driver.stop_calls == 1

    @pytest.mark.asyncio
    async def test_release_is_idempotent(self) -> None:
        browser, driver = _FakeBrowser(), _FakeDriver()
        session = _session(browser, driver)

        await session.release()
        await session.release()

        assert browser.close_calls == 1
        assert driver.stop_calls == 1

    @pytest.mark.asyncio
    async def test_browser_close_failure_still_stops_driver(self) -> None:
        browser, driver = _FakeBrowser(error=RuntimeError("already gone")), _FakeDriver()

        await _session(browser, driver).release()

        assert driver.stop_calls == 1


class TestSessionAcquire:
    @pytest.mark.asyncio
    async def test_launch_applies_configuration(self, monkeypatch) -> None:
        driver = _install_driver(monkeypatch)
        manager = BrowserSessionManager(settings=ReviewScrapingSettings())

        session = await manager.acquire()

        chromium = driver.chromium
        assert chromium.launch_options["headless"] is True
        assert chromium.launch_options["args"] == [*CHROMIUM_ARGS, "--window-size=1920,1080"]
        assert chromium.browser.context_options == {
            "viewport": {"width": 1920, "height": 1080},
            "user_agent": DEFAULT_USER_AGENT,
        }
        page = chromium.browser.context.page
        assert page.default_timeout == 60_000
        assert page.default_navigation_timeout == 60_000
        assert page.routes == [("**/*", manager._route_request)]
        assert session.page is page
        assert not session.released

    @pytest.mark.asyncio
    async def test_route_failure_tears_down_browser_and_driver(self, monkeypatch) -> None:
        driver = _install_driver(monkeypatch, route_error=RuntimeError("route rejected"))
        manager = BrowserSessionManager(settings=ReviewScrapingSettings())

        with pytest.raises(RuntimeError, match="route rejected"):
            await manager.acquire()

        assert driver.chromium.browser.close_calls == 1
        assert driver.stop_calls == 1

    @pytest.mark.asyncio
    async def test_close_failure_keeps_launch_error_and_stops_driver(self, monkeypatch) -> None:
        driver = _install_driver(
            monkeypatch,
            new_page_error=RuntimeError("new page refused"),
            close_error=RuntimeError("browser already gone"),
        )
        manager = BrowserSessionManager(settings=ReviewScrapingSettings())

        with pytest.raises(RuntimeError, match="new page refused"):
            await manager.acquire()

        assert driver.chromium.browser.close_calls == 1
        assert driver.stop_calls == 1

    @pytest.mark.asyncio
    async def test_launch_failure_stops_driver(self, monkeypatch) -> None:
        driver = _install_driver(monkeypatch, launch_error=RuntimeError("Executable doesn't exist"))
        manager = BrowserSessionManager(settings=ReviewScrapingSettings())

        with pytest.raises(RuntimeError, match="Executable"):
            await manager.acquire()

        assert driver.chromium.browser.close_calls == 0
        assert driver.stop_calls == 1


class TestSessionManagerContext:
    @pytest.mark.asyncio
    async def test_session_context_releases_on_error(self, monkeypatch) -> None:
        browser, driver = _FakeBrowser(), _FakeDriver()
        manager = BrowserSessionManager(settings=ReviewScrapingSettings())

        async def _fake_acquire() -> BrowserSession:
            return _session(browser, driver)

        monkeypatch.setattr(manager, "acquire", _fake_acquire)

        with pytest.raises(ValueError):
            async with manager.session():
                raise ValueError("boom")

        assert browser.close_calls == 1
        assert driver.stop_calls == 1


class TestResourceBlocking:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("resource_type", ["image", "stylesheet", "font", "media"])
    async def test_heavy_resources_are_aborted(self, resource_type: str) -> None:
        manager = BrowserSessionManager(settings=ReviewScrapingSettings())
        route = _FakeRoute(resource_type)

        await manager._route_request(route)

        assert route.outcome == "aborted"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("resource_type", ["document", "script", "xhr", "fetch"])
    async def test_other_requests_continue(self, resource_type: str) -> None:
        manager = BrowserSessionManager(settings=ReviewScrapingSettings())
        route = _FakeRoute(resource_type)

        await manager._route_request(route)

        assert route.outcome == "continued"
