"""
Shared fixtures: an in-memory stand-in for the Playwright sync driver.

The fakes record every engine call in `FakeDriver.events` so tests can assert
ordering (e.g. dispose-before-launch) without a real browser.
"""

from __future__ import annotations

import io
from typing import Any

import pytest
from PIL import Image
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from mcp_servers.playwright_browser.config import ServerConfig
from mcp_servers.playwright_browser.server.dispatch import Dispatcher
from mcp_servers.playwright_browser.session import SessionHandle


def png_bytes(width: int = 4, height: int = 3) -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", (width, height), color=(255, 0, 0)).save(buf, format="PNG")
    return buf.getvalue()


class FakeLocator:
    def __init__(self, page: FakePage, selector: str) -> None:
        self.page = page
        self.selector = selector

    def scroll_into_view_if_needed(self, **kwargs: Any) -> None:
        self.page._record("scroll_into_view_if_needed", self.selector, **kwargs)
        self.page._require(self.selector)


class FakePage:
    """Page double. `elements` maps selector -> {"text": ..., "attrs": {...}}."""

    def __init__(self, driver: FakeDriver) -> None:
        self.driver = driver
        self.url = "about:blank"
        self.titles: dict[str, str] = {"https://example.com": "Example Domain"}
        self.elements: dict[str, dict[str, Any]] = {}
        self.calls: list[tuple[str, tuple, dict]] = []
        self.failures: dict[str, Exception] = {}
        self.evaluate_result: Any = None
        self.screenshot_data: bytes = png_bytes()

    def _record(self, method: str, *args: Any, **kwargs: Any) -> None:
        self.calls.append((method, args, kwargs))
        if method in self.failures:
            raise self.failures[method]

    def _require(self, selector: str) -> dict[str, Any]:
        if selector not in self.elements:
            raise PlaywrightTimeoutError(f'Timeout 30000ms exceeded.\nwaiting for locator("{selector}")')
        return self.elements[selector]

    def last_call(self, method: str) -> tuple[tuple, dict]:
        for name, args, kwargs in reversed(self.calls):
            if name == method:
                return args, kwargs
        raise AssertionError(f"{method} was never called")

    def goto(self, url: str, **kwargs: Any) -> None:
        self._record("goto", url, **kwargs)
        self.url = url

    def go_back(self, **kwargs: Any) -> None:
        self._record("go_back", **kwargs)

    def go_forward(self, **kwargs: Any) -> None:
        self._record("go_forward", **kwargs)

    def reload(self, **kwargs: Any) -> None:
        self._record("reload", **kwargs)

    def wait_for_load_state(self, state: str = "load", **kwargs: Any) -> None:
        self._record("wait_for_load_state", state, **kwargs)

    def title(self) -> str:
        return self.titles.get(self.url, "")

    def click(self, selector: str, **kwargs: Any) -> None:
        self._record("click", selector, **kwargs)
        self._require(selector)

    def type(self, selector: str, text: str, **kwargs: Any) -> None:
        self._record("type", selector, text, **kwargs)
        self._require(selector)

    def fill(self, selector: str, value: str, **kwargs: Any) -> None:
        self._record("fill", selector, value, **kwargs)
        self._require(selector)

    def press(self, selector: str, key: str, **kwargs: Any) -> None:
        self._record("press", selector, key, **kwargs)
        self._require(selector)

    def select_option(self, selector: str, value: Any = None, **kwargs: Any) -> list[str]:
        self._record("select_option", selector, value, **kwargs)
        self._require(selector)
        return [value] if isinstance(value, str) else list(value or [])

    def wait_for_selector(self, selector: str, **kwargs: Any) -> None:
        self._record("wait_for_selector", selector, **kwargs)
        self._require(selector)

    def text_content(self, selector: str, **kwargs: Any) -> str | None:
        self._record("text_content", selector, **kwargs)
        return self._require(selector).get("text")

    def get_attribute(self, selector: str, name: str, **kwargs: Any) -> str | None:
        self._record("get_attribute", selector, name, **kwargs)
        return self._require(selector).get("attrs", {}).get(name)

    def evaluate(self, expression: str, arg: Any = None) -> Any:
        self._record("evaluate", expression, arg)
        return self.evaluate_result

    def screenshot(self, **kwargs: Any) -> bytes:
        self._record("screenshot", **kwargs)
        return self.screenshot_data

    def locator(self, selector: str) -> FakeLocator:
        return FakeLocator(self, selector)


class FakeContext:
    def __init__(self, driver: FakeDriver, browser: FakeBrowser) -> None:
        self.driver = driver
        self.browser = browser
        self.default_timeout: float | None = None
        self.default_navigation_timeout: float | None = None

    def set_default_timeout(self, timeout: float) -> None:
        self.default_timeout = timeout

    def set_default_navigation_timeout(self, timeout: float) -> None:
        self.default_navigation_timeout = timeout

    def new_page(self) -> FakePage:
        if self.driver.fail_new_page:
            raise PlaywrightError("Target page, context or browser has been closed")
        page = FakePage(self.driver)
        page.failures.update(self.driver.page_failures)
        self.driver.pages.append(page)
        return page


class FakeBrowser:
    def __init__(self, driver: FakeDriver, engine: str, number: int, options: dict[str, Any]) -> None:
        self.driver = driver
        self.engine = engine
        self.number = number
        self.options = options
        self.closed = False

    def new_context(self, **kwargs: Any) -> FakeContext:
        context = FakeContext(self.driver, self)
        self.driver.contexts.append(context)
        return context

    def close(self) -> None:
        self.driver.events.append(("close", self.engine, self.number))
        if self.driver.fail_close:
            raise PlaywrightError("Browser has been closed")
        self.closed = True


class FakeBrowserType:
    def __init__(self, driver: FakeDriver, name: str) -> None:
        self.driver = driver
        self.name = name

    def launch(self, **kwargs: Any) -> FakeBrowser:
        if self.driver.fail_launch:
            raise PlaywrightError(f"Executable doesn't exist for {self.name}")
        self.driver.launched += 1
        browser = FakeBrowser(self.driver, self.name, self.driver.launched, kwargs)
        self.driver.events.append(("launch", self.name, browser.number))
        self.driver.browsers.append(browser)
        return browser


class FakeDriver:
    """Stand-in for the object returned by `sync_playwright().start()`."""

    def __init__(self) -> None:
        self.events: list[tuple[str, str, int]] = []
        self.browsers: list[FakeBrowser] = []
        self.contexts: list[FakeContext] = []
        self.pages: list[FakePage] = []
        self.launched = 0
        self.stopped = False
        self.fail_launch = False
        self.fail_new_page = False
        self.fail_close = False
        self.page_failures: dict[str, Exception] = {}
        self.chromium = FakeBrowserType(self, "chromium")
        self.firefox = FakeBrowserType(self, "firefox")
        self.webkit = FakeBrowserType(self, "webkit")

    @property
    def live_browsers(self) -> list[FakeBrowser]:
        return [b for b in self.browsers if not b.closed]

    def stop(self) -> None:
        self.stopped = True


@pytest.fixture
def driver() -> FakeDriver:
    return FakeDriver()


@pytest.fixture
def config() -> ServerConfig:
    return ServerConfig()


@pytest.fixture
def session(driver: FakeDriver, config: ServerConfig) -> SessionHandle:
    return SessionHandle(config, driver_factory=lambda: driver)


@pytest.fixture
def dispatcher(session: SessionHandle) -> Dispatcher:
    return Dispatcher(session)


@pytest.fixture
def page(dispatcher: Dispatcher, driver: FakeDriver) -> FakePage:
    """A live session on https://example.com; returns its page."""
    dispatcher.dispatch("navigate", {"url": "https://example.com"})
    return driver.pages[-1]
