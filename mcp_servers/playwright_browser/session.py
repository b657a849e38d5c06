"""
Browser session ownership.

One MCP process owns at most one Playwright browser, with exactly one context and
one page inside it. `SessionHandle` is the only place that creates or destroys
them; tool handlers get the live page through `SessionHandle.current()`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from .config import ServerConfig
from .errors import NoSessionError, SessionStartError

if TYPE_CHECKING:
    from playwright.sync_api import Browser, BrowserContext, Page, Playwright

logger = logging.getLogger("mcp.playwright.session")


class BrowserEngine(str, Enum):
    CHROMIUM = "chromium"
    FIREFOX = "firefox"
    WEBKIT = "webkit"


@dataclass(frozen=True, slots=True)
class Session:
    """A live browser process with its single context and page."""

    engine: BrowserEngine
    browser: Browser
    context: BrowserContext
    page: Page


def _start_playwright() -> Playwright:
    from playwright.sync_api import sync_playwright

    return sync_playwright().start()


class SessionHandle:
    """
    Holder of the process-wide browser session.

    States: empty (no session) and active. `start()` always disposes the previous
    session before launching a new browser, so two browsers never coexist.
    """

    def __init__(
        self,
        config: ServerConfig | None = None,
        driver_factory: Callable[[], Any] = _start_playwright,
    ) -> None:
        self.config = config or ServerConfig()
        self._driver_factory = driver_factory
        self._driver: Any | None = None
        self._session: Session | None = None

    @property
    def active(self) -> bool:
        return self._session is not None

    def _ensure_driver(self) -> Any:
        if self._driver is None:
            self._driver = self._driver_factory()
        return self._driver

    def start(self, engine: BrowserEngine | str, headless: bool = True) -> Session:
        """Replace the current session (if any) with a fresh browser, context and page."""
        engine = BrowserEngine(engine)
        self.dispose()

        try:
            driver = self._ensure_driver()
        except Exception as exc:
            raise SessionStartError(f"Failed to start Playwright: {exc}") from exc

        launch_options = self.config.launch_options(headless)
        logger.info("launching browser engine=%s headless=%s", engine.value, headless)

        browser = None
        try:
            browser = getattr(driver, engine.value).launch(**launch_options)
            context = browser.new_context()
            if self.config.default_timeout_ms is not None:
                context.set_default_timeout(self.config.default_timeout_ms)
                context.set_default_navigation_timeout(self.config.default_timeout_ms)
            page = context.new_page()
        except Exception as exc:
            if browser is not None:
                self._close_browser(browser)
            raise SessionStartError(f"Failed to launch {engine.value}: {exc}") from exc

        self._session = Session(engine=engine, browser=browser, context=context, page=page)
        return self._session

    def current(self) -> Session:
        if self._session is None:
            raise NoSessionError()
        return self._session

    def dispose(self) -> None:
        """Close the browser and forget the session. No-op when nothing is open."""
        session, self._session = self._session, None
        if session is None:
            return
        logger.info("closing browser engine=%s", session.engine.value)
        self._close_browser(session.browser)

    def shutdown(self) -> None:
        """Dispose the session and stop the Playwright driver (process exit)."""
        self.dispose()
        driver, self._driver = self._driver, None
        if driver is None:
            return
        try:
            driver.stop()
        except Exception as exc:  # noqa: BLE001
            logger.warning("playwright_stop_failed: %s", exc)

    @staticmethod
    def _close_browser(browser: Browser) -> None:
        # A crashed or already-closed browser still counts as disposed.
        try:
            browser.close()
        except Exception as exc:  # noqa: BLE001
            logger.warning("browser_close_failed: %s", exc)


__all__ = ["BrowserEngine", "Session", "SessionHandle"]
