"""
================================================================================
Browser Factory
================================================================================

Owns the driver session for a test and hands out page objects.

Features:
    - Local launch or connection to a remote Playwright server
    - Browser selection through capabilities (chrome, firefox, webkit, ...)
    - Lazy, memoized page objects keyed by page name
    - Explicit lifecycle: start -> navigate -> quit

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Optional, Type

from loguru import logger
from playwright.async_api import (
    async_playwright,
    Browser,
    BrowserContext,
    Page,
    Playwright,
)

from .capabilities import BrowserCapabilities, capabilities_for
from .config_loader import UISettings
from .page_base import BasePage

if TYPE_CHECKING:
    from pomsuites.ui_testing.pages import DashboardPage, LoginPage, SearchPage


class BrowserSessionError(RuntimeError):
    """Raised when the driver session is used outside start()/quit()."""
    pass


def _default_pages() -> Dict[str, Type[BasePage]]:
    # Imported late: page objects import the framework package.
    from pomsuites.ui_testing.pages import DashboardPage, LoginPage, SearchPage

    return {
        "login": LoginPage,
        "dashboard": DashboardPage,
        "search": SearchPage,
    }


class BrowserFactory:
    """
    One browser session plus the page objects bound to it.

    Usage:
        async with BrowserFactory() as browser:
            await browser.navigate("/login")
            await browser.login_page.login("demo_user", "demo_password")
            assert await browser.dashboard_page.is_loaded()

        # Explicit lifecycle
        browser = BrowserFactory(browser_name="firefox")
        await browser.start()
        ...
        await browser.quit()
    """

    # Default context options
    DEFAULT_CONTEXT_OPTIONS = {
        "viewport": {"width": 1920, "height": 1080},
        "ignore_https_errors": True,
    }

    def __init__(
        self,
        browser_name: Optional[str] = None,
        base_url: Optional[str] = None,
        remote_url: Optional[str] = None,
        headless: Optional[bool] = None,
        settings: Optional[UISettings] = None,
    ):
        """
        Initialize browser factory.

        Unset arguments fall back to `UISettings` (env > YAML > defaults).

        Args:
            browser_name: Browser to use - see SUPPORTED_BROWSERS
            base_url: Application base URL
            remote_url: Remote Playwright server endpoint; empty launches locally
            headless: Run a local browser in headless mode
            settings: Pre-built settings instead of reading the config

        Raises:
            UnsupportedBrowserError: For an unknown browser name
        """
        settings = settings or UISettings.from_config()

        self.browser_name = browser_name or settings.browser
        self.base_url = (base_url or settings.base_url).rstrip("/")
        self.remote_url = settings.remote_url if remote_url is None else remote_url
        self.headless = settings.headless if headless is None else headless
        self.timeout = settings.timeout
        self.capabilities: BrowserCapabilities = capabilities_for(self.browser_name)

        self._pages_registry: Dict[str, Type[BasePage]] = _default_pages()
        self._pages: Dict[str, BasePage] = {}

        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._context: Optional[BrowserContext] = None
        self._page: Optional[Page] = None

    async def __aenter__(self) -> "BrowserFactory":
        """Async context manager entry - start browser."""
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit - quit browser."""
        await self.quit()

    # =========================================================================
    # Session Lifecycle
    # =========================================================================

    @property
    def is_running(self) -> bool:
        return self._page is not None

    async def start(self) -> None:
        """Start Playwright, create the browser session and open one page."""
        if self.is_running:
            raise BrowserSessionError("Browser already started. Call quit() first.")

        self._playwright = await async_playwright().start()
        try:
            await self._open_session()
        except BaseException:
            # Release whatever was created before the failure
            try:
                await self.quit()
            except Exception as e:
                logger.warning(f"Cleanup after failed start also failed: {e}")
            raise

    async def _open_session(self) -> None:
        browser_type = getattr(self._playwright, self.capabilities.engine)

        if self.remote_url:
            self._browser = await browser_type.connect(self.remote_url)
            logger.info(
                f"Connected to remote {self.capabilities.engine} at {self.remote_url}"
            )
        else:
            self._browser = await browser_type.launch(
                **self.capabilities.to_launch_kwargs(headless=self.headless)
            )
            logger.info(
                f"Browser started: {self.browser_name} "
                f"(engine={self.capabilities.engine}, headless={self.headless})"
            )

        self._context = await self._browser.new_context(**self.DEFAULT_CONTEXT_OPTIONS)
        self._context.set_default_timeout(self.timeout)
        self._page = await self._context.new_page()

    async def quit(self) -> None:
        """
        Close the page context, the browser and Playwright.

        Safe to call more than once. Every resource is released even if an
        earlier close fails; the first failure is re-raised afterwards.
        """
        self._pages.clear()
        self._page = None

        first_error: Optional[BaseException] = None
        context, self._context = self._context, None
        browser, self._browser = self._browser, None
        playwright, self._playwright = self._playwright, None

        for name, closer in (
            ("context", context.close if context else None),
            ("browser", browser.close if browser else None),
            ("playwright", playwright.stop if playwright else None),
        ):
            if closer is None:
                continue
            try:
                await closer()
            except Exception as e:
                logger.error(f"Failed to close {name}: {e}")
                first_error = first_error or e

        if first_error is not None:
            raise first_error

        if context or browser or playwright:
            logger.info("Browser closed")

    @property
    def page(self) -> Page:
        """The Playwright page of the running session."""
        if self._page is None:
            raise BrowserSessionError("Browser not started. Call start() first.")
        return self._page

    async def navigate(self, path_or_url: str = "", wait_for: str = "load") -> None:
        """
        Open a URL in the session page.

        Args:
            path_or_url: Absolute http(s) URL, or a path joined to base_url
            wait_for: Wait condition - 'load', 'domcontentloaded', 'networkidle'
        """
        if path_or_url.startswith(("http://", "https://")):
            url = path_or_url
        else:
            url = f"{self.base_url}/{path_or_url.lstrip('/')}"
        logger.debug(f"Navigate: {url}")
        await self.page.goto(url, wait_until=wait_for)

    # =========================================================================
    # Page Objects
    # =========================================================================

    def register_page(self, name: str, page_cls: Type[BasePage]) -> None:
        """
        Register (or replace) a page class under `name` for this factory.

        A cached instance of a replaced page is dropped.
        """
        self._pages_registry[name] = page_cls
        self._pages.pop(name, None)
        logger.debug(f"Registered page: {name} -> {page_cls.__name__}")

    def get_page(self, name: str) -> BasePage:
        """
        Return the page object registered as `name`.

        Created on first access and reused for the rest of the session.

        Raises:
            BrowserSessionError: If the session is not running
            KeyError: If no page class is registered under `name`
        """
        page = self.page
        if name not in self._pages:
            try:
                page_cls = self._pages_registry[name]
            except KeyError:
                raise KeyError(
                    f"Unknown page: {name!r}. "
                    f"Registered: {', '.join(sorted(self._pages_registry))}"
                ) from None
            self._pages[name] = page_cls(page, base_url=self.base_url, timeout=self.timeout)
        return self._pages[name]

    @property
    def login_page(self) -> LoginPage:
        return self.get_page("login")

    @property
    def dashboard_page(self) -> DashboardPage:
        return self.get_page("dashboard")

    @property
    def search_page(self) -> SearchPage:
        return self.get_page("search")


__all__ = [
    "BrowserFactory",
    "BrowserSessionError",
]
