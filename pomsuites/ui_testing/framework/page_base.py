"""
================================================================================
Base Page Object
================================================================================

Foundation class for Page Object Model implementation.

Provides:
    - Element lookup (`find_element`) over Playwright locators
    - The two core interactions every page builds on: `click` and `send_keys`
    - Navigation relative to the configured base URL
    - Screenshot and failure capture for Allure

Every helper is a direct pass-through to Playwright. Driver errors
(timeouts, missing elements, navigation failures) propagate unchanged.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any, Optional

import allure
from loguru import logger
from playwright.async_api import Locator as PlaywrightLocator
from playwright.async_api import Page

from .config_loader import UISettings
from .locators import LocatorLike, as_selector


# Default output directory for screenshots
SCREENSHOT_DIR = Path(__file__).parent.parent / "screenshots"


class BasePage:
    """
    Base class for all page objects.

    Subclasses declare locator constants and compose named actions from
    `click` / `send_keys`:

    Usage:
        class LoginPage(BasePage):
            URL_PATH = "/login"

            USERNAME_INPUT = By.test_id("input-username")
            PASSWORD_INPUT = By.test_id("input-password")
            LOGIN_BUTTON = By.test_id("btn-login")

            async def login(self, username: str, password: str):
                await self.send_keys(self.USERNAME_INPUT, username)
                await self.send_keys(self.PASSWORD_INPUT, password)
                await self.click(self.LOGIN_BUTTON)
    """

    # Override in subclasses
    URL_PATH: str = "/"
    PAGE_TITLE: str = ""

    def __init__(
        self,
        page: Page,
        base_url: str = "",
        timeout: Optional[int] = None,
    ):
        """
        Initialize page object.

        Args:
            page: Playwright Page object
            base_url: Base URL for the application (defaults to ui.base_url)
            timeout: Default timeout in ms for waits (defaults to ui.timeout)
        """
        self.page = page
        if not base_url or timeout is None:
            settings = UISettings.from_config()
            base_url = base_url or settings.base_url
            timeout = settings.timeout if timeout is None else timeout
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    @property
    def url(self) -> str:
        """Get full page URL."""
        return f"{self.base_url}{self.URL_PATH}"

    async def navigate(self, wait_for: str = "load") -> None:
        """
        Navigate to this page.

        Args:
            wait_for: Wait condition - 'load', 'domcontentloaded', 'networkidle'
        """
        with allure.step(f"Navigate to {self.URL_PATH}"):
            await self.page.goto(self.url, wait_until=wait_for)
            logger.debug(f"Navigated to: {self.url}")

    async def navigate_to(
        self,
        path: str,
        wait_for: str = "load",
    ) -> None:
        """
        Navigate to specific path.

        Args:
            path: URL path to navigate to
            wait_for: Wait condition
        """
        full_url = f"{self.base_url}/{path.lstrip('/')}"
        with allure.step(f"Navigate to {path}"):
            await self.page.goto(full_url, wait_until=wait_for)

    async def wait_for_page_load(
        self,
        state: str = "load",
        timeout: Optional[int] = None,
    ) -> None:
        """
        Wait for the page to reach a stable load state.

        Args:
            state: Playwright load state ('load', 'domcontentloaded', 'networkidle')
            timeout: Timeout in milliseconds
        """
        if timeout is None:
            timeout = self.timeout
        await self.page.wait_for_load_state(state, timeout=timeout)

    # =========================================================================
    # Element Interactions
    # =========================================================================

    def find_element(self, target: LocatorLike) -> PlaywrightLocator:
        """
        Look up an element.

        Args:
            target: Locator constant or raw Playwright selector

        Returns:
            Playwright Locator (lazy; resolved by the driver on first action)
        """
        return self.page.locator(as_selector(target))

    def _locator_name(self, target: LocatorLike) -> str:
        """Name of the class constant holding `target`, or "" for ad-hoc locators."""
        for name in dir(type(self)):
            if name.isupper() and getattr(type(self), name) == target:
                return name
        return ""

    def _describe(self, target: LocatorLike) -> str:
        name = self._locator_name(target)
        return f"{name} ({target})" if name else str(target)

    def _shown(self, target: LocatorLike, value: str) -> str:
        """Value as it may appear in logs and report steps."""
        if "password" in self._describe(target).lower():
            return "*" * len(value)
        return value

    async def click(self, target: LocatorLike, **kwargs: Any) -> None:
        """
        Click an element.

        Args:
            target: Locator constant or raw selector
            **kwargs: Passed through to Playwright `click()`
        """
        with allure.step(f"Click: {self._describe(target)}"):
            logger.debug(f"Click: {self._describe(target)}")
            await self.find_element(target).click(**kwargs)

    async def send_keys(self, target: LocatorLike, text: str, **kwargs: Any) -> None:
        """
        Type text into an element key by key.

        Args:
            target: Locator constant or raw selector
            text: Keys to send
            **kwargs: Passed through to Playwright `press_sequentially()`
        """
        shown = self._shown(target, text)
        with allure.step(f"Send keys to {self._describe(target)}: {shown}"):
            logger.debug(f"Send keys to {self._describe(target)}: {shown}")
            await self.find_element(target).press_sequentially(text, **kwargs)

    async def fill(self, target: LocatorLike, value: str, **kwargs: Any) -> None:
        """Replace the value of an input in one step."""
        shown = self._shown(target, value)
        with allure.step(f"Fill {self._describe(target)}: {shown}"):
            await self.find_element(target).fill(value, **kwargs)

    async def get_text(self, target: LocatorLike) -> str:
        """Get text content of element."""
        return await self.find_element(target).text_content() or ""

    async def is_visible(self, target: LocatorLike) -> bool:
        """Check if element is currently visible (no waiting)."""
        return await self.find_element(target).is_visible()

    # =========================================================================
    # Wait Utilities
    # =========================================================================

    async def wait_for_url(
        self,
        url_pattern: str,
        timeout: Optional[int] = None,
    ) -> None:
        """
        Wait for URL to match pattern.

        Args:
            url_pattern: URL pattern (supports wildcards)
            timeout: Timeout in milliseconds
        """
        if timeout is None:
            timeout = self.timeout
        with allure.step(f"Wait for URL: {url_pattern}"):
            await self.page.wait_for_url(url_pattern, timeout=timeout)

    # =========================================================================
    # Screenshot and Debug Utilities
    # =========================================================================

    async def screenshot(
        self,
        name: str,
        full_page: bool = False,
        attach_to_allure: bool = True,
    ) -> Path:
        """
        Take screenshot and optionally attach to Allure.

        Args:
            name: Screenshot name (without extension)
            full_page: Capture full scrollable page
            attach_to_allure: Whether to attach to Allure report

        Returns:
            Path to saved screenshot
        """
        SCREENSHOT_DIR.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filepath = SCREENSHOT_DIR / f"{name}_{timestamp}.png"

        await self.page.screenshot(path=str(filepath), full_page=full_page)

        if attach_to_allure:
            allure.attach.file(
                str(filepath),
                name=name,
                attachment_type=allure.attachment_type.PNG,
            )

        logger.debug(f"Screenshot saved: {filepath}")
        return filepath

    async def capture_failure(self, test_name: str) -> None:
        """Attach a screenshot and the current URL to the Allure report."""
        with allure.step("Capture failure details"):
            await self.screenshot(f"failure_{test_name}", attach_to_allure=True)
            allure.attach(
                self.page.url,
                name="Current URL",
                attachment_type=allure.attachment_type.TEXT,
            )


__all__ = [
    "BasePage",
    "PageBase",
    "SCREENSHOT_DIR",
]

# Backward-compatible alias (many Page Objects prefer PageBase naming)
PageBase = BasePage
