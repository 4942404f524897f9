"""
================================================================================
Login Page Object (Async / Playwright)
================================================================================

Locators and actions for the login form.

Credentials default to the `UI_USERNAME` / `UI_PASSWORD` environment
variables (demo-safe values are set by the root conftest).

================================================================================
"""

from __future__ import annotations

import os
from typing import Optional

import allure
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from pomsuites.ui_testing.framework.locators import By
from pomsuites.ui_testing.framework.page_base import PageBase


class LoginPage(PageBase):
    """Login page object (async)."""

    URL_PATH = "/login"
    PAGE_TITLE = "Login"

    USERNAME_INPUT = By.test_id("input-username")
    PASSWORD_INPUT = By.test_id("input-password")
    LOGIN_BUTTON = By.test_id("btn-login")
    ERROR_MESSAGE = By.test_id("error-message")

    @allure.step("Open login page")
    async def open(self) -> "LoginPage":
        """Navigate to the login page."""
        await self.navigate()
        await self.wait_for_page_load()
        return self

    async def enter_username(self, username: str) -> None:
        await self.send_keys(self.USERNAME_INPUT, username)

    async def enter_password(self, password: str) -> None:
        await self.send_keys(self.PASSWORD_INPUT, password)

    async def submit(self) -> None:
        await self.click(self.LOGIN_BUTTON)

    @allure.step("Login (username={username})")
    async def login(
        self,
        username: Optional[str] = None,
        password: Optional[str] = None,
        wait_dashboard: bool = True,
    ) -> None:
        """
        Perform login.

        Args:
            username: Username to login. Defaults to `UI_USERNAME` env var.
            password: Password to login. Defaults to `UI_PASSWORD` env var.
            wait_dashboard: Whether to wait for a dashboard URL after login.
        """
        if self.URL_PATH not in (self.page.url or ""):
            await self.open()

        if username is None:
            username = os.getenv("UI_USERNAME", "demo_user")
        if password is None:
            password = os.getenv("UI_PASSWORD", "demo_password")

        await self.enter_username(username)
        await self.enter_password(password)
        await self.submit()

        if wait_dashboard:
            await self.wait_for_url("**/dashboard**")

    @allure.step("Verify login form is displayed")
    async def is_form_displayed(self) -> bool:
        """Verify login form elements are visible."""
        return (
            await self.is_visible(self.USERNAME_INPUT)
            and await self.is_visible(self.PASSWORD_INPUT)
            and await self.is_visible(self.LOGIN_BUTTON)
        )

    @allure.step("Verify login error is displayed")
    async def is_error_displayed(self, timeout: int = 1500) -> bool:
        """Wait briefly for the error message after a failed login."""
        try:
            await self.find_element(self.ERROR_MESSAGE).wait_for(
                state="visible", timeout=timeout
            )
        except PlaywrightTimeoutError:
            return False
        return True
