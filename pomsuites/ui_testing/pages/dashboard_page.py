"""
================================================================================
Dashboard Page Object (Async / Playwright)
================================================================================

Landing page after login: title check, navigation to search, logout.

================================================================================
"""

from __future__ import annotations

import allure

from pomsuites.ui_testing.framework.locators import By
from pomsuites.ui_testing.framework.page_base import PageBase


class DashboardPage(PageBase):
    """Dashboard page object (async)."""

    URL_PATH = "/dashboard"
    PAGE_TITLE = "Dashboard"

    TITLE = By.test_id("dashboard-title")
    NAV_SEARCH = By.test_id("nav-search")
    LOGOUT_BUTTON = By.test_id("btn-logout")

    @allure.step("Open dashboard")
    async def open(self) -> "DashboardPage":
        """Navigate to dashboard."""
        await self.navigate()
        await self.wait_for_page_load()
        return self

    @allure.step("Verify dashboard loaded")
    async def is_loaded(self) -> bool:
        await self.find_element(self.TITLE).wait_for(state="visible")
        return self.URL_PATH in self.page.url

    @allure.step("Navigate to search")
    async def go_to_search(self) -> None:
        await self.click(self.NAV_SEARCH)
        await self.wait_for_url("**/search**")

    @allure.step("Logout")
    async def logout(self) -> None:
        """Logout and wait to land back on the login page."""
        await self.click(self.LOGOUT_BUTTON)
        await self.wait_for_url("**/login**")
