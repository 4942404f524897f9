"""
================================================================================
UI Testing Pytest Configuration
================================================================================

Fixtures for the end-to-end suites: one BrowserFactory per test, page
objects handed out by the factory, and failure capture for Allure.

These tests need a running application at UI_BASE_URL and are only run
with `--run-e2e`.

================================================================================
"""

from typing import AsyncGenerator

import pytest
from loguru import logger

from pomsuites.ui_testing.framework.browser_factory import BrowserFactory
from pomsuites.ui_testing.pages.dashboard_page import DashboardPage
from pomsuites.ui_testing.pages.login_page import LoginPage
from pomsuites.ui_testing.pages.search_page import SearchPage


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Expose each phase's report on the item so fixtures can see failures."""
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest.fixture
async def browser(request) -> AsyncGenerator[BrowserFactory, None]:
    """
    Function-scoped browser session.

    Reads UI_BROWSER / UI_BASE_URL / UI_REMOTE_URL / UI_HEADLESS. On test
    failure a screenshot and the current URL are attached to Allure
    before the session is closed.
    """
    factory = BrowserFactory()
    await factory.start()
    yield factory

    rep_call = getattr(request.node, "rep_call", None)
    if rep_call is not None and rep_call.failed:
        try:
            await factory.login_page.capture_failure(request.node.name)
        except Exception as e:
            # Log but don't fail teardown if capture fails
            logger.warning(f"Failed to capture failure details: {e}")

    await factory.quit()


# ================================================================================
# Page Object Fixtures
# ================================================================================

@pytest.fixture
def login_page(browser: BrowserFactory) -> LoginPage:
    return browser.login_page


@pytest.fixture
def dashboard_page(browser: BrowserFactory) -> DashboardPage:
    return browser.dashboard_page


@pytest.fixture
def search_page(browser: BrowserFactory) -> SearchPage:
    return browser.search_page


@pytest.fixture
async def authenticated_dashboard(
    login_page: LoginPage,
    dashboard_page: DashboardPage,
) -> DashboardPage:
    """DashboardPage after a successful login with the default credentials."""
    await login_page.open()
    await login_page.login()
    return dashboard_page


@pytest.fixture
def test_data():
    """Common test data for UI tests."""
    return {
        "valid_user": {
            "username": "demo_user",
            "password": "demo_password",
        },
        "invalid_user": {
            "username": "invalid_user",
            "password": "wrong_password",
        },
        "search_term": "page object",
    }
