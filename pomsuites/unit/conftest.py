"""
Fixtures for framework unit tests.

Playwright objects are replaced by mocks so the suite runs without a
browser; assertions check what the framework asks the driver to do.
"""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from pomsuites.ui_testing.framework.config_loader import ConfigLoader, UISettings


ELEMENT_METHODS = (
    "click",
    "press_sequentially",
    "fill",
    "text_content",
    "is_visible",
    "wait_for",
    "count",
    "all_text_contents",
)


def make_fake_page(url: str = "http://app.test/") -> MagicMock:
    """A Playwright Page double whose locator() always returns the same element."""
    page = MagicMock(name="page")
    page.url = url
    page.goto = AsyncMock()
    page.wait_for_load_state = AsyncMock()
    page.wait_for_url = AsyncMock()
    page.screenshot = AsyncMock()

    element = MagicMock(name="element")
    for method in ELEMENT_METHODS:
        setattr(element, method, AsyncMock())
    page.locator.return_value = element
    return page


@pytest.fixture(autouse=True)
def _fresh_config():
    ConfigLoader.reset()
    yield
    ConfigLoader.reset()


@pytest.fixture
def fake_page() -> MagicMock:
    return make_fake_page()


@pytest.fixture
def settings() -> UISettings:
    return UISettings(
        base_url="http://app.test",
        remote_url="",
        browser="chromium",
        headless=True,
        timeout=5000,
    )


@pytest.fixture
def fake_playwright(monkeypatch):
    """
    Patch `async_playwright` in the browser factory module.

    Returns a namespace exposing the mocks so tests can assert on launch,
    connect and close calls.
    """
    page = make_fake_page()

    context = MagicMock(name="context")
    context.new_page = AsyncMock(return_value=page)
    context.close = AsyncMock()

    browser = MagicMock(name="browser")
    browser.new_context = AsyncMock(return_value=context)
    browser.close = AsyncMock()

    playwright = MagicMock(name="playwright")
    for engine in ("chromium", "firefox", "webkit"):
        browser_type = MagicMock(name=engine)
        browser_type.launch = AsyncMock(return_value=browser)
        browser_type.connect = AsyncMock(return_value=browser)
        setattr(playwright, engine, browser_type)
    playwright.stop = AsyncMock()

    manager = MagicMock(name="async_playwright()")
    manager.start = AsyncMock(return_value=playwright)
    monkeypatch.setattr(
        "pomsuites.ui_testing.framework.browser_factory.async_playwright",
        lambda: manager,
    )

    return SimpleNamespace(
        playwright=playwright,
        browser=browser,
        context=context,
        page=page,
    )
