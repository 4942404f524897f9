"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based Page Object Model framework.

Components:
    - locators: Strategy + value pairs declared by page objects
    - page_base: Base page object with find_element / click / send_keys
    - capabilities: Browser name -> engine, channel and launch options
    - browser_factory: Driver session lifecycle and memoized page objects
    - config_loader: YAML + environment configuration

Author: Automation Team
License: MIT
================================================================================
"""

from .locators import By, Locator, Strategy
from .page_base import BasePage, PageBase
from .capabilities import (
    BrowserCapabilities,
    SUPPORTED_BROWSERS,
    UnsupportedBrowserError,
    capabilities_for,
)
from .config_loader import ConfigLoader, ConfigurationError, UISettings
from .browser_factory import BrowserFactory, BrowserSessionError

__all__ = [
    "By",
    "Locator",
    "Strategy",
    "BasePage",
    "PageBase",
    "BrowserCapabilities",
    "SUPPORTED_BROWSERS",
    "UnsupportedBrowserError",
    "capabilities_for",
    "ConfigLoader",
    "ConfigurationError",
    "UISettings",
    "BrowserFactory",
    "BrowserSessionError",
]
