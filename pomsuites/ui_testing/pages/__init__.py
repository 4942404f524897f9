"""
================================================================================
Page Objects
================================================================================

Page Object Model implementations for application pages.

Each page class encapsulates:
    - Element locators (class-level `By.*` constants)
    - Page-specific actions composed from click / send_keys
    - Verification methods

Author: Automation Team
License: MIT
================================================================================
"""

from .login_page import LoginPage
from .dashboard_page import DashboardPage
from .search_page import SearchPage

__all__ = [
    "LoginPage",
    "DashboardPage",
    "SearchPage",
]
