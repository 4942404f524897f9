"""
================================================================================
Suite Pytest Configuration
================================================================================

Registers the markers used across the unit and UI suites and tags tests
by directory.

================================================================================
"""

import pytest


def pytest_configure(config):
    """Configure pytest with project-wide custom markers."""

    # Priority markers
    config.addinivalue_line(
        "markers", "P0: Critical priority tests - must pass for deployment"
    )
    config.addinivalue_line(
        "markers", "P1: High priority tests - important functionality"
    )
    config.addinivalue_line(
        "markers", "P2: Medium priority tests - edge cases and minor features"
    )

    # Test type markers
    config.addinivalue_line(
        "markers", "smoke: Quick verification tests"
    )
    config.addinivalue_line(
        "markers", "regression: Full regression test suite"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests with a real browser (opt-in via --run-e2e)"
    )
    config.addinivalue_line(
        "markers", "unit: Framework tests that run without a browser"
    )

    # Domain markers
    config.addinivalue_line(
        "markers", "ui: UI-specific tests"
    )
    config.addinivalue_line(
        "markers", "auth: Tests related to authentication"
    )
    config.addinivalue_line(
        "markers", "search: Tests related to search"
    )


def pytest_collection_modifyitems(config, items):
    """
    Add markers by location.

    Tests under ui_testing/tests drive a real browser and are tagged
    'ui' and 'e2e'; tests under unit/ are tagged 'unit'.
    """
    for item in items:
        try:
            parts = item.path.relative_to(config.rootpath).parts
        except ValueError:
            parts = item.path.parts

        if parts[:3] == ("pomsuites", "ui_testing", "tests"):
            item.add_marker(pytest.mark.ui)
            item.add_marker(pytest.mark.e2e)
        elif parts[:2] == ("pomsuites", "unit"):
            item.add_marker(pytest.mark.unit)


def pytest_report_header(config):
    """Add custom header to pytest output."""
    return [
        "",
        "=" * 60,
        "Page Object Model UI Test Suites",
        "=" * 60,
        "",
    ]
