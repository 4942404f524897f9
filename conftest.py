"""
Repository-level pytest configuration (showcase-safe).

Why this exists:
  - Provide safe defaults for demo environments (no secrets embedded)
  - Keep browser suites opt-in so the unit suite runs anywhere
  - Keep behavior explicit and discoverable

Important:
  Values below are placeholders. Real projects should load credentials from
  a secure secret manager in CI/CD.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Generator

import pytest

from pomtools.common import init_logger


def pytest_addoption(parser):
    """Register the opt-in switch for real-browser suites."""
    parser.addoption(
        "--run-e2e",
        action="store_true",
        default=False,
        help="Run end-to-end tests against UI_BASE_URL with a real browser",
    )


@pytest.hookimpl(trylast=True)
def pytest_collection_modifyitems(config, items):
    """Skip e2e tests unless --run-e2e is given."""
    if config.getoption("--run-e2e"):
        return
    skip_e2e = pytest.mark.skip(reason="needs --run-e2e and a running application")
    for item in items:
        if "e2e" in item.keywords:
            item.add_marker(skip_e2e)


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent


@pytest.fixture(scope="session", autouse=True)
def _demo_safe_env_defaults() -> Generator[None, None, None]:
    """
    Set demo-safe environment defaults if not already provided by the user/CI.

    This prevents accidental leakage and keeps local runs predictable.
    """
    defaults = {
        "UI_BASE_URL": "http://localhost:3000",
        "UI_BROWSER": "chromium",
        "UI_USERNAME": "demo_user",
        "UI_PASSWORD": "demo_password",
    }

    for k, v in defaults.items():
        os.environ.setdefault(k, v)

    init_logger()
    yield
