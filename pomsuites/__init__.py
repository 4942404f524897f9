"""
Page Object Model suites package.

This repository intentionally keeps `pomsuites` importable to support:
  - IDE navigation
  - programmatic runners (e.g., `run_tests.py`)
  - reuse of the framework and page objects from other test projects

All content is demo-safe and does not include production secrets.
"""
