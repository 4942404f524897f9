"""
================================================================================
POM Tools
================================================================================

Shared helpers for the Page Object Model suites.

Modules:
    - common: Loguru logging setup shared by the framework and the runner

Example:
    from pomtools.common import init_logger

    init_logger(level="DEBUG")

================================================================================
"""

__version__ = "1.0.0"

__all__ = [
    "common",
]
