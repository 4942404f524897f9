"""
================================================================================
Browser Capabilities
================================================================================

Maps a browser name (UI_BROWSER, --browser) to the Playwright engine,
channel and launch options used to create the driver session.

Unknown names fail fast with UnsupportedBrowserError instead of starting
a session with undefined capabilities.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


class UnsupportedBrowserError(ValueError):
    """Raised when a browser name has no capability definition."""
    pass


# Chromium flags shared by chrome/chromium/edge sessions
CHROMIUM_ARGS = [
    "--ignore-certificate-errors",
    "--disable-features=IsolateOrigins,site-per-process",
]


@dataclass(frozen=True)
class BrowserCapabilities:
    """
    Everything needed to start one browser.

    Attributes:
        engine: Playwright browser type - 'chromium', 'firefox', 'webkit'
        channel: Branded build for chromium ('chrome', 'msedge'), else None
        launch_options: Extra keyword arguments for `launch()`
    """
    engine: str
    channel: Optional[str] = None
    launch_options: Dict[str, Any] = field(default_factory=dict)

    def to_launch_kwargs(self, headless: bool = True) -> Dict[str, Any]:
        """Keyword arguments for `BrowserType.launch()`."""
        kwargs: Dict[str, Any] = {**self.launch_options, "headless": headless}
        if self.channel:
            kwargs["channel"] = self.channel
        return kwargs


_CAPABILITIES: Dict[str, BrowserCapabilities] = {
    "chrome": BrowserCapabilities(
        "chromium", channel="chrome", launch_options={"args": CHROMIUM_ARGS}
    ),
    "chromium": BrowserCapabilities(
        "chromium", launch_options={"args": CHROMIUM_ARGS}
    ),
    "edge": BrowserCapabilities(
        "chromium", channel="msedge", launch_options={"args": CHROMIUM_ARGS}
    ),
    "msedge": BrowserCapabilities(
        "chromium", channel="msedge", launch_options={"args": CHROMIUM_ARGS}
    ),
    "firefox": BrowserCapabilities("firefox"),
    "safari": BrowserCapabilities("webkit"),
    "webkit": BrowserCapabilities("webkit"),
}

SUPPORTED_BROWSERS = tuple(_CAPABILITIES)


def capabilities_for(name: str) -> BrowserCapabilities:
    """
    Look up capabilities for a browser name (case-insensitive).

    Raises:
        UnsupportedBrowserError: If the name is not one of SUPPORTED_BROWSERS
    """
    key = (name or "").strip().lower()
    try:
        return _CAPABILITIES[key]
    except KeyError:
        raise UnsupportedBrowserError(
            f"Unsupported browser: {name!r}. "
            f"Choose one of: {', '.join(SUPPORTED_BROWSERS)}"
        ) from None


__all__ = [
    "BrowserCapabilities",
    "UnsupportedBrowserError",
    "SUPPORTED_BROWSERS",
    "capabilities_for",
]
