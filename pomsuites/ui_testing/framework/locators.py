"""
================================================================================
Locators
================================================================================

Strategy + value pairs that page objects declare as constants.

A Locator is only a description of how to find an element. Rendering it
yields a Playwright selector string; the lookup itself is always performed
by the driver (`page.locator(...)`).

Usage:
    class LoginPage(BasePage):
        USERNAME_INPUT = By.test_id("input-username")
        LOGIN_BUTTON = By.css("button[type='submit']")

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class Strategy(str, Enum):
    """Element lookup strategies understood by `Locator.selector`."""

    CSS = "css"
    XPATH = "xpath"
    ID = "id"
    NAME = "name"
    TEXT = "text"
    TEST_ID = "test_id"
    LINK_TEXT = "link_text"


def _quote(value: str) -> str:
    return '"' + value.replace("\\", "\\\\").replace('"', '\\"') + '"'


@dataclass(frozen=True)
class Locator:
    """
    Opaque strategy+value pair.

    Attributes:
        strategy: How the value should be interpreted
        value: Selector, id, visible text... depending on the strategy
    """
    strategy: Strategy
    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError(f"Locator value must not be empty ({self.strategy.value})")

    @property
    def selector(self) -> str:
        """Playwright selector string for this locator."""
        if self.strategy is Strategy.CSS:
            return f"css={self.value}"
        if self.strategy is Strategy.XPATH:
            return f"xpath={self.value}"
        if self.strategy is Strategy.ID:
            return f"[id={_quote(self.value)}]"
        if self.strategy is Strategy.NAME:
            return f"[name={_quote(self.value)}]"
        if self.strategy is Strategy.TEXT:
            return f"text={self.value}"
        if self.strategy is Strategy.TEST_ID:
            return f"[data-testid={_quote(self.value)}]"
        # LINK_TEXT
        return f"a:has-text({_quote(self.value)})"

    def __str__(self) -> str:
        return f"{self.strategy.value}={self.value}"


class By:
    """Shorthand constructors: `By.css("#login")`, `By.test_id("btn-login")`."""

    @staticmethod
    def css(value: str) -> Locator:
        return Locator(Strategy.CSS, value)

    @staticmethod
    def xpath(value: str) -> Locator:
        return Locator(Strategy.XPATH, value)

    @staticmethod
    def id(value: str) -> Locator:
        return Locator(Strategy.ID, value)

    @staticmethod
    def name(value: str) -> Locator:
        return Locator(Strategy.NAME, value)

    @staticmethod
    def text(value: str) -> Locator:
        return Locator(Strategy.TEXT, value)

    @staticmethod
    def test_id(value: str) -> Locator:
        return Locator(Strategy.TEST_ID, value)

    @staticmethod
    def link_text(value: str) -> Locator:
        return Locator(Strategy.LINK_TEXT, value)


LocatorLike = Union[Locator, str]


def as_selector(target: LocatorLike) -> str:
    """
    Resolve a Locator or raw selector string to a Playwright selector.

    Raw strings are passed through untouched.

    Raises:
        TypeError: For anything that is neither a Locator nor a string
    """
    if isinstance(target, Locator):
        return target.selector
    if isinstance(target, str):
        return target
    raise TypeError(
        f"Expected Locator or selector string, got {type(target).__name__}"
    )


__all__ = [
    "Strategy",
    "Locator",
    "By",
    "LocatorLike",
    "as_selector",
]
