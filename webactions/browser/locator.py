#!/usr/bin/env python3
"""
Element locator value type.

A Locator pairs a Selenium ``By`` strategy with a selector string. It unpacks
like the ``(by, value)`` tuples Selenium's own APIs take, so it can be passed
straight to ``find_element`` or to ``expected_conditions``.
"""

from dataclasses import dataclass
from typing import Iterator, Tuple, Union

from selenium.webdriver.common.by import By


@dataclass(frozen=True)
class Locator:
    """Immutable description of how to find one page element."""

    by: str
    value: str

    def __iter__(self) -> Iterator[str]:
        yield self.by
        yield self.value

    def __str__(self) -> str:
        return f"{self.by}={self.value!r}"

    def as_tuple(self) -> Tuple[str, str]:
        """Return the ``(by, value)`` tuple Selenium expects."""
        return (self.by, self.value)

    @classmethod
    def coerce(cls, locator: Union["Locator", Tuple[str, str]]) -> "Locator":
        """
        Normalize a Locator or a ``(by, value)`` pair into a Locator.

        Raises:
            TypeError: If the argument is neither a Locator nor a pair
        """
        if isinstance(locator, cls):
            return locator
        if isinstance(locator, (tuple, list)) and len(locator) == 2:
            return cls(locator[0], locator[1])
        raise TypeError(f"Expected a Locator or (by, value) pair, got {locator!r}")

    # Shortcuts for the common strategies
    @classmethod
    def id(cls, value: str) -> "Locator":
        return cls(By.ID, value)

    @classmethod
    def name(cls, value: str) -> "Locator":
        return cls(By.NAME, value)

    @classmethod
    def css(cls, value: str) -> "Locator":
        return cls(By.CSS_SELECTOR, value)

    @classmethod
    def xpath(cls, value: str) -> "Locator":
        return cls(By.XPATH, value)

    @classmethod
    def class_name(cls, value: str) -> "Locator":
        return cls(By.CLASS_NAME, value)

    @classmethod
    def tag_name(cls, value: str) -> "Locator":
        return cls(By.TAG_NAME, value)

    @classmethod
    def link_text(cls, value: str) -> "Locator":
        return cls(By.LINK_TEXT, value)
