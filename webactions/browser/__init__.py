"""
Browser module for session setup and page interaction.

This package contains components for starting Selenium WebDriver sessions
(Chrome, Firefox, Edge) and for interacting with page elements through
bounded waits and retries.
"""

from .actions import WebActions
from .context import SessionContext
from .driver import (BrowserKind, DriverSession, build_chrome_options,
                     create_driver)
from .locator import Locator

__all__ = [
    "BrowserKind",          # Supported browsers
    "DriverSession",        # Get-or-create owner of one WebDriver
    "SessionContext",       # Driver plus implicit wait, as used by tests
    "WebActions",           # Interaction helpers
    "Locator",              # (by, value) element locator
    "build_chrome_options",
    "create_driver",
]
