"""
webactions package.

This package provides a thin helper layer over Selenium for browser-driven
tests: session bootstrap for Chrome, Firefox and Edge, and interaction
helpers with bounded waits and retries.
"""

__version__ = "1.0.0"
__author__ = "Aluve Software"

from .browser import (BrowserKind, DriverSession, Locator, SessionContext,
                      WebActions)
from .cli.config import Configuration
from .exceptions import (ConfigurationError, ElementNotFoundError,
                         EngineError, NotSelectControlError,
                         OptionNotFoundError, RetriesExhaustedError,
                         UnsupportedBrowserError, WaitTimeoutError,
                         WebActionsError)

__all__ = [
    "BrowserKind",
    "DriverSession",
    "SessionContext",
    "WebActions",
    "Locator",
    "Configuration",
    "WebActionsError",
    "ConfigurationError",
    "UnsupportedBrowserError",
    "ElementNotFoundError",
    "OptionNotFoundError",
    "WaitTimeoutError",
    "RetriesExhaustedError",
    "EngineError",
    "NotSelectControlError",
]
