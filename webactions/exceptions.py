#!/usr/bin/env python3
"""
Exception hierarchy for the webactions package.

Selenium raises a flat family of ``WebDriverException`` subclasses. The
helpers in this package translate them into a small set of typed errors so
calling tests can tell "not found", "timed out" and "engine failure" apart.
"""

from contextlib import contextmanager

from selenium.common.exceptions import (NoSuchElementException,
                                        TimeoutException,
                                        UnexpectedTagNameException,
                                        WebDriverException)


class WebActionsError(Exception):
    """Base exception for all webactions errors."""
    pass


class ConfigurationError(WebActionsError):
    """Raised when configuration values are invalid or missing."""
    pass


class UnsupportedBrowserError(ConfigurationError):
    """Raised when a browser name does not map to a supported browser."""

    def __init__(self, name):
        self.name = name
        super().__init__(
            f"Unsupported browser: {name!r} (expected one of: chrome, firefox, edge)"
        )


class ElementNotFoundError(WebActionsError):
    """Raised when no element matches a locator."""

    def __init__(self, locator=None, message=None):
        self.locator = locator
        super().__init__(message or f"No element found for locator {locator}")


class OptionNotFoundError(ElementNotFoundError):
    """Raised when a select control has no option with the requested visible text."""

    def __init__(self, locator, option):
        self.option = option
        super().__init__(
            locator, f"No option with visible text {option!r} in select {locator}"
        )


class WaitTimeoutError(WebActionsError):
    """Raised when an explicit wait runs out of time."""

    def __init__(self, locator=None, timeout=None, message=None):
        self.locator = locator
        self.timeout = timeout
        super().__init__(
            message or f"Timed out after {timeout}s waiting for {locator}"
        )


class RetriesExhaustedError(WaitTimeoutError):
    """Raised when a retried interaction failed on every attempt."""

    def __init__(self, locator, attempts, timeout=None):
        self.attempts = attempts
        super().__init__(
            locator,
            timeout,
            f"Interaction with {locator} failed after {attempts} attempts",
        )


class EngineError(WebActionsError):
    """Raised when Selenium or the browser fails for any other reason."""
    pass


class NotSelectControlError(EngineError):
    """Raised when a select helper is pointed at a non-<select> element."""
    pass


@contextmanager
def translate_errors(locator=None, timeout=None):
    """
    Translate Selenium exceptions raised inside the block into webactions errors.

    The original exception is always chained as ``__cause__``. Exceptions that
    do not come from Selenium pass through untouched.

    Args:
        locator: Locator being acted on, used in error messages
        timeout: Wait budget in seconds, reported on timeouts

    Raises:
        ElementNotFoundError: For ``NoSuchElementException``
        WaitTimeoutError: For ``TimeoutException``
        NotSelectControlError: For ``UnexpectedTagNameException``
        EngineError: For any other ``WebDriverException``
    """
    try:
        yield
    except NoSuchElementException as e:
        raise ElementNotFoundError(locator) from e
    except TimeoutException as e:
        raise WaitTimeoutError(locator, timeout) from e
    except UnexpectedTagNameException as e:
        raise NotSelectControlError(str(e)) from e
    except WebDriverException as e:
        raise EngineError(str(e)) from e
