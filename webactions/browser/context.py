#!/usr/bin/env python3
"""
Test context module.

A SessionContext is what a test holds on to: creating one starts the browser,
applies the implicit wait, and hands out WebActions helpers bound to it.
"""

import logging
from numbers import Real

from .actions import WebActions
from .driver import DriverSession

logger = logging.getLogger(__name__)


class SessionContext:
    """Starts one browser session and applies an implicit wait to it."""

    def __init__(self, implicit_wait, browser=None, headless=None, arguments=None, session=None):
        """
        Initialize the context and start its browser.

        Args:
            implicit_wait: Implicit wait applied to the driver, in seconds
            browser: BrowserKind member or browser name; required unless
                ``session`` is given
            headless: Chrome headless override
            arguments: Extra Chrome flags
            session: Pre-built DriverSession to use instead of creating one

        Raises:
            ValueError: If ``implicit_wait`` is negative or not a number
            UnsupportedBrowserError: If ``browser`` is missing or unknown
        """
        if isinstance(implicit_wait, bool) or not isinstance(implicit_wait, Real) or implicit_wait < 0:
            raise ValueError(f"implicit_wait must be a non-negative number, got {implicit_wait!r}")

        self.implicit_wait = implicit_wait
        self.session = session or DriverSession(browser, headless=headless, arguments=arguments)
        if self.session.is_started:
            self.session.driver.implicitly_wait(implicit_wait)
        else:
            self.get_driver()

    @classmethod
    def from_config(cls, config):
        """
        Create a context from a Configuration.

        Args:
            config: webactions.cli.config.Configuration instance

        Returns:
            SessionContext: A context with a started browser
        """
        return cls(
            config.implicit_wait,
            browser=config.browser_kind,
            headless=config.headless,
            arguments=config.arguments,
        )

    @property
    def driver(self):
        return self.get_driver()

    def get_driver(self):
        """
        Return the context's driver; the same handle on every call.

        If the browser was closed, a new one is started and gets the
        implicit wait applied again.
        """
        if self.session.is_started:
            return self.session.driver
        driver = self.session.get_driver()
        driver.implicitly_wait(self.implicit_wait)
        logger.debug("Implicit wait set to %ss", self.implicit_wait)
        return driver

    def actions(self, wait_time):
        """
        Create a WebActions helper that borrows this context's driver.

        Args:
            wait_time: Explicit wait budget in seconds for the helper
        """
        return WebActions(self.get_driver(), wait_time)

    def close(self):
        """Quit the browser."""
        self.session.quit()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
