#!/usr/bin/env python3
"""
WebDriver setup and initialization module.

This module contains functions for provisioning driver binaries, building
launch options and creating configured WebDriver instances, plus the
DriverSession wrapper that owns a single lazily created driver.
"""

import enum
import logging
import platform

from selenium import webdriver
from selenium.common.exceptions import WebDriverException
from selenium.webdriver.chrome.options import Options as ChromeOptions
from selenium.webdriver.chrome.service import Service as ChromeService
from selenium.webdriver.edge.service import Service as EdgeService
from selenium.webdriver.firefox.service import Service as FirefoxService
from webdriver_manager.chrome import ChromeDriverManager
from webdriver_manager.firefox import GeckoDriverManager
from webdriver_manager.microsoft import EdgeChromiumDriverManager

from ..exceptions import EngineError, UnsupportedBrowserError

logger = logging.getLogger(__name__)

# Flags every Chrome session gets, in this order
CHROME_BASE_ARGUMENTS = (
    "--remote-allow-origins=*",
    # Containers and CI runners usually cannot run Chrome's sandbox
    "--no-sandbox",
    # /dev/shm is too small in many VMs and Chrome crashes when it fills up
    "--disable-dev-shm-usage",
)
CHROME_HEADLESS_ARGUMENT = "--headless"


class BrowserKind(enum.Enum):
    """Browsers a session can be created for."""

    CHROME = "chrome"
    FIREFOX = "firefox"
    EDGE = "edge"

    @classmethod
    def from_name(cls, name):
        """
        Look up a browser kind by name, ignoring case and surrounding whitespace.

        Args:
            name: Browser name such as "chrome" or "Firefox"

        Returns:
            BrowserKind: The matching member

        Raises:
            UnsupportedBrowserError: If the name is missing or unknown
        """
        if isinstance(name, cls):
            return name
        if not isinstance(name, str) or not name.strip():
            raise UnsupportedBrowserError(name)
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise UnsupportedBrowserError(name) from None


def is_windows():
    """Return True when running on the Windows desktop OS."""
    return platform.system() == "Windows"


def build_chrome_options(headless=None, arguments=None):
    """
    Build Chrome launch options.

    Args:
        headless: Force headless on (True) or off (False); None runs headless
            everywhere except Windows
        arguments: Extra command-line flags appended after the defaults

    Returns:
        ChromeOptions: Configured Chrome options
    """
    chrome_options = ChromeOptions()
    for argument in CHROME_BASE_ARGUMENTS:
        chrome_options.add_argument(argument)

    if headless is None:
        headless = not is_windows()
    if headless:
        chrome_options.add_argument(CHROME_HEADLESS_ARGUMENT)

    for argument in arguments or ():
        # Skip anything already present so user flags can't double up
        if argument not in chrome_options.arguments:
            chrome_options.add_argument(argument)

    return chrome_options


def create_driver(kind, headless=None, arguments=None):
    """
    Provision the driver binary and start a maximized browser session.

    Firefox and Edge are launched with default options; ``headless`` and
    ``arguments`` only apply to Chrome.

    Args:
        kind: BrowserKind member or browser name
        headless: Chrome headless override, see build_chrome_options
        arguments: Extra Chrome flags

    Returns:
        WebDriver: A started, maximized WebDriver instance

    Raises:
        UnsupportedBrowserError: If ``kind`` is not a supported browser
        WebDriverException: If the browser fails to launch
        Exception: Whatever webdriver-manager raises when it cannot
            resolve or download the driver binary
    """
    kind = BrowserKind.from_name(kind)
    logger.info("Starting %s WebDriver", kind.value)

    try:
        if kind is BrowserKind.CHROME:
            options = build_chrome_options(headless=headless, arguments=arguments)
            logger.debug("Chrome arguments: %s", options.arguments)
            service = ChromeService(ChromeDriverManager().install())
            driver = webdriver.Chrome(service=service, options=options)
        elif kind is BrowserKind.FIREFOX:
            service = FirefoxService(GeckoDriverManager().install())
            driver = webdriver.Firefox(service=service)
        else:
            service = EdgeService(EdgeChromiumDriverManager().install())
            driver = webdriver.Edge(service=service)
    except Exception:
        logger.error("Could not start %s WebDriver", kind.value, exc_info=True)
        raise

    driver.maximize_window()
    logger.info("%s WebDriver started", kind.value.capitalize())
    return driver


class DriverSession:
    """
    Owns at most one WebDriver and creates it on first use.

    The driver is built by ``factory`` the first time ``get_driver`` is called
    and reused until ``quit``. Only the session quits its driver; callers that
    borrow the handle must not.
    """

    def __init__(self, kind, headless=None, arguments=None, factory=None):
        """
        Initialize a driver session without starting a browser.

        Args:
            kind: BrowserKind member or browser name
            headless: Chrome headless override
            arguments: Extra Chrome flags
            factory: Callable taking ``(kind, headless=..., arguments=...)``
                and returning a WebDriver; defaults to create_driver
        """
        self.kind = BrowserKind.from_name(kind)
        self.headless = headless
        self.arguments = list(arguments or [])
        self._factory = factory or create_driver
        self._driver = None

    @property
    def driver(self):
        """The live WebDriver, or None if none has been created."""
        return self._driver

    @property
    def is_started(self):
        return self._driver is not None

    def get_driver(self):
        """
        Return the session's WebDriver, creating it on the first call.

        Returns:
            WebDriver: The same instance on every call until ``quit``
        """
        if self._driver is None:
            self._driver = self._factory(
                self.kind, headless=self.headless, arguments=self.arguments
            )
        return self._driver

    def quit(self):
        """
        Quit the WebDriver if one is running.

        The handle is cleared even when quitting fails.

        Raises:
            EngineError: If Selenium fails to end the session
        """
        driver, self._driver = self._driver, None
        if driver is None:
            return
        try:
            driver.quit()
            logger.info("%s WebDriver closed", self.kind.value.capitalize())
        except WebDriverException as e:
            logger.error("Error closing %s WebDriver: %s", self.kind.value, e)
            raise EngineError(f"Error closing WebDriver: {e}") from e

    def __enter__(self):
        self.get_driver()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.quit()

    def __repr__(self):
        state = "started" if self.is_started else "idle"
        return f"DriverSession({self.kind.value}, {state})"
