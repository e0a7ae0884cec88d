#!/usr/bin/env python3
"""
Page interaction helpers.

This module contains the WebActions class, which wraps common Selenium
interactions (clicking, toggling, reading and typing text, picking select
options) with bounded explicit waits and typed errors.
"""

import logging
from numbers import Real

from selenium.common.exceptions import (NoSuchElementException,
                                        TimeoutException,
                                        WebDriverException)
from selenium.webdriver.common.action_chains import ActionChains
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.ui import Select, WebDriverWait

from ..exceptions import (OptionNotFoundError, RetriesExhaustedError,
                          translate_errors)
from .conditions import text_to_be_non_empty
from .locator import Locator

logger = logging.getLogger(__name__)

# Number of times click_element tries before giving up
CLICK_ATTEMPTS = 3

# Seconds between polls of an explicit wait (Selenium's own default)
POLL_FREQUENCY = 0.5


class WebActions:
    """
    Interaction helpers bound to a borrowed WebDriver.

    The helper never creates or quits the driver. Every explicit wait it
    performs is bounded by ``wait_time`` seconds, measured from the start of
    that wait.
    """

    def __init__(self, driver, wait_time, poll_frequency=POLL_FREQUENCY):
        """
        Initialize the helper.

        Args:
            driver: Selenium WebDriver to act on
            wait_time: Explicit wait budget in seconds
            poll_frequency: Seconds between condition checks while waiting

        Raises:
            ValueError: If ``wait_time`` is negative or not a number
        """
        if isinstance(wait_time, bool) or not isinstance(wait_time, Real) or wait_time < 0:
            raise ValueError(f"wait_time must be a non-negative number, got {wait_time!r}")
        self.driver = driver
        self.wait_time = wait_time
        self.poll_frequency = poll_frequency

    def _wait(self):
        return WebDriverWait(self.driver, self.wait_time, poll_frequency=self.poll_frequency)

    def _select_if_unselected(self, label, locator, control):
        locator = Locator.coerce(locator)
        with translate_errors(locator):
            element = self.driver.find_element(*locator)
            if element.is_selected():
                logger.debug("%s %r already selected (%s)", control, label, locator)
                return
            logger.debug("Selecting %s %r (%s)", control, label, locator)
            element.click()

    def check_checkbox_by_label(self, label, locator):
        """
        Check a checkbox unless it is already checked.

        Args:
            label: Text label of the checkbox; only used for logging, the
                element is looked up by ``locator``
            locator: Locator of the checkbox input

        Raises:
            ElementNotFoundError: If no element matches ``locator``
            EngineError: If Selenium fails to read or click the element
        """
        self._select_if_unselected(label, locator, "checkbox")

    def click_radio_btn_by_label(self, label, locator):
        """
        Click a radio button unless it is already selected.

        Args:
            label: Text label of the radio button; only used for logging
            locator: Locator of the radio input

        Raises:
            ElementNotFoundError: If no element matches ``locator``
            EngineError: If Selenium fails to read or click the element
        """
        self._select_if_unselected(label, locator, "radio button")

    def is_text_present_in_element(self, locator, text):
        """
        Wait for ``text`` to appear in the element's text.

        The check is a substring match, polled until ``wait_time`` runs out.

        Args:
            locator: Locator of the element to watch
            text: Text expected to appear

        Returns:
            bool: True if the text appeared in time, False if the wait
            timed out (including when the element never showed up)

        Raises:
            EngineError: If Selenium fails for any reason other than a timeout
        """
        locator = Locator.coerce(locator)
        with translate_errors(locator, self.wait_time):
            try:
                return bool(self._wait().until(
                    EC.text_to_be_present_in_element(locator.as_tuple(), text)
                ))
            except TimeoutException:
                logger.debug("Text %r not present in %s after %ss", text, locator, self.wait_time)
                return False

    def get_element_text(self, locator):
        """
        Return the element's text, waiting for it to become non-empty.

        If the text is still empty when the wait runs out, the text is read
        once more without waiting and returned as-is, so an empty string is a
        possible result.

        Args:
            locator: Locator of the element to read

        Returns:
            str: The element's text

        Raises:
            ElementNotFoundError: If the element is missing on the final read
            EngineError: If Selenium fails to read the element
        """
        locator = Locator.coerce(locator)
        with translate_errors(locator, self.wait_time):
            try:
                return self._wait().until(text_to_be_non_empty(locator.as_tuple()))
            except TimeoutException:
                logger.debug("Text of %s still empty after %ss, reading it directly", locator, self.wait_time)
                return self.driver.find_element(*locator).text

    def click_element(self, locator):
        """
        Click an element once it is clickable and visible, retrying on failure.

        Each attempt waits up to ``wait_time`` for the element to become
        clickable and visible before clicking. Failed attempts are retried
        immediately, up to CLICK_ATTEMPTS in total.

        Args:
            locator: Locator of the element to click

        Raises:
            RetriesExhaustedError: If every attempt failed; the last
                Selenium error is chained as the cause
        """
        locator = Locator.coerce(locator)
        last_error = None

        for attempt in range(CLICK_ATTEMPTS):
            try:
                wait = self._wait()
                wait.until(EC.element_to_be_clickable(locator.as_tuple()))
                wait.until(EC.visibility_of_element_located(locator.as_tuple())).click()
                return
            except WebDriverException as e:
                last_error = e
                logger.warning(
                    "Click on %s failed (attempt %d/%d): %s",
                    locator, attempt + 1, CLICK_ATTEMPTS, e.__class__.__name__,
                )

        raise RetriesExhaustedError(locator, CLICK_ATTEMPTS, self.wait_time) from last_error

    def update_field(self, locator, text):
        """
        Replace the content of an input field.

        Moves the pointer over the field, clears it and types ``text``. There
        is no explicit wait or retry.

        Args:
            locator: Locator of the input field
            text: New content for the field

        Raises:
            ElementNotFoundError: If no element matches ``locator``
            EngineError: If Selenium fails to hover, clear or type
        """
        locator = Locator.coerce(locator)
        with translate_errors(locator):
            field = self.driver.find_element(*locator)
            ActionChains(self.driver).move_to_element(field).perform()
            field.clear()
            field.send_keys(text)

    def select_text_option(self, locator, visible_text):
        """
        Select the option of a <select> whose visible text matches exactly.

        Args:
            locator: Locator of the select element
            visible_text: Visible label of the option to choose

        Raises:
            ElementNotFoundError: If no element matches ``locator``
            OptionNotFoundError: If no option has that visible text
            NotSelectControlError: If the element is not a <select>
            EngineError: For any other Selenium failure
        """
        locator = Locator.coerce(locator)
        with translate_errors(locator):
            select = Select(self.driver.find_element(*locator))
            try:
                select.select_by_visible_text(visible_text)
            except NoSuchElementException as e:
                raise OptionNotFoundError(locator, visible_text) from e
