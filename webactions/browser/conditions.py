"""Extra wait conditions in the style of selenium's expected_conditions."""

from selenium.common.exceptions import StaleElementReferenceException


def text_to_be_non_empty(locator):
    """
    An expectation that the element located by ``locator`` has non-empty text.

    Returns the text once it is non-empty, otherwise False. A missing element
    raises NoSuchElementException, which WebDriverWait ignores by default.
    """

    def _predicate(driver):
        try:
            text = driver.find_element(*locator).text
        except StaleElementReferenceException:
            return False
        return text if text else False

    return _predicate
