"""Tests for SessionContext: bootstrap, implicit wait and helper creation."""

import pytest

from webactions.browser.actions import WebActions
from webactions.browser.context import SessionContext
from webactions.browser.driver import BrowserKind, DriverSession
from webactions.cli.config import Configuration
from webactions.exceptions import UnsupportedBrowserError

from fakes import DriverFactory


def test_construction_starts_browser_and_applies_implicit_wait(driver_factory):
    context = SessionContext(7, browser="chrome")
    assert len(driver_factory.drivers) == 1
    assert driver_factory.drivers[0].implicit_waits == [7]
    assert context.driver is driver_factory.drivers[0]


def test_get_driver_returns_same_handle(driver_factory):
    context = SessionContext(5, browser="firefox")
    assert context.get_driver() is context.get_driver()
    assert len(driver_factory.calls) == 1
    assert driver_factory.drivers[0].implicit_waits == [5]


@pytest.mark.parametrize("name", ["chrome", "firefox", "edge"])
def test_browser_kind_passed_explicitly(driver_factory, name):
    SessionContext(1, browser=name.upper())
    assert driver_factory.calls[0][0] is BrowserKind(name)


def test_missing_browser_is_rejected(driver_factory):
    with pytest.raises(UnsupportedBrowserError):
        SessionContext(5)
    assert driver_factory.calls == []


@pytest.mark.parametrize("implicit_wait", [-1, "10", None])
def test_invalid_implicit_wait_is_rejected(driver_factory, implicit_wait):
    with pytest.raises(ValueError):
        SessionContext(implicit_wait, browser="chrome")
    assert driver_factory.calls == []


def test_actions_borrow_the_context_driver(driver_factory):
    context = SessionContext(3, browser="chrome")
    actions = context.actions(12)
    assert isinstance(actions, WebActions)
    assert actions.driver is context.driver
    assert actions.wait_time == 12


def test_close_quits_and_reopen_reapplies_wait(driver_factory):
    context = SessionContext(4, browser="chrome")
    first = context.driver
    context.close()
    assert first.quit_calls == 1

    second = context.get_driver()
    assert second is not first
    assert second.implicit_waits == [4]


def test_context_manager_closes_browser(driver_factory):
    with SessionContext(2, browser="edge") as context:
        driver = context.driver
    assert driver.quit_calls == 1


def test_uses_supplied_session():
    factory = DriverFactory()
    session = DriverSession("firefox", factory=factory)
    context = SessionContext(9, session=session)
    assert context.session is session
    assert factory.drivers[0].implicit_waits == [9]


def test_supplied_started_session_gets_implicit_wait():
    factory = DriverFactory()
    session = DriverSession("chrome", factory=factory)
    driver = session.get_driver()
    SessionContext(6, session=session)
    assert driver.implicit_waits == [6]
    assert len(factory.calls) == 1


def test_from_config(driver_factory):
    config = Configuration(browser="Edge", implicit_wait=3, headless=True, arguments=["--lang=en"])
    context = SessionContext.from_config(config)
    assert driver_factory.calls == [(BrowserKind.EDGE, True, ["--lang=en"])]
    assert context.driver.implicit_waits == [3]


def test_from_config_without_browser_is_rejected(driver_factory):
    with pytest.raises(UnsupportedBrowserError):
        SessionContext.from_config(Configuration.from_env({}))
    assert driver_factory.calls == []
