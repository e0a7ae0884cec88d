"""Shared fixtures for the webactions test suite."""

import pytest

from webactions.browser import actions as actions_module
from webactions.browser import driver as driver_module
from webactions.cli import config as config_module

from fakes import DriverFactory, FakeActionChains


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep WEBACTIONS_* variables from the developer's shell out of the tests."""
    for name in (config_module.ENV_BROWSER, config_module.ENV_IMPLICIT_WAIT,
                 config_module.ENV_WAIT_TIME, config_module.ENV_HEADLESS,
                 config_module.ENV_ARGUMENTS):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def driver_factory(monkeypatch):
    """Replace create_driver so DriverSession hands out FakeDrivers."""
    factory = DriverFactory()
    monkeypatch.setattr(driver_module, "create_driver", factory)
    return factory


@pytest.fixture
def action_chains(monkeypatch):
    FakeActionChains.performed = []
    monkeypatch.setattr(actions_module, "ActionChains", FakeActionChains)
    return FakeActionChains
