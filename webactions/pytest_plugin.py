"""
pytest fixtures for browser tests.

Enable in a conftest.py with::

    pytest_plugins = ["webactions.pytest_plugin"]

Settings come from WEBACTIONS_* environment variables, overridden by the
command-line options this plugin adds. There is no default browser:
``web_context`` raises UnsupportedBrowserError unless ``--web-browser`` or
WEBACTIONS_BROWSER names one.
"""

import pytest

from .browser.context import SessionContext
from .cli.config import Configuration


def pytest_addoption(parser):
    group = parser.getgroup("webactions", "browser session settings")
    group.addoption("--web-browser", dest="web_browser", action="store", default=None,
                    help="Browser to run tests in: chrome, firefox or edge (required unless WEBACTIONS_BROWSER is set)")
    group.addoption("--web-implicit-wait", dest="web_implicit_wait", action="store", type=int, default=None,
                    help="Implicit wait applied to the driver, in seconds")
    group.addoption("--web-wait-time", dest="web_wait_time", action="store", type=int, default=None,
                    help="Explicit wait budget for WebActions, in seconds")
    group.addoption("--web-headed", dest="web_headed", action="store_true", default=False,
                    help="Show the browser window (Chrome runs headless by default off Windows)")


@pytest.fixture(scope="session")
def web_config(pytestconfig):
    """Configuration resolved from the environment and command-line options."""
    values = Configuration.from_env().to_dict()
    for key in ("browser", "implicit_wait", "wait_time"):
        value = pytestconfig.getoption("web_" + key)
        if value is not None:
            values[key] = value
    if pytestconfig.getoption("web_headed"):
        values["headless"] = False
    return Configuration.from_dict(values)


@pytest.fixture
def web_context(web_config):
    """A started browser session, closed after the test."""
    context = SessionContext.from_config(web_config)
    yield context
    context.close()


@pytest.fixture
def web_actions(web_context, web_config):
    """WebActions bound to the test's browser session."""
    return web_context.actions(web_config.wait_time)
