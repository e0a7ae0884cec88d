"""Tests for the webactions command."""

import json

import pytest
from selenium.common.exceptions import SessionNotCreatedException
from selenium.webdriver.common.by import By

from webactions.__main__ import main
from webactions.browser import driver as driver_module

from fakes import DriverFactory, FakeElement


def test_starts_session_and_quits(driver_factory, capsys):
    assert main(["--browser", "firefox", "--implicit-wait", "2"]) == 0

    driver = driver_factory.drivers[0]
    assert driver_factory.calls[0][0].value == "firefox"
    assert driver.implicit_waits == [2]
    assert driver.quit_calls == 1
    assert "Browser: firefox" in capsys.readouterr().out


def test_opens_url_and_reads_text(monkeypatch, capsys):
    factory = DriverFactory({(By.CSS_SELECTOR, "#status"): FakeElement("Ready")})
    monkeypatch.setattr(driver_module, "create_driver", factory)

    code = main(["--browser", "chrome", "--url", "https://example.com",
                 "--text-locator", "#status", "--wait-time", "1"])

    assert code == 0
    assert factory.drivers[0].visited == ["https://example.com"]
    out = capsys.readouterr().out
    assert "Page title: Fake page" in out
    assert "Text of #status: Ready" in out


def test_launch_failure_returns_1(monkeypatch, capsys):
    monkeypatch.setattr(driver_module, "create_driver",
                        DriverFactory(error=SessionNotCreatedException("Chrome failed to start")))
    assert main(["--browser", "chrome"]) == 1
    assert "Chrome failed to start" in capsys.readouterr().out


def test_bad_config_file_returns_1(tmp_path, driver_factory):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"browser": "safari"}))
    assert main(["--config", str(path)]) == 1
    assert driver_factory.calls == []


def test_save_config(tmp_path, driver_factory):
    path = tmp_path / "saved.json"
    assert main(["--browser", "edge", "--save-config", str(path)]) == 0
    assert json.loads(path.read_text())["browser"] == "edge"


def test_argument_errors_exit_2():
    with pytest.raises(SystemExit) as exc_info:
        main(["--browser", "lynx"])
    assert exc_info.value.code == 2


def test_missing_browser_returns_1(driver_factory, capsys):
    assert main(["--url", "https://example.com"]) == 1
    assert "Unsupported browser: None" in capsys.readouterr().out
    assert driver_factory.calls == []
