#!/usr/bin/env python3
"""
Configuration management module.

This module provides the Configuration dataclass and functions for loading
it from the environment, JSON files and command-line arguments.
"""

import json
import os
from dataclasses import asdict, dataclass, field, fields
from typing import List, Mapping, Optional

from ..browser.driver import BrowserKind
from ..exceptions import ConfigurationError, UnsupportedBrowserError

# Environment variables read by Configuration.from_env
ENV_BROWSER = "WEBACTIONS_BROWSER"
ENV_IMPLICIT_WAIT = "WEBACTIONS_IMPLICIT_WAIT"
ENV_WAIT_TIME = "WEBACTIONS_WAIT_TIME"
ENV_HEADLESS = "WEBACTIONS_HEADLESS"
ENV_ARGUMENTS = "WEBACTIONS_ARGUMENTS"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _parse_int(name, value):
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"{name} must be an integer, got {value!r}") from None


def _parse_bool(name, value):
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"{name} must be a boolean (true/false), got {value!r}")


def _split_arguments(value):
    return [arg.strip() for arg in value.split(',') if arg.strip()]


@dataclass
class Configuration:
    """
    Configuration for a browser test session.

    This dataclass holds everything needed to start a session and build
    interaction helpers, and can be serialized to and from JSON.
    """
    # Browser selection
    browser: Optional[str] = None  # required before a session can start
    headless: Optional[bool] = None  # None: headless unless on Windows (Chrome only)
    arguments: List[str] = field(default_factory=list)

    # Waits, in seconds
    implicit_wait: int = 10
    wait_time: int = 10

    # Page to open from the command line
    url: Optional[str] = None

    def __post_init__(self):
        """Validate configuration after initialization."""
        # None is allowed while sources are layered; browser_kind rejects it
        if self.browser is not None:
            self.browser = BrowserKind.from_name(self.browser).value

        for name in ("implicit_wait", "wait_time"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)) or value < 0:
                raise ConfigurationError(f"{name} must be a non-negative number, got {value!r}")

        if self.headless is not None and not isinstance(self.headless, bool):
            raise ConfigurationError(f"headless must be true, false or null, got {self.headless!r}")

        if isinstance(self.arguments, str) or not all(isinstance(arg, str) for arg in self.arguments):
            raise ConfigurationError(f"arguments must be a list of strings, got {self.arguments!r}")
        self.arguments = list(self.arguments)

    @property
    def browser_kind(self):
        """
        The configured browser as a BrowserKind.

        Raises:
            UnsupportedBrowserError: If no browser was configured
        """
        return BrowserKind.from_name(self.browser)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None):
        """
        Create a Configuration from WEBACTIONS_* environment variables.

        Variables that are unset or empty keep their defaults.

        Args:
            environ: Mapping to read instead of os.environ

        Returns:
            Configuration: Configuration instance

        Raises:
            ConfigurationError: If a variable holds an invalid value
        """
        environ = os.environ if environ is None else environ
        values = {}

        if environ.get(ENV_BROWSER):
            values["browser"] = environ[ENV_BROWSER]
        if environ.get(ENV_IMPLICIT_WAIT):
            values["implicit_wait"] = _parse_int(ENV_IMPLICIT_WAIT, environ[ENV_IMPLICIT_WAIT])
        if environ.get(ENV_WAIT_TIME):
            values["wait_time"] = _parse_int(ENV_WAIT_TIME, environ[ENV_WAIT_TIME])
        if environ.get(ENV_HEADLESS):
            values["headless"] = _parse_bool(ENV_HEADLESS, environ[ENV_HEADLESS])
        if environ.get(ENV_ARGUMENTS):
            values["arguments"] = _split_arguments(environ[ENV_ARGUMENTS])

        return cls(**values)

    @classmethod
    def from_args(cls, args):
        """
        Create a Configuration from parsed command-line arguments.

        Options that were not given on the command line keep their defaults.

        Args:
            args: Parsed command-line arguments

        Returns:
            Configuration: Configuration instance
        """
        return _override_config_from_args(cls(), args)

    def to_dict(self):
        """
        Convert configuration to a dictionary.

        Returns:
            dict: Dictionary representation of the configuration
        """
        return asdict(self)

    @classmethod
    def from_dict(cls, config_dict):
        """
        Create a Configuration instance from a dictionary.

        Args:
            config_dict: Dictionary containing configuration parameters

        Returns:
            Configuration: Configuration instance

        Raises:
            ConfigurationError: If the dictionary has unknown keys or bad values
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(config_dict) - known)
        if unknown:
            raise ConfigurationError(f"Unknown configuration keys: {', '.join(unknown)}")
        return cls(**config_dict)

    def print_summary(self):
        """Print a summary of the configuration."""
        print("\nWeb actions configuration:")
        print(f"- Browser: {self.browser}")
        if self.browser_kind is BrowserKind.CHROME:
            if self.headless is None:
                print("- Headless: auto (headless unless running on Windows)")
            else:
                print(f"- Headless: {'Yes' if self.headless else 'No'}")
            if self.arguments:
                print(f"- Extra arguments: {' '.join(self.arguments)}")
        print(f"- Implicit wait: {self.implicit_wait}s")
        print(f"- Explicit wait: {self.wait_time}s")
        if self.url:
            print(f"- URL: {self.url}")
        print()


def _read_config_file(config_file):
    if not os.path.exists(config_file):
        raise FileNotFoundError(f"Configuration file not found: {config_file}")

    with open(config_file, 'r') as f:
        try:
            config_dict = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in configuration file {config_file}: {e.msg}") from e

    if not isinstance(config_dict, dict):
        raise ConfigurationError(f"Configuration file {config_file} must contain a JSON object")
    return config_dict


def load_config(config_file: str) -> Configuration:
    """
    Load configuration from a JSON file.

    Args:
        config_file: Path to the configuration file

    Returns:
        Configuration: Configuration instance

    Raises:
        FileNotFoundError: If the configuration file does not exist
        ConfigurationError: If the file is not valid JSON or holds bad values
    """
    return Configuration.from_dict(_read_config_file(config_file))


def save_config(config: Configuration, config_file: str) -> None:
    """
    Save configuration to a JSON file.

    Args:
        config: Configuration instance
        config_file: Path to the configuration file
    """
    # Create directory if it doesn't exist
    directory = os.path.dirname(os.path.abspath(config_file))
    if directory and not os.path.exists(directory):
        os.makedirs(directory)

    with open(config_file, 'w') as f:
        json.dump(config.to_dict(), f, indent=2)


def load_config_from_args(args):
    """
    Build configuration from the environment, a config file and CLI arguments.

    Later sources win: environment variables, then the ``--config`` file,
    then options given explicitly on the command line.

    Args:
        args: Parsed command-line arguments

    Returns:
        Configuration: Configuration instance

    Raises:
        UnsupportedBrowserError: If none of the sources names a browser
    """
    values = Configuration.from_env().to_dict()
    if args.config:
        values.update(_read_config_file(args.config))
    config = _override_config_from_args(Configuration.from_dict(values), args)
    if config.browser is None:
        raise UnsupportedBrowserError(None)
    return config


def _override_config_from_args(config, args):
    """
    Override configuration with explicitly specified command-line arguments.

    The parser leaves every option it was not given at None, so only
    options the user typed replace configured values.

    Args:
        config: Existing configuration
        args: Parsed command-line arguments

    Returns:
        Configuration: New, validated configuration
    """
    values = config.to_dict()
    for key in ("browser", "implicit_wait", "wait_time", "headless", "url"):
        value = getattr(args, key, None)
        if value is not None:
            values[key] = value

    extra = getattr(args, "arguments", None)
    if extra:
        values["arguments"] = values["arguments"] + [arg for arg in extra if arg not in values["arguments"]]

    return Configuration.from_dict(values)
