#!/usr/bin/env python3
"""
Command-line argument parsing module.

This module provides functions for setting up and parsing the arguments of
the ``webactions`` smoke-check command.
"""

import argparse
from urllib.parse import urlparse

from ..browser.driver import BrowserKind


def create_parser():
    """
    Create the command-line argument parser.

    Options default to None so configuration files and environment variables
    are only overridden by options the user actually gave.

    Returns:
        argparse.ArgumentParser: Configured argument parser
    """
    parser = argparse.ArgumentParser(
        prog='webactions',
        description='Start a browser session the way tests do, optionally open a page, and report'
    )

    # Browser options
    browser_group = parser.add_argument_group('Browser Options')
    browser_group.add_argument('--browser', type=str.lower, default=None,
                        choices=[kind.value for kind in BrowserKind],
                        help='Browser to start (required unless WEBACTIONS_BROWSER or the config file sets it)')
    headless_group = browser_group.add_mutually_exclusive_group()
    headless_group.add_argument('--headless', dest='headless', action='store_const', const=True, default=None,
                        help='Force headless mode (Chrome only)')
    headless_group.add_argument('--visible', dest='headless', action='store_const', const=False,
                        help='Force a visible browser window (Chrome only)')
    browser_group.add_argument('--argument', dest='arguments', action='append', default=None, metavar='FLAG',
                        help='Extra Chrome command-line flag; may be repeated')

    # Wait options
    wait_group = parser.add_argument_group('Wait Options')
    wait_group.add_argument('--implicit-wait', type=int, default=None,
                        help='Implicit wait applied to the driver, in seconds (default: 10)')
    wait_group.add_argument('--wait-time', type=int, default=None,
                        help='Explicit wait budget for interaction helpers, in seconds (default: 10)')

    # Page options
    page_group = parser.add_argument_group('Page Options')
    page_group.add_argument('--url', type=str, default=None,
                        help='Page to open once the browser is up')
    page_group.add_argument('--text-locator', type=str, default=None, metavar='CSS',
                        help='CSS selector of an element whose text should be printed (requires --url)')

    # Configuration file options
    config_group = parser.add_argument_group('Configuration Options')
    config_group.add_argument('--config', type=str, default=None,
                        help='Path to configuration file (JSON)')
    config_group.add_argument('--save-config', type=str, default=None,
                        help='Save the resolved settings to a configuration file')
    config_group.add_argument('--verbose', '-v', action='store_true',
                        help='Enable debug logging')

    return parser


def parse_args(args=None):
    """
    Parse command-line arguments.

    Args:
        args: Command-line arguments to parse (uses sys.argv if None)

    Returns:
        argparse.Namespace: Parsed arguments

    Raises:
        SystemExit: If arguments are missing or invalid
    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    for name in ('implicit_wait', 'wait_time'):
        value = getattr(parsed_args, name)
        if value is not None and value < 0:
            parser.error(f"--{name.replace('_', '-')} must not be negative")

    if parsed_args.url:
        parsed_url = urlparse(parsed_args.url)
        if not parsed_url.scheme or not parsed_url.netloc:
            parser.error("Invalid URL. Please provide a valid URL (e.g., https://example.com)")

    if parsed_args.text_locator and not parsed_args.url:
        parser.error("--text-locator requires --url")

    return parsed_args
