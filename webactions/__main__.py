#!/usr/bin/env python3
"""
Main entry point for webactions.

This module provides a smoke-check command: it starts a browser session the
same way tests do, optionally opens a page and reads an element's text, then
shuts the browser down.
"""

import logging
import sys
import traceback

from selenium.common.exceptions import WebDriverException

from .browser.context import SessionContext
from .browser.locator import Locator
from .cli.argument_parser import parse_args
from .cli.config import load_config_from_args, save_config
from .exceptions import WebActionsError

logger = logging.getLogger(__name__)


def main(argv=None):
    """Main entry point for the webactions command."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )

    try:
        # Load or create configuration
        config = load_config_from_args(args)

        # Save configuration if requested
        if args.save_config:
            save_config(config, args.save_config)
            print(f"Configuration saved to {args.save_config}")

        config.print_summary()

        with SessionContext.from_config(config) as context:
            driver = context.get_driver()
            if config.url:
                driver.get(config.url)
                print(f"- Page title: {driver.title}")

                if args.text_locator:
                    actions = context.actions(config.wait_time)
                    text = actions.get_element_text(Locator.css(args.text_locator))
                    print(f"- Text of {args.text_locator}: {text}")

        print("Browser session completed successfully")
        return 0

    except KeyboardInterrupt:
        print("\nInterrupted by user.")
        return 130  # Standard exit code for SIGINT

    except (WebActionsError, WebDriverException, FileNotFoundError) as e:
        print(f"\nError: {e}")
        logger.debug("Session failed", exc_info=True)
        return 1

    except Exception as e:
        print(f"\nError: {e}")
        traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
