#!/usr/bin/env python3
"""
SwabBooker - book a COVID test appointment from the terminal.

Main entry point for the application.
"""

import argparse
import asyncio
import sys
from typing import List, Optional

from loguru import logger

from swabbooker.core.config import AppConfig, CliSettings, load_config
from swabbooker.core.exceptions import SwabBookerError
from swabbooker.core.logger import setup_logging
from swabbooker.services.api import BookingApiClient
from swabbooker.services.booking import BookingResult, BookingWorkflow
from swabbooker.ui import Prompter

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130


def parse_args(argv: Optional[List[str]] = None, settings: Optional[CliSettings] = None):
    """Parse command line flags; defaults come from SWABBOOKER_* settings."""
    settings = settings or CliSettings()
    parser = argparse.ArgumentParser(description="SwabBooker - book a COVID test appointment")
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        default=settings.debug,
        help="Log every request and response",
    )
    parser.add_argument(
        "-c", "--config", default=settings.config_path, help="Path to configuration file"
    )
    parser.add_argument("--log-file", default=settings.log_file, help="Also log to this file")
    return parser.parse_args(argv)


async def run_booking(config: AppConfig, prompter: Optional[Prompter] = None) -> BookingResult:
    """
    Run the booking workflow once against the configured API.

    Args:
        config: Validated configuration
        prompter: Source of user answers (terminal by default)

    Returns:
        Result of the workflow
    """
    async with BookingApiClient.from_config(config.api) as client:
        workflow = BookingWorkflow(client, prompter or Prompter(), config)
        try:
            return await workflow.run()
        except SwabBookerError:
            logger.error(f"Booking aborted during step '{workflow.current_step.value}'")
            raise


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point."""
    args = parse_args(argv)

    setup_logging(debug=args.debug, log_file=args.log_file)

    try:
        config = load_config(args.config)
        result = asyncio.run(run_booking(config))
        logger.debug(f"Workflow finished: {result.outcome.value}")
    except KeyboardInterrupt:
        logger.warning("Interrupted, nothing more will be sent")
        sys.exit(EXIT_INTERRUPTED)
    except SwabBookerError as e:
        logger.error(e.message)
        logger.debug(f"Error details: {e.to_dict()}")
        sys.exit(EXIT_FAILURE)
    except Exception as e:
        logger.opt(exception=e).error(f"Fatal error: {e}")
        sys.exit(EXIT_FAILURE)


if __name__ == "__main__":
    main()
