"""
Main entry point for the URL redirection validator

Usage: python url_match.py url_list.txt
"""
import argparse
import logging
import sys
from typing import List, Optional

import config
from redirect_validator.browser import PlaywrightBrowser
from redirect_validator.results import ResultWriter
from redirect_validator.tasks import load_tasks
from redirect_validator.utils import set_console_level, setup_logging
from redirect_validator.validator import RedirectValidator

logger = setup_logging(__name__)

BANNER = "--------------------------\nUrl Redirection Validator\n--------------------------"

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='url_match.py',
        description='Check that redirection URLs end up on the expected domain',
    )
    parser.add_argument(
        'url_list',
        help='Text file with a header line, then one "redirectionURL,destinationURL" per line'
    )
    parser.add_argument(
        '--output',
        default=str(config.RESULT_CSV),
        help=f'CSV file to append results to (default: {config.RESULT_CSV})'
    )
    parser.add_argument(
        '--settle',
        type=float,
        default=config.SETTLE_SECONDS,
        help=f'Seconds to wait for redirects after each navigation (default: {config.SETTLE_SECONDS})'
    )
    parser.add_argument(
        '--headless',
        action=argparse.BooleanOptionalAction,
        default=config.HEADLESS,
        help='Run Chromium without a window'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Verbose logging'
    )
    return parser

def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point with command-line argument parsing"""
    args = build_parser().parse_args(argv)

    if args.verbose:
        set_console_level(logging.DEBUG)

    print(BANNER)

    try:
        # The whole list is read before the browser starts
        tasks = load_tasks(args.url_list)

        writer = ResultWriter(args.output)
        writer.ensure_header()

        with PlaywrightBrowser(headless=args.headless) as browser:
            validator = RedirectValidator(browser, writer, settle_seconds=args.settle,
                                          task_delay=config.TASK_DELAY)
            validator.run(tasks)

        logger.info(f"All URLs have been processed. Results in {writer.path}")
        return 0

    except Exception as e:
        logger.error(f"An error occurred: {e}")
        return 1

if __name__ == '__main__':
    sys.exit(main())
