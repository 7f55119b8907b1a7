"""Command-line demo: print a user's tweet details or report why not.

Examples:
- python -m castor
- python -m castor 1234 --strategy curried --log-level DEBUG
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TYPE_CHECKING

from castor.config import resolve_config
from castor.errors import ConfigurationError
from castor.pipeline import STRATEGIES
from castor.report import report_tweet_details
from castor.repository import TwitterRepository

if TYPE_CHECKING:
    from collections.abc import Sequence

    from castor.errors import NotFoundError

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_CONFIG = 2


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for ``python -m castor``."""
    parser = argparse.ArgumentParser(
        prog="castor", description="Assemble tweet details for a user"
    )
    parser.add_argument(
        "user_id",
        nargs="?",
        default=None,
        help="User to look up (default: CASTOR_USER_ID or 1234)",
    )
    parser.add_argument(
        "--strategy",
        choices=sorted(STRATEGIES),
        default=None,
        help="Pipeline composition strategy (default: CASTOR_STRATEGY or applicative)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging verbosity",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry: run the pipeline once and report the outcome."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s: %(message)s",
    )

    try:
        config = resolve_config({"user_id": args.user_id, "strategy": args.strategy})
    except ConfigurationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        if exc.hint:
            print(f"hint: {exc.hint}", file=sys.stderr)
        return EXIT_CONFIG

    repo = TwitterRepository.from_config(config)

    def _print_error(error: NotFoundError) -> None:
        print(f"error: {error.message}", file=sys.stderr)

    ok = report_tweet_details(
        repo.get_tweet_details(config.user_id), on_error=_print_error
    )
    return EXIT_OK if ok else EXIT_NOT_FOUND
