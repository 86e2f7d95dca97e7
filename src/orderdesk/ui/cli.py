# ruff: noqa: T201

from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from orderdesk.app import load_data_store
from orderdesk.common import configure_logging
from orderdesk.config import ConfigurationError, get_data_source_config
from orderdesk.ui.printer import print_data_store

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Load customers, articles and orders from JSON and print them"
    )
    parser.add_argument(
        "--customers",
        type=str,
        help="Path to the customers JSON file (defaults to config)",
    )
    parser.add_argument(
        "--articles",
        type=str,
        help="Path to the articles JSON file (defaults to config)",
    )
    parser.add_argument(
        "--orders",
        type=str,
        help="Path to the orders JSON file (defaults to config)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log dropped fields and per-source counters",
    )
    return parser.parse_args(list(argv))


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)

    try:
        config = get_data_source_config().with_overrides(
            customers=parsed_args.customers,
            articles=parsed_args.articles,
            orders=parsed_args.orders,
        )
    except ConfigurationError:
        log.exception("Configuration error")
        sys.exit(2)

    try:
        store, _ = load_data_store(config)
        print(print_data_store(store))
    except Exception:
        log.exception("Fatal error while loading data")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
