"""Shared logging helpers for orderdesk."""

from __future__ import annotations

import logging
import sys


def configure_logging(*, level: int = logging.INFO, force: bool = False) -> None:
    """Send log records to stderr so they never mix with the printed tables.

    ``--verbose`` passes ``DEBUG`` to see why individual records were dropped.
    Pass ``force=True`` to replace handlers that are already installed.
    """

    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
        force=force,
    )
