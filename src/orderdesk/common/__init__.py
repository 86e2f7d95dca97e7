from __future__ import annotations

from .locations import trim_location
from .logging import configure_logging

__all__ = [
    "configure_logging",
    "trim_location",
]
