"""Helpers for file locations given on the command line or in the environment."""

from __future__ import annotations

from typing import Final

_QUOTES: Final[str] = "\"'"


def trim_location(location: str) -> str:
    """Strip surrounding whitespace and quote characters, as left over from shells."""

    return location.strip().strip(_QUOTES)
