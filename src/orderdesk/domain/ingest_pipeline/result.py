"""Counters reported by a single ingestion pass."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class LoadResult:
    source: str
    read: int = 0
    stored: int = 0
    dropped: int = 0
    missing: bool = False
    error: str | None = None

    @property
    def ok(self) -> bool:
        return not self.missing and self.error is None
