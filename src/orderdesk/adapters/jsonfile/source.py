"""Read raw records from JSON array files."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from orderdesk.common import trim_location


class RecordSourceError(ValueError):
    """Raised when a source document is not a JSON array of records."""


@dataclass(frozen=True, slots=True)
class JsonRecordSource:
    path: Path

    @classmethod
    def from_location(cls, location: str | Path) -> JsonRecordSource:
        if isinstance(location, Path):
            return cls(path=location)
        trimmed = trim_location(location)
        if not trimmed:
            raise ValueError("source location is empty")
        return cls(path=Path(trimmed))

    @property
    def location(self) -> str:
        return str(self.path)

    def read(self) -> list[object]:
        with self.path.open(encoding="utf-8") as handle:
            document = json.load(handle)
        if not isinstance(document, list):
            raise RecordSourceError(
                f"expected a JSON array in {self.path}, got {type(document).__name__}"
            )
        return document
