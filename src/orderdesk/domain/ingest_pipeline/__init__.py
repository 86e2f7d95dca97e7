"""Ingestion pipeline: raw records -> record factory -> repository.

Order records resolve customers and articles by id while they are created, so
the customer and article pipelines must finish before the order pipeline runs.
"""

from __future__ import annotations

from .pipeline import IngestionPipeline
from .result import LoadResult

__all__ = [
    "IngestionPipeline",
    "LoadResult",
]
