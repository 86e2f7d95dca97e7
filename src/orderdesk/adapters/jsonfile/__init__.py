"""Public interface for the JSON file adapter."""

from __future__ import annotations

from .factories import ArticleRecordFactory, CustomerRecordFactory, OrderRecordFactory
from .schema import ArticleRecord, CustomerRecord, OrderItemRecord, OrderRecord
from .source import JsonRecordSource, RecordSourceError

__all__ = [
    "ArticleRecord",
    "ArticleRecordFactory",
    "CustomerRecord",
    "CustomerRecordFactory",
    "JsonRecordSource",
    "OrderItemRecord",
    "OrderRecord",
    "OrderRecordFactory",
    "RecordSourceError",
]
