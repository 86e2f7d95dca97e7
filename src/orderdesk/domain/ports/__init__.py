from __future__ import annotations

from .ingestion import RecordFactory, RecordSource
from .persistence import ArticleRepository, CustomerRepository, OrderRepository, Repository

__all__ = [
    "ArticleRepository",
    "CustomerRepository",
    "OrderRepository",
    "RecordFactory",
    "RecordSource",
    "Repository",
]
