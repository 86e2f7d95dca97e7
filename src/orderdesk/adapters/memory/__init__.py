"""In-memory adapters."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .repository import InMemoryRepository

if TYPE_CHECKING:
    from orderdesk.domain.model import Article, Customer, Order


def customer_repository() -> InMemoryRepository[Customer, int]:
    return InMemoryRepository(lambda customer: customer.id)


def article_repository() -> InMemoryRepository[Article, str]:
    return InMemoryRepository(lambda article: article.id)


def order_repository() -> InMemoryRepository[Order, str]:
    return InMemoryRepository(lambda order: order.id)


__all__ = [
    "InMemoryRepository",
    "article_repository",
    "customer_repository",
    "order_repository",
]
