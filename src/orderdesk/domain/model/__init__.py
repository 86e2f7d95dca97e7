"""Public domain model surface."""

from __future__ import annotations

from orderdesk.domain.model.article import Article
from orderdesk.domain.model.customer import MIN_CONTACT_LENGTH, Customer, split_name
from orderdesk.domain.model.entity import IdentifiedEntity
from orderdesk.domain.model.enums import Currency, EntityType, Tax
from orderdesk.domain.model.order import (
    EARLIEST_CREATION_DATE,
    Order,
    OrderItem,
    creation_date_bounds,
)

__all__ = [  # noqa: RUF022
    # base
    "IdentifiedEntity",
    # entities
    "Customer",
    "Article",
    "Order",
    "OrderItem",
    # enums
    "Currency",
    "EntityType",
    "Tax",
    # helpers
    "EARLIEST_CREATION_DATE",
    "MIN_CONTACT_LENGTH",
    "creation_date_bounds",
    "split_name",
]
