"""Translate raw JSON records into domain entities.

Every factory returns ``None`` for a record it cannot use; that is how bad input
is dropped without aborting a load. The order factory resolves customer and
article references against repositories that must already be populated.
"""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING, TypeVar

from pydantic import BaseModel, ValidationError

from orderdesk.domain.model import Article, Customer, Order, Tax

from .schema import ArticleRecord, CustomerRecord, OrderItemRecord, OrderRecord

if TYPE_CHECKING:
    from orderdesk.domain.ports import ArticleRepository, CustomerRepository


log = getLogger(__name__)

TRecord = TypeVar("TRecord", bound=BaseModel)


def _parse_record(model: type[TRecord], record: object) -> TRecord | None:
    try:
        return model.model_validate(record)
    except ValidationError as exc:
        log.debug("Invalid %s: %s", model.__name__, exc.errors(include_url=False))
        return None


@dataclass(frozen=True, slots=True)
class CustomerRecordFactory:
    """``{"id": 1, "name": "Meyer, Eric", "contacts": [...]}`` -> ``Customer``."""

    def create(self, record: object) -> Customer | None:
        payload = _parse_record(CustomerRecord, record)
        if payload is None:
            return None

        try:
            customer = Customer.create(payload.name, id_=payload.id)
        except ValueError as exc:
            log.debug("Rejected customer %s: %s", payload.id, exc)
            return None

        for contact in payload.contacts or ():
            if contact is None:
                log.debug("Ignoring non-text contact of customer %s", payload.id)
                continue
            try:
                customer.add_contact(contact)
            except ValueError as exc:
                log.debug("Ignoring contact of customer %s: %s", payload.id, exc)

        return customer


@dataclass(frozen=True, slots=True)
class ArticleRecordFactory:
    """``{"id": "SKU-1", "description": "Widget", "price": 499, "tax": "reduced"}``."""

    def create(self, record: object) -> Article | None:
        payload = _parse_record(ArticleRecord, record)
        if payload is None:
            return None

        try:
            return Article.create(
                payload.description,
                id_=payload.id,
                unit_price=payload.price,
                tax=Tax.VAT_REDUCED if payload.is_reduced_tax else Tax.VAT,
            )
        except ValueError as exc:
            log.debug("Rejected article %s: %s", payload.id, exc)
            return None


@dataclass(frozen=True, slots=True)
class OrderRecordFactory:
    """``{"id": "O-1", "customer_id": 1, "items": [{"article_id": ..., "units": ...}]}``.

    An unresolvable customer drops the whole order while unresolvable or
    malformed items are skipped one by one.
    """

    customers: CustomerRepository
    articles: ArticleRepository

    def create(self, record: object) -> Order | None:
        payload = _parse_record(OrderRecord, record)
        if payload is None:
            return None

        customer = self.customers.find_by_id(payload.customer_id)
        if customer is None:
            log.debug("Order %s references unknown customer %s", payload.id, payload.customer_id)
            return None

        try:
            order = Order.create(customer, id_=payload.id)
        except ValueError as exc:
            log.debug("Rejected order %s: %s", payload.id, exc)
            return None

        for raw_item in payload.items:
            item = _parse_record(OrderItemRecord, raw_item)
            if item is None:
                continue
            article = self.articles.find_by_id(item.article_id)
            if article is None:
                log.debug("Order %s references unknown article %s", payload.id, item.article_id)
                continue
            order.add_item(article, item.units)

        return order
