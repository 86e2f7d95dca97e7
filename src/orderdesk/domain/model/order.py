"""Order aggregate. An order owns its items; items reference shared articles."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime, time, timedelta
from typing import TYPE_CHECKING, ClassVar, Final, Self

from orderdesk.domain.model.entity import IdentifiedEntity
from orderdesk.domain.model.enums import EntityType

if TYPE_CHECKING:
    from orderdesk.domain.model.article import Article
    from orderdesk.domain.model.customer import Customer

EARLIEST_CREATION_DATE: Final[datetime] = datetime(2020, 1, 1, tzinfo=UTC)


def _utcnow() -> datetime:
    return datetime.now(UTC)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def creation_date_bounds(now: datetime | None = None) -> tuple[datetime, datetime]:
    """Return the inclusive range of valid creation dates.

    The upper bound is tomorrow (relative to ``now``) at 23:59:59 UTC.
    """

    anchor = _as_utc(now or _utcnow())
    tomorrow = anchor.date() + timedelta(days=1)
    latest = datetime.combine(tomorrow, time(23, 59, 59), tzinfo=UTC)
    return EARLIEST_CREATION_DATE, latest


@dataclass(frozen=True, slots=True)
class OrderItem:
    """A number of units of one article. Created through ``Order.add_item``."""

    article: Article
    units: int


@dataclass(eq=False, kw_only=True)
class Order(IdentifiedEntity[str]):
    ENTITY_TYPE: ClassVar[EntityType] = EntityType.ORDER

    _customer: Customer = field(repr=False)
    _created: datetime = field(default_factory=_utcnow, init=False)
    _items: list[OrderItem] = field(default_factory=list[OrderItem], init=False, repr=False)

    def __post_init__(self) -> None:
        if self._customer is None:
            raise ValueError("customer is None")
        if not self._customer.has_id:
            raise ValueError("customer has no id")

    @classmethod
    def create(cls, customer: Customer, *, id_: str | None = None) -> Order:
        order = cls(_customer=customer)
        if id_ is not None:
            order.assign_id(id_)
        return order

    @property
    def customer(self) -> Customer:
        return self._customer

    @property
    def created(self) -> datetime:
        return self._created

    @property
    def items(self) -> tuple[OrderItem, ...]:
        return tuple(self._items)

    @property
    def items_count(self) -> int:
        return len(self._items)

    def _validate_id(self, value: str) -> None:
        if not value or not isinstance(value, str):
            raise ValueError("invalid id (None or empty)")

    def set_created(self, created: datetime, *, now: datetime | None = None) -> Self:
        """Set the creation timestamp; naive values are read as UTC."""

        if created is None:
            raise ValueError("creation date is None")
        value = _as_utc(created)
        earliest, latest = creation_date_bounds(now)
        if value < earliest or value > latest:
            raise ValueError(
                "invalid creation date (outside bounds "
                f"{earliest.isoformat()} <= date <= {latest.isoformat()})"
            )
        self._created = value
        return self

    def add_item(self, article: Article, units: int) -> Self:
        if article is None:
            raise ValueError("article is None")
        if isinstance(units, bool) or not isinstance(units, int):
            raise ValueError(f"units is not an integer: {units!r}")
        if units <= 0:
            raise ValueError("units <= 0")
        self._items.append(OrderItem(article=article, units=units))
        return self

    def delete_item(self, index: int) -> None:
        if 0 <= index < len(self._items):
            del self._items[index]

    def delete_all_items(self) -> None:
        self._items.clear()
