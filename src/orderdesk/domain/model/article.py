"""Article entity."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Self

from orderdesk.domain.model.entity import IdentifiedEntity
from orderdesk.domain.model.enums import Currency, EntityType, Tax


@dataclass(eq=False, kw_only=True)
class Article(IdentifiedEntity[str]):
    """A sellable item. Prices are integer amounts in the currency's minor unit."""

    ENTITY_TYPE: ClassVar[EntityType] = EntityType.ARTICLE

    _description: str = field(default="", init=False)
    _unit_price: int = field(default=0, init=False)
    _currency: Currency = field(default=Currency.EUR, init=False)
    _tax: Tax = field(default=Tax.VAT, init=False)

    @classmethod
    def create(
        cls,
        description: str,
        *,
        id_: str | None = None,
        unit_price: int = 0,
        currency: Currency = Currency.EUR,
        tax: Tax = Tax.VAT,
    ) -> Article:
        article = (
            cls()
            .set_description(description)
            .set_unit_price(unit_price)
            .set_currency(currency)
            .set_tax(tax)
        )
        if id_ is not None:
            article.assign_id(id_)
        return article

    @property
    def description(self) -> str:
        return self._description

    @property
    def unit_price(self) -> int:
        return self._unit_price

    @property
    def currency(self) -> Currency:
        return self._currency

    @property
    def tax(self) -> Tax:
        return self._tax

    def _validate_id(self, value: str) -> None:
        if not value or not isinstance(value, str):
            raise ValueError("invalid id (None or empty)")

    def set_description(self, description: str) -> Self:
        if not description or not isinstance(description, str):
            raise ValueError("invalid description (None or empty)")
        self._description = description
        return self

    def set_unit_price(self, unit_price: int) -> Self:
        if isinstance(unit_price, bool) or not isinstance(unit_price, int):
            raise ValueError(f"invalid unit price (not an integer): {unit_price!r}")
        if unit_price < 0:
            raise ValueError("invalid unit price (negative)")
        self._unit_price = unit_price
        return self

    def set_currency(self, currency: Currency) -> Self:
        if currency is None:
            raise ValueError("invalid currency (None)")
        self._currency = Currency(currency)
        return self

    def set_tax(self, tax: Tax) -> Self:
        if tax is None:
            raise ValueError("invalid tax (None)")
        self._tax = Tax(tax)
        return self
