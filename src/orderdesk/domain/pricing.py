"""Order value and VAT arithmetic.

All amounts are integers in the currency's minor unit. Prices include VAT, so the
tax share of a gross amount is ``gross * rate / (100 + rate)``.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from orderdesk.domain.model import Tax

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from orderdesk.domain.model import Currency, Order, OrderItem

TAX_RATES: Final[Mapping[Tax, Decimal]] = MappingProxyType(
    {
        Tax.TAX_FREE: Decimal(0),
        Tax.VAT: Decimal(19),
        Tax.VAT_REDUCED: Decimal(7),
    }
)


def tax_rate(tax: Tax) -> Decimal:
    """Return the rate in percent."""

    if tax is None:
        raise ValueError("argument tax is None")
    return TAX_RATES[tax]


def calculate_vat(gross_value: int, tax: Tax) -> int:
    rate = tax_rate(tax)
    if gross_value <= 0:
        return 0
    vat = Decimal(gross_value) * rate / (Decimal(100) + rate)
    return int(vat.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def order_item_value(item: OrderItem) -> int:
    if item is None:
        raise ValueError("argument item is None")
    return item.article.unit_price * item.units


def order_item_vat(item: OrderItem) -> int:
    return calculate_vat(order_item_value(item), item.article.tax)


def order_value(order: Order) -> int:
    if order is None:
        raise ValueError("argument order is None")
    return sum(order_item_value(item) for item in order.items)


def order_vat(order: Order) -> int:
    if order is None:
        raise ValueError("argument order is None")
    return sum(order_item_vat(item) for item in order.items)


def _totals_by_currency(
    order: Order, amount_of: Callable[[OrderItem], int]
) -> dict[Currency, int]:
    if order is None:
        raise ValueError("argument order is None")
    totals: dict[Currency, int] = {}
    for item in order.items:
        currency = item.article.currency
        totals[currency] = totals.get(currency, 0) + amount_of(item)
    return totals


def order_value_by_currency(order: Order) -> dict[Currency, int]:
    """Order value split by article currency, in order of first appearance."""

    return _totals_by_currency(order, order_item_value)


def order_vat_by_currency(order: Order) -> dict[Currency, int]:
    return _totals_by_currency(order, order_item_vat)
