from __future__ import annotations

from decimal import Decimal

import pytest

from orderdesk.domain.model import Currency, Tax
from orderdesk.domain.pricing import (
    calculate_vat,
    order_item_value,
    order_item_vat,
    order_value,
    order_value_by_currency,
    order_vat,
    order_vat_by_currency,
    tax_rate,
)
from tests.helpers.records import make_article, make_order


@pytest.mark.parametrize(
    ("tax", "expected"),
    [(Tax.TAX_FREE, Decimal(0)), (Tax.VAT, Decimal(19)), (Tax.VAT_REDUCED, Decimal(7))],
)
def test_tax_rate(tax: Tax, expected: Decimal) -> None:
    assert tax_rate(tax) == expected


@pytest.mark.parametrize(
    ("gross", "tax", "expected"),
    [
        (119, Tax.VAT, 19),
        (1000, Tax.VAT, 160),  # 159.66
        (1497, Tax.VAT, 239),  # 239.02
        (107, Tax.VAT_REDUCED, 7),
        (4990, Tax.VAT_REDUCED, 326),  # 326.45
        (1000, Tax.TAX_FREE, 0),
        (0, Tax.VAT, 0),
        (-500, Tax.VAT, 0),
    ],
)
def test_calculate_vat(gross: int, tax: Tax, expected: int) -> None:
    assert calculate_vat(gross, tax) == expected


def test_calculate_vat_rounds_to_nearest_unit() -> None:
    # 238 * 7 / 107 == 15.57..., 1605 * 7 / 107 == 105.0
    assert calculate_vat(238, Tax.VAT_REDUCED) == 16
    assert calculate_vat(1605, Tax.VAT_REDUCED) == 105


def test_calculate_vat_rejects_missing_tax() -> None:
    with pytest.raises(ValueError, match="tax is None"):
        calculate_vat(100, None)  # type: ignore[arg-type]


def test_order_values() -> None:
    widget = make_article("SKU-1", unit_price=499)
    book = make_article("SKU-2", description="Book", unit_price=4990, tax=Tax.VAT_REDUCED)
    order = make_order().add_item(widget, 3).add_item(book, 1)

    assert order_item_value(order.items[0]) == 1497
    assert order_item_vat(order.items[0]) == 239
    assert order_value(order) == 1497 + 4990
    assert order_vat(order) == 239 + 326


def test_empty_order_has_no_value() -> None:
    order = make_order()

    assert order_value(order) == 0
    assert order_vat(order) == 0


def test_order_totals_are_kept_per_currency() -> None:
    order = (
        make_order()
        .add_item(make_article("SKU-1", unit_price=499), 2)
        .add_item(make_article("SKU-9", "Mug", 1000, currency=Currency.USD), 1)
        .add_item(make_article("SKU-2", "Book", 4990, Tax.VAT_REDUCED), 1)
    )

    assert order_value_by_currency(order) == {Currency.EUR: 998 + 4990, Currency.USD: 1000}
    assert order_vat_by_currency(order) == {Currency.EUR: 159 + 326, Currency.USD: 160}
    assert list(order_value_by_currency(order)) == [Currency.EUR, Currency.USD]


def test_order_totals_of_empty_order() -> None:
    assert order_value_by_currency(make_order()) == {}
