"""Plain-text tables for loaded customers, articles and orders."""

from __future__ import annotations

from typing import TYPE_CHECKING

from orderdesk.domain.formatting import (
    ContactStyle,
    format_amount,
    format_article_price,
    format_customer_contacts,
    format_customer_name,
)
from orderdesk.domain.model import Currency, Tax
from orderdesk.domain.pricing import order_value_by_currency, order_vat_by_currency, tax_rate

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping, Sequence

    from orderdesk.app import DataStore
    from orderdesk.domain.model import Article, Customer, Order


def render_table(headers: Sequence[str], rows: Iterable[Sequence[str]]) -> str:
    materialized = [tuple(headers), *(tuple(row) for row in rows)]
    widths = [max(len(row[i]) for row in materialized) for i in range(len(headers))]

    def line(row: Sequence[str]) -> str:
        cells = (cell.ljust(width) for cell, width in zip(row, widths, strict=True))
        return "| " + " | ".join(cells) + " |"

    separator = "+" + "+".join("-" * (width + 2) for width in widths) + "+"
    body = [line(row) for row in materialized[1:]]
    return "\n".join([separator, line(materialized[0]), separator, *body, separator])


def _tax_label(tax: Tax) -> str:
    if tax is Tax.TAX_FREE:
        return "tax free"
    return f"{tax_rate(tax)}% VAT"


def _format_totals(totals: Mapping[Currency, int]) -> str:
    if not totals:
        return format_amount(0, Currency.EUR)
    return " + ".join(format_amount(amount, currency) for currency, amount in totals.items())


def _order_items_summary(order: Order) -> str:
    return ", ".join(f"{item.units}x {item.article.description}" for item in order.items)


def print_customers(customers: Iterable[Customer]) -> str:
    rows = [
        (
            str(customer.id),
            format_customer_name(customer),
            format_customer_contacts(customer, ContactStyle.FIRST_WITH_COUNT),
        )
        for customer in sorted(customers, key=lambda c: c.id or 0)
    ]
    return render_table(("ID", "Name", "Contacts"), rows)


def print_articles(articles: Iterable[Article]) -> str:
    rows = [
        (
            article.id or "",
            article.description,
            format_article_price(article),
            _tax_label(article.tax),
        )
        for article in sorted(articles, key=lambda a: a.id or "")
    ]
    return render_table(("ID", "Description", "Price", "Tax"), rows)


def print_orders(orders: Iterable[Order]) -> str:
    rows = [
        (
            order.id or "",
            format_customer_name(order.customer),
            _order_items_summary(order),
            _format_totals(order_value_by_currency(order)),
            _format_totals(order_vat_by_currency(order)),
        )
        for order in sorted(orders, key=lambda o: o.id or "")
    ]
    return render_table(("ID", "Customer", "Items", "Value", "VAT"), rows)


def print_data_store(store: DataStore) -> str:
    summary = (
        f"({store.customers.count()}) Customer objects added.\n"
        f"({store.articles.count()}) Article objects added.\n"
        f"({store.orders.count()}) Order objects added.\n---"
    )
    return "\n".join(
        [
            summary,
            "Customers:",
            print_customers(store.customers.find_all()),
            "Articles:",
            print_articles(store.articles.find_all()),
            "Orders:",
            print_orders(store.orders.find_all()),
        ]
    )
