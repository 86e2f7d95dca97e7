"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class EntityType(StrEnum):
    CUSTOMER = "customer"
    ARTICLE = "article"
    ORDER = "order"


class Currency(StrEnum):
    EUR = "EUR"
    USD = "USD"
    GBP = "GBP"
    YEN = "YEN"
    BTC = "BTC"


class Tax(StrEnum):
    """Tax classification of an article."""

    TAX_FREE = "tax_free"
    VAT = "vat"
    VAT_REDUCED = "vat_reduced"
