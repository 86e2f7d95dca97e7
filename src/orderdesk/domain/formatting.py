"""Human-readable rendering of names, contacts and prices."""

from __future__ import annotations

from enum import StrEnum
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from orderdesk.domain.model import Currency

if TYPE_CHECKING:
    from collections.abc import Mapping

    from orderdesk.domain.model import Article, Customer

CURRENCY_SYMBOLS: Final[Mapping[Currency, str]] = MappingProxyType(
    {
        Currency.EUR: "€",
        Currency.USD: "$",
        Currency.GBP: "£",
        Currency.YEN: "¥",
        Currency.BTC: "BTC",
    }
)

# currencies without a minor unit in print
_WHOLE_UNIT_CURRENCIES: Final[frozenset[Currency]] = frozenset({Currency.YEN})

MAX_DECIMAL_DIGITS: Final[int] = 3


class NameStyle(StrEnum):
    LAST_FIRST = "last_first"  # Meyer, Eric
    FIRST_LAST = "first_last"  # Eric Meyer
    LAST_INITIAL = "last_initial"  # Meyer, E.
    INITIAL_LAST = "initial_last"  # E. Meyer
    LAST = "last"
    FIRST = "first"


class ContactStyle(StrEnum):
    FIRST = "first"
    FIRST_WITH_COUNT = "first_with_count"
    ALL = "all"


class PriceStyle(StrEnum):
    PLAIN = "plain"  # 4.99
    EUR_SUFFIX = "eur_suffix"  # 4.99 EUR
    EUR_CODE = "eur_code"  # 4.99EUR
    EUR_SYMBOL = "eur_symbol"
    USD_SYMBOL = "usd_symbol"
    GBP_SYMBOL = "gbp_symbol"
    YEN_SYMBOL = "yen_symbol"
    WHOLE = "whole"  # 499


def _initial(name: str) -> str:
    return name[:1].upper()


def format_customer_name(
    customer: Customer,
    style: NameStyle = NameStyle.LAST_FIRST,
    *,
    upper: bool = False,
) -> str:
    if customer is None:
        raise ValueError("argument customer is None")

    last = customer.last_name
    first = customer.first_name
    match NameStyle(style):
        case NameStyle.LAST_FIRST:
            text = f"{last}, {first}"
        case NameStyle.FIRST_LAST:
            text = f"{first} {last}"
        case NameStyle.LAST_INITIAL:
            text = f"{last}, {_initial(first)}."
        case NameStyle.INITIAL_LAST:
            text = f"{_initial(first)}. {last}"
        case NameStyle.LAST:
            text = last
        case NameStyle.FIRST:
            text = first
    return text.upper() if upper else text


def format_customer_contacts(customer: Customer, style: ContactStyle = ContactStyle.FIRST) -> str:
    if customer is None:
        raise ValueError("argument customer is None")

    contacts = customer.contacts
    match ContactStyle(style):
        case ContactStyle.FIRST:
            return contacts[0] if contacts else ""
        case ContactStyle.FIRST_WITH_COUNT:
            first = contacts[0] if contacts else ""
            if len(contacts) > 1:
                return f"{first}, (+{len(contacts) - 1} contacts)"
            return first
        case ContactStyle.ALL:
            return ", ".join(contacts)


def format_decimal(value: int, decimal_digits: int, unit: str = "") -> str:
    """Render an integer amount of minor units, e.g. ``16999, 2`` -> ``169.99``.

    The integer part uses ``,`` as thousands separator. ``decimal_digits`` is
    clamped to ``0..3``.
    """

    digits = max(0, min(MAX_DECIMAL_DIGITS, decimal_digits))
    sign = "-" if value < 0 else ""
    whole, fraction = divmod(abs(value), 10**digits)
    text = f"{sign}{whole:,d}"
    if digits:
        text += f".{fraction:0{digits}d}"
    return f"{text}{unit}"


def format_price(price: int, style: PriceStyle = PriceStyle.PLAIN) -> str:
    match PriceStyle(style):
        case PriceStyle.PLAIN:
            return format_decimal(price, 2)
        case PriceStyle.EUR_SUFFIX:
            return format_decimal(price, 2, " EUR")
        case PriceStyle.EUR_CODE:
            return format_decimal(price, 2, "EUR")
        case PriceStyle.EUR_SYMBOL:
            return format_decimal(price, 2, CURRENCY_SYMBOLS[Currency.EUR])
        case PriceStyle.USD_SYMBOL:
            return format_decimal(price, 2, CURRENCY_SYMBOLS[Currency.USD])
        case PriceStyle.GBP_SYMBOL:
            return format_decimal(price, 2, CURRENCY_SYMBOLS[Currency.GBP])
        case PriceStyle.YEN_SYMBOL:
            return format_decimal(price, 0, CURRENCY_SYMBOLS[Currency.YEN])
        case PriceStyle.WHOLE:
            return format_decimal(price, 0)


def format_amount(amount: int, currency: Currency) -> str:
    digits = 0 if currency in _WHOLE_UNIT_CURRENCIES else 2
    return format_decimal(amount, digits, CURRENCY_SYMBOLS[currency])


def format_article_price(article: Article) -> str:
    if article is None:
        raise ValueError("argument article is None")
    return format_amount(article.unit_price, article.currency)
