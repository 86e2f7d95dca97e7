"""Locations of the JSON data sources."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Final

from orderdesk.common import trim_location

from .env import optional_env_var
from .errors import ConfigurationError

DATA_DIR_ENV: Final[str] = "ORDERDESK_DATA_DIR"
CUSTOMERS_FILE_ENV: Final[str] = "ORDERDESK_CUSTOMERS_FILE"
ARTICLES_FILE_ENV: Final[str] = "ORDERDESK_ARTICLES_FILE"
ORDERS_FILE_ENV: Final[str] = "ORDERDESK_ORDERS_FILE"

DEFAULT_DATA_DIR: Final[str] = "."
DEFAULT_CUSTOMERS_FILENAME: Final[str] = "customers.json"
DEFAULT_ARTICLES_FILENAME: Final[str] = "articles.json"
DEFAULT_ORDERS_FILENAME: Final[str] = "orders.json"


@dataclass(frozen=True, slots=True)
class DataSourceConfig:
    customers: Path
    articles: Path
    orders: Path

    @classmethod
    def in_directory(cls, data_dir: Path) -> DataSourceConfig:
        return cls(
            customers=data_dir / DEFAULT_CUSTOMERS_FILENAME,
            articles=data_dir / DEFAULT_ARTICLES_FILENAME,
            orders=data_dir / DEFAULT_ORDERS_FILENAME,
        )

    def with_overrides(
        self,
        *,
        customers: str | None = None,
        articles: str | None = None,
        orders: str | None = None,
    ) -> DataSourceConfig:
        """Return a copy with any given location replacing the configured one."""

        return replace(
            self,
            customers=_as_path(customers) if customers else self.customers,
            articles=_as_path(articles) if articles else self.articles,
            orders=_as_path(orders) if orders else self.orders,
        )


def _as_path(location: str) -> Path:
    trimmed = trim_location(location)
    if not trimmed:
        raise ConfigurationError(f"Invalid source location: {location!r}")
    return Path(trimmed)


def get_data_source_config() -> DataSourceConfig:
    data_dir = optional_env_var(DATA_DIR_ENV) or DEFAULT_DATA_DIR
    defaults = DataSourceConfig.in_directory(_as_path(data_dir))
    return defaults.with_overrides(
        customers=optional_env_var(CUSTOMERS_FILE_ENV),
        articles=optional_env_var(ARTICLES_FILE_ENV),
        orders=optional_env_var(ORDERS_FILE_ENV),
    )
