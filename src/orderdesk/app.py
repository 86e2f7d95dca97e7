"""Application orchestration entry points."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from orderdesk.adapters.jsonfile import (
    ArticleRecordFactory,
    CustomerRecordFactory,
    JsonRecordSource,
    OrderRecordFactory,
)
from orderdesk.adapters.memory import article_repository, customer_repository, order_repository
from orderdesk.config import DataSourceConfig, get_data_source_config
from orderdesk.domain.ingest_pipeline import IngestionPipeline, LoadResult

if TYPE_CHECKING:
    from orderdesk.domain.ports import ArticleRepository, CustomerRepository, OrderRepository


log = getLogger(__name__)


@dataclass(slots=True)
class DataStore:
    customers: CustomerRepository
    articles: ArticleRepository
    orders: OrderRepository


@dataclass(frozen=True, slots=True)
class DataStoreLoadResult:
    customers: LoadResult
    articles: LoadResult
    orders: LoadResult


def create_data_store() -> DataStore:
    """Return a store with empty in-memory repositories."""

    return DataStore(
        customers=customer_repository(),
        articles=article_repository(),
        orders=order_repository(),
    )


def load_data_store(
    config: DataSourceConfig | None = None,
    *,
    store: DataStore | None = None,
) -> tuple[DataStore, DataStoreLoadResult]:
    """Load customers, then articles, then orders into ``store``.

    Orders resolve customer and article ids while they are created, so both of
    those repositories are fully loaded before the order pass starts.
    """

    sources = config or get_data_source_config()
    active_store = store or create_data_store()

    customers = IngestionPipeline(
        factory=CustomerRecordFactory(), repository=active_store.customers
    ).load(JsonRecordSource.from_location(sources.customers))
    articles = IngestionPipeline(
        factory=ArticleRecordFactory(), repository=active_store.articles
    ).load(JsonRecordSource.from_location(sources.articles))
    orders = IngestionPipeline(
        factory=OrderRecordFactory(
            customers=active_store.customers, articles=active_store.articles
        ),
        repository=active_store.orders,
    ).load(JsonRecordSource.from_location(sources.orders))

    result = DataStoreLoadResult(customers=customers, articles=articles, orders=orders)
    log.info(
        "Finished loading data store: customers=%s, articles=%s, orders=%s, dropped=%s",
        active_store.customers.count(),
        active_store.articles.count(),
        active_store.orders.count(),
        customers.dropped + articles.dropped + orders.dropped,
    )
    return active_store, result
