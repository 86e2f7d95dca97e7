from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from orderdesk.config import DataSourceConfig
from tests.helpers.records import ARTICLE_RECORDS, CUSTOMER_RECORDS, ORDER_RECORDS, write_json

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "ORDERDESK_DATA_DIR",
        "ORDERDESK_CUSTOMERS_FILE",
        "ORDERDESK_ARTICLES_FILE",
        "ORDERDESK_ORDERS_FILE",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    write_json(tmp_path / "customers.json", CUSTOMER_RECORDS)
    write_json(tmp_path / "articles.json", ARTICLE_RECORDS)
    write_json(tmp_path / "orders.json", ORDER_RECORDS)
    return tmp_path


@pytest.fixture
def data_source_config(data_dir: Path) -> DataSourceConfig:
    return DataSourceConfig.in_directory(data_dir)
