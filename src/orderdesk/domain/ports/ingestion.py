"""Ports used by the ingestion pipeline."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterable

TEntity = TypeVar("TEntity")


@runtime_checkable
class RecordFactory(Protocol[TEntity]):
    """Turn one raw external record into a validated entity.

    Returning ``None`` marks the record as unusable; it is not an error.
    """

    def create(self, record: object) -> TEntity | None: ...


@runtime_checkable
class RecordSource(Protocol):
    """A one-shot readable sequence of raw records.

    ``read`` raises ``FileNotFoundError`` when the underlying source is absent.
    """

    @property
    def location(self) -> str: ...

    def read(self) -> Iterable[object]: ...
