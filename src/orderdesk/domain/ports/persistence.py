"""Ports for storing domain entities."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeAlias, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterable

    from orderdesk.domain.model import Article, Customer, Order

TEntity = TypeVar("TEntity")
TId = TypeVar("TId")


@runtime_checkable
class Repository(Protocol[TEntity, TId]):
    """Keyed store of entities of one type.

    ``save`` upserts by the entity's own identity and replaces an existing value
    wholesale. Removing something that is not stored is a no-op. ``None``
    arguments are rejected with ``ValueError``.
    """

    def count(self) -> int: ...

    def find_all(self) -> tuple[TEntity, ...]: ...

    def find_by_id(self, id_: TId) -> TEntity | None: ...

    def exists_by_id(self, id_: TId) -> bool: ...

    def find_all_by_id(self, ids: Iterable[TId]) -> tuple[TEntity, ...]: ...

    def save(self, entity: TEntity) -> TEntity: ...

    def save_all(self, entities: Iterable[TEntity]) -> list[TEntity]: ...

    def delete_by_id(self, id_: TId) -> None: ...

    def delete(self, entity: TEntity) -> None: ...

    def delete_all_by_id(self, ids: Iterable[TId]) -> None: ...

    def delete_all(self, entities: Iterable[TEntity]) -> None: ...

    def clear(self) -> None: ...


CustomerRepository: TypeAlias = "Repository[Customer, int]"
ArticleRepository: TypeAlias = "Repository[Article, str]"
OrderRepository: TypeAlias = "Repository[Order, str]"
