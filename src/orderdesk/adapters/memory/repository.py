"""Dictionary-backed implementation of the repository port."""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

TEntity = TypeVar("TEntity")
TId = TypeVar("TId")


class InMemoryRepository(Generic[TEntity, TId]):
    """Generic repository keyed by the identity ``id_of`` extracts from an entity."""

    def __init__(self, id_of: Callable[[TEntity], TId | None]) -> None:
        if id_of is None:
            raise ValueError("argument id_of is None")
        self._id_of = id_of
        self._items: dict[TId, TEntity] = {}

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, id_: object) -> bool:
        return id_ in self._items

    def count(self) -> int:
        return len(self._items)

    def find_all(self) -> tuple[TEntity, ...]:
        return tuple(self._items.values())

    def find_by_id(self, id_: TId) -> TEntity | None:
        if id_ is None:
            raise ValueError("argument id is None")
        return self._items.get(id_)

    def exists_by_id(self, id_: TId) -> bool:
        return self.find_by_id(id_) is not None

    def find_all_by_id(self, ids: Iterable[TId]) -> tuple[TEntity, ...]:
        if ids is None:
            raise ValueError("argument ids is None")
        found: list[TEntity] = []
        for id_ in ids:
            if id_ is None:
                continue
            entity = self._items.get(id_)
            if entity is not None:
                found.append(entity)
        return tuple(found)

    def save(self, entity: TEntity) -> TEntity:
        id_ = self._require_id(entity)
        # replace, never merge
        self._items[id_] = entity
        return entity

    def save_all(self, entities: Iterable[TEntity]) -> list[TEntity]:
        if entities is None:
            raise ValueError("argument entities is None")
        return [self.save(entity) for entity in entities]

    def delete_by_id(self, id_: TId) -> None:
        if id_ is None:
            raise ValueError("argument id is None")
        self._items.pop(id_, None)

    def delete(self, entity: TEntity) -> None:
        self._items.pop(self._require_id(entity), None)

    def delete_all_by_id(self, ids: Iterable[TId]) -> None:
        if ids is None:
            raise ValueError("argument ids is None")
        for id_ in ids:
            if id_ is not None:
                self._items.pop(id_, None)

    def delete_all(self, entities: Iterable[TEntity]) -> None:
        if entities is None:
            raise ValueError("argument entities is None")
        for entity in entities:
            self.delete(entity)

    def clear(self) -> None:
        self._items.clear()

    def _require_id(self, entity: TEntity) -> TId:
        if entity is None:
            raise ValueError("argument entity is None")
        id_ = self._id_of(entity)
        if id_ is None:
            raise ValueError("entity id is None")
        return id_
