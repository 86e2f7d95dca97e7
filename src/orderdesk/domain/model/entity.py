"""
Base building block:
set-once identity shared by all domain entities.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar, Generic, Self, TypeVar

if TYPE_CHECKING:
    from orderdesk.domain.model.enums import EntityType

TId = TypeVar("TId")


@dataclass(eq=False, kw_only=True)
class IdentifiedEntity(ABC, Generic[TId]):
    """Identity starts out unassigned and transitions to a value exactly once.

    Later assignments are ignored; the first one wins. Invalid values are still
    rejected, even when an identity is already in place.
    """

    # class-level discriminator; subclasses must override
    ENTITY_TYPE: ClassVar[EntityType]

    _id: TId | None = field(default=None, init=False)

    @property
    def entity_type(self) -> EntityType:
        return self.ENTITY_TYPE

    @property
    def id(self) -> TId | None:
        return self._id

    @property
    def has_id(self) -> bool:
        return self._id is not None

    def assign_id(self, value: TId) -> Self:
        self._validate_id(value)
        if self._id is None:
            self._id = value
        return self

    @abstractmethod
    def _validate_id(self, value: TId) -> None:
        """Raise ``ValueError`` when ``value`` is not a usable identity."""
