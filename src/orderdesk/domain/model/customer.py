"""Customer entity."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import ClassVar, Final, Self

from orderdesk.domain.model.entity import IdentifiedEntity
from orderdesk.domain.model.enums import EntityType

# leading/trailing whitespace, quotes and separators
_TRIM_CHARS: Final[str] = " \t\n\r\f\v\"',;"
_NAME_SECTION_SEPARATOR: Final[re.Pattern[str]] = re.compile(r"[,;]")

MIN_CONTACT_LENGTH: Final[int] = 6


def _trim(value: str) -> str:
    return value.strip(_TRIM_CHARS)


def split_name(name: str) -> tuple[str, str]:
    """Split a full name into ``(first_name, last_name)``.

    ``"Meyer, Eric"`` and ``"Meyer; Eric"`` name the last name first. Without a
    separator the last word is the last name and all preceding words form the
    first name(s).
    """

    sections = _NAME_SECTION_SEPARATOR.split(name)
    while sections and not sections[-1]:
        sections.pop()

    if len(sections) > 1:
        # higher sections are ignored
        return _trim(sections[1]), _trim(sections[0])

    words = name.split()
    if not words:
        return "", ""
    return _trim(" ".join(words[:-1])), _trim(words[-1])


@dataclass(eq=False, kw_only=True)
class Customer(IdentifiedEntity[int]):
    ENTITY_TYPE: ClassVar[EntityType] = EntityType.CUSTOMER

    _first_name: str = field(default="", init=False)
    _last_name: str = field(default="", init=False)
    _contacts: list[str] = field(default_factory=list[str], init=False)

    @classmethod
    def create(cls, name: str, *, id_: int | None = None) -> Customer:
        customer = cls().set_name(name)
        if id_ is not None:
            customer.assign_id(id_)
        return customer

    @property
    def first_name(self) -> str:
        return self._first_name

    @property
    def last_name(self) -> str:
        return self._last_name

    @property
    def contacts(self) -> tuple[str, ...]:
        return tuple(self._contacts)

    @property
    def contacts_count(self) -> int:
        return len(self._contacts)

    def _validate_id(self, value: int) -> None:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError("invalid id (not an integer)")
        if value < 0:
            raise ValueError("invalid id (negative)")

    def set_name(self, name: str) -> Self:
        if name is None:
            raise ValueError("name is None")
        if not name:
            raise ValueError("name is empty")
        first, last = split_name(name)
        return self.set_names(first, last)

    def set_names(self, first: str | None, last: str | None) -> Self:
        """Set first and/or last name; ``None`` keeps the current value."""

        if first is not None:
            self._first_name = _trim(first)
        if last is not None:
            self._last_name = _trim(last)
        return self

    def add_contact(self, contact: str) -> Self:
        if not contact:
            raise ValueError("contact is None or empty")
        if not isinstance(contact, str):
            raise ValueError(f"contact is not a string: {contact!r}")

        trimmed = _trim(contact)
        if len(trimmed) < MIN_CONTACT_LENGTH:
            raise ValueError(
                f"contact less than {MIN_CONTACT_LENGTH} characters: {contact!r}"
            )
        if trimmed not in self._contacts:
            self._contacts.append(trimmed)
        return self

    def delete_contact(self, index: int) -> None:
        if 0 <= index < len(self._contacts):
            del self._contacts[index]

    def delete_all_contacts(self) -> None:
        self._contacts.clear()
