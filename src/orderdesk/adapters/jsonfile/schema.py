"""Pydantic models describing the raw JSON source records."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _non_text_to_none(value: object) -> object:
    # numbers pass through and become strings via coerce_numbers_to_str
    if isinstance(value, str) or (isinstance(value, int | float) and not isinstance(value, bool)):
        return value
    return None


def _contact_texts(value: object) -> object:
    if not isinstance(value, list):
        return None
    return [_non_text_to_none(item) for item in value]


class RecordBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)


class CustomerRecord(RecordBaseModel):
    id: int = Field(ge=0)
    name: str
    contacts: list[str | None] | None = None

    _normalize_contacts = field_validator("contacts", mode="before")(_contact_texts)


class ArticleRecord(RecordBaseModel):
    id: str = Field(min_length=1)
    description: str
    price: int = Field(ge=0)
    tax: str | None = None

    _ignore_non_str_tax = field_validator("tax", mode="before")(_non_text_to_none)

    @property
    def is_reduced_tax(self) -> bool:
        return self.tax == "reduced"


class OrderItemRecord(RecordBaseModel):
    article_id: str = Field(min_length=1)
    units: int = Field(gt=0)


class OrderRecord(RecordBaseModel):
    id: str = Field(min_length=1)
    customer_id: int
    # validated one by one so a bad item does not drop the whole order
    items: list[Any] = Field(min_length=1)
