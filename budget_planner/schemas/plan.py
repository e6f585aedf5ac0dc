"""Schemas for budget sections and the items they group."""
from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


class BudgetItem(BaseModel):
    """A single monetary line entry with layout hints for the board UI."""

    model_config = ConfigDict(populate_by_name=True)

    id: int = 0
    item_name: str = Field("", alias="itemName")
    item_value: Decimal = Field(Decimal("0"), alias="itemValue")
    cols: int = 0
    rows: int = 0
    color: str = ""

    @field_serializer("item_value")
    def _serialize_value(self, value: Decimal) -> float:
        return float(value)


class BudgetSection(BaseModel):
    """Named grouping of budget items, e.g. "Housing" or "Income"."""

    model_config = ConfigDict(populate_by_name=True)

    id: int = 0
    title: str = ""
    items: list[BudgetItem] = Field(default_factory=list)

    @field_validator("items", mode="before")
    @classmethod
    def _null_items_as_empty(cls, value: object) -> object:
        return [] if value is None else value


def dump_sections(sections: list[BudgetSection]) -> list[dict]:
    """Encode sections with their camelCase wire names."""

    return [section.model_dump(mode="json", by_alias=True) for section in sections]
