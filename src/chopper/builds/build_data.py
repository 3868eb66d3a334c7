"""Typed codec for the build_data blob saved with a user build.

The storage layer keeps build_data as opaque text. This module gives callers a
typed view of it: the chosen style, one selected part per category (with its
name and price denormalized), and the total price. The wire form is the one the
configurator frontend writes:

    {"style": {"id": 1, "name": "Bobber"},
     "parts": {"3": {"id": 7, "name": "Ape Hangers", "category_id": 3, "price": 249.99}},
     "totalPrice": 249.99}
"""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_serializer

from chopper.money import to_cents, to_float

DEFAULT_TOTAL_STEPS = 10


class StyleSelection(BaseModel):
    id: int
    name: str


class PartSelection(BaseModel):
    id: int
    name: str
    category_id: int
    price: Decimal

    @field_serializer("price")
    def _price_as_number(self, price: Decimal) -> float:
        return to_float(price)


class BuildData(BaseModel):
    """Style plus selected parts keyed by category id."""

    model_config = ConfigDict(populate_by_name=True)

    style: StyleSelection | None = None
    parts: dict[int, PartSelection] = Field(default_factory=dict)
    total_price: Decimal = Field(Decimal("0.00"), alias="totalPrice")

    @field_serializer("total_price")
    def _total_as_number(self, total: Decimal) -> float:
        return to_float(total)


def compute_total(parts: Mapping[int, PartSelection]) -> Decimal:
    """Sum of the selected part prices, to the cent."""
    return to_cents(sum((p.price for p in parts.values()), Decimal("0")))


def with_part(data: BuildData, part: PartSelection) -> BuildData:
    """Select a part, replacing any earlier selection in the same category."""
    parts = {**data.parts, part.category_id: part}
    return data.model_copy(update={"parts": parts, "total_price": compute_total(parts)})


def encode_build_data(data: BuildData) -> str:
    return data.model_dump_json(by_alias=True)


def decode_build_data(raw: str) -> BuildData:
    """Parse a stored build_data string.

    Raises:
        ValueError: If the string is not JSON or does not have the build shape.
    """
    try:
        return BuildData.model_validate_json(raw)
    except ValidationError as e:
        msg = f"Invalid build data: {e}"
        raise ValueError(msg) from e


def progress_percent(progress_step: int, total_steps: int = DEFAULT_TOTAL_STEPS) -> float:
    """Progress as a percentage of total_steps, capped at 100."""
    if total_steps <= 0:
        msg = "total_steps must be positive"
        raise ValueError(msg)
    return min(progress_step / total_steps * 100, 100.0)
