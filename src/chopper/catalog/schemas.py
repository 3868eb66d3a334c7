"""Request/response schemas for chopper styles, part categories and parts."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from chopper.db.models import INT_MAX, INT_MIN
from chopper.money import CENTS, MAX_PRICE, to_cents, to_float


# ---------------------------------------------------------------------------
# Chopper styles
# ---------------------------------------------------------------------------


class CreateChopperStyleInput(BaseModel):
    name: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    image_url: str | None = None


class ChopperStyleResponse(BaseModel):
    id: int
    name: str
    description: str
    image_url: str | None = None
    created_at: datetime

    model_config = {"from_attributes": True}


# ---------------------------------------------------------------------------
# Part categories
# ---------------------------------------------------------------------------


class CreatePartCategoryInput(BaseModel):
    name: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)


class PartCategoryResponse(BaseModel):
    id: int
    name: str
    description: str
    created_at: datetime

    model_config = {"from_attributes": True}


# ---------------------------------------------------------------------------
# Parts
# ---------------------------------------------------------------------------


class CreatePartInput(BaseModel):
    """Create a part. The category must already exist."""

    name: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    category_id: int = Field(..., ge=INT_MIN, le=INT_MAX)
    price: Decimal = Field(..., gt=0, lt=MAX_PRICE)
    image_url: str | None = None
    specifications: str | None = Field(None, description="Free-form JSON text, stored as-is")
    compatibility: str | None = Field(None, description="Free-form JSON text, stored as-is")

    @field_validator("price")
    @classmethod
    def price_in_cents(cls, v: Decimal) -> Decimal:
        """Bounds apply to the value as stored, rounded to the cent."""
        price = to_cents(v)
        if price < CENTS:
            msg = "price must be at least 0.01"
            raise ValueError(msg)
        if price >= MAX_PRICE:
            msg = f"price must be below {MAX_PRICE}"
            raise ValueError(msg)
        return price


class PartResponse(BaseModel):
    id: int
    name: str
    description: str
    category_id: int
    price: float
    image_url: str | None = None
    specifications: str | None = None
    compatibility: str | None = None
    created_at: datetime

    model_config = {"from_attributes": True}

    @field_validator("price", mode="before")
    @classmethod
    def price_to_float(cls, v: Decimal | float) -> float:
        """NUMERIC comes back as Decimal; surface it as a 2-place float."""
        return to_float(v)
