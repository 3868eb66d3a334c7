"""Request/response schemas for user builds and build parts."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, model_validator

from chopper.db.models import INT_MAX, INT_MIN

# Columns that may be omitted from an update but never set to null.
_NOT_NULLABLE = ("name", "is_public", "build_data", "progress_step")


# ---------------------------------------------------------------------------
# User builds
# ---------------------------------------------------------------------------


class CreateUserBuildInput(BaseModel):
    """Save a build for an existing user."""

    user_id: int = Field(..., ge=INT_MIN, le=INT_MAX)
    name: str = Field(..., min_length=1)
    description: str | None = None
    chopper_style_id: int | None = Field(None, ge=INT_MIN, le=INT_MAX)
    is_public: bool = False
    build_data: str = Field(..., min_length=1, description="Encoded configuration, stored as-is")
    progress_step: int = Field(0, ge=0, le=INT_MAX)


class UpdateUserBuildInput(BaseModel):
    """Partial update. Only the fields present in the request are applied."""

    id: int = Field(..., ge=INT_MIN, le=INT_MAX)
    name: str | None = Field(None, min_length=1)
    description: str | None = None
    chopper_style_id: int | None = Field(None, ge=INT_MIN, le=INT_MAX)
    is_public: bool | None = None
    build_data: str | None = Field(None, min_length=1)
    progress_step: int | None = Field(None, ge=0, le=INT_MAX)

    @model_validator(mode="after")
    def reject_null_for_required_columns(self) -> UpdateUserBuildInput:
        for field in _NOT_NULLABLE:
            if field in self.model_fields_set and getattr(self, field) is None:
                msg = f"{field} cannot be null"
                raise ValueError(msg)
        return self

    def changes(self) -> dict[str, Any]:
        """The explicitly provided fields, excluding the id."""
        return self.model_dump(include=self.model_fields_set - {"id"})


class UserBuildResponse(BaseModel):
    id: int
    user_id: int
    name: str
    description: str | None = None
    chopper_style_id: int | None = None
    is_public: bool
    build_data: str
    progress_step: int
    progress_percent: float
    created_at: datetime
    updated_at: datetime


# ---------------------------------------------------------------------------
# Build parts
# ---------------------------------------------------------------------------


class CreateBuildPartInput(BaseModel):
    build_id: int = Field(..., ge=INT_MIN, le=INT_MAX)
    part_id: int = Field(..., ge=INT_MIN, le=INT_MAX)
    quantity: int = Field(..., gt=0, le=INT_MAX)
    notes: str | None = None


class BuildPartResponse(BaseModel):
    id: int
    build_id: int
    part_id: int
    quantity: int
    notes: str | None = None
    created_at: datetime

    model_config = {"from_attributes": True}


# ---------------------------------------------------------------------------
# Configurator
# ---------------------------------------------------------------------------


class ComposedBuildResponse(BaseModel):
    """A build_data string assembled from catalog rows, ready for createUserBuild."""

    build_data: str
    total_price: float
    parts_count: int
