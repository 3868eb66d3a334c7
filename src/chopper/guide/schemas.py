"""Request/response schemas for build guide steps."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

from chopper.db.models import INT_MAX

DifficultyLevel = Literal["beginner", "intermediate", "advanced"]


class CreateBuildGuideStepInput(BaseModel):
    """Create a guide step. Duplicate step numbers are accepted."""

    step_number: int = Field(..., gt=0, le=INT_MAX)
    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    instructions: str = Field(..., min_length=1)
    image_url: str | None = None
    video_url: str | None = None
    estimated_time_minutes: int | None = Field(None, gt=0, le=INT_MAX)
    difficulty_level: DifficultyLevel
    required_tools: str | None = Field(None, description="JSON-encoded list of tool names, stored as-is")


class BuildGuideStepResponse(BaseModel):
    id: int
    step_number: int
    title: str
    description: str
    instructions: str
    image_url: str | None = None
    video_url: str | None = None
    estimated_time_minutes: int | None = None
    difficulty_level: DifficultyLevel
    required_tools: str | None = None
    created_at: datetime

    model_config = {"from_attributes": True}
