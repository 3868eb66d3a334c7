"""Request/response schemas for educational content."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

ContentType = Literal["history", "style_guide", "part_info", "general"]


class CreateEducationalContentInput(BaseModel):
    title: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)
    content_type: ContentType
    image_url: str | None = None
    video_url: str | None = None
    tags: str | None = Field(None, description="JSON-encoded tag list, stored as-is")


class EducationalContentResponse(BaseModel):
    id: int
    title: str
    content: str
    content_type: ContentType
    image_url: str | None = None
    video_url: str | None = None
    tags: str | None = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
