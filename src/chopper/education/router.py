"""Educational content operations."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from chopper.database import get_session
from chopper.education.schemas import (
    ContentType,
    CreateEducationalContentInput,
    EducationalContentResponse,
)
from chopper.education.service import create_educational_content, list_educational_content

router = APIRouter(prefix="/rpc", tags=["Education"])


@router.get("/getEducationalContent", response_model=list[EducationalContentResponse])
async def get_educational_content(
    content_type: ContentType | None = Query(None),
    db: AsyncSession = Depends(get_session),
) -> list[EducationalContentResponse]:
    """List content, optionally filtered by content type."""
    items = await list_educational_content(db, content_type=content_type)
    return [EducationalContentResponse.model_validate(i) for i in items]


@router.post("/createEducationalContent", response_model=EducationalContentResponse)
async def create_educational_content_endpoint(
    body: CreateEducationalContentInput,
    db: AsyncSession = Depends(get_session),
) -> EducationalContentResponse:
    item = await create_educational_content(db, **body.model_dump())
    await db.commit()
    return EducationalContentResponse.model_validate(item)
