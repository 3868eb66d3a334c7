"""Educational content repository: history articles, style guides, part notes."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING

import structlog
from sqlalchemy import select

from chopper.db.models import EducationalContent

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

logger = structlog.get_logger()


async def list_educational_content(
    db: AsyncSession,
    content_type: str | None = None,
) -> list[EducationalContent]:
    """All content, or only the rows of one content type."""
    query = select(EducationalContent).order_by(EducationalContent.id)
    if content_type is not None:
        query = query.where(EducationalContent.content_type == content_type)
    result = await db.execute(query)
    return list(result.scalars().all())


async def create_educational_content(
    db: AsyncSession,
    title: str,
    content: str,
    content_type: str,
    image_url: str | None = None,
    video_url: str | None = None,
    tags: str | None = None,
) -> EducationalContent:
    now = datetime.now(timezone.utc)
    item = EducationalContent(
        title=title,
        content=content,
        content_type=content_type,
        image_url=image_url,
        video_url=video_url,
        tags=tags,
        created_at=now,
        updated_at=now,
    )
    db.add(item)
    await db.flush()
    await db.refresh(item)

    logger.info("educational_content_created", content_id=item.id, content_type=content_type)
    return item
