"""Build guide step repository."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING

import structlog
from sqlalchemy import select

from chopper.db.models import BuildGuideStep

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

logger = structlog.get_logger()


async def list_build_guide_steps(db: AsyncSession) -> list[BuildGuideStep]:
    """All steps in guide order (step_number ascending, insertion order on ties)."""
    result = await db.execute(select(BuildGuideStep).order_by(BuildGuideStep.step_number, BuildGuideStep.id))
    return list(result.scalars().all())


async def create_build_guide_step(
    db: AsyncSession,
    step_number: int,
    title: str,
    description: str,
    instructions: str,
    difficulty_level: str,
    image_url: str | None = None,
    video_url: str | None = None,
    estimated_time_minutes: int | None = None,
    required_tools: str | None = None,
) -> BuildGuideStep:
    step = BuildGuideStep(
        step_number=step_number,
        title=title,
        description=description,
        instructions=instructions,
        image_url=image_url,
        video_url=video_url,
        estimated_time_minutes=estimated_time_minutes,
        difficulty_level=difficulty_level,
        required_tools=required_tools,
        created_at=datetime.now(timezone.utc),
    )
    db.add(step)
    await db.flush()
    await db.refresh(step)

    logger.info("build_guide_step_created", step_id=step.id, step_number=step_number)
    return step
