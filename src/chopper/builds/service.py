"""User build repositories: saved builds, their parts, and configurator composition."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

import structlog
from sqlalchemy import select

from chopper.builds.build_data import BuildData, PartSelection, StyleSelection, with_part
from chopper.catalog.service import get_chopper_style, get_part
from chopper.config import get_settings
from chopper.db.models import BuildPart, ChopperStyle, Part, UserBuild
from chopper.errors import NotFoundError
from chopper.users.service import get_user_by_id

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

logger = structlog.get_logger()

UPDATABLE_FIELDS = frozenset(
    {"name", "description", "chopper_style_id", "is_public", "build_data", "progress_step"}
)


async def _require_style(db: AsyncSession, style_id: int) -> ChopperStyle:
    style = await get_chopper_style(db, style_id)
    if style is None:
        raise NotFoundError("Chopper style", style_id)
    return style


async def _require_part(db: AsyncSession, part_id: int) -> Part:
    part = await get_part(db, part_id)
    if part is None:
        raise NotFoundError("Part", part_id)
    return part


async def create_user_build(
    db: AsyncSession,
    user_id: int,
    name: str,
    build_data: str,
    description: str | None = None,
    chopper_style_id: int | None = None,
    is_public: bool = False,
    progress_step: int = 0,
) -> UserBuild:
    """
    Save a build for a user.

    Raises:
        NotFoundError: If the user, or a non-null chopper style, does not exist.
    """
    if await get_user_by_id(db, user_id) is None:
        raise NotFoundError("User", user_id)
    if chopper_style_id is not None:
        await _require_style(db, chopper_style_id)

    now = datetime.now(timezone.utc)
    build = UserBuild(
        user_id=user_id,
        name=name,
        description=description,
        chopper_style_id=chopper_style_id,
        is_public=is_public,
        build_data=build_data,
        progress_step=progress_step,
        created_at=now,
        updated_at=now,
    )
    db.add(build)
    await db.flush()
    await db.refresh(build)

    logger.info("user_build_created", build_id=build.id, user_id=user_id, is_public=is_public)
    return build


async def get_build(db: AsyncSession, build_id: int) -> UserBuild | None:
    """Fetch a build by id, None if absent."""
    return await db.get(UserBuild, build_id)


async def list_user_builds(db: AsyncSession, user_id: int) -> list[UserBuild]:
    result = await db.execute(select(UserBuild).where(UserBuild.user_id == user_id).order_by(UserBuild.id))
    return list(result.scalars().all())


async def list_public_builds(db: AsyncSession, limit: int = 20, offset: int = 0) -> list[UserBuild]:
    """Public builds, newest first. Limit is capped at the configured maximum."""
    limit = min(limit, get_settings().public_builds_max_limit)

    result = await db.execute(
        select(UserBuild)
        .where(UserBuild.is_public.is_(True))
        .order_by(UserBuild.created_at.desc(), UserBuild.id.desc())
        .limit(limit)
        .offset(offset)
    )
    return list(result.scalars().all())


async def update_user_build(db: AsyncSession, build_id: int, changes: dict[str, Any]) -> UserBuild:
    """
    Apply a partial update. updated_at is refreshed even when changes is empty.

    No version check: concurrent updates to the same build are last-write-wins.

    Raises:
        NotFoundError: If the build, or a non-null chopper style in changes, does not exist.
        ValueError: If changes names a field that cannot be updated.
    """
    unknown = set(changes) - UPDATABLE_FIELDS
    if unknown:
        msg = f"Fields cannot be updated: {', '.join(sorted(unknown))}"
        raise ValueError(msg)

    build = await get_build(db, build_id)
    if build is None:
        raise NotFoundError("Build", build_id)
    if changes.get("chopper_style_id") is not None:
        await _require_style(db, changes["chopper_style_id"])

    for field, value in changes.items():
        setattr(build, field, value)
    build.updated_at = datetime.now(timezone.utc)

    await db.flush()
    await db.refresh(build)

    logger.info("user_build_updated", build_id=build_id, fields=sorted(changes))
    return build


async def add_part_to_build(
    db: AsyncSession,
    build_id: int,
    part_id: int,
    quantity: int,
    notes: str | None = None,
) -> BuildPart:
    """
    Link a part to a build.

    Raises:
        NotFoundError: If the build or the part does not exist.
    """
    if await get_build(db, build_id) is None:
        raise NotFoundError("Build", build_id)
    await _require_part(db, part_id)

    build_part = BuildPart(
        build_id=build_id,
        part_id=part_id,
        quantity=quantity,
        notes=notes,
        created_at=datetime.now(timezone.utc),
    )
    db.add(build_part)
    await db.flush()
    await db.refresh(build_part)

    logger.info("build_part_added", build_id=build_id, part_id=part_id, quantity=quantity)
    return build_part


async def compose_build_data(
    db: AsyncSession,
    chopper_style_id: int | None,
    part_ids: Iterable[int],
) -> BuildData:
    """
    Assemble a BuildData from catalog rows, one part per category.

    Parts are applied in order, so a later part replaces an earlier one from
    the same category. Read-only.

    Raises:
        NotFoundError: If the style or any part does not exist.
    """
    data = BuildData()
    if chopper_style_id is not None:
        style = await _require_style(db, chopper_style_id)
        data = data.model_copy(update={"style": StyleSelection(id=style.id, name=style.name)})

    for part_id in part_ids:
        part = await _require_part(db, part_id)
        data = with_part(
            data,
            PartSelection(id=part.id, name=part.name, category_id=part.category_id, price=part.price),
        )
    return data
