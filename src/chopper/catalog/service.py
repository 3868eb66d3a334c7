"""Catalog repositories: chopper styles, part categories and parts."""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal
from typing import TYPE_CHECKING

import structlog
from sqlalchemy import select

from chopper.db.models import ChopperStyle, Part, PartCategory
from chopper.errors import NotFoundError
from chopper.money import to_cents

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

logger = structlog.get_logger()


# --- Chopper styles ---


async def list_chopper_styles(db: AsyncSession) -> list[ChopperStyle]:
    result = await db.execute(select(ChopperStyle).order_by(ChopperStyle.id))
    return list(result.scalars().all())


async def get_chopper_style(db: AsyncSession, style_id: int) -> ChopperStyle | None:
    return await db.get(ChopperStyle, style_id)


async def create_chopper_style(
    db: AsyncSession,
    name: str,
    description: str,
    image_url: str | None = None,
) -> ChopperStyle:
    style = ChopperStyle(
        name=name,
        description=description,
        image_url=image_url,
        created_at=datetime.now(timezone.utc),
    )
    db.add(style)
    await db.flush()
    await db.refresh(style)

    logger.info("chopper_style_created", style_id=style.id, name=name)
    return style


# --- Part categories ---


async def list_part_categories(db: AsyncSession) -> list[PartCategory]:
    """All categories ordered by name."""
    result = await db.execute(select(PartCategory).order_by(PartCategory.name, PartCategory.id))
    return list(result.scalars().all())


async def create_part_category(db: AsyncSession, name: str, description: str) -> PartCategory:
    category = PartCategory(name=name, description=description, created_at=datetime.now(timezone.utc))
    db.add(category)
    await db.flush()
    await db.refresh(category)

    logger.info("part_category_created", category_id=category.id, name=name)
    return category


# --- Parts ---


async def list_parts(db: AsyncSession) -> list[Part]:
    result = await db.execute(select(Part).order_by(Part.id))
    return list(result.scalars().all())


async def list_parts_by_category(db: AsyncSession, category_id: int) -> list[Part]:
    """Parts in one category. An unknown category yields an empty list."""
    result = await db.execute(select(Part).where(Part.category_id == category_id).order_by(Part.id))
    return list(result.scalars().all())


async def get_part(db: AsyncSession, part_id: int) -> Part | None:
    return await db.get(Part, part_id)


async def create_part(
    db: AsyncSession,
    name: str,
    description: str,
    category_id: int,
    price: Decimal,
    image_url: str | None = None,
    specifications: str | None = None,
    compatibility: str | None = None,
) -> Part:
    """
    Insert a part after checking its category exists.

    Raises:
        NotFoundError: If category_id does not reference a part category.
    """
    if await db.get(PartCategory, category_id) is None:
        raise NotFoundError("Part category", category_id)

    part = Part(
        name=name,
        description=description,
        category_id=category_id,
        price=to_cents(price),
        image_url=image_url,
        specifications=specifications,
        compatibility=compatibility,
        created_at=datetime.now(timezone.utc),
    )
    db.add(part)
    await db.flush()
    await db.refresh(part)

    logger.info("part_created", part_id=part.id, category_id=category_id, price=str(part.price))
    return part
