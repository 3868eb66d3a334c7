"""Catalog operations: chopper styles, part categories and parts."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from chopper.catalog.schemas import (
    ChopperStyleResponse,
    CreateChopperStyleInput,
    CreatePartCategoryInput,
    CreatePartInput,
    PartCategoryResponse,
    PartResponse,
)
from chopper.catalog.service import (
    create_chopper_style,
    create_part,
    create_part_category,
    list_chopper_styles,
    list_part_categories,
    list_parts,
    list_parts_by_category,
)
from chopper.database import get_session
from chopper.db.models import INT_MAX, INT_MIN

router = APIRouter(prefix="/rpc", tags=["Catalog"])


# ---------------------------------------------------------------------------
# Chopper styles
# ---------------------------------------------------------------------------


@router.get("/getChopperStyles", response_model=list[ChopperStyleResponse])
async def get_chopper_styles(db: AsyncSession = Depends(get_session)) -> list[ChopperStyleResponse]:
    styles = await list_chopper_styles(db)
    return [ChopperStyleResponse.model_validate(s) for s in styles]


@router.post("/createChopperStyle", response_model=ChopperStyleResponse)
async def create_chopper_style_endpoint(
    body: CreateChopperStyleInput,
    db: AsyncSession = Depends(get_session),
) -> ChopperStyleResponse:
    style = await create_chopper_style(db, body.name, body.description, body.image_url)
    await db.commit()
    return ChopperStyleResponse.model_validate(style)


# ---------------------------------------------------------------------------
# Part categories
# ---------------------------------------------------------------------------


@router.get("/getPartCategories", response_model=list[PartCategoryResponse])
async def get_part_categories(db: AsyncSession = Depends(get_session)) -> list[PartCategoryResponse]:
    """All part categories, sorted by name."""
    categories = await list_part_categories(db)
    return [PartCategoryResponse.model_validate(c) for c in categories]


@router.post("/createPartCategory", response_model=PartCategoryResponse)
async def create_part_category_endpoint(
    body: CreatePartCategoryInput,
    db: AsyncSession = Depends(get_session),
) -> PartCategoryResponse:
    category = await create_part_category(db, body.name, body.description)
    await db.commit()
    return PartCategoryResponse.model_validate(category)


# ---------------------------------------------------------------------------
# Parts
# ---------------------------------------------------------------------------


@router.get("/getParts", response_model=list[PartResponse])
async def get_parts(db: AsyncSession = Depends(get_session)) -> list[PartResponse]:
    parts = await list_parts(db)
    return [PartResponse.model_validate(p) for p in parts]


@router.get("/getPartsByCategory", response_model=list[PartResponse])
async def get_parts_by_category(
    category_id: int = Query(..., ge=INT_MIN, le=INT_MAX),
    db: AsyncSession = Depends(get_session),
) -> list[PartResponse]:
    parts = await list_parts_by_category(db, category_id)
    return [PartResponse.model_validate(p) for p in parts]


@router.post("/createPart", response_model=PartResponse)
async def create_part_endpoint(
    body: CreatePartInput,
    db: AsyncSession = Depends(get_session),
) -> PartResponse:
    """Create a part in an existing category. 404 if the category is unknown."""
    part = await create_part(
        db,
        name=body.name,
        description=body.description,
        category_id=body.category_id,
        price=body.price,
        image_url=body.image_url,
        specifications=body.specifications,
        compatibility=body.compatibility,
    )
    await db.commit()
    return PartResponse.model_validate(part)
