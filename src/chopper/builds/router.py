"""User build operations: saved builds, public gallery, build parts, configurator."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from pydantic import Field
from sqlalchemy.ext.asyncio import AsyncSession

from chopper.builds.build_data import encode_build_data, progress_percent
from chopper.builds.schemas import (
    BuildPartResponse,
    ComposedBuildResponse,
    CreateBuildPartInput,
    CreateUserBuildInput,
    UpdateUserBuildInput,
    UserBuildResponse,
)
from chopper.builds.service import (
    add_part_to_build,
    compose_build_data,
    create_user_build,
    get_build,
    list_public_builds,
    list_user_builds,
    update_user_build,
)
from chopper.config import get_settings
from chopper.database import get_session
from chopper.db.models import INT_MAX, INT_MIN, UserBuild
from chopper.money import to_float

router = APIRouter(prefix="/rpc", tags=["Builds"])


def _build_response(build: UserBuild) -> UserBuildResponse:
    """Build a UserBuildResponse from a UserBuild model."""
    return UserBuildResponse(
        id=build.id,
        user_id=build.user_id,
        name=build.name,
        description=build.description,
        chopper_style_id=build.chopper_style_id,
        is_public=build.is_public,
        build_data=build.build_data,
        progress_step=build.progress_step,
        progress_percent=progress_percent(build.progress_step, get_settings().progress_total_steps),
        created_at=build.created_at,
        updated_at=build.updated_at,
    )


# ---------------------------------------------------------------------------
# Saved builds
# ---------------------------------------------------------------------------


@router.post("/createUserBuild", response_model=UserBuildResponse)
async def create_user_build_endpoint(
    body: CreateUserBuildInput,
    db: AsyncSession = Depends(get_session),
) -> UserBuildResponse:
    """Save a build. 404 if the user or chopper style does not exist."""
    build = await create_user_build(db, **body.model_dump())
    await db.commit()
    return _build_response(build)


@router.get("/getUserBuilds", response_model=list[UserBuildResponse])
async def get_user_builds(
    user_id: int = Query(..., ge=INT_MIN, le=INT_MAX),
    db: AsyncSession = Depends(get_session),
) -> list[UserBuildResponse]:
    builds = await list_user_builds(db, user_id)
    return [_build_response(b) for b in builds]


@router.get("/getPublicBuilds", response_model=list[UserBuildResponse])
async def get_public_builds(
    limit: int = Query(20, gt=0),
    offset: int = Query(0, ge=0, le=INT_MAX),
    db: AsyncSession = Depends(get_session),
) -> list[UserBuildResponse]:
    """Public builds, newest first."""
    builds = await list_public_builds(db, limit=limit, offset=offset)
    return [_build_response(b) for b in builds]


@router.post("/updateUserBuild", response_model=UserBuildResponse)
async def update_user_build_endpoint(
    body: UpdateUserBuildInput,
    db: AsyncSession = Depends(get_session),
) -> UserBuildResponse:
    """Partially update a build; omitted fields keep their values."""
    build = await update_user_build(db, body.id, body.changes())
    await db.commit()
    return _build_response(build)


@router.get("/getBuildDetails", response_model=UserBuildResponse | None)
async def get_build_details(
    build_id: int = Query(..., ge=INT_MIN, le=INT_MAX),
    db: AsyncSession = Depends(get_session),
) -> UserBuildResponse | None:
    """A single build, or null when it does not exist."""
    build = await get_build(db, build_id)
    if build is None:
        return None
    return _build_response(build)


# ---------------------------------------------------------------------------
# Build parts
# ---------------------------------------------------------------------------


@router.post("/addPartToBuild", response_model=BuildPartResponse)
async def add_part_to_build_endpoint(
    body: CreateBuildPartInput,
    db: AsyncSession = Depends(get_session),
) -> BuildPartResponse:
    """Attach a part to a build. 404 if either does not exist."""
    build_part = await add_part_to_build(db, **body.model_dump())
    await db.commit()
    return BuildPartResponse.model_validate(build_part)


# ---------------------------------------------------------------------------
# Configurator
# ---------------------------------------------------------------------------


@router.get("/composeBuildData", response_model=ComposedBuildResponse)
async def compose_build_data_endpoint(
    chopper_style_id: int | None = Query(None, ge=INT_MIN, le=INT_MAX),
    part_ids: list[Annotated[int, Field(ge=INT_MIN, le=INT_MAX)]] = Query([]),
    db: AsyncSession = Depends(get_session),
) -> ComposedBuildResponse:
    """Price a selection of parts and encode it as build_data."""
    data = await compose_build_data(db, chopper_style_id, part_ids)
    return ComposedBuildResponse(
        build_data=encode_build_data(data),
        total_price=to_float(data.total_price),
        parts_count=len(data.parts),
    )
