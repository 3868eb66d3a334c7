"""Build guide operations."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from chopper.database import get_session
from chopper.guide.schemas import BuildGuideStepResponse, CreateBuildGuideStepInput
from chopper.guide.service import create_build_guide_step, list_build_guide_steps

router = APIRouter(prefix="/rpc", tags=["Build Guide"])


@router.get("/getBuildGuideSteps", response_model=list[BuildGuideStepResponse])
async def get_build_guide_steps(db: AsyncSession = Depends(get_session)) -> list[BuildGuideStepResponse]:
    """The whole guide, ordered by step number."""
    steps = await list_build_guide_steps(db)
    return [BuildGuideStepResponse.model_validate(s) for s in steps]


@router.post("/createBuildGuideStep", response_model=BuildGuideStepResponse)
async def create_build_guide_step_endpoint(
    body: CreateBuildGuideStepInput,
    db: AsyncSession = Depends(get_session),
) -> BuildGuideStepResponse:
    step = await create_build_guide_step(db, **body.model_dump())
    await db.commit()
    return BuildGuideStepResponse.model_validate(step)
