"""User operations: /rpc/createUser."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from chopper.database import get_session
from chopper.users.schemas import CreateUserInput, UserResponse
from chopper.users.service import create_user

router = APIRouter(prefix="/rpc", tags=["Users"])


@router.post("/createUser", response_model=UserResponse)
async def create_user_endpoint(
    body: CreateUserInput,
    db: AsyncSession = Depends(get_session),
) -> UserResponse:
    """Register a user."""
    user = await create_user(db, body.username, body.email)
    await db.commit()
    return UserResponse.model_validate(user)
