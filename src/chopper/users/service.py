"""User registration and lookup."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING

import structlog
from sqlalchemy.exc import IntegrityError

from chopper.db.models import User
from chopper.errors import ConstraintViolationError

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

logger = structlog.get_logger()


async def get_user_by_id(db: AsyncSession, user_id: int) -> User | None:
    """Fetch a user by primary key."""
    return await db.get(User, user_id)


async def create_user(db: AsyncSession, username: str, email: str) -> User:
    """
    Insert a new user.

    Raises:
        ConstraintViolationError: If the username or email is already registered.
    """
    now = datetime.now(timezone.utc)
    user = User(username=username, email=email, created_at=now, updated_at=now)
    db.add(user)
    try:
        await db.flush()
    except IntegrityError as e:
        await db.rollback()
        raise ConstraintViolationError(f"Username or email already registered: {e.orig}") from e
    await db.refresh(user)

    logger.info("user_created", user_id=user.id, username=username)
    return user
