"""addPartToBuild tests."""

from __future__ import annotations

import pytest
from httpx import AsyncClient
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from chopper.db.models import BuildPart


@pytest.mark.asyncio
async def test_add_part_to_build(client: AsyncClient, build: dict, part: dict) -> None:
    response = await client.post("/rpc/addPartToBuild", json={
        "build_id": build["id"],
        "part_id": part["id"],
        "quantity": 2,
        "notes": "One spare",
    })
    assert response.status_code == 200
    data = response.json()
    assert data["build_id"] == build["id"]
    assert data["part_id"] == part["id"]
    assert data["quantity"] == 2
    assert data["notes"] == "One spare"
    assert data["created_at"]


@pytest.mark.asyncio
async def test_notes_optional(client: AsyncClient, build: dict, part: dict) -> None:
    response = await client.post("/rpc/addPartToBuild", json={
        "build_id": build["id"],
        "part_id": part["id"],
        "quantity": 1,
    })
    assert response.status_code == 200
    assert response.json()["notes"] is None


@pytest.mark.asyncio
async def test_unknown_build(client: AsyncClient, part: dict, db_session: AsyncSession) -> None:
    response = await client.post("/rpc/addPartToBuild", json={"build_id": 99999, "part_id": part["id"], "quantity": 1})
    assert response.status_code == 404
    assert response.json()["detail"] == "Build with id 99999 not found"
    assert await db_session.scalar(select(func.count(BuildPart.id))) == 0


@pytest.mark.asyncio
async def test_unknown_part(client: AsyncClient, build: dict, db_session: AsyncSession) -> None:
    response = await client.post("/rpc/addPartToBuild", json={"build_id": build["id"], "part_id": 99999, "quantity": 1})
    assert response.status_code == 404
    assert response.json()["detail"] == "Part with id 99999 not found"
    assert await db_session.scalar(select(func.count(BuildPart.id))) == 0


@pytest.mark.asyncio
@pytest.mark.parametrize("quantity", [0, -1])
async def test_non_positive_quantity_rejected(client: AsyncClient, build: dict, part: dict, quantity: int) -> None:
    response = await client.post("/rpc/addPartToBuild", json={
        "build_id": build["id"],
        "part_id": part["id"],
        "quantity": quantity,
    })
    assert response.status_code == 422
