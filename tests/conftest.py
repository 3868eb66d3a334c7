"""Shared test fixtures.

Every test gets its own SQLite database file, created from the ORM metadata.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from chopper.config import get_settings
from chopper.database import close_db, create_schema, get_session, init_db
from chopper.main import create_app


@pytest_asyncio.fixture
async def database(tmp_path, monkeypatch) -> AsyncGenerator[None, None]:
    """Point the app at a fresh SQLite file and create the schema."""
    monkeypatch.setenv("CHOPPER_DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'chopper.db'}")
    monkeypatch.setenv("CHOPPER_LOG_FORMAT", "console")
    get_settings.cache_clear()

    await init_db(get_settings().database_url)
    await create_schema()
    yield
    await close_db()
    get_settings.cache_clear()


@pytest_asyncio.fixture
async def client(database: None) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client bound to the app (lifespan is driven by the database fixture)."""
    app = create_app()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def db_session(database: None) -> AsyncGenerator[AsyncSession, None]:
    """Direct database session for test assertions."""
    sessions = get_session()
    session = await anext(sessions)
    yield session
    await sessions.aclose()


# ---------------------------------------------------------------------------
# Seed data created through the API
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture
async def user(client: AsyncClient) -> dict:
    response = await client.post("/rpc/createUser", json={"username": "rider", "email": "rider@example.com"})
    assert response.status_code == 200
    return response.json()


@pytest_asyncio.fixture
async def style(client: AsyncClient) -> dict:
    response = await client.post("/rpc/createChopperStyle", json={
        "name": "Bobber",
        "description": "Stripped down, chopped rear fender, solo seat.",
        "image_url": "https://img.example.com/bobber.jpg",
    })
    assert response.status_code == 200
    return response.json()


@pytest_asyncio.fixture
async def category(client: AsyncClient) -> dict:
    response = await client.post("/rpc/createPartCategory", json={
        "name": "Handlebars",
        "description": "Bars, risers and controls.",
    })
    assert response.status_code == 200
    return response.json()


@pytest_asyncio.fixture
async def part(client: AsyncClient, category: dict) -> dict:
    response = await client.post("/rpc/createPart", json={
        "name": "16in Ape Hangers",
        "description": "Chrome 1.25in ape hanger bars.",
        "category_id": category["id"],
        "price": 249.99,
    })
    assert response.status_code == 200
    return response.json()


@pytest_asyncio.fixture
async def build(client: AsyncClient, user: dict, style: dict) -> dict:
    response = await client.post("/rpc/createUserBuild", json={
        "user_id": user["id"],
        "name": "Garage Bobber",
        "description": "First build",
        "chopper_style_id": style["id"],
        "build_data": '{"style": null, "parts": {}, "totalPrice": 0}',
    })
    assert response.status_code == 200
    return response.json()
