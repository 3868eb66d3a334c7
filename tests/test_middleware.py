"""Middleware and error mapping tests."""

from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient

from chopper.main import create_app


@pytest.mark.asyncio
async def test_request_id_generated(client: AsyncClient) -> None:
    """A request without X-Request-Id gets one assigned."""
    response = await client.get("/health")
    assert len(response.headers["X-Request-Id"]) == 36


@pytest.mark.asyncio
async def test_request_id_propagated(client: AsyncClient) -> None:
    """A caller-supplied X-Request-Id is echoed back."""
    response = await client.get("/health", headers={"X-Request-Id": "build-42"})
    assert response.headers["X-Request-Id"] == "build-42"


@pytest.mark.asyncio
async def test_validation_error_format(client: AsyncClient) -> None:
    """Malformed input returns 422 with the error list."""
    response = await client.post("/rpc/createPart", json={"name": "Bars"})
    assert response.status_code == 422
    data = response.json()
    assert data["detail"] == "Validation error"
    missing = {tuple(e["loc"]) for e in data["errors"]}
    assert ("body", "category_id") in missing
    assert ("body", "price") in missing


@pytest.mark.asyncio
async def test_mutation_rejects_get(client: AsyncClient) -> None:
    """Mutations are POST-only."""
    response = await client.get("/rpc/createUser")
    assert response.status_code == 405
    assert "detail" in response.json()


@pytest.mark.asyncio
async def test_unknown_operation(client: AsyncClient) -> None:
    response = await client.get("/rpc/deleteEverything")
    assert response.status_code == 404
    assert response.json() == {"detail": "Not Found"}


@pytest.mark.asyncio
async def test_storage_unavailable_when_database_not_initialized() -> None:
    """Without an initialized database every storage call returns 503."""
    app = create_app()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        response = await ac.get("/rpc/getChopperStyles")
    assert response.status_code == 503
    assert "not initialized" in response.json()["detail"]


@pytest.mark.asyncio
async def test_cors_preflight(client: AsyncClient) -> None:
    response = await client.options(
        "/rpc/createUser",
        headers={
            "Origin": "http://localhost:5173",
            "Access-Control-Request-Method": "POST",
        },
    )
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://localhost:5173"


TOO_BIG = 10**20


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("path", "params"),
    [
        ("/rpc/getBuildDetails", {"build_id": TOO_BIG}),
        ("/rpc/getUserBuilds", {"user_id": TOO_BIG}),
        ("/rpc/getPublicBuilds", {"offset": TOO_BIG}),
        ("/rpc/getPartsByCategory", {"category_id": -TOO_BIG}),
        ("/rpc/composeBuildData", {"chopper_style_id": TOO_BIG}),
        ("/rpc/composeBuildData", {"part_ids": [1, TOO_BIG]}),
    ],
)
async def test_out_of_range_query_ints_rejected(client: AsyncClient, path: str, params: dict) -> None:
    """Integers outside the INTEGER column range are a validation error, not a storage crash."""
    response = await client.get(path, params=params)
    assert response.status_code == 422
    assert response.json()["detail"] == "Validation error"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("path", "body"),
    [
        ("/rpc/createUserBuild", {"user_id": TOO_BIG, "name": "x", "build_data": "{}"}),
        ("/rpc/createUserBuild", {"user_id": 1, "name": "x", "build_data": "{}", "progress_step": 2**31}),
        ("/rpc/updateUserBuild", {"id": TOO_BIG, "name": "x"}),
        ("/rpc/updateUserBuild", {"id": 1, "chopper_style_id": TOO_BIG}),
        ("/rpc/addPartToBuild", {"build_id": 1, "part_id": TOO_BIG, "quantity": 1}),
        ("/rpc/addPartToBuild", {"build_id": 1, "part_id": 1, "quantity": TOO_BIG}),
        ("/rpc/createPart", {"name": "x", "description": "y", "category_id": TOO_BIG, "price": 1}),
        (
            "/rpc/createBuildGuideStep",
            {"step_number": TOO_BIG, "title": "t", "description": "d", "instructions": "i",
             "difficulty_level": "beginner"},
        ),
    ],
)
async def test_out_of_range_body_ints_rejected(client: AsyncClient, path: str, body: dict) -> None:
    response = await client.post(path, json=body)
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_largest_id_is_accepted(client: AsyncClient) -> None:
    response = await client.get("/rpc/getBuildDetails", params={"build_id": 2**31 - 1})
    assert response.status_code == 200
    assert response.json() is None
