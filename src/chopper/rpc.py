"""Operation index for the /rpc channel.

Every operation is a route under RPC_PREFIX named after the operation.
GET routes are queries (read-only, safe to retry); POST routes are mutations.
"""

from collections.abc import Mapping

from fastapi import APIRouter, Request

RPC_PREFIX = "/rpc"

router = APIRouter(tags=["RPC"])


def list_procedures(paths: Mapping[str, Mapping[str, object]]) -> list[dict[str, str]]:
    """Name and kind of every operation under RPC_PREFIX, from OpenAPI ``paths``."""
    procedures = []
    for path, operations in paths.items():
        if not path.startswith(RPC_PREFIX + "/"):
            continue
        kind = "query" if "get" in operations else "mutation"
        procedures.append({"name": path.removeprefix(RPC_PREFIX + "/"), "kind": kind})
    return sorted(procedures, key=lambda p: p["name"])


@router.get(RPC_PREFIX)
async def procedure_index(request: Request) -> dict[str, list[dict[str, str]]]:
    return {"procedures": list_procedures(request.app.openapi()["paths"])}
