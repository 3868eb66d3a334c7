"""FastAPI application factory."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from chopper.builds.router import router as builds_router
from chopper.catalog.router import router as catalog_router
from chopper.config import get_settings
from chopper.database import close_db, create_schema, init_db
from chopper.education.router import router as education_router
from chopper.guide.router import router as guide_router
from chopper.health.router import router as health_router
from chopper.middleware import setup_middleware
from chopper.rpc import router as rpc_router
from chopper.users.router import router as users_router

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup and shutdown lifecycle."""
    settings = get_settings()
    await init_db(settings.database_url)
    if settings.auto_create_schema:
        await create_schema()
    logger.info("startup_complete", environment=settings.environment)

    yield

    await close_db()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="Chopper Builder API",
        description="Catalog, build guide and saved-build configurator for custom choppers",
        version=settings.app_version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )

    setup_middleware(app, settings)
    app.include_router(health_router, tags=["Health"])
    app.include_router(rpc_router)
    app.include_router(users_router)
    app.include_router(catalog_router)
    app.include_router(guide_router)
    app.include_router(builds_router)
    app.include_router(education_router)

    return app


app = create_app()
