"""
recipe_api.api.app

FastAPI app factory for the Recipe API service.

Responsibilities:
- Build the FastAPI application and register routers/middleware/error handlers.
- Initialize and dispose shared infrastructure (DB engine/session factory).
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from recipe_api import __version__
from recipe_api.api.exception_handlers import setup_exception_handlers
from recipe_api.api.routers.comments import router as comments_router
from recipe_api.api.routers.dev_auth import router as dev_auth_router
from recipe_api.api.routers.health import router as health_router
from recipe_api.api.routers.recipes import router as recipes_router
from recipe_api.api.routers.users import router as users_router
from recipe_api.db.init_db import init_db
from recipe_api.db.session import create_engine, create_sessionmaker
from recipe_api.observability.logging import configure_logging, get_logger
from recipe_api.observability.middleware import RequestContextMiddleware
from recipe_api.settings import Settings

log = get_logger(__name__)


def create_app(*, settings: Settings) -> FastAPI:
    configure_logging(service_name=settings.service_name, level=settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env)
        engine = create_engine(settings)
        app.state.engine = engine
        app.state.sessionmaker = create_sessionmaker(engine)
        if settings.env in ("dev", "test"):
            # Prod runs Alembic migrations instead.
            await init_db(engine)
        try:
            yield
        finally:
            await engine.dispose()
            log.info("shutdown")

    app = FastAPI(
        title="Recipe API",
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(RequestContextMiddleware)
    setup_exception_handlers(app)
    app.include_router(health_router, tags=["health"])
    app.include_router(dev_auth_router)
    app.include_router(users_router)
    app.include_router(recipes_router)
    app.include_router(comments_router)

    return app


# --- Module Notes -----------------------------------------------------------
# App composition stays here; business rules stay in services.
