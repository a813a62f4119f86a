"""
FastAPI application factory.
"""

from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.ext.asyncio import AsyncEngine

from fieldops.api.middleware.error_handler import add_error_handlers
from fieldops.api.middleware.logging import LoggingMiddleware
from fieldops.api.routes import (
    admin,
    auth,
    dashboard,
    field_workers,
    health,
    profile,
    ratings,
    service_requests,
    tasks,
    users,
)
from fieldops.config.database import create_engine, get_async_session_factory, init_models
from fieldops.config.logging import configure_logging, get_logger
from fieldops.config.settings import settings

logger = get_logger(__name__)

ROUTERS = (
    health.router,
    auth.router,
    users.router,
    profile.router,
    field_workers.router,
    admin.router,
    service_requests.router,
    tasks.router,
    ratings.router,
    dashboard.router,
)


def create_app(engine: Optional[AsyncEngine] = None) -> FastAPI:
    """Create and configure FastAPI application.

    The engine is built from settings unless one is passed in; every request
    gets its own session from the factory stored on app.state.
    """
    configure_logging()

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Service marketplace backend: requests, assignment, execution and ratings",
        openapi_url=f"{settings.API_PREFIX}/openapi.json" if settings.DEBUG else None,
        docs_url=f"{settings.API_PREFIX}/docs" if settings.DEBUG else None,
        redoc_url=f"{settings.API_PREFIX}/redoc" if settings.DEBUG else None,
    )

    app.state.engine = engine or create_engine()
    app.state.session_factory = get_async_session_factory(app.state.engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    add_error_handlers(app)
    LoggingMiddleware(app)

    for router in ROUTERS:
        app.include_router(router, prefix=settings.API_PREFIX)

    @app.on_event("startup")
    async def startup_event():
        if settings.RUN_MIGRATIONS:
            await init_models(app.state.engine)
        logger.info("Application startup", environment=settings.ENVIRONMENT)

    @app.on_event("shutdown")
    async def shutdown_event():
        await app.state.engine.dispose()
        logger.info("Application shutdown")

    return app
