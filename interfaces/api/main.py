"""Main FastAPI application."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from domain.value_objects.storage_options import StorageOptions
from infrastructure.config import settings
from infrastructure.logging import setup_logging
from interfaces.api.routes.object_routes import router as object_router
from interfaces.api.routes.object_routes import signed_url_router
from interfaces.dependencies import get_container

setup_logging(settings)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Resolve the object store wiring once so misconfiguration fails at startup."""
    logger.info("app_starting", env=settings.app_env)

    options = get_container()[StorageOptions]
    app.state.root_client_path = options.root_client_path

    logger.info("app_ready", root_client_path=options.root_client_path)

    yield

    logger.info("app_stopped")


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    app = FastAPI(
        title=settings.app_name,
        description="Object store gateway API",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(object_router)
    app.include_router(signed_url_router)

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


app = create_app()
