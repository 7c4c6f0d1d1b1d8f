"""Entry point for the TaskAssist FastAPI application."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text

from .api.routers import api_router
from .core.config import Settings, get_settings
from .core.logging import configure_logging
from .core.middleware import RequestContextMiddleware
from .db.session import init_db
from .deps import DatabaseSessionDependency
from .errors import register_exception_handlers
from .schemas.system import HealthCheckResponse, RootResponse

logger = logging.getLogger(__name__)


def _normalise_prefix(raw_prefix: str) -> str:
    prefix = raw_prefix.strip()
    if prefix and not prefix.startswith("/"):
        prefix = f"/{prefix}"
    prefix = prefix.rstrip("/")
    return "" if prefix == "/" else prefix


def create_app(settings: Settings | None = None) -> FastAPI:
    """Instantiate and configure the FastAPI application."""

    settings = settings or get_settings()
    configure_logging(settings)
    router_prefix = _normalise_prefix(settings.api_prefix)

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        if settings.create_tables_on_startup:
            await init_db()
            logger.info("Database tables ensured")
        yield

    application = FastAPI(
        title=settings.project_name,
        version=settings.version,
        summary="Task management API with projects, assignments and teammates.",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url=f"{router_prefix}/openapi.json",
        lifespan=lifespan,
    )

    application.state.settings = settings

    application.add_middleware(RequestContextMiddleware)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    if router_prefix:
        application.include_router(api_router, prefix=router_prefix)
    else:
        application.include_router(api_router)

    @application.get("/", response_model=RootResponse, summary="Service metadata", tags=["system"])
    async def read_root() -> RootResponse:
        """Expose minimal service metadata for API clients."""

        return RootResponse(
            name=settings.project_name,
            environment=settings.environment,
            version=settings.version,
            api_prefix=settings.api_prefix,
        )

    @application.get("/healthz", response_model=HealthCheckResponse, summary="Health check", tags=["system"])
    async def read_health(session: DatabaseSessionDependency) -> HealthCheckResponse:
        """Report liveness along with a round trip to the database."""

        await session.scalar(text("SELECT 1"))
        return HealthCheckResponse(status="ok", database="ok")

    register_exception_handlers(application)
    return application


app = create_app()


def run() -> None:
    """Console entry point for ``taskassist``."""

    settings: Settings = get_settings()
    uvicorn.run(
        "taskassist.main:app",
        host=settings.app_host,
        port=settings.app_port,
        reload=settings.reload,
        log_config=None,
    )
