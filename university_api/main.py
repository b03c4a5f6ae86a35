"""FastAPI application factory."""

from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Annotated, AsyncGenerator
import time

from fastapi import Depends, FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from university_api import __version__
from university_api.config import settings
from university_api.core.database.session import engine, get_db
from university_api.core.database.migration_check import require_migrations
from university_api.core.logging import setup_logging, get_logger, LoggingMiddleware
from university_api.core.universities.exceptions import UniversityError
from university_api.api.v1.router import api_router


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifecycle management."""

    # === STARTUP ===
    setup_logging(
        log_level=settings.log_level,
        log_format=settings.log_format,
        is_development=settings.is_development,
        logs_dir=settings.logs_dir,
        log_to_file=settings.log_to_file,
        log_file_max_bytes=settings.log_file_max_bytes,
        log_file_backup_count=settings.log_file_backup_count,
    )

    logger = get_logger(__name__)
    logger.info("application_starting", app_name=settings.app_name, environment=settings.app_env)

    try:
        await require_migrations(
            engine, fail_on_outdated=settings.require_migrations_on_startup
        )
    except RuntimeError as e:
        logger.error("migration_check_failed", error=str(e))
        raise

    app.state._start_time = time.time()
    logger.info("application_started_successfully", app_name=settings.app_name)

    yield

    # === SHUTDOWN ===
    logger.info("application_shutting_down", app_name=settings.app_name)
    await engine.dispose()
    logger.info(
        "application_shutdown_complete",
        app_name=settings.app_name,
        uptime_seconds=round(time.time() - app.state._start_time, 2),
    )


async def university_error_handler(request: Request, exc: UniversityError) -> JSONResponse:
    """Render university errors as ``{"error": ...}`` bodies."""
    get_logger(__name__).info(
        "university_request_rejected",
        error=exc.message,
        status_code=exc.status_code,
    )
    return JSONResponse(status_code=exc.status_code, content=jsonable_encoder(exc.to_dict()))


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed requests as 400 with the same error body shape."""
    return JSONResponse(
        status_code=400,
        content=jsonable_encoder({"error": "Invalid request", "details": exc.errors()}),
    )


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    app = FastAPI(
        title=settings.app_name,
        version=__version__,
        description="REST API for browsing and managing universities",
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
        openapi_url="/api/openapi.json" if settings.debug else None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Adds correlation IDs and request context
    app.add_middleware(LoggingMiddleware)

    app.add_exception_handler(UniversityError, university_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)

    app.include_router(api_router, prefix="/api/v1")

    @app.get("/health")
    async def health_check(
        db: Annotated[AsyncSession, Depends(get_db)],
    ) -> dict:
        """Health check endpoint reporting database connectivity. No auth required."""
        logger = get_logger(__name__)

        db_status = "unknown"
        db_latency = None
        try:
            db_start = time.time()
            await db.execute(text("SELECT 1"))
            db_latency = round((time.time() - db_start) * 1000, 2)
            db_status = "connected"
        except Exception as e:
            db_status = "error"
            logger.error("database_health_check_failed", error=str(e))

        return {
            "status": "healthy" if db_status == "connected" else "degraded",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "version": __version__,
            "environment": settings.app_env,
            "database": {
                "status": db_status,
                "latency_ms": db_latency,
            },
        }

    return app


app = create_app()
