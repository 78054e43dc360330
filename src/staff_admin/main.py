"""FastAPI application entry point."""

import logging
import re
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from staff_admin.config.settings import get_settings
from staff_admin.config.logging_config import setup_logging
from staff_admin.repositories.sqlalchemy.database import init_db
from staff_admin.api.routers import employees_router
from staff_admin.core.exceptions import AppError

logger = logging.getLogger(__name__)

_MYSQL_DUPLICATE = re.compile(r"Duplicate entry '([^']*)'")
_SQLITE_UNIQUE = re.compile(r"UNIQUE constraint failed: \w+\.(\w+)")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    setup_logging()
    init_db()
    yield
    # Shutdown (nothing to clean up)


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    description="Staff account administration for the restaurant admin backend",
    version=settings.app_version,
    lifespan=lifespan,
)

# Include routers
app.include_router(employees_router)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Global handler for application errors."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.code, "message": exc.message},
    )


def duplicate_message(exc: IntegrityError) -> str:
    """Build a user-facing message from a unique-constraint violation."""
    detail = str(exc.orig)
    match = _MYSQL_DUPLICATE.search(detail)
    if match:
        return f"{match.group(1)} already exists"
    match = _SQLITE_UNIQUE.search(detail)
    if match:
        return f"{match.group(1)} already exists"
    return "Record already exists"


@app.exception_handler(IntegrityError)
async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    """Translate store constraint violations (e.g. duplicate username)."""
    logger.warning(f"Constraint violation on {request.url.path}: {exc.orig}")
    return JSONResponse(
        status_code=409,
        content={"error": "DUPLICATE", "message": duplicate_message(exc)},
    )


@app.get("/health")
def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/")
def root() -> dict[str, str]:
    """Root endpoint with API info."""
    return {
        "app": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
    }
