"""FastAPI application for the coach-lift HTTP API."""

from contextlib import asynccontextmanager
from pathlib import Path

import aiosqlite
import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .. import __version__
from ..db.engine import get_db_path, init_db
from ..logging_config import configure_logging
from .routers import logs, programs

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler - runs on startup and shutdown."""
    # Startup: schema creation is idempotent
    await init_db(app.state.db_path)
    yield


async def storage_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Report storage failures as 502 without partial data."""
    logger.error("storage_error", path=request.url.path, error=str(exc))
    return JSONResponse({"error": f"Storage error: {exc}"}, status_code=502)


def create_app(db_path: Path | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    configure_logging()

    app = FastAPI(
        title="coach-lift",
        description="Training program generator and workout log",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.db_path = db_path or get_db_path()

    app.add_exception_handler(aiosqlite.Error, storage_error_handler)
    app.add_exception_handler(OSError, storage_error_handler)

    # Include routers
    app.include_router(programs.router)
    app.include_router(logs.router)

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    return app
