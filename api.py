"""
IP Map Navigator FastAPI Application

Main entry point for the login API. In production it also serves the
built single-page frontend.
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

# Common library imports
from common.logging import configure_logging
from common.utils import APIException

# App-specific imports
from ipmap.config import Settings, settings as default_settings
from ipmap.dependencies import init_all_services, reset_services
from ipmap.routers import auth_router, health_router

logger = logging.getLogger(__name__)

API_PREFIX = "/api"


def create_app(settings: Settings = default_settings) -> FastAPI:
    """Build the application for the given settings."""

    # =========================================================================
    # Application Lifespan
    # =========================================================================
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application lifespan context manager.

        Validates configuration and initializes services on startup.
        """
        configure_logging(settings.LOG_LEVEL)
        logger.info("Starting IP Map Navigator API...")

        settings.validate_required()
        init_all_services(settings)
        logger.info("All services initialized successfully!")

        yield

        logger.info("Shutting down IP Map Navigator API...")
        reset_services()

    app = FastAPI(
        title="IP Map Navigator API",
        description="Credential login for the IP Map Navigator client",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs" if settings.is_development() else None,
        redoc_url="/redoc" if settings.is_development() else None,
    )

    # =========================================================================
    # Error Rendering
    # =========================================================================
    @app.exception_handler(APIException)
    async def api_exception_handler(request: Request, exc: APIException):
        """Render APIException detail as the response body: {"message": ...}."""
        return JSONResponse(status_code=exc.status_code, content=exc.detail, headers=exc.headers)

    # =========================================================================
    # CORS Middleware
    # =========================================================================
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_cors_origins(),
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # =========================================================================
    # Include Routers (all under /api prefix)
    # =========================================================================
    app.include_router(health_router, prefix=API_PREFIX)
    app.include_router(auth_router, prefix=API_PREFIX)

    # =========================================================================
    # Static Frontend (production only)
    # =========================================================================
    if settings.serve_static():
        mount_frontend(app, Path(settings.STATIC_DIR))

    return app


def mount_frontend(app: FastAPI, dist_path: Path) -> None:
    """Serve the built SPA, falling back to index.html for client-side routes."""
    index_file = dist_path / "index.html"
    if not index_file.is_file():
        logger.warning(f"Static frontend not found at {dist_path}, skipping")
        return

    assets_path = dist_path / "assets"
    if assets_path.is_dir():
        app.mount("/assets", StaticFiles(directory=assets_path), name="assets")

    @app.get("/{full_path:path}", include_in_schema=False)
    async def spa_fallback(full_path: str):
        candidate = (dist_path / full_path).resolve()
        if full_path and candidate.is_file() and dist_path.resolve() in candidate.parents:
            return FileResponse(candidate)
        return FileResponse(index_file)


app = create_app()


# =============================================================================
# Run with Uvicorn
# =============================================================================
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "api:app",
        host=default_settings.HOST,
        port=default_settings.PORT,
        reload=default_settings.is_development(),
    )
