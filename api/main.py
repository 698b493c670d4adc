"""
Store Records API - FastAPI Application

Main entry point for the API server.
Environment-agnostic: configuration reads from settings (.env file).
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from recordstore import __version__
from recordstore.logging_setup import setup_logging
from recordstore.resources import RESOURCES
from recordstore.settings import Settings, get_settings
from api.dependencies import AppState, lifespan_handler
from api.routers import health
from api.routers.records import create_resource_router
from api.schemas.records import RECORD_SCHEMAS

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Application factory for creating FastAPI app.

    Args:
        settings: Optional settings override (tests point db_dir at a tmp dir)

    Returns:
        Configured FastAPI application instance
    """
    cfg = settings or get_settings()
    setup_logging(cfg.log_level)

    app = FastAPI(
        title="Store Records API",
        description="CRUD and search over users, products, stores, orders, suppliers and campaigns",
        version=__version__,
        lifespan=lifespan_handler
    )
    app.state.records = AppState(cfg)

    logger.info(f"Configuring CORS with origins: {cfg.cors_origins}")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # One router per resource, all built from the same factory
    for name, resource in RESOURCES.items():
        app.include_router(
            create_resource_router(resource, RECORD_SCHEMAS[name]),
            prefix=f"/api{resource.prefix}",
            tags=[name],
        )
    app.include_router(health.router, prefix="/api/health", tags=["health"])

    @app.get("/")
    async def root():
        """Root endpoint - API info"""
        return {
            "name": "Store Records API",
            "version": __version__,
            "environment": cfg.env,
            "status": "running",
            "docs": "/docs",
            "health": "/api/health/ready"
        }

    logger.info(f"FastAPI application created (env={cfg.env}, db_dir={cfg.db_dir})")
    return app


if __name__ == "__main__":
    import uvicorn

    cfg = get_settings()
    setup_logging(cfg.log_level)

    logger.info(f"Starting API server on {cfg.api_host}:{cfg.api_port}")
    logger.info(f"Environment: {cfg.env}")
    logger.info(f"Reload: {cfg.api_reload}")

    uvicorn.run(
        "api.main:create_app",
        factory=True,
        host=cfg.api_host,
        port=cfg.api_port,
        reload=cfg.api_reload,
        workers=cfg.api_workers if not cfg.api_reload else 1,  # Workers only work without reload
        log_level=cfg.log_level.lower()
    )
