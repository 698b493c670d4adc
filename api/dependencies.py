"""
API Dependencies - Application state and FastAPI dependency injection

Holds one repository per resource kind. Each repository owns its
collection; routers reach them only through these accessors.
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, Callable, Dict, Optional

from fastapi import Request

from recordstore.exceptions import StorageError
from recordstore.resources import RESOURCES, ResourceConfig
from recordstore.settings import Settings, get_settings
from recordstore.repositories.base import BaseRepository
from recordstore.repositories.local import LocalFileRepository

logger = logging.getLogger(__name__)


class AppState:
    """
    Application state - the repositories serving this app instance.

    Created once per app by the application factory and stored on
    ``app.state.records``.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.repositories: Dict[str, BaseRepository] = {
            name: LocalFileRepository(resource, settings=self.settings)
            for name, resource in RESOURCES.items()
        }

    def repository(self, name: str) -> BaseRepository:
        return self.repositories[name]

    def get_status(self) -> Dict[str, Any]:
        """Record counts per collection; a broken store is reported, not raised"""
        collections: Dict[str, Any] = {}
        for name, repo in self.repositories.items():
            try:
                collections[name] = {"ready": True, "records": repo.count()}
            except StorageError as e:
                logger.error(f"Collection {name} is not readable: {e}")
                collections[name] = {"ready": False, "error": e.message}
        return {
            "ready": all(c["ready"] for c in collections.values()),
            "db_dir": str(self.settings.db_dir),
            "collections": collections,
        }


def get_app_state(request: Request) -> AppState:
    """
    FastAPI dependency to access app state.

    Usage in routers:
        @router.get("/example")
        async def example(state: AppState = Depends(get_app_state)):
            ...
    """
    return request.app.state.records


def repository_dependency(resource: ResourceConfig) -> Callable[[Request], BaseRepository]:
    """
    Build a dependency returning the repository for one resource.

    Usage in routers:
        get_repo = repository_dependency(STORES)

        @router.get("/")
        def list_stores(repo: BaseRepository = Depends(get_repo)):
            ...
    """
    def _get_repository(request: Request) -> BaseRepository:
        return get_app_state(request).repository(resource.name)

    _get_repository.__name__ = f"get_{resource.name}_repository"
    return _get_repository


@asynccontextmanager
async def lifespan_handler(app):
    """
    FastAPI lifespan context manager for startup/shutdown.

    Usage in main.py:
        app = FastAPI(lifespan=lifespan_handler)
    """
    logger.info("FastAPI starting up...")
    status = app.state.records.get_status()
    for name, info in status["collections"].items():
        if info["ready"]:
            logger.info(f"Collection {name}: {info['records']} records")
        else:
            logger.warning(f"Collection {name} unavailable: {info['error']}")

    yield  # App is now running

    logger.info("FastAPI shutting down...")
