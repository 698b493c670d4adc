"""
Records Router - CRUD and search endpoints for one resource kind

The same factory builds the router of every resource; the resource
configuration decides the search route and the empty-search policy.
"""

import logging
from typing import Any, Dict, List, Optional, Type

from fastapi import APIRouter, Body, Depends, HTTPException

from recordstore.exceptions import NotFoundError, StorageError, ValidationError
from recordstore.resources import ResourceConfig, build_search_predicate
from api.dependencies import repository_dependency
from recordstore.repositories.base import BaseRepository
from api.schemas.records import ErrorResponse, RecordBase, example_for

logger = logging.getLogger(__name__)


def _storage_failure(e: StorageError, action: str) -> HTTPException:
    logger.error(f"{action} failed: {e}", exc_info=True)
    return HTTPException(status_code=500, detail=f"{action} failed: storage error")


def create_resource_router(resource: ResourceConfig, schema: Type[RecordBase]) -> APIRouter:
    """
    Build the router for one resource.

    Args:
        resource: Resource configuration (required fields, search policy)
        schema: Pydantic model documenting the record fields

    Returns:
        APIRouter to be mounted at ``resource.prefix``
    """
    router = APIRouter()
    get_repo = repository_dependency(resource)
    label = resource.label
    not_found = {404: {"model": ErrorResponse}}
    # dates in dd/mm/yyyy contain slashes
    term_param = "{term:path}" if resource.search_mode == "exact_date" else "{term}"
    # Bodies stay schema-less; the example only feeds /docs
    examples = [example_for(schema)]

    @router.get("", responses={200: {"model": List[schema]}})
    def list_records(repo: BaseRepository = Depends(get_repo)) -> List[Dict[str, Any]]:
        """Return the whole collection"""
        try:
            return repo.list_records()
        except StorageError as e:
            raise _storage_failure(e, f"Listing {resource.name}")

    @router.get(
        f"/{resource.search_route}/{term_param}",
        responses={200: {"model": List[schema]}, **not_found},
    )
    def search_records(term: str, repo: BaseRepository = Depends(get_repo)) -> List[Dict[str, Any]]:
        """Search records by the resource's search field"""
        try:
            results = list(repo.find(build_search_predicate(resource, term)))
        except StorageError as e:
            raise _storage_failure(e, f"Searching {resource.name}")

        if not results and resource.empty_search_not_found:
            raise HTTPException(status_code=404, detail=f"No {label.lower()} matches {term!r}")
        return results

    @router.get("/{record_id}", responses={200: {"model": schema}, **not_found})
    def get_record(record_id: str, repo: BaseRepository = Depends(get_repo)) -> Dict[str, Any]:
        """Return one record by id"""
        try:
            return repo.get_by_id(record_id)
        except NotFoundError:
            raise HTTPException(status_code=404, detail=f"{label} not found")
        except StorageError as e:
            raise _storage_failure(e, f"Reading {label.lower()} {record_id}")

    @router.post(
        "",
        status_code=201,
        responses={201: {"model": schema}, 400: {"model": ErrorResponse}},
    )
    def create_record(
        payload: Dict[str, Any] = Body(..., examples=examples),
        repo: BaseRepository = Depends(get_repo)
    ) -> Dict[str, Any]:
        """Create a record; every required field must be present and non-empty"""
        try:
            return repo.create(payload)
        except ValidationError as e:
            raise HTTPException(status_code=400, detail=str(e))
        except StorageError as e:
            raise _storage_failure(e, f"Creating {label.lower()}")

    @router.put("/{record_id}", responses={200: {"model": schema}, **not_found})
    def update_record(
        record_id: str,
        payload: Optional[Dict[str, Any]] = Body(None, examples=[{"status": "off"}]),
        repo: BaseRepository = Depends(get_repo)
    ) -> Dict[str, Any]:
        """Merge the supplied fields into a record; the id never changes"""
        fields = payload or {}
        try:
            return repo.update(record_id, fields)
        except NotFoundError:
            raise HTTPException(status_code=404, detail=f"{label} not found")
        except StorageError as e:
            raise _storage_failure(e, f"Updating {label.lower()} {record_id}")

    @router.delete("/{record_id}", responses={200: {"model": schema}, **not_found})
    def delete_record(record_id: str, repo: BaseRepository = Depends(get_repo)) -> Dict[str, Any]:
        """Remove a record and return it"""
        try:
            return repo.delete(record_id)
        except NotFoundError:
            raise HTTPException(status_code=404, detail=f"{label} not found")
        except StorageError as e:
            raise _storage_failure(e, f"Deleting {label.lower()} {record_id}")

    return router
