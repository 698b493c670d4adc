"""
Health Router - Health checks and collection status endpoints
"""

from fastapi import APIRouter, Depends
from typing import Dict, Any

from api.dependencies import get_app_state, AppState

router = APIRouter()


@router.get("/ready")
def health_check_ready(state: AppState = Depends(get_app_state)) -> Dict[str, Any]:
    """
    Readiness probe.

    Returns ready=True when every collection store is readable.
    """
    return state.get_status()
