"""
Health check endpoints for the Phone Agent Creator.
"""

from datetime import datetime, timezone
from typing import Dict, Any

from fastapi import APIRouter, Depends

from agent_creator_shared_utils.core.config import Settings, get_settings

router = APIRouter()

SERVICE_NAME = "Phone Agent Creator"


@router.get("")
async def health_check(settings: Settings = Depends(get_settings)) -> Dict[str, Any]:
    """Basic health check endpoint."""
    return {
        "status": "healthy",
        "service": SERVICE_NAME,
        "version": "1.0.0",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": settings.app_env,
        "vapi_base_url": settings.vapi_base_url
    }


@router.get("/live")
async def liveness_check() -> Dict[str, Any]:
    """Liveness check for container orchestration."""
    return {
        "status": "alive",
        "service": SERVICE_NAME,
        "timestamp": datetime.now(timezone.utc).isoformat()
    }
