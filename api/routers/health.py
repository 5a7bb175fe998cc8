"""
Health check router.

This router provides health check endpoints for monitoring and load balancers.
"""

import logging

from fastapi import APIRouter, Depends

from api.deps import get_gear_cache, get_settings
from backend.settings import Settings
from services.gear_catalog import GearDefinitionCache

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Health"],
)


@router.get("/health")
def health():
    """
    Simple liveness endpoint.

    Returns:
        dict: Status indicator for health checks
    """
    return {"status": "ok", "service": "workout-engine"}


@router.get("/health/ready")
def readiness(settings: Settings = Depends(get_settings)):
    """
    Readiness endpoint reporting whether the database is configured.
    """
    database = "configured" if settings.supabase_url and settings.supabase_key else "missing"
    return {"status": "ok", "environment": settings.environment, "database": database}


@router.post("/admin/gear-cache/invalidate")
def invalidate_gear_cache(cache: GearDefinitionCache = Depends(get_gear_cache)):
    """
    Drop cached gear definitions and gym equipment.

    Call after content managers edit gear reference data.
    """
    cache.invalidate()
    logger.info("Gear cache invalidated")
    return {"success": True}
