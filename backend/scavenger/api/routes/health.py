"""
Data Risk Scavenger Health API Routes

Health check and source status endpoints.
"""

import logging

from fastapi import APIRouter, Depends

from scavenger.api.dependencies import get_coordinator, get_settings
from scavenger.config import Settings
from scavenger.services.scan import ScanCoordinator
from scavenger.utils.helpers import utc_now

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health_check(settings: Settings = Depends(get_settings)):
    """
    Basic health check endpoint.

    Returns:
        Health status
    """
    return {
        "status": "healthy",
        "timestamp": utc_now().isoformat(),
        "service": "data-risk-scavenger",
        "version": settings.app_version,
    }


@router.get("/sources")
async def sources_status(coordinator: ScanCoordinator = Depends(get_coordinator)):
    """
    Status of every lookup source.

    Returns:
        Per-source configuration and request counters
    """
    status = coordinator.get_provider_status()
    configured = sum(1 for source in status.values() if source.get("configured"))
    return {
        "sources": status,
        "configured": configured,
        "total": len(status),
    }
