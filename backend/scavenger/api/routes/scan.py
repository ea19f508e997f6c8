"""
Data Risk Scavenger Scan API Routes

Runs a multi-email exposure scan and returns the report.
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, Query

from scavenger.api.dependencies import get_coordinator
from scavenger.models.scan import UserInput
from scavenger.services.report import build_report, format_for_display
from scavenger.services.scan import ScanCoordinator
from scavenger.utils.exceptions import ValidationError, ScanFailedError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/scan", tags=["scan"])


@router.post("")
async def run_scan(
    user_input: UserInput,
    view: str = Query("report", pattern="^(report|display)$", description="report or display"),
    coordinator: ScanCoordinator = Depends(get_coordinator),
) -> Dict[str, Any]:
    """
    Scan every submitted email and build the vulnerability report.

    Returns:
        VulnerabilityReport, or its display-formatted view with ?view=display
    """
    try:
        scan = await coordinator.scan(user_input)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except ScanFailedError as e:
        logger.error(f"Scan failed for all emails: {e.failed_emails}")
        raise HTTPException(status_code=502, detail="Scan failed for every email. Please try again.")

    report = build_report(scan, user_input)

    if view == "display":
        return format_for_display(report)
    return report.model_dump(mode="json")
