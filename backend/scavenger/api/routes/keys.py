"""
Data Risk Scavenger API Key Routes

Credential store administration. Key values are write-only.
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from scavenger.api.dependencies import get_credential_store
from scavenger.services.sources import CredentialStore
from scavenger.utils.exceptions import UnknownServiceError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/keys", tags=["keys"])


class APIKeyUpdate(BaseModel):
    """New credential for a service."""
    value: str = Field(..., min_length=1, description="API key or token")


@router.get("")
async def list_keys(store: CredentialStore = Depends(get_credential_store)) -> Dict[str, Any]:
    """List services with their configured flags."""
    return {
        "services": store.describe(),
        "configured": store.list_credentials(),
    }


@router.put("/{service}")
async def store_key(
    service: str,
    update: APIKeyUpdate,
    store: CredentialStore = Depends(get_credential_store),
) -> Dict[str, Any]:
    """Store or replace the key for a service."""
    try:
        store.store_credential(service, update.value)
    except UnknownServiceError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"service": service, "configured": True}


@router.delete("/{service}")
async def delete_key(
    service: str,
    store: CredentialStore = Depends(get_credential_store),
) -> Dict[str, Any]:
    """Remove the key for a service."""
    try:
        deleted = store.delete_credential(service)
    except UnknownServiceError as e:
        raise HTTPException(status_code=404, detail=e.message)
    return {"service": service, "deleted": deleted}
