"""
Data Risk Scavenger Credential Store

Keyed secret store for lookup-service API keys, seeded from settings.
Values live in memory only.
"""

import logging
from typing import Optional, Dict, List, Any

from scavenger.config import Settings
from scavenger.utils.constants import (
    SERVICE_METADATA,
    SERVICE_HIBP,
    SERVICE_EMAILREP,
    SERVICE_SHERLOCK,
    SERVICE_SOCIAL_SEARCHER,
    SERVICE_SERPAPI,
)
from scavenger.utils.exceptions import UnknownServiceError

logger = logging.getLogger(__name__)


class CredentialStore:
    """In-memory API key store keyed by service name."""

    def __init__(self, initial: Optional[Dict[str, Optional[str]]] = None):
        self._keys: Dict[str, str] = {}
        for service, value in (initial or {}).items():
            if value:
                self.store_credential(service, value)

    @classmethod
    def from_settings(cls, settings: Settings) -> "CredentialStore":
        """Seed a store from configured API keys."""
        return cls({
            SERVICE_HIBP: settings.hibp_api_key,
            SERVICE_EMAILREP: settings.emailrep_api_key,
            SERVICE_SHERLOCK: settings.sherlock_api_key,
            SERVICE_SOCIAL_SEARCHER: settings.social_searcher_api_key,
            SERVICE_SERPAPI: settings.serpapi_api_key,
        })

    def _check_service(self, service: str) -> None:
        if service not in SERVICE_METADATA:
            raise UnknownServiceError(f"Unknown service: {service}")

    def get_credential(self, service: str) -> Optional[str]:
        self._check_service(service)
        return self._keys.get(service)

    def has_credential(self, service: str) -> bool:
        return bool(self.get_credential(service))

    def store_credential(self, service: str, value: str) -> None:
        self._check_service(service)
        if not value or not value.strip():
            raise ValueError("Credential value must not be empty")
        self._keys[service] = value.strip()
        logger.info(f"Stored credential for {service}")

    def delete_credential(self, service: str) -> bool:
        self._check_service(service)
        removed = self._keys.pop(service, None) is not None
        if removed:
            logger.info(f"Deleted credential for {service}")
        return removed

    def list_credentials(self) -> List[str]:
        """Services that currently have a credential."""
        return [service for service in SERVICE_METADATA if service in self._keys]

    def describe(self) -> List[Dict[str, Any]]:
        """Service metadata with configured flags, never the values."""
        return [
            {
                "service": service,
                "configured": service in self._keys,
                **meta,
            }
            for service, meta in SERVICE_METADATA.items()
        ]
