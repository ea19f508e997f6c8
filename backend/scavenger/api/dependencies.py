"""
Data Risk Scavenger API Dependencies

FastAPI dependency injection for settings, the credential store and the
scan coordinator.
"""

import logging

from scavenger.config import Settings, get_settings as _get_settings
from scavenger.services.scan import ScanCoordinator, get_scan_coordinator
from scavenger.services.sources import CredentialStore

logger = logging.getLogger(__name__)


def get_settings() -> Settings:
    """Get application settings."""
    return _get_settings()


def get_coordinator() -> ScanCoordinator:
    """Get the shared scan coordinator."""
    return get_scan_coordinator()


def get_credential_store() -> CredentialStore:
    """Get the credential store the coordinator's adapters read from."""
    return get_scan_coordinator().credentials
