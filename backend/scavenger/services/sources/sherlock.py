"""
Data Risk Scavenger Sherlock Integration

Username presence search through a hosted Sherlock runner.
"""

import logging
from typing import Optional

from scavenger.utils.constants import (
    SERVICE_SHERLOCK,
    SHERLOCK_RUN_TIMEOUT,
    SHERLOCK_MAX_SITES,
    API_TIMEOUT_DEFAULT,
)
from scavenger.utils.exceptions import SourceError
from scavenger.models.sources import UsernamePresence
from .base import BaseSourceAdapter
from .credentials import CredentialStore
from .http import HTTPClient

logger = logging.getLogger(__name__)


class SherlockAdapter(BaseSourceAdapter):
    """
    Sherlock username search.

    Sherlock itself is a command line tool, so it is reached through a
    runner service exposing POST /search. Both the runner URL and its
    bearer token must be configured.
    """

    provider_name = "sherlock"
    service = SERVICE_SHERLOCK
    requires_api_key = True

    def __init__(
        self,
        credentials: CredentialStore,
        http_client: Optional[HTTPClient] = None,
        timeout: float = API_TIMEOUT_DEFAULT,
        base_url: Optional[str] = None,
    ):
        super().__init__(credentials, http_client, timeout)
        self.base_url = base_url.rstrip("/") if base_url else None

    @property
    def is_configured(self) -> bool:
        return bool(self.base_url) and super().is_configured

    async def fetch_presence(self, username: str) -> Optional[UsernamePresence]:
        """
        Find sites where a username is registered.

        Returns:
            UsernamePresence, or None when unavailable for any reason
        """
        if not username or not self._ready("username search"):
            return None

        payload = {
            "username": username,
            "timeout": SHERLOCK_RUN_TIMEOUT,
            "max_sites": SHERLOCK_MAX_SITES,
            "print_found_only": True,
        }

        try:
            response = await self._send(
                f"{self.base_url}/search",
                method="POST",
                headers={"Authorization": f"Bearer {self.api_key}"},
                json_body=payload,
            )
            if not response.ok:
                logger.warning(f"Sherlock returned HTTP {response.status} for {username}")
                return None
            data = self._json(response)
            if isinstance(data, dict) and "username" not in data:
                data = {**data, "username": username}
            presence = self._validate(UsernamePresence, data)
        except SourceError as e:
            logger.warning(f"Sherlock search failed for {username}: {e.message}")
            return None

        logger.info(f"Sherlock: {username} found on {len(presence.found)} sites")
        return presence
