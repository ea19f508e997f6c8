"""
Data Risk Scavenger EmailRep.io Integration

Provides email reputation lookups.
"""

import logging
from typing import Optional
from urllib.parse import quote

from scavenger.utils.constants import EMAILREP_API_URL, SERVICE_EMAILREP
from scavenger.utils.exceptions import SourceError
from scavenger.models.sources import EmailReputation
from .base import BaseSourceAdapter

logger = logging.getLogger(__name__)


class EmailRepAdapter(BaseSourceAdapter):
    """
    EmailRep.io reputation lookup.

    Reports whether an address looks suspicious, whether its credentials
    have leaked, and whether it appears in a known breach.
    """

    provider_name = "emailrep"
    service = SERVICE_EMAILREP
    requires_api_key = True

    async def fetch_reputation(self, email: str) -> Optional[EmailReputation]:
        """
        Get reputation for an email address.

        Returns:
            EmailReputation, or None when unavailable for any reason
        """
        if not email or not self._ready("reputation lookup"):
            return None

        try:
            response = await self._send(
                f"{EMAILREP_API_URL}/{quote(email)}",
                headers={"Key": self.api_key},
            )
            if not response.ok:
                logger.warning(f"EmailRep returned HTTP {response.status} for {email}")
                return None
            reputation = self._validate(EmailReputation, self._json(response))
        except SourceError as e:
            logger.warning(f"EmailRep lookup failed for {email}: {e.message}")
            return None

        logger.info(
            f"EmailRep: {email} suspicious={reputation.suspicious} "
            f"credentials_leaked={reputation.details.credentials_leaked}"
        )
        return reputation
