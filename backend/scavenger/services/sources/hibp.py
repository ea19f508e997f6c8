"""
Data Risk Scavenger Have I Been Pwned Integration

Provides breach lookups for email addresses via the HIBP v3 API.
"""

import logging
from typing import List
from urllib.parse import quote

from scavenger.utils.constants import HIBP_API_URL, SERVICE_HIBP
from scavenger.utils.exceptions import BreachLookupError, SourceError
from scavenger.models.sources import BreachRecord
from .base import BaseSourceAdapter

logger = logging.getLogger(__name__)


class HIBPAdapter(BaseSourceAdapter):
    """
    Have I Been Pwned breach lookup.

    Returns the full breach records for an account:
    - Breach name, title and domain
    - Breach date and exposed data classes
    - Verification, spam-list and sensitivity flags

    Requires an API key (paid subscription).
    """

    provider_name = "hibp"
    service = SERVICE_HIBP
    requires_api_key = True

    async def fetch_breaches(self, email: str) -> List[BreachRecord]:
        """
        Get all breaches an email address appears in.

        Args:
            email: Email address to check

        Returns:
            Breach records; empty when not configured, not found or on
            transport/body failures

        Raises:
            BreachLookupError: HIBP answered with an error status other than 404
        """
        if not email or not self._ready("breach lookup"):
            return []

        url = f"{HIBP_API_URL}/breachedaccount/{quote(email)}"

        try:
            response = await self._send(
                url,
                params={"truncateResponse": "false"},
                headers={"hibp-api-key": self.api_key},
            )
        except SourceError as e:
            logger.warning(f"HIBP request failed for {email}: {e.message}")
            return []

        if response.status == 404:
            logger.debug(f"HIBP: no breaches for {email}")
            return []

        if not response.ok:
            logger.error(f"HIBP returned HTTP {response.status} for {email}")
            raise BreachLookupError(
                f"Breach lookup failed with HTTP {response.status}",
                status=response.status,
            )

        try:
            data = self._json(response)
            if not isinstance(data, list):
                data = [] if data is None else [data]
            breaches = [self._validate(BreachRecord, item) for item in data]
        except SourceError as e:
            logger.warning(f"HIBP response for {email} discarded: {e.message}")
            return []

        logger.info(f"HIBP: {len(breaches)} breaches for {email}")
        return breaches

