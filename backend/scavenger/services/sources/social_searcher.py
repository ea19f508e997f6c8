"""
Data Risk Scavenger Social Searcher Integration

Social media mention search with sentiment.
"""

import logging
from typing import Optional, List

from scavenger.utils.constants import (
    SOCIAL_SEARCHER_API_URL,
    SOCIAL_SEARCH_NETWORKS,
    SOCIAL_SEARCH_LIMIT,
    SERVICE_SOCIAL_SEARCHER,
    API_TIMEOUT_DEFAULT,
)
from scavenger.utils.exceptions import SourceError
from scavenger.utils.helpers import email_local_part
from scavenger.models.sources import SocialSearchResult
from .base import BaseSourceAdapter
from .credentials import CredentialStore
from .http import HTTPClient

logger = logging.getLogger(__name__)


def build_query(email: str, name: Optional[str] = None) -> str:
    """
    Build the mention search query for a subject.

    Terms: the quoted full name, first and last name for multi-word
    names, and the email local part unless it is all digits.
    """
    terms: List[str] = []

    full_name = (name or "").strip()
    if full_name:
        terms.append(f'"{full_name}"')
        parts = full_name.split()
        if len(parts) > 1:
            terms.append(parts[0])
            terms.append(parts[-1])

    local = email_local_part(email or "")
    if local and not local.isdigit():
        terms.append(local)

    return " OR ".join(terms)


class SocialSearcherAdapter(BaseSourceAdapter):
    """Social Searcher v2 mention search."""

    provider_name = "social_searcher"
    service = SERVICE_SOCIAL_SEARCHER
    requires_api_key = True

    def __init__(
        self,
        credentials: CredentialStore,
        http_client: Optional[HTTPClient] = None,
        timeout: float = API_TIMEOUT_DEFAULT,
        limit: int = SOCIAL_SEARCH_LIMIT,
    ):
        super().__init__(credentials, http_client, timeout)
        self.limit = limit

    async def fetch_mentions(self, email: str, name: Optional[str] = None) -> Optional[SocialSearchResult]:
        """
        Search social networks for mentions of a person.

        Returns:
            SocialSearchResult, or None when unavailable for any reason
        """
        query = build_query(email, name)
        if not query or not self._ready("mention search"):
            return None

        params = {
            "q": query,
            "key": self.api_key,
            "network": SOCIAL_SEARCH_NETWORKS,
            "limit": self.limit,
        }

        try:
            response = await self._send(f"{SOCIAL_SEARCHER_API_URL}/search", params=params)
            if not response.ok:
                logger.warning(f"Social Searcher returned HTTP {response.status}")
                return None
            data = self._json(response)
            if isinstance(data, dict):
                data = {**data, "query": data.get("query") or query}
            result = self._validate(SocialSearchResult, data)
        except SourceError as e:
            logger.warning(f"Social Searcher failed for {email}: {e.message}")
            return None

        logger.info(
            f"Social Searcher: {len(result.posts)} posts for {email}, "
            f"{result.negative_count} negative"
        )
        return result
