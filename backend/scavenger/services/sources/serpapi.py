"""
Data Risk Scavenger SerpAPI Integration

Google web search for a person's name and email.
"""

import logging
from typing import Any, List, Optional

from scavenger.utils.constants import (
    SERPAPI_API_URL,
    SERVICE_SERPAPI,
    MAX_WEB_RESULTS,
    API_TIMEOUT_DEFAULT,
)
from scavenger.utils.exceptions import MalformedResponseError, SourceError
from scavenger.models.sources import WebSearchResponse, WebSearchResult
from .base import BaseSourceAdapter
from .credentials import CredentialStore
from .http import HTTPClient

logger = logging.getLogger(__name__)


class SerpAPIAdapter(BaseSourceAdapter):
    """
    SerpAPI Google search.

    Organic results are tagged with the email that produced them, ordered
    by position and capped before they reach the merge step.
    """

    provider_name = "serpapi"
    service = SERVICE_SERPAPI
    requires_api_key = True

    def __init__(
        self,
        credentials: CredentialStore,
        http_client: Optional[HTTPClient] = None,
        timeout: float = API_TIMEOUT_DEFAULT,
        max_results: int = MAX_WEB_RESULTS,
    ):
        super().__init__(credentials, http_client, timeout)
        self.max_results = max_results

    async def search(
        self,
        name: str,
        email: str,
        location: Optional[str] = None,
    ) -> Optional[WebSearchResponse]:
        """
        Search the web for a name and email together.

        Returns:
            WebSearchResponse, or None when unavailable for any reason
        """
        query = " ".join(part for part in [(name or "").strip(), (email or "").strip()] if part)
        if not query or not self._ready("web search"):
            return None

        params = {
            "q": query,
            "api_key": self.api_key,
            "engine": "google",
        }
        if location:
            params["location"] = location

        try:
            response = await self._send(SERPAPI_API_URL, params=params)
            if not response.ok:
                logger.warning(f"SerpAPI returned HTTP {response.status}")
                return None
            data = self._json(response)
            if not isinstance(data, dict):
                data = {}
            if data.get("error"):
                logger.warning(f"SerpAPI error: {data['error']}")
                return None
            organic = self._organic_results(data.get("organic_results"), email)
            organic.sort(key=lambda r: r.position)
            total = _engine_total(data.get("search_information"))
        except SourceError as e:
            logger.warning(f"SerpAPI search failed for {email}: {e.message}")
            return None

        total = total or len(organic)
        logger.info(f"SerpAPI: {len(organic)} organic results for {email} (engine total {total})")
        return WebSearchResponse(total_results=total, results=organic[:self.max_results])

    def _organic_results(self, items: Any, email: str) -> List[WebSearchResult]:
        """
        Validate organic results and tag them with the searched email.

        Entries without a position take their place in the list. Entries
        that are not objects are skipped.

        Raises:
            MalformedResponseError: organic_results is not a list, or an
                entry does not fit WebSearchResult
        """
        if items is None:
            return []
        if not isinstance(items, list):
            self._record_failure("Unexpected payload shape: organic_results")
            raise MalformedResponseError("SerpAPI organic_results is not a list")

        results: List[WebSearchResult] = []
        for index, item in enumerate(items, start=1):
            if not isinstance(item, dict):
                logger.debug(f"SerpAPI: skipping non-object organic result at {index}")
                continue
            entry = {**item, "source_email": email}
            if entry.get("position") is None:
                entry["position"] = index
            results.append(self._validate(WebSearchResult, entry))
        return results


def _engine_total(info: Any) -> Optional[int]:
    """search_information.total_results when it is a usable count."""
    if not isinstance(info, dict):
        return None
    total = info.get("total_results")
    if isinstance(total, bool) or not isinstance(total, int):
        return None
    return total
