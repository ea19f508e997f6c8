"""
Data Risk Scavenger HTTP Client

Thin request abstraction injected into every source adapter, so that
interception and mocking happen by substitution.
"""

import json
import logging
import asyncio
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Protocol

import aiohttp

from scavenger.utils.constants import API_TIMEOUT_DEFAULT, USER_AGENT
from scavenger.utils.exceptions import APIConnectionError, APITimeoutError

logger = logging.getLogger(__name__)


@dataclass
class HTTPResponse:
    """Status and body of a completed HTTP request."""
    status: int
    text: str = ""
    headers: Dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def json(self) -> Any:
        """Decode the body as JSON. Raises ValueError on bad JSON."""
        return json.loads(self.text) if self.text else None


class HTTPClient(Protocol):
    """Anything that can perform an HTTP request for an adapter."""

    async def request(
        self,
        url: str,
        method: str = "GET",
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        json_body: Optional[Any] = None,
        timeout: Optional[float] = None,
    ) -> HTTPResponse:
        ...


class AiohttpClient:
    """
    HTTPClient backed by aiohttp.

    A session is opened per request. Transport failures are raised as
    APIConnectionError / APITimeoutError; HTTP error statuses are returned
    as responses for the adapter to interpret. Undecodable bytes are
    replaced, so a bad body fails JSON parsing or validation in the adapter.
    """

    def __init__(self, default_timeout: float = API_TIMEOUT_DEFAULT):
        self.default_timeout = default_timeout

    async def request(
        self,
        url: str,
        method: str = "GET",
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        json_body: Optional[Any] = None,
        timeout: Optional[float] = None,
    ) -> HTTPResponse:
        request_headers = {"User-Agent": USER_AGENT}
        if headers:
            request_headers.update(headers)

        client_timeout = aiohttp.ClientTimeout(total=timeout or self.default_timeout)

        try:
            async with aiohttp.ClientSession(timeout=client_timeout) as session:
                async with session.request(
                    method,
                    url,
                    params=params,
                    headers=request_headers,
                    json=json_body,
                ) as response:
                    body = await response.read()
                    return HTTPResponse(
                        status=response.status,
                        text=decode_body(body, response.charset),
                        headers=dict(response.headers),
                    )
        except asyncio.TimeoutError as e:
            raise APITimeoutError(f"Request to {_host(url)} timed out") from e
        except aiohttp.ClientError as e:
            raise APIConnectionError(f"Connection to {_host(url)} failed: {e}") from e


def decode_body(body: bytes, charset: Optional[str] = None) -> str:
    """Decode a response body with its declared charset, replacing bad bytes."""
    try:
        return body.decode(charset or "utf-8", errors="replace")
    except LookupError:
        return body.decode("utf-8", errors="replace")


def _host(url: str) -> str:
    """Host part of a URL, for log and error messages without query secrets."""
    from urllib.parse import urlparse
    return urlparse(url).netloc or url
