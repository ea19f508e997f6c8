"""
Data Risk Scavenger Base Source Adapter

Abstract base class for all external lookup adapters.
Includes credential checks, per-call timeouts, rate limit detection
and API status tracking.
"""

import logging
import asyncio
from abc import ABC
from typing import Optional, Any, Dict, Type, TypeVar
from datetime import datetime, timedelta
from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ValidationError as PydanticValidationError

from scavenger.utils.constants import API_TIMEOUT_DEFAULT
from scavenger.utils.exceptions import (
    SourceError,
    APITimeoutError,
    MalformedResponseError,
)
from scavenger.utils.helpers import utc_now
from .credentials import CredentialStore
from .http import HTTPClient, HTTPResponse, AiohttpClient

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class APIStatus(str, Enum):
    """API availability status."""
    AVAILABLE = "available"
    RATE_LIMITED = "rate_limited"
    ERROR = "error"
    UNCONFIGURED = "unconfigured"
    UNKNOWN = "unknown"


@dataclass
class APIStatusInfo:
    """Tracks API status and usage."""
    provider_name: str
    status: APIStatus = APIStatus.UNKNOWN
    last_success: Optional[datetime] = None
    last_error: Optional[datetime] = None
    last_error_message: Optional[str] = None
    requests_made: int = 0
    requests_failed: int = 0
    rate_limit_reset: Optional[datetime] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "provider": self.provider_name,
            "status": self.status.value,
            "last_success": self.last_success.isoformat() if self.last_success else None,
            "last_error": self.last_error.isoformat() if self.last_error else None,
            "last_error_message": self.last_error_message,
            "requests_made": self.requests_made,
            "requests_failed": self.requests_failed,
            "rate_limit_reset": self.rate_limit_reset.isoformat() if self.rate_limit_reset else None,
        }


class BaseSourceAdapter(ABC):
    """
    Abstract base class for lookup adapters.

    Adapters never raise past their public fetch methods: an unconfigured
    service, a failed request or a malformed body all come back as the
    adapter's empty value. The breach adapter is the one exception and
    raises BreachLookupError on error statuses other than 404.
    """

    # Provider identification
    provider_name: str = "base"
    service: str = ""
    requires_api_key: bool = True

    # Rate limit detection patterns
    RATE_LIMIT_STATUS_CODES = {429}
    RATE_LIMIT_MESSAGES = ["rate limit", "too many requests", "quota exceeded", "limit exceeded"]
    RATE_LIMIT_COOLDOWN_SECONDS = 60

    def __init__(
        self,
        credentials: CredentialStore,
        http_client: Optional[HTTPClient] = None,
        timeout: float = API_TIMEOUT_DEFAULT,
    ):
        self.credentials = credentials
        self.http = http_client or AiohttpClient(default_timeout=timeout)
        self.timeout = timeout
        self._status = APIStatusInfo(provider_name=self.provider_name)

    @property
    def api_key(self) -> Optional[str]:
        return self.credentials.get_credential(self.service)

    @property
    def is_configured(self) -> bool:
        """Check if the adapter has what it needs to call its service."""
        if not self.requires_api_key:
            return True
        return self.credentials.has_credential(self.service)

    @property
    def status(self) -> APIStatusInfo:
        if not self.is_configured:
            self._status.status = APIStatus.UNCONFIGURED
        elif self._status.status == APIStatus.UNCONFIGURED:
            self._status.status = APIStatus.UNKNOWN
        return self._status

    def _is_rate_limited(self) -> bool:
        """Check if we're inside a rate limit cooldown."""
        if self._status.status != APIStatus.RATE_LIMITED:
            return False
        if self._status.rate_limit_reset and utc_now() > self._status.rate_limit_reset:
            self._status.status = APIStatus.AVAILABLE
            return False
        return True

    def _detect_rate_limit(self, status_code: int, response_text: str) -> bool:
        """Detect if response indicates rate limiting."""
        if status_code in self.RATE_LIMIT_STATUS_CODES:
            return True
        if 200 <= status_code < 300:
            return False
        response_lower = (response_text or "").lower()
        return any(msg in response_lower for msg in self.RATE_LIMIT_MESSAGES)

    def _record_success(self) -> None:
        self._status.last_success = utc_now()
        self._status.status = APIStatus.AVAILABLE

    def _record_failure(self, error_msg: str, is_rate_limit: bool = False) -> None:
        self._status.last_error = utc_now()
        self._status.last_error_message = error_msg
        self._status.requests_failed += 1

        if is_rate_limit:
            self._status.status = APIStatus.RATE_LIMITED
            self._status.rate_limit_reset = utc_now() + timedelta(seconds=self.RATE_LIMIT_COOLDOWN_SECONDS)
        else:
            self._status.status = APIStatus.ERROR

    def _ready(self, operation: str) -> bool:
        """Whether a call should be made at all. Absence is not an error."""
        if not self.is_configured:
            logger.info(f"{self.provider_name}: not configured, skipping {operation}")
            return False
        if self._is_rate_limited():
            logger.warning(
                f"{self.provider_name}: rate limited until {self._status.rate_limit_reset}, skipping {operation}"
            )
            return False
        return True

    async def _send(
        self,
        url: str,
        method: str = "GET",
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        json_body: Optional[Any] = None,
    ) -> HTTPResponse:
        """
        Perform one request with the adapter timeout applied.

        Raises:
            APITimeoutError: the call exceeded the adapter timeout
            SourceError: the transport failed
        """
        self._status.requests_made += 1
        try:
            response = await asyncio.wait_for(
                self.http.request(
                    url,
                    method=method,
                    params=params,
                    headers=headers,
                    json_body=json_body,
                    timeout=self.timeout,
                ),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError as e:
            self._record_failure("Request timed out")
            raise APITimeoutError(f"{self.provider_name} timed out after {self.timeout}s") from e
        except SourceError as e:
            self._record_failure(str(e))
            raise

        if self._detect_rate_limit(response.status, response.text):
            self._record_failure(f"HTTP {response.status}", is_rate_limit=True)
        elif response.ok:
            self._record_success()
        elif response.status != 404:
            self._record_failure(f"HTTP {response.status}")
        return response

    def _json(self, response: HTTPResponse) -> Any:
        """Decode a response body or raise MalformedResponseError."""
        try:
            return response.json()
        except ValueError as e:
            self._record_failure("Malformed JSON body")
            raise MalformedResponseError(f"{self.provider_name} returned malformed JSON") from e

    def _validate(self, model: Type[ModelT], data: Any) -> ModelT:
        """Validate a payload against a model or raise MalformedResponseError."""
        try:
            return model.model_validate(data)
        except PydanticValidationError as e:
            self._record_failure(f"Unexpected payload shape: {e.error_count()} errors")
            raise MalformedResponseError(
                f"{self.provider_name} returned an unexpected payload: {e.error_count()} validation errors"
            ) from e
