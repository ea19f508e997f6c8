"""
Data Risk Scavenger Test Configuration

Pytest fixtures and configuration.
"""

import json
import asyncio
from typing import Any, Callable, Dict, List, Optional, Union

import pytest

from scavenger.config import Settings
from scavenger.services.sources import CredentialStore, HTTPResponse
from scavenger.services.scan import ScanCoordinator


Matcher = Union[str, Callable[[str, Dict[str, Any]], bool]]


class FakeHTTPClient:
    """
    In-memory HTTPClient.

    Routes are checked in the order they were added; a route matches on a
    URL substring or a callable taking (url, params). Unmatched requests
    get a 404.
    """

    def __init__(self):
        self.routes: List[Dict[str, Any]] = []
        self.calls: List[Dict[str, Any]] = []

    def add(
        self,
        match: Matcher,
        body: Any = None,
        status: int = 200,
        text: Optional[str] = None,
        error: Optional[Exception] = None,
        delay: float = 0.0,
    ) -> "FakeHTTPClient":
        self.routes.append({
            "match": match,
            "body": body,
            "status": status,
            "text": text,
            "error": error,
            "delay": delay,
        })
        return self

    def calls_to(self, fragment: str) -> List[Dict[str, Any]]:
        return [call for call in self.calls if fragment in call["url"]]

    async def request(
        self,
        url: str,
        method: str = "GET",
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        json_body: Optional[Any] = None,
        timeout: Optional[float] = None,
    ) -> HTTPResponse:
        params = params or {}
        self.calls.append({
            "url": url,
            "method": method,
            "params": params,
            "headers": headers or {},
            "json": json_body,
        })

        for route in self.routes:
            match = route["match"]
            matched = match(url, params) if callable(match) else match in url
            if not matched:
                continue
            if route["delay"]:
                await asyncio.sleep(route["delay"])
            if route["error"] is not None:
                raise route["error"]
            if route["text"] is not None:
                text = route["text"]
            elif route["body"] is not None:
                text = json.dumps(route["body"])
            else:
                text = ""
            return HTTPResponse(status=route["status"], text=text)

        return HTTPResponse(status=404, text="")


ALL_KEYS = {
    "hibp": "hibp-test-key",
    "emailrep": "emailrep-test-key",
    "sherlock": "sherlock-test-token",
    "social_searcher": "social-test-key",
    "serpapi": "serp-test-key",
}


def make_settings(**overrides) -> Settings:
    """Settings isolated from the environment and any .env file."""
    values = {
        "sherlock_api_url": "https://sherlock.test",
        "adapter_timeout_seconds": 2,
        "pass_timeout_seconds": 5,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def fake_http() -> FakeHTTPClient:
    return FakeHTTPClient()


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def settings_factory() -> Callable[..., Settings]:
    return make_settings


@pytest.fixture
def credentials() -> CredentialStore:
    return CredentialStore(dict(ALL_KEYS))


@pytest.fixture
def empty_credentials() -> CredentialStore:
    return CredentialStore()


@pytest.fixture
def coordinator(credentials, fake_http, settings) -> ScanCoordinator:
    return ScanCoordinator(credentials=credentials, http_client=fake_http, settings=settings)


def hibp_breach(
    name: str,
    data_classes: Optional[List[str]] = None,
    breach_date: str = "2020-01-01",
    domain: Optional[str] = None,
    verified: bool = True,
    spam_list: bool = False,
) -> Dict[str, Any]:
    """A breach payload in HIBP wire format."""
    return {
        "Name": name,
        "Title": name,
        "Domain": domain if domain is not None else f"{name.lower()}.com",
        "BreachDate": breach_date,
        "AddedDate": f"{breach_date}T00:00:00Z",
        "PwnCount": 1000,
        "Description": f"{name} was breached.",
        "DataClasses": data_classes or ["Email addresses"],
        "IsVerified": verified,
        "IsFabricated": False,
        "IsSensitive": False,
        "IsSpamList": spam_list,
        "IsMalware": False,
        "LogoPath": "https://example.test/logo.png",
    }


@pytest.fixture
def make_hibp_breach() -> Callable[..., Dict[str, Any]]:
    return hibp_breach
