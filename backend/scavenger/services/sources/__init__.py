"""
Data Risk Scavenger Source Adapters

Boundary wrappers around the external lookup services.
"""

from .http import HTTPClient, HTTPResponse, AiohttpClient
from .credentials import CredentialStore
from .base import BaseSourceAdapter, APIStatus, APIStatusInfo
from .hibp import HIBPAdapter
from .emailrep import EmailRepAdapter
from .sherlock import SherlockAdapter
from .social_searcher import SocialSearcherAdapter, build_query
from .serpapi import SerpAPIAdapter

__all__ = [
    # Transport
    'HTTPClient',
    'HTTPResponse',
    'AiohttpClient',

    # Credentials
    'CredentialStore',

    # Base
    'BaseSourceAdapter',
    'APIStatus',
    'APIStatusInfo',

    # Adapters
    'HIBPAdapter',
    'EmailRepAdapter',
    'SherlockAdapter',
    'SocialSearcherAdapter',
    'build_query',
    'SerpAPIAdapter',
]
