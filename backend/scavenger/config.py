"""
Data Risk Scavenger Application Configuration

Configuration management using pydantic-settings.
All configuration values are loaded from environment variables or a .env file.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from typing import List, Optional
from functools import lru_cache

from scavenger.utils.constants import (
    APP_NAME,
    APP_VERSION,
    API_TIMEOUT_DEFAULT,
    PASS_TIMEOUT_DEFAULT,
    MAX_WEB_RESULTS,
    SOCIAL_SEARCH_LIMIT,
)


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Values can be set via:
    1. Environment variables
    2. .env file (local development)
    3. Default values defined here
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # =========================================================================
    # Application
    # =========================================================================
    app_name: str = APP_NAME
    app_version: str = APP_VERSION
    debug: bool = False

    # =========================================================================
    # Server
    # =========================================================================
    host: str = "0.0.0.0"
    port: int = 8000
    cors_origins: List[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:5173",
    ]

    # =========================================================================
    # Lookup Service Credentials
    # =========================================================================
    hibp_api_key: Optional[str] = Field(default=None, description="Have I Been Pwned API key")
    emailrep_api_key: Optional[str] = Field(default=None, description="EmailRep.io API key")
    serpapi_api_key: Optional[str] = Field(default=None, description="SerpAPI key")
    social_searcher_api_key: Optional[str] = Field(default=None, description="Social Searcher API key")
    sherlock_api_key: Optional[str] = Field(default=None, description="Bearer token for the Sherlock runner")
    sherlock_api_url: Optional[str] = Field(default=None, description="Base URL of the Sherlock runner")

    # =========================================================================
    # Scan Behaviour
    # =========================================================================
    adapter_timeout_seconds: float = Field(default=API_TIMEOUT_DEFAULT, description="Per-adapter timeout")
    pass_timeout_seconds: float = Field(default=PASS_TIMEOUT_DEFAULT, description="Timeout for one email pass")
    max_web_results: int = Field(default=MAX_WEB_RESULTS, description="Web results kept per search")
    social_search_limit: int = Field(default=SOCIAL_SEARCH_LIMIT, description="Posts requested per social search")


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Settings are cached to avoid re-reading environment on every access.
    Use get_settings.cache_clear() to reload settings.
    """
    return Settings()
