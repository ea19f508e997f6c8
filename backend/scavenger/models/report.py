"""
Data Risk Scavenger Report Data Models

Pydantic models for the final vulnerability report.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List

from .sources import BreachRecord, WebSearchResult
from .scan import RiskLevel, DigitalFootprint, ScanStatistics


class PasswordSecurity(BaseModel):
    """Heuristic password grading."""
    model_config = ConfigDict(frozen=True)

    strength: int = Field(..., ge=0, le=5, description="0-5 from length and character classes")
    is_common: bool = Field(False, description="Found on the common-password deny-list")
    compromised: bool = Field(False, description="A breach exposed passwords; not a per-password check")
    suggestions: List[str] = Field(default_factory=list)


class DarkWebSource(BaseModel):
    """Breaches grouped by domain."""
    model_config = ConfigDict(frozen=True)

    name: str
    count: int
    last_seen: Optional[str] = None


class DarkWebFindings(BaseModel):
    """Verified, non-spam breach mentions."""
    model_config = ConfigDict(frozen=True)

    mentions: int = 0
    sources: List[DarkWebSource] = Field(default_factory=list)
    exposed_info: List[str] = Field(default_factory=list)


class WebPresenceSummary(BaseModel):
    """Organic search results behind the report."""
    model_config = ConfigDict(frozen=True)

    total_results: int = 0
    organic_results: List[WebSearchResult] = Field(default_factory=list)


class VulnerabilityReport(BaseModel):
    """Final exposure report. Built once per scan, never persisted."""
    model_config = ConfigDict(frozen=True)

    name: str
    email: str
    additional_emails: List[str] = Field(default_factory=list)
    location: Optional[str] = None
    scan_date: str = Field(..., description="ISO-8601 timestamp")

    breach_count: int = 0
    breaches: List[BreachRecord] = Field(default_factory=list)
    risk_level: RiskLevel = RiskLevel.LOW
    total_risk_score: int = 0
    exposed_data_types: List[str] = Field(default_factory=list)
    recommended_actions: List[str] = Field(default_factory=list)
    stats: ScanStatistics = Field(default_factory=ScanStatistics)
    digital_footprint: DigitalFootprint = Field(default_factory=DigitalFootprint)
    web_presence: Optional[WebPresenceSummary] = None
    dark_web_findings: Optional[DarkWebFindings] = None
    password_security: Optional[PasswordSecurity] = None
