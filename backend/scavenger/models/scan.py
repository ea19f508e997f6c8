"""
Data Risk Scavenger Scan Data Models

Pydantic models for scan input, per-email pass results and the
aggregated scan.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List, Dict
from enum import Enum

from .sources import (
    BreachRecord,
    EmailReputation,
    UsernamePresence,
    SocialSearchResult,
    WebSearchResult,
)


class RiskLevel(str, Enum):
    """Coarse risk classification."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


# =============================================================================
# Input
# =============================================================================

class UserInput(BaseModel):
    """Identity fields submitted for a scan."""
    name: str = Field(..., description="Full name")
    primary_email: str = Field(..., description="Primary email address")
    additional_emails: List[str] = Field(default_factory=list, description="Extra addresses, scanned in order")
    location: Optional[str] = Field(None, description="Location used to narrow web search")
    password: Optional[str] = Field(None, description="Password to grade; never stored")
    username: Optional[str] = Field(None, description="Username for presence lookup")


# =============================================================================
# Per-email pass
# =============================================================================

class PerEmailScanResult(BaseModel):
    """Raw adapter outputs for one email."""
    model_config = ConfigDict(frozen=True)

    email: str
    breaches: List[BreachRecord] = Field(default_factory=list)
    reputation: Optional[EmailReputation] = None
    presence: Optional[UsernamePresence] = None
    social: Optional[SocialSearchResult] = None
    web_results: List[WebSearchResult] = Field(default_factory=list)
    web_total_results: int = 0
    failed_sources: List[str] = Field(default_factory=list, description="Adapters that errored or timed out")


# =============================================================================
# Digital footprint
# =============================================================================

class SocialProfile(BaseModel):
    """A profile on a social network."""
    model_config = ConfigDict(frozen=True)

    network: str
    username: Optional[str] = None
    url: Optional[str] = None


class WebPresenceEntry(BaseModel):
    """A web page that mentions the subject."""
    model_config = ConfigDict(frozen=True)

    title: str
    url: str
    snippet: Optional[str] = None
    displayed_link: Optional[str] = None


class ProfessionalInfo(BaseModel):
    """Employer and role inferred from search results."""
    model_config = ConfigDict(frozen=True)

    company: str
    title: Optional[str] = None
    period: Optional[str] = None


class EmailUsage(BaseModel):
    """Services the address is known to be registered with."""
    model_config = ConfigDict(frozen=True)

    services: List[str] = Field(default_factory=list)


class DigitalFootprint(BaseModel):
    """Derived summary of the subject's online presence."""
    model_config = ConfigDict(frozen=True)

    social_profiles: List[SocialProfile] = Field(default_factory=list)
    web_presence: List[WebPresenceEntry] = Field(default_factory=list)
    professional_info: List[ProfessionalInfo] = Field(default_factory=list)
    locations: List[str] = Field(default_factory=list)
    email_usage: Optional[EmailUsage] = None
    interests: List[str] = Field(default_factory=list)


# =============================================================================
# Statistics
# =============================================================================

class TimelinePoint(BaseModel):
    """Breach count for one year-month bucket."""
    model_config = ConfigDict(frozen=True)

    date: str
    count: int


class DataTypeRisk(BaseModel):
    """Risk score for one exposed data type."""
    model_config = ConfigDict(frozen=True)

    type: str
    risk_score: int


class ScanStatistics(BaseModel):
    """Display statistics for charts."""
    model_config = ConfigDict(frozen=True)

    breach_count: int = 0
    data_exposure_by_category: Dict[str, int] = Field(default_factory=dict)
    breach_timeline: List[TimelinePoint] = Field(default_factory=list)
    risk_by_data_type: List[DataTypeRisk] = Field(default_factory=list)
    digital_presence_score: int = 0
    web_presence_score: int = 0
    web_results_count: int = 0
    total_web_results: int = 0


# =============================================================================
# Aggregate
# =============================================================================

class AggregatedScan(BaseModel):
    """Merged result of one or more email passes."""
    model_config = ConfigDict(frozen=True)

    breaches: List[BreachRecord] = Field(default_factory=list)
    total_risk_score: int = Field(0, ge=0, le=100)
    risk_level: RiskLevel = RiskLevel.LOW
    exposed_data_types: List[str] = Field(default_factory=list)
    recommended_actions: List[str] = Field(default_factory=list)
    digital_footprint: DigitalFootprint = Field(default_factory=DigitalFootprint)
    web_results: List[WebSearchResult] = Field(default_factory=list)
    web_total_results: int = 0
    stats: ScanStatistics = Field(default_factory=ScanStatistics)
    scanned_emails: List[str] = Field(default_factory=list)
    skipped_emails: List[str] = Field(default_factory=list)

    @property
    def passes_merged(self) -> int:
        return len(self.scanned_emails)


# =============================================================================
# Progress events
# =============================================================================

class ScanStage(str, Enum):
    """Coordinator progress stages."""
    STARTED = "started"
    PASS_STARTED = "pass_started"
    PASS_COMPLETED = "pass_completed"
    PASS_FAILED = "pass_failed"
    COMPLETED = "completed"


class ScanProgress(BaseModel):
    """Diagnostic event emitted while a scan runs."""
    stage: ScanStage
    total: int
    index: Optional[int] = None
    email: Optional[str] = None
    breach_count: Optional[int] = None
    web_result_count: Optional[int] = None
    message: Optional[str] = None
