"""
Data Risk Scavenger Source Data Models

Pydantic models for the payloads returned by external lookup services.
Unknown fields are dropped at the adapter boundary; missing required
fields fail validation and the adapter treats the response as absent.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import Optional, List
from enum import Enum


class SourceModel(BaseModel):
    """Base for third-party payload models."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)


# =============================================================================
# Breaches (Have I Been Pwned)
# =============================================================================

class BreachRecord(SourceModel):
    """One historical breach entry. Unique by name."""
    name: str = Field(..., alias="Name", description="Breach identifier")
    title: str = Field("", alias="Title")
    domain: str = Field("", alias="Domain")
    breach_date: str = Field("", alias="BreachDate", description="YYYY-MM-DD")
    added_date: Optional[str] = Field(None, alias="AddedDate")
    pwn_count: int = Field(0, alias="PwnCount")
    description: str = Field("", alias="Description")
    data_classes: List[str] = Field(default_factory=list, alias="DataClasses")
    is_verified: bool = Field(False, alias="IsVerified")
    is_fabricated: bool = Field(False, alias="IsFabricated")
    is_sensitive: bool = Field(False, alias="IsSensitive")
    is_spam_list: bool = Field(False, alias="IsSpamList")
    is_malware: bool = Field(False, alias="IsMalware")


# =============================================================================
# Email reputation (EmailRep.io)
# =============================================================================

class EmailReputationDetails(SourceModel):
    """Reputation flags for an email address."""
    blacklisted: bool = False
    malicious_activity: bool = False
    credentials_leaked: bool = False
    credentials_leaked_recent: bool = False
    data_breach: bool = False
    first_seen: Optional[str] = None
    last_seen: Optional[str] = None
    domain_exists: bool = True
    domain_reputation: Optional[str] = None
    new_domain: bool = False
    spam: bool = False
    free_provider: bool = False
    disposable: bool = False
    deliverable: bool = False
    valid_mx: bool = False
    spoofable: bool = False
    profiles: List[str] = Field(default_factory=list)


class EmailReputation(SourceModel):
    """Email reputation verdict."""
    email: str
    reputation: Optional[str] = None
    suspicious: bool
    references: int = 0
    details: EmailReputationDetails = Field(default_factory=EmailReputationDetails)


# =============================================================================
# Username presence (Sherlock)
# =============================================================================

class UsernameProfile(SourceModel):
    """A site where the username exists."""
    site: str
    url: str


class UsernamePresence(SourceModel):
    """Sites where a username was found."""
    username: str
    found: List[UsernameProfile]
    not_found: List[str] = Field(default_factory=list, alias="notFound")


# =============================================================================
# Social mentions (Social Searcher)
# =============================================================================

class Sentiment(str, Enum):
    """Post sentiment."""
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


class SocialUser(SourceModel):
    """Author of a social post."""
    id: Optional[str] = None
    name: Optional[str] = None
    url: Optional[str] = None


class SocialMention(SourceModel):
    """One social media post mentioning the subject."""
    network: str
    posted_at: Optional[str] = Field(None, alias="posted")
    sentiment: Sentiment = Sentiment.NEUTRAL
    text: str = ""
    url: Optional[str] = None
    user: Optional[SocialUser] = None

    @field_validator("sentiment", mode="before")
    @classmethod
    def _coerce_sentiment(cls, value):
        if isinstance(value, str) and value.lower() in {s.value for s in Sentiment}:
            return value.lower()
        return Sentiment.NEUTRAL


class SentimentCounts(SourceModel):
    """Post counts by sentiment."""
    positive: int = 0
    negative: int = 0
    neutral: int = 0


class SocialSearchResult(SourceModel):
    """Social mention search result with sentiment totals."""
    query: str = ""
    posts: List[SocialMention] = Field(default_factory=list)
    sentiment: Optional[SentimentCounts] = None

    @model_validator(mode="after")
    def _fill_sentiment(self):
        if self.sentiment is None:
            counts = {s.value: 0 for s in Sentiment}
            for post in self.posts:
                counts[post.sentiment.value] += 1
            object.__setattr__(self, "sentiment", SentimentCounts(**counts))
        return self

    @property
    def negative_count(self) -> int:
        return self.sentiment.negative if self.sentiment else 0


# =============================================================================
# Web search (SerpAPI)
# =============================================================================

class WebSearchResult(SourceModel):
    """One organic search result. Unique by link."""
    position: int = 0
    title: str = ""
    link: str
    snippet: str = ""
    displayed_link: str = ""
    source_email: Optional[str] = Field(None, alias="sourceEmail")


class WebSearchResponse(SourceModel):
    """Organic results for one query plus the engine-reported total."""
    total_results: int = 0
    results: List[WebSearchResult] = Field(default_factory=list)
