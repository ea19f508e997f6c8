"""
Data Risk Scavenger Risk Scoring

Two independent weightings over one pass's adapter outputs:

- determine_risk_level: capped components normalized against the sum of
  the caps, thresholded into low / medium / high.
- calculate_risk_score: a finer 0-100 score shown to the user.

The two are deliberately not the same computation.
"""

import logging
from typing import List, Optional, Sequence

from scavenger.models.scan import RiskLevel
from scavenger.models.sources import (
    BreachRecord,
    EmailReputation,
    SocialSearchResult,
    WebSearchResult,
)
from scavenger.utils.constants import (
    SENSITIVE_DATA_TYPES,
    CRITICAL_DATA_TYPES,
    MEDIUM_RISK_DATA_TYPES,
    LOW_RISK_DATA_TYPES,
    SENSITIVE_WEB_KEYWORDS,
    SOCIAL_MEDIA_DOMAINS,
    RISK_LEVEL_BREACH_CAP,
    RISK_LEVEL_REPUTATION_CAP,
    RISK_LEVEL_SOCIAL_CAP,
    RISK_LEVEL_MAX_SCORE,
    RISK_LEVEL_HIGH_THRESHOLD,
    RISK_LEVEL_MEDIUM_THRESHOLD,
    RISK_LEVEL_RANK,
)
from scavenger.utils.helpers import clamp, round_half_up, extract_domain, domain_matches
from .exposure import breach_data_classes

logger = logging.getLogger(__name__)


# =============================================================================
# Risk level
# =============================================================================

def breach_level_component(breaches: Sequence[BreachRecord]) -> int:
    """Up to 30 for breach count, plus 20 if any sensitive category leaked."""
    if not breaches:
        return 0
    score = min(len(breaches) * 3, 30)
    exposed = breach_data_classes(breaches)
    if any(data_type in exposed for data_type in SENSITIVE_DATA_TYPES):
        score += 20
    return min(score, RISK_LEVEL_BREACH_CAP)


def reputation_level_component(reputation: Optional[EmailReputation]) -> int:
    if reputation is None:
        return 0
    score = 0
    if reputation.suspicious:
        score += 15
    if reputation.details.credentials_leaked:
        score += 10
    if reputation.details.data_breach:
        score += 5
    return min(score, RISK_LEVEL_REPUTATION_CAP)


def social_level_component(
    social: Optional[SocialSearchResult],
    web_results: Sequence[WebSearchResult] = (),
) -> int:
    """Mentions and web hits (capped at 10) plus negative sentiment (capped at 5)."""
    posts = len(social.posts) if social else 0
    negative = social.negative_count if social else 0
    score = min(posts + len(web_results) // 3, 10) + min(negative, 5)
    return min(score, RISK_LEVEL_SOCIAL_CAP)


def risk_level_percentage(
    breaches: Sequence[BreachRecord],
    reputation: Optional[EmailReputation] = None,
    social: Optional[SocialSearchResult] = None,
    web_results: Sequence[WebSearchResult] = (),
) -> float:
    """Sum of the level components as a percentage of their combined caps."""
    raw = (
        breach_level_component(breaches)
        + reputation_level_component(reputation)
        + social_level_component(social, web_results)
    )
    return raw / RISK_LEVEL_MAX_SCORE * 100


def determine_risk_level(
    breaches: Sequence[BreachRecord],
    reputation: Optional[EmailReputation] = None,
    social: Optional[SocialSearchResult] = None,
    web_results: Sequence[WebSearchResult] = (),
) -> RiskLevel:
    """
    Classify overall risk.

    Returns:
        HIGH at 60% or more of the maximum, MEDIUM at 30% or more, else LOW
    """
    percentage = risk_level_percentage(breaches, reputation, social, web_results)

    if percentage >= RISK_LEVEL_HIGH_THRESHOLD:
        return RiskLevel.HIGH
    if percentage >= RISK_LEVEL_MEDIUM_THRESHOLD:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


def risk_level_rank(level: Optional[RiskLevel]) -> int:
    """Ordering used when merging: high > medium > low > none."""
    if level is None:
        return RISK_LEVEL_RANK["none"]
    return RISK_LEVEL_RANK[RiskLevel(level).value]


# =============================================================================
# Risk score
# =============================================================================

def breach_score_component(breaches: Sequence[BreachRecord]) -> int:
    return min(len(breaches) * 5, 40)


def data_type_score_component(exposed_data_types: Sequence[str]) -> float:
    """Tiered severity: critical up to 15, medium up to 7, low up to 3."""
    critical = medium = low = 0
    for data_type in exposed_data_types:
        lowered = data_type.lower()
        if lowered in CRITICAL_DATA_TYPES:
            critical += 1
        elif lowered in MEDIUM_RISK_DATA_TYPES:
            medium += 1
        elif lowered in LOW_RISK_DATA_TYPES:
            low += 1

    return min(critical * 5, 15) + min(medium * 2, 7) + min(low * 0.5, 3)


def reputation_score_component(reputation: Optional[EmailReputation]) -> int:
    if reputation is None:
        return 0
    score = 0
    if reputation.suspicious:
        score += 10
    if reputation.details.credentials_leaked:
        score += 10
    return score


def social_score_component(social: Optional[SocialSearchResult]) -> int:
    if social is None:
        return 0
    return min(len(social.posts), 7) + min(social.negative_count, 8)


def count_sensitive_web_results(web_results: Sequence[WebSearchResult]) -> int:
    """Results whose title or snippet mentions a sensitive keyword."""
    count = 0
    for result in web_results:
        text = f"{result.title} {result.snippet}".lower()
        if any(keyword in text for keyword in SENSITIVE_WEB_KEYWORDS):
            count += 1
    return count


def count_social_web_results(web_results: Sequence[WebSearchResult]) -> int:
    """Results hosted on a known social network."""
    return sum(
        1 for result in web_results
        if domain_matches(extract_domain(result.link), SOCIAL_MEDIA_DOMAINS)
    )


def web_score_component(web_results: Sequence[WebSearchResult]) -> int:
    if not web_results:
        return 0
    return (
        min(len(web_results) // 2, 5)
        + min(count_sensitive_web_results(web_results), 5)
        + min(count_social_web_results(web_results), 10)
    )


def calculate_risk_score(
    breaches: Sequence[BreachRecord],
    exposed_data_types: Sequence[str],
    reputation: Optional[EmailReputation] = None,
    social: Optional[SocialSearchResult] = None,
    web_results: Sequence[WebSearchResult] = (),
) -> int:
    """
    Calculate the 0-100 risk score for one pass.

    Args:
        breaches: Breach records for the pass
        exposed_data_types: Output of extract_exposed_data_types
        reputation: Email reputation, if available
        social: Social mention search, if available
        web_results: Organic web results

    Returns:
        Integer score clamped to 0-100
    """
    components: List[float] = [
        breach_score_component(breaches),
        data_type_score_component(exposed_data_types),
        reputation_score_component(reputation),
        social_score_component(social),
        web_score_component(web_results),
    ]
    total = sum(components)
    logger.debug(f"Risk score components: {components} -> {total}")
    return round_half_up(clamp(total, 0, 100))
