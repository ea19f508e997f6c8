"""
Data Risk Scavenger Scan Merge

Pure reducer folding a new email pass into the running aggregate.
Nothing here mutates its inputs.
"""

from typing import Iterable, List, Optional

from scavenger.models.scan import (
    AggregatedScan,
    DigitalFootprint,
    EmailUsage,
    ProfessionalInfo,
    SocialProfile,
    WebPresenceEntry,
)
from scavenger.models.sources import BreachRecord, WebSearchResult
from scavenger.utils.constants import MAX_FOOTPRINT_LOCATIONS, MAX_FOOTPRINT_INTERESTS
from scavenger.utils.helpers import dedupe_preserving_order, round_half_up
from scavenger.services.aggregation.risk import risk_level_rank
from scavenger.services.aggregation.statistics import generate_statistics


def merge_breaches(first: Iterable[BreachRecord], second: Iterable[BreachRecord]) -> List[BreachRecord]:
    """Union keyed by breach name; the first occurrence wins."""
    seen = set()
    merged: List[BreachRecord] = []
    for breach in list(first) + list(second):
        if breach.name in seen:
            continue
        seen.add(breach.name)
        merged.append(breach)
    return merged


def merge_web_results(
    first: Iterable[WebSearchResult],
    second: Iterable[WebSearchResult],
) -> List[WebSearchResult]:
    """
    Combine results from several emails.

    Stable sort by original rank, then deduplicate by link with the
    first occurrence kept.
    """
    ordered = sorted(list(first) + list(second), key=lambda result: result.position)
    seen = set()
    merged: List[WebSearchResult] = []
    for result in ordered:
        if result.link in seen:
            continue
        seen.add(result.link)
        merged.append(result)
    return merged


def average_risk_score(previous: int, passes_so_far: int, new: int) -> int:
    """
    Running average update: round((S * i + T) / (i + 1)).

    Rounding at each step makes this an approximation of the true mean
    over all passes.
    """
    return round_half_up((previous * passes_so_far + new) / (passes_so_far + 1))


def _merge_email_usage(first: Optional[EmailUsage], second: Optional[EmailUsage]) -> Optional[EmailUsage]:
    services = dedupe_preserving_order(
        (first.services if first else []) + (second.services if second else []),
        case_insensitive=True,
    )
    return EmailUsage(services=services) if services else None


def merge_footprints(first: DigitalFootprint, second: DigitalFootprint) -> DigitalFootprint:
    """Union every footprint list, deduplicated on its natural key."""
    profiles: List[SocialProfile] = []
    profile_keys = set()
    for profile in first.social_profiles + second.social_profiles:
        key = (profile.network.lower(), profile.url)
        if key not in profile_keys:
            profile_keys.add(key)
            profiles.append(profile)

    web_presence: List[WebPresenceEntry] = []
    web_keys = set()
    for entry in first.web_presence + second.web_presence:
        if entry.url not in web_keys:
            web_keys.add(entry.url)
            web_presence.append(entry)

    professional: List[ProfessionalInfo] = []
    companies = set()
    for info in first.professional_info + second.professional_info:
        if info.company.lower() not in companies:
            companies.add(info.company.lower())
            professional.append(info)

    return DigitalFootprint(
        social_profiles=profiles,
        web_presence=web_presence,
        professional_info=professional,
        locations=dedupe_preserving_order(
            first.locations + second.locations, case_insensitive=True
        )[:MAX_FOOTPRINT_LOCATIONS],
        email_usage=_merge_email_usage(first.email_usage, second.email_usage),
        interests=dedupe_preserving_order(first.interests + second.interests)[:MAX_FOOTPRINT_INTERESTS],
    )


def merge_scans(accumulator: AggregatedScan, next_pass: AggregatedScan) -> AggregatedScan:
    """
    Fold one more pass into the running aggregate.

    - breaches: union by name
    - total_risk_score: running average over passes merged so far
    - risk_level: only ever raised, never lowered
    - exposed data types and actions: union in first-seen order
    - web results: sorted by rank, deduplicated by link
    - stats: recomputed from the merged data

    Args:
        accumulator: Aggregate of all passes so far (at least one)
        next_pass: Aggregate of a single new pass

    Returns:
        A new AggregatedScan
    """
    passes_so_far = max(accumulator.passes_merged, 1)

    breaches = merge_breaches(accumulator.breaches, next_pass.breaches)
    exposed_data_types = dedupe_preserving_order(
        accumulator.exposed_data_types + next_pass.exposed_data_types,
        case_insensitive=True,
    )
    web_results = merge_web_results(accumulator.web_results, next_pass.web_results)
    web_total_results = accumulator.web_total_results + next_pass.web_total_results
    footprint = merge_footprints(accumulator.digital_footprint, next_pass.digital_footprint)

    risk_level = accumulator.risk_level
    if risk_level_rank(next_pass.risk_level) > risk_level_rank(accumulator.risk_level):
        risk_level = next_pass.risk_level

    return AggregatedScan(
        breaches=breaches,
        total_risk_score=average_risk_score(
            accumulator.total_risk_score, passes_so_far, next_pass.total_risk_score
        ),
        risk_level=risk_level,
        exposed_data_types=exposed_data_types,
        recommended_actions=dedupe_preserving_order(
            accumulator.recommended_actions + next_pass.recommended_actions
        ),
        digital_footprint=footprint,
        web_results=web_results,
        web_total_results=web_total_results,
        stats=generate_statistics(
            breaches,
            exposed_data_types,
            footprint,
            web_results_count=len(web_results),
            total_web_results=web_total_results,
        ),
        scanned_emails=accumulator.scanned_emails + next_pass.scanned_emails,
        skipped_emails=accumulator.skipped_emails + next_pass.skipped_emails,
    )
