"""
Data Risk Scavenger Scan Statistics

Display statistics for charts: category counts, breach timeline,
per-data-type risk and presence scores.
"""

from collections import Counter
from typing import Dict, List, Sequence

from scavenger.models.scan import (
    DataTypeRisk,
    DigitalFootprint,
    ScanStatistics,
    TimelinePoint,
)
from scavenger.models.sources import BreachRecord
from scavenger.utils.constants import (
    CRITICAL_DATA_TYPES,
    MEDIUM_RISK_DATA_TYPES,
    DATA_TYPE_BASE_RISK_CRITICAL,
    DATA_TYPE_BASE_RISK_MEDIUM,
    DATA_TYPE_BASE_RISK_LOW,
)
from .exposure import breach_exposes, fuzzy_type_match


def count_breaches_with_type(breaches: Sequence[BreachRecord], data_type: str) -> int:
    return sum(1 for breach in breaches if breach_exposes(breach, data_type))


def data_exposure_by_category(
    breaches: Sequence[BreachRecord],
    exposed_data_types: Sequence[str],
) -> Dict[str, int]:
    """Number of breaches exposing each data type, by fuzzy match."""
    return {
        data_type: count_breaches_with_type(breaches, data_type)
        for data_type in exposed_data_types
    }


def breach_timeline(breaches: Sequence[BreachRecord]) -> List[TimelinePoint]:
    """Breach counts bucketed by YYYY-MM, ascending."""
    buckets = Counter(breach.breach_date[:7] for breach in breaches if breach.breach_date)
    return [TimelinePoint(date=date, count=count) for date, count in sorted(buckets.items())]


def data_type_base_risk(data_type: str) -> int:
    if any(fuzzy_type_match(data_type, critical) for critical in CRITICAL_DATA_TYPES):
        return DATA_TYPE_BASE_RISK_CRITICAL
    if any(fuzzy_type_match(data_type, medium) for medium in MEDIUM_RISK_DATA_TYPES):
        return DATA_TYPE_BASE_RISK_MEDIUM
    return DATA_TYPE_BASE_RISK_LOW


def risk_by_data_type(
    breaches: Sequence[BreachRecord],
    exposed_data_types: Sequence[str],
) -> List[DataTypeRisk]:
    """Tier base risk plus up to 30 for breach frequency, capped at 100."""
    return [
        DataTypeRisk(
            type=data_type,
            risk_score=min(
                data_type_base_risk(data_type)
                + min(count_breaches_with_type(breaches, data_type) * 5, 30),
                100,
            ),
        )
        for data_type in exposed_data_types
    ]


def digital_presence_score(footprint: DigitalFootprint) -> int:
    score = (
        min(len(footprint.social_profiles) * 10, 50)
        + min(len(footprint.web_presence) * 2, 30)
        + min(len(footprint.professional_info) * 5, 10)
        + min(len(footprint.locations) * 5, 10)
    )
    return min(score, 100)


def generate_statistics(
    breaches: Sequence[BreachRecord],
    exposed_data_types: Sequence[str],
    footprint: DigitalFootprint,
    web_results_count: int = 0,
    total_web_results: int = 0,
) -> ScanStatistics:
    """Build ScanStatistics for a pass or a merged scan."""
    return ScanStatistics(
        breach_count=len(breaches),
        data_exposure_by_category=data_exposure_by_category(breaches, exposed_data_types),
        breach_timeline=breach_timeline(breaches),
        risk_by_data_type=risk_by_data_type(breaches, exposed_data_types),
        digital_presence_score=digital_presence_score(footprint),
        web_presence_score=min(len(footprint.web_presence) * 10, 100),
        web_results_count=web_results_count,
        total_web_results=total_web_results,
    )
