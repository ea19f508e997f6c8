"""
Data Risk Scavenger Aggregation Engine

Reduces one email pass's adapter outputs to an AggregatedScan.
"""

import logging

from scavenger.models.scan import AggregatedScan, PerEmailScanResult
from .exposure import extract_exposed_data_types
from .risk import determine_risk_level, calculate_risk_score
from .recommendations import generate_recommended_actions
from .footprint import generate_digital_footprint
from .statistics import generate_statistics

logger = logging.getLogger(__name__)


def aggregate_pass(result: PerEmailScanResult) -> AggregatedScan:
    """
    Aggregate a single pass.

    Args:
        result: Raw adapter outputs for one email

    Returns:
        AggregatedScan covering just that email
    """
    exposed_data_types = extract_exposed_data_types(result.breaches)

    risk_level = determine_risk_level(
        result.breaches,
        result.reputation,
        result.social,
        result.web_results,
    )
    risk_score = calculate_risk_score(
        result.breaches,
        exposed_data_types,
        result.reputation,
        result.social,
        result.web_results,
    )

    footprint = generate_digital_footprint(
        presence=result.presence,
        social=result.social,
        web_results=result.web_results,
        breaches=result.breaches,
    )

    stats = generate_statistics(
        result.breaches,
        exposed_data_types,
        footprint,
        web_results_count=len(result.web_results),
        total_web_results=result.web_total_results,
    )

    logger.info(
        f"Aggregated pass for {result.email}: {len(result.breaches)} breaches, "
        f"risk {risk_level.value} ({risk_score}/100)"
    )

    return AggregatedScan(
        breaches=list(result.breaches),
        total_risk_score=risk_score,
        risk_level=risk_level,
        exposed_data_types=exposed_data_types,
        recommended_actions=generate_recommended_actions(result.breaches, result.reputation),
        digital_footprint=footprint,
        web_results=list(result.web_results),
        web_total_results=result.web_total_results,
        stats=stats,
        scanned_emails=[result.email],
    )
