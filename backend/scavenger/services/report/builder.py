"""
Data Risk Scavenger Report Builder

Combines an AggregatedScan with the submitted identity fields into the
final VulnerabilityReport.
"""

import logging
from typing import Dict, List, Optional, Sequence
from datetime import datetime

from scavenger.models.report import (
    DarkWebFindings,
    DarkWebSource,
    PasswordSecurity,
    VulnerabilityReport,
    WebPresenceSummary,
)
from scavenger.models.scan import AggregatedScan, UserInput
from scavenger.models.sources import BreachRecord
from scavenger.utils.constants import (
    COMMON_PASSWORDS,
    PASSWORD_MANAGER_SUGGESTION,
    PASSWORD_GOOD_COMPLEXITY_MESSAGE,
)
from scavenger.utils.helpers import utc_now, dedupe_preserving_order
from scavenger.services.aggregation.exposure import breach_data_classes

logger = logging.getLogger(__name__)


# =============================================================================
# Password security
# =============================================================================

def _has_symbol(password: str) -> bool:
    return any(not c.isalnum() and not c.isspace() for c in password)


def password_strength(password: str) -> int:
    """One point each for length 8+, length 12+, uppercase, digit and symbol."""
    checks = [
        len(password) >= 8,
        len(password) >= 12,
        any(c.isupper() for c in password),
        any(c.isdigit() for c in password),
        _has_symbol(password),
    ]
    return sum(1 for passed in checks if passed)


def assess_password(password: str, breaches: Sequence[BreachRecord] = ()) -> PasswordSecurity:
    """
    Grade a password with simple heuristics.

    The compromised flag only means some breach exposed passwords for the
    scanned addresses; this password itself is never checked against a
    breach corpus.
    """
    suggestions: List[str] = []

    if len(password) < 8:
        suggestions.append("Use at least 8 characters")
    if len(password) < 12:
        suggestions.append("Use 12 or more characters for stronger protection")
    if not any(c.isupper() for c in password):
        suggestions.append("Add uppercase letters")
    if not any(c.isdigit() for c in password):
        suggestions.append("Add numbers")
    if not _has_symbol(password):
        suggestions.append("Add special characters such as !, @ or #")

    is_common = password.lower() in COMMON_PASSWORDS
    if is_common:
        suggestions.append("Avoid common passwords that appear on breach word lists")

    if not suggestions:
        suggestions.append(PASSWORD_GOOD_COMPLEXITY_MESSAGE)
    suggestions.append(PASSWORD_MANAGER_SUGGESTION)

    compromised = any("password" in data_class for data_class in breach_data_classes(breaches))

    return PasswordSecurity(
        strength=password_strength(password),
        is_common=is_common,
        compromised=compromised,
        suggestions=suggestions,
    )


# =============================================================================
# Dark web findings
# =============================================================================

def summarize_dark_web(breaches: Sequence[BreachRecord]) -> DarkWebFindings:
    """
    Summarize breach mentions.

    mentions counts verified, non-spam-list breaches; sources groups every
    breach by domain with its count and most recent breach date.
    """
    credible = [b for b in breaches if b.is_verified and not b.is_spam_list]

    counts: Dict[str, int] = {}
    last_seen: Dict[str, Optional[str]] = {}
    for breach in breaches:
        key = breach.domain or breach.name
        counts[key] = counts.get(key, 0) + 1
        # ISO dates compare correctly as strings
        if breach.breach_date and breach.breach_date > (last_seen.get(key) or ""):
            last_seen[key] = breach.breach_date

    sources = [
        DarkWebSource(name=key, count=count, last_seen=last_seen.get(key))
        for key, count in counts.items()
    ]

    exposed_info = dedupe_preserving_order(
        (data_class for breach in credible for data_class in breach.data_classes),
        case_insensitive=True,
    )

    return DarkWebFindings(mentions=len(credible), sources=sources, exposed_info=exposed_info)


# =============================================================================
# Report
# =============================================================================

def build_report(
    scan: AggregatedScan,
    user_input: UserInput,
    scan_date: Optional[datetime] = None,
) -> VulnerabilityReport:
    """
    Build the final report.

    Args:
        scan: Merged scan over all emails
        user_input: Submitted identity fields
        scan_date: Timestamp override, defaults to now (UTC)

    Returns:
        VulnerabilityReport
    """
    password_security = None
    if user_input.password:
        password_security = assess_password(user_input.password, scan.breaches)

    web_presence = None
    if scan.web_results:
        web_presence = WebPresenceSummary(
            total_results=scan.web_total_results,
            organic_results=scan.web_results,
        )

    report = VulnerabilityReport(
        name=user_input.name,
        email=user_input.primary_email.strip(),
        additional_emails=[e.strip() for e in user_input.additional_emails if e and e.strip()],
        location=user_input.location,
        scan_date=(scan_date or utc_now()).isoformat(),
        breach_count=len(scan.breaches),
        breaches=scan.breaches,
        risk_level=scan.risk_level,
        total_risk_score=scan.total_risk_score,
        exposed_data_types=scan.exposed_data_types,
        recommended_actions=scan.recommended_actions,
        stats=scan.stats,
        digital_footprint=scan.digital_footprint,
        web_presence=web_presence,
        dark_web_findings=summarize_dark_web(scan.breaches),
        password_security=password_security,
    )

    logger.info(
        f"Report generated for {report.email}: {report.breach_count} breaches, "
        f"risk {report.risk_level.value} ({report.total_risk_score}/100), "
        f"{len(report.exposed_data_types)} exposed data types"
    )
    return report
