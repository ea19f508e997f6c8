"""
Data Risk Scavenger Report Formatter

Flattens a VulnerabilityReport into display-ready values.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from scavenger.models.report import VulnerabilityReport
from scavenger.utils.constants import SEVERITY_HIGH_THRESHOLD, SEVERITY_MEDIUM_THRESHOLD


def calculate_severity(risk_score: int) -> str:
    """Severity label for a 0-100 score."""
    if risk_score >= SEVERITY_HIGH_THRESHOLD:
        return 'high'
    if risk_score >= SEVERITY_MEDIUM_THRESHOLD:
        return 'medium'
    return 'low'


def _display_date(value: Optional[str]) -> Optional[str]:
    """Render an ISO date or timestamp as YYYY-MM-DD; unparseable values pass through."""
    if not value:
        return value
    try:
        return datetime.fromisoformat(value.replace('Z', '+00:00')).strftime('%Y-%m-%d')
    except ValueError:
        return value


def _yes_no(flag: bool) -> str:
    return 'Yes' if flag else 'No'


def format_for_display(report: VulnerabilityReport) -> Dict[str, Any]:
    """
    Format a report for display.

    Args:
        report: Finished report

    Returns:
        Dictionary with summary, breaches, exposedData, actions,
        passwordInfo and darkWebInfo sections
    """
    password = report.password_security
    dark_web = report.dark_web_findings

    return {
        'summary': {
            'email': report.email,
            'name': report.name,
            'breachCount': report.breach_count,
            'riskLevel': report.risk_level.value,
            'severity': calculate_severity(report.total_risk_score),
            'scanDate': _display_date(report.scan_date),
            'totalRiskScore': report.total_risk_score,
        },
        'breaches': [
            {
                'name': breach.title or breach.name,
                'domain': breach.domain,
                'date': _display_date(breach.breach_date),
                'dataExposed': ', '.join(breach.data_classes),
                'description': breach.description,
            }
            for breach in report.breaches
        ],
        'exposedData': list(report.exposed_data_types),
        'actions': list(report.recommended_actions),
        'passwordInfo': {
            'strength': password.strength,
            'isCommon': _yes_no(password.is_common),
            'compromised': _yes_no(password.compromised),
            'suggestions': list(password.suggestions),
        } if password else None,
        'darkWebInfo': {
            'mentions': dark_web.mentions,
            'sources': [
                {
                    'name': source.name,
                    'count': source.count,
                    'lastSeen': _display_date(source.last_seen) if source.last_seen else 'Unknown',
                }
                for source in dark_web.sources
            ],
            'exposedInfo': list(dark_web.exposed_info),
        } if dark_web else None,
    }
