"""
Data Risk Scavenger Scan Services

Multi-email coordination and the pass merge reducer.
"""

from .merge import merge_scans, merge_breaches, merge_web_results, average_risk_score
from .coordinator import (
    ScanCoordinator,
    get_scan_coordinator,
    configure_scan_coordinator,
)

__all__ = [
    'merge_scans',
    'merge_breaches',
    'merge_web_results',
    'average_risk_score',
    'ScanCoordinator',
    'get_scan_coordinator',
    'configure_scan_coordinator',
]
