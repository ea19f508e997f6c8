"""
Data Risk Scavenger Report Services

Final report construction and display formatting.
"""

from .builder import build_report, assess_password, summarize_dark_web
from .formatter import calculate_severity, format_for_display

__all__ = [
    'build_report',
    'assess_password',
    'summarize_dark_web',
    'calculate_severity',
    'format_for_display',
]
