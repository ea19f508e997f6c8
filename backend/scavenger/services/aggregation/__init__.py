"""
Data Risk Scavenger Aggregation Engine

Pure scoring and summarization over one pass's adapter outputs.
"""

from .engine import aggregate_pass
from .exposure import extract_exposed_data_types, fuzzy_type_match
from .risk import (
    determine_risk_level,
    calculate_risk_score,
    risk_level_rank,
)
from .recommendations import generate_recommended_actions
from .footprint import generate_digital_footprint
from .statistics import generate_statistics

__all__ = [
    'aggregate_pass',
    'extract_exposed_data_types',
    'fuzzy_type_match',
    'determine_risk_level',
    'calculate_risk_score',
    'risk_level_rank',
    'generate_recommended_actions',
    'generate_digital_footprint',
    'generate_statistics',
]
