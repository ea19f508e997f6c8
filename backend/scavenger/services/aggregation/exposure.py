"""
Data Risk Scavenger Exposed Data Types

Breach data-class extraction and the fuzzy category matching shared by
scoring and statistics.
"""

from typing import Iterable, List, Set

from scavenger.models.sources import BreachRecord
from scavenger.utils.helpers import dedupe_preserving_order


def extract_exposed_data_types(breaches: Iterable[BreachRecord]) -> List[str]:
    """
    Union of data classes across breaches.

    Deduplicated case-insensitively, keeping the first-seen casing and order.
    """
    return dedupe_preserving_order(
        (data_class for breach in breaches for data_class in breach.data_classes),
        case_insensitive=True,
    )


def breach_data_classes(breaches: Iterable[BreachRecord]) -> Set[str]:
    """Lowercased set of every data class exposed by the breaches."""
    return {data_class.lower() for breach in breaches for data_class in breach.data_classes}


def fuzzy_type_match(left: str, right: str) -> bool:
    """Equal, or either contains the other, ignoring case."""
    a, b = left.lower(), right.lower()
    return a == b or a in b or b in a


def breach_exposes(breach: BreachRecord, data_type: str) -> bool:
    """Whether any of a breach's data classes fuzzily matches data_type."""
    return any(fuzzy_type_match(data_class, data_type) for data_class in breach.data_classes)
