"""
Data Risk Scavenger Helper Functions

Utility functions used throughout the application.
"""

import math
from datetime import datetime, timezone
from typing import Iterable, List, Optional
from urllib.parse import urlparse


# ============================================================================
# Timestamps
# ============================================================================

def utc_now() -> datetime:
    """Get current UTC timestamp."""
    return datetime.now(timezone.utc)


# ============================================================================
# Numbers
# ============================================================================

def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return int(math.floor(value + 0.5))


def clamp(value: float, low: float = 0, high: float = 100) -> float:
    """Clamp a value into [low, high]."""
    return max(low, min(value, high))


# ============================================================================
# Collections
# ============================================================================

def dedupe_preserving_order(items: Iterable[str], case_insensitive: bool = False) -> List[str]:
    """
    Remove duplicates while keeping first-seen order.

    With case_insensitive=True the first-seen casing is kept.
    """
    seen = set()
    result = []
    for item in items:
        key = item.lower() if case_insensitive else item
        if key in seen:
            continue
        seen.add(key)
        result.append(item)
    return result


# ============================================================================
# Email / URL helpers
# ============================================================================

def email_local_part(email: str) -> str:
    """Return the part of an email address before the @."""
    return email.split('@')[0] if email else ''


def extract_domain(url: str) -> str:
    """Extract lowercase host from a URL, without a leading www."""
    try:
        host = urlparse(url).netloc.lower()
    except ValueError:
        return ''
    if host.startswith('www.'):
        host = host[4:]
    return host


def domain_matches(host: str, domains: Iterable[str]) -> Optional[str]:
    """Return the first domain that host equals or is a subdomain of."""
    for domain in domains:
        if host == domain or host.endswith('.' + domain):
            return domain
    return None
