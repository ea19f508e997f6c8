"""
Data Risk Scavenger Digital Footprint

Best-effort enrichment of a pass into a presence summary. The extraction
functions are plain regex heuristics over search titles and snippets; they
carry no confidence score and can misattribute companies or places.
Each one is a pure function so it can be swapped or disabled on its own.
"""

import re
import logging
from collections import Counter
from typing import List, Optional, Sequence

from scavenger.models.scan import (
    DigitalFootprint,
    EmailUsage,
    ProfessionalInfo,
    SocialProfile,
    WebPresenceEntry,
)
from scavenger.models.sources import (
    BreachRecord,
    SocialSearchResult,
    UsernamePresence,
    WebSearchResult,
)
from scavenger.utils.constants import (
    LOCATION_STOPWORDS,
    MAX_FOOTPRINT_LOCATIONS,
    MAX_FOOTPRINT_INTERESTS,
)
from scavenger.utils.helpers import dedupe_preserving_order, extract_domain, domain_matches

logger = logging.getLogger(__name__)


# =============================================================================
# Patterns
# =============================================================================

LINKEDIN_SUFFIX_PATTERN = re.compile(r"\s*\|\s*LinkedIn.*$", re.IGNORECASE)
TITLE_SEPARATOR_PATTERN = re.compile(r"\s+[-–—]\s+")

COMPANY = r"(?P<company>[A-Z][\w&'.-]*(?:\s+(?:[A-Z][\w&'.-]*|&|of))*)"
WORKS_AT_PATTERN = re.compile(r"\b(?i:works|working|worked|employed)\s+(?i:at|for)\s+" + COMPANY)
EXPERIENCE_PATTERN = re.compile(r"Experience:\s*(?P<company>[^·|\n]+?)\s*(?:·|\||$)")
PERIOD_PATTERN = re.compile(
    r"\b(?P<period>(?:19|20)\d{2}\s*[-–—]\s*(?:(?:19|20)\d{2}|(?i:present)))"
)

PLACE = r"(?P<place>[A-Z][a-zA-Z'-]+(?:(?:\s|,\s)[A-Z][a-zA-Z'-]+){0,2})"
LOCATION_LABEL_PATTERN = re.compile(r"Location:\s*(?P<place>[^·|\n]+?)\s*(?:·|\||$)")
LOCATION_PHRASE_PATTERN = re.compile(r"\b(?i:based|located|lives|living|resides)\s+(?i:in)\s+" + PLACE)
IN_PLACE_PATTERN = re.compile(r"\b[Ii]n\s+" + PLACE)

HASHTAG_PATTERN = re.compile(r"#(\w{2,})")

_STRIP = " .,;:-"


# =============================================================================
# Extractors
# =============================================================================

def social_profiles_from_presence(presence: Optional[UsernamePresence]) -> List[SocialProfile]:
    if presence is None:
        return []
    return [
        SocialProfile(network=profile.site, username=presence.username, url=profile.url)
        for profile in presence.found
    ]


def web_presence_from_results(web_results: Sequence[WebSearchResult]) -> List[WebPresenceEntry]:
    return [
        WebPresenceEntry(
            title=result.title,
            url=result.link,
            snippet=result.snippet or None,
            displayed_link=result.displayed_link or None,
        )
        for result in web_results
    ]


def parse_linkedin_title(title: str, snippet: str = "") -> Optional[ProfessionalInfo]:
    """
    Parse "Name - Title - Company | LinkedIn" style result titles.

    Two segments are read as "Name - Company", or "Name - Title at Company"
    when the second segment contains " at ". A year range in the snippet
    ("2019 - Present") becomes the period.
    """
    text = LINKEDIN_SUFFIX_PATTERN.sub("", title or "").strip()
    parts = [part.strip(_STRIP) for part in TITLE_SEPARATOR_PATTERN.split(text) if part.strip(_STRIP)]

    period_match = PERIOD_PATTERN.search(snippet or "")
    period = period_match.group("period") if period_match else None

    if len(parts) >= 3:
        return ProfessionalInfo(company=parts[2], title=parts[1], period=period)

    if len(parts) == 2:
        role, sep, company = parts[1].partition(" at ")
        if sep and company.strip(_STRIP):
            return ProfessionalInfo(
                company=company.strip(_STRIP),
                title=role.strip(_STRIP) or None,
                period=period,
            )
        return ProfessionalInfo(company=parts[1], period=period)

    return None


def extract_professional_info(web_results: Sequence[WebSearchResult]) -> List[ProfessionalInfo]:
    """Employer and role hints, deduplicated by company name."""
    found: List[ProfessionalInfo] = []

    for result in web_results:
        if domain_matches(extract_domain(result.link), ["linkedin.com"]):
            parsed = parse_linkedin_title(result.title, result.snippet)
            if parsed:
                found.append(parsed)

        snippet = result.snippet or ""
        for pattern in (EXPERIENCE_PATTERN, WORKS_AT_PATTERN):
            for match in pattern.finditer(snippet):
                company = match.group("company").strip(_STRIP)
                if company:
                    found.append(ProfessionalInfo(company=company))

    seen = set()
    unique: List[ProfessionalInfo] = []
    for info in found:
        key = info.company.lower()
        if key in seen:
            continue
        seen.add(key)
        unique.append(info)
    return unique


def _is_place(candidate: str) -> bool:
    first_word = candidate.split()[0].strip(_STRIP).lower() if candidate.split() else ""
    return bool(first_word) and first_word not in LOCATION_STOPWORDS


def extract_locations(web_results: Sequence[WebSearchResult]) -> List[str]:
    """Place names from labels and "based in / lives in / in <Place>" phrases."""
    candidates: List[str] = []

    for result in web_results:
        for text in (result.snippet or "", result.title or ""):
            for pattern in (LOCATION_LABEL_PATTERN, LOCATION_PHRASE_PATTERN, IN_PLACE_PATTERN):
                for match in pattern.finditer(text):
                    place = match.group("place").strip(_STRIP)
                    if place and _is_place(place):
                        candidates.append(place)

    return dedupe_preserving_order(candidates, case_insensitive=True)[:MAX_FOOTPRINT_LOCATIONS]


def extract_interests(social: Optional[SocialSearchResult]) -> List[str]:
    """Most frequent hashtags across social mentions."""
    if social is None:
        return []
    counts = Counter(
        tag.lower()
        for post in social.posts
        for tag in HASHTAG_PATTERN.findall(post.text or "")
    )
    return [tag for tag, _ in counts.most_common(MAX_FOOTPRINT_INTERESTS)]


def email_usage_from_breaches(breaches: Sequence[BreachRecord]) -> Optional[EmailUsage]:
    """Services the address was registered with, going by breached sites."""
    services = dedupe_preserving_order(
        (breach.title or breach.name for breach in breaches),
        case_insensitive=True,
    )
    return EmailUsage(services=services) if services else None


# =============================================================================
# Footprint
# =============================================================================

def generate_digital_footprint(
    presence: Optional[UsernamePresence] = None,
    social: Optional[SocialSearchResult] = None,
    web_results: Sequence[WebSearchResult] = (),
    breaches: Sequence[BreachRecord] = (),
) -> DigitalFootprint:
    """
    Derive the digital footprint for one pass.

    Args:
        presence: Username presence search
        social: Social mention search
        web_results: Organic web results
        breaches: Breach records

    Returns:
        DigitalFootprint
    """
    footprint = DigitalFootprint(
        social_profiles=social_profiles_from_presence(presence),
        web_presence=web_presence_from_results(web_results),
        professional_info=extract_professional_info(web_results),
        locations=extract_locations(web_results),
        email_usage=email_usage_from_breaches(breaches),
        interests=extract_interests(social),
    )

    logger.debug(
        f"Footprint: {len(footprint.social_profiles)} profiles, "
        f"{len(footprint.web_presence)} web entries, "
        f"{len(footprint.professional_info)} employers, "
        f"{len(footprint.locations)} locations"
    )
    return footprint
