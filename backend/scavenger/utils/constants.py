"""
Data Risk Scavenger Constants - Central location for ALL constant values.
"""

from typing import Dict, List

# APPLICATION INFO
APP_NAME: str = "Data Risk Scavenger"
APP_VERSION: str = "1.0.0"
APP_DESCRIPTION: str = "Digital exposure scanning across breach, reputation, social and web sources"
USER_AGENT: str = "DataRiskScavenger/1.0"

# SERVICES (credential store keys)
SERVICE_HIBP: str = "hibp"
SERVICE_EMAILREP: str = "emailrep"
SERVICE_SHERLOCK: str = "sherlock"
SERVICE_SOCIAL_SEARCHER: str = "social_searcher"
SERVICE_SERPAPI: str = "serpapi"

SERVICE_METADATA: Dict[str, Dict[str, str]] = {
    SERVICE_HIBP: {
        "display_name": "Have I Been Pwned",
        "description": "Check if your email or username has been compromised in a data breach.",
        "doc_url": "https://haveibeenpwned.com/API/v3",
    },
    SERVICE_SOCIAL_SEARCHER: {
        "display_name": "Social Searcher",
        "description": "Search for social media mentions across platforms.",
        "doc_url": "https://www.social-searcher.com/api-v2/",
    },
    SERVICE_SHERLOCK: {
        "display_name": "Sherlock Project",
        "description": "Find usernames across social networks through a hosted Sherlock runner.",
        "doc_url": "https://github.com/sherlock-project/sherlock",
    },
    SERVICE_EMAILREP: {
        "display_name": "EmailRep.io",
        "description": "Check email reputation and risk.",
        "doc_url": "https://emailrep.io/docs/",
    },
    SERVICE_SERPAPI: {
        "display_name": "SerpAPI",
        "description": "Search engine results API.",
        "doc_url": "https://serpapi.com/",
    },
}

# TIMEOUTS (seconds)
API_TIMEOUT_DEFAULT: int = 30
PASS_TIMEOUT_DEFAULT: int = 90

# EXTERNAL API URLS
HIBP_API_URL: str = "https://haveibeenpwned.com/api/v3"
EMAILREP_API_URL: str = "https://emailrep.io"
SOCIAL_SEARCHER_API_URL: str = "https://api.social-searcher.com/v2"
SERPAPI_API_URL: str = "https://serpapi.com/search"

# SOURCE LIMITS
MAX_WEB_RESULTS: int = 15
SOCIAL_SEARCH_LIMIT: int = 20
SOCIAL_SEARCH_NETWORKS: str = "web,twitter,facebook,instagram,youtube,reddit,pinterest,vk"
SHERLOCK_RUN_TIMEOUT: int = 60
SHERLOCK_MAX_SITES: int = 100

# RISK LEVELS
RISK_LEVEL_RANK: Dict[str, int] = {
    "high": 3,
    "medium": 2,
    "low": 1,
    "none": 0,
}

RISK_LEVEL_HIGH_THRESHOLD: int = 60
RISK_LEVEL_MEDIUM_THRESHOLD: int = 30

# Component caps for the risk-level percentage
RISK_LEVEL_BREACH_CAP: int = 50
RISK_LEVEL_REPUTATION_CAP: int = 30
RISK_LEVEL_SOCIAL_CAP: int = 15
RISK_LEVEL_MAX_SCORE: int = RISK_LEVEL_BREACH_CAP + RISK_LEVEL_REPUTATION_CAP + RISK_LEVEL_SOCIAL_CAP

# Severity thresholds used by display formatting
SEVERITY_HIGH_THRESHOLD: int = 70
SEVERITY_MEDIUM_THRESHOLD: int = 40

# DATA CLASS TIERS (lowercase)
SENSITIVE_DATA_TYPES: List[str] = [
    "passwords", "credit cards", "social security numbers", "financial data",
    "security questions", "phone numbers", "addresses",
]

CRITICAL_DATA_TYPES: List[str] = [
    "passwords", "credit cards", "payment info", "social security numbers",
    "government issued ids", "financial data", "bank account numbers",
]

MEDIUM_RISK_DATA_TYPES: List[str] = [
    "phone numbers", "physical addresses", "security questions", "dates of birth",
]

LOW_RISK_DATA_TYPES: List[str] = [
    "email addresses", "names", "usernames", "employers", "job titles", "genders",
]

# Per-data-type risk base values
DATA_TYPE_BASE_RISK_CRITICAL: int = 70
DATA_TYPE_BASE_RISK_MEDIUM: int = 40
DATA_TYPE_BASE_RISK_LOW: int = 10

# WEB PRESENCE HEURISTICS
SENSITIVE_WEB_KEYWORDS: List[str] = [
    "address", "phone", "password", "date of birth", "born", "ssn",
    "social security", "salary", "lives in", "home", "leak", "dump",
]

SOCIAL_MEDIA_DOMAINS: List[str] = [
    "facebook.com", "twitter.com", "x.com", "instagram.com", "linkedin.com",
    "tiktok.com", "reddit.com", "pinterest.com", "youtube.com", "snapchat.com",
    "github.com", "medium.com", "tumblr.com", "vk.com", "threads.net",
]

# Words that look like places after "in" but are not
LOCATION_STOPWORDS: List[str] = [
    "january", "february", "march", "april", "may", "june", "july", "august",
    "september", "october", "november", "december", "the", "this", "that",
    "order", "addition", "fact", "general", "charge", "touch", "english",
    "linkedin", "google", "person", "total",
]

MAX_FOOTPRINT_LOCATIONS: int = 10
MAX_FOOTPRINT_INTERESTS: int = 10

# PASSWORDS
COMMON_PASSWORDS: List[str] = [
    "123456", "123456789", "12345678", "12345", "1234567", "1234567890",
    "password", "password1", "password123", "qwerty", "qwerty123", "abc123",
    "111111", "000000", "123123", "iloveyou", "admin", "welcome", "letmein",
    "monkey", "dragon", "football", "baseball", "sunshine", "princess",
    "master", "shadow", "superman", "trustno1", "1q2w3e4r", "passw0rd",
    "starwars", "whatever", "login", "hello", "freedom", "zaq1zaq1",
]

PASSWORD_MANAGER_SUGGESTION: str = "Use a password manager to generate and store unique passwords for every account"
PASSWORD_GOOD_COMPLEXITY_MESSAGE: str = "Your password has good complexity. Make sure it is not reused across accounts"
