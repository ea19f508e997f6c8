"""
Data Risk Scavenger Input Validators

Functions for validating user-supplied identity fields.
"""

import re
from typing import List, Optional

from .exceptions import InvalidEmailError, MissingFieldError


# ============================================================================
# Regular Expression Patterns
# ============================================================================

# local@domain.tld
EMAIL_REGEX = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')


# ============================================================================
# Validation
# ============================================================================

def is_valid_email(email: Optional[str]) -> bool:
    """Check whether a string looks like an email address."""
    if not email:
        return False
    return bool(EMAIL_REGEX.match(email.strip()))


def validate_email(email: Optional[str], field_name: str = "email") -> str:
    """
    Validate and normalize an email address.

    Raises:
        MissingFieldError: email is empty
        InvalidEmailError: email does not match local@domain.tld
    """
    if email is None or not email.strip():
        raise MissingFieldError(f"{field_name} is required")

    email = email.strip()
    if not is_valid_email(email):
        raise InvalidEmailError(f"{field_name} is not a valid email address: {email}")
    return email


def validate_required(value: Optional[str], field_name: str) -> str:
    """Ensure a text field is present and not blank."""
    if value is None or not value.strip():
        raise MissingFieldError(f"{field_name} is required")
    return value.strip()


def validate_email_list(emails: Optional[List[str]], field_name: str = "additional_emails") -> List[str]:
    """Validate an optional list of emails, dropping blank entries."""
    if not emails:
        return []
    return [
        validate_email(email, field_name)
        for email in emails
        if email and email.strip()
    ]
