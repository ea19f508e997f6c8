"""
Data Risk Scavenger Custom Exceptions

Centralized exception classes for error handling.
"""

from typing import Optional


class ScavengerBaseException(Exception):
    """Base exception for all Data Risk Scavenger errors."""
    def __init__(self, message: str = "An error occurred"):
        self.message = message
        super().__init__(self.message)


# ============================================================================
# Validation Exceptions
# ============================================================================

class ValidationError(ScavengerBaseException):
    """Input validation failed."""
    pass


class MissingFieldError(ValidationError):
    """A required identity field is missing or blank."""
    pass


class InvalidEmailError(ValidationError):
    """Email address format is invalid."""
    pass


# ============================================================================
# Source Adapter Exceptions
# ============================================================================

class SourceError(ScavengerBaseException):
    """Error talking to an external lookup service."""
    pass


class APIConnectionError(SourceError):
    """Failed to connect to external API."""
    pass


class APITimeoutError(SourceError):
    """API request timed out."""
    pass


class MalformedResponseError(SourceError):
    """API returned a body that could not be parsed into the expected shape."""
    pass


class BreachLookupError(SourceError):
    """Breach service answered with an error status other than 404."""
    def __init__(self, message: str = "Breach lookup failed", status: Optional[int] = None):
        self.status = status
        super().__init__(message)


# ============================================================================
# Scan Exceptions
# ============================================================================

class ScanError(ScavengerBaseException):
    """Error while running an exposure scan."""
    pass


class EmailPassError(ScanError):
    """A single email's pass could not be completed."""
    def __init__(self, message: str = "Email pass failed", email: Optional[str] = None):
        self.email = email
        super().__init__(message)


class ScanFailedError(ScanError):
    """No email pass succeeded."""
    def __init__(self, message: str = "Scan failed for every email", failed_emails: Optional[list] = None):
        self.failed_emails = failed_emails or []
        super().__init__(message)


# ============================================================================
# Configuration Exceptions
# ============================================================================

class ConfigurationError(ScavengerBaseException):
    """Application configuration error."""
    pass


class UnknownServiceError(ConfigurationError):
    """Credential requested for a service the store does not know."""
    pass
