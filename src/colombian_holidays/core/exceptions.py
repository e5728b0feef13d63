"""
Custom exceptions for the colombian-holidays service.

The holiday engine itself is total and raises none of these; they are
used at the API and configuration boundaries for HTTP status mapping.
"""

from typing import Optional


class ColombianHolidaysError(Exception):
    """Base exception for all colombian-holidays errors."""
    
    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


# =============================================================================
# Business Errors (4xx)
# =============================================================================

class BusinessError(ColombianHolidaysError):
    """Base exception for business logic errors (typically 4xx)."""
    pass


class ValidationError(BusinessError):
    """Raised when a request or view command is invalid."""
    
    def __init__(self, field: str, message: str):
        super().__init__(
            f"Validation error on '{field}': {message}",
            {"field": field}
        )
        self.field = field


# =============================================================================
# Infrastructure Errors (5xx)
# =============================================================================

class InfrastructureError(ColombianHolidaysError):
    """Base exception for infrastructure errors (typically 5xx)."""
    pass


class ConfigurationError(InfrastructureError):
    """Raised when a required configuration is missing."""
    
    def __init__(self, config_name: str, message: Optional[str] = None):
        msg = message or f"Configuration missing: {config_name}"
        super().__init__(msg, {"config_name": config_name})
        self.config_name = config_name
