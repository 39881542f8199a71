"""
Locale configuration exceptions
"""

from .base import DomainException


class LocaleConfigurationError(DomainException):
    """Raised when the locale registry or a locale file is unusable"""

    def __init__(self, message: str, locale: str = None, details: dict = None):
        merged = dict(details or {})
        if locale:
            merged["locale"] = locale
        super().__init__(
            message=f"Locale configuration error: {message}",
            code="LOCALE_CONFIGURATION_ERROR",
            details=merged,
        )
