"""
Domain exceptions for sitelang
"""

from .base import DomainException
from .locale import LocaleConfigurationError

__all__ = [
    "DomainException",
    "LocaleConfigurationError",
]
