"""
Configuration for sitelang
"""

from .settings import (
    ApplicationSettings,
    Environment,
    LocaleSettings,
    get_settings,
    reload_settings,
)

__all__ = [
    "ApplicationSettings",
    "Environment",
    "LocaleSettings",
    "get_settings",
    "reload_settings",
]
