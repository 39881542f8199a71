"""
Centralized Configuration System for sitelang

Type-safe configuration using Pydantic Settings.

Features:
- Environment variable binding with defaults
- Hierarchical configuration structure
- Single source of truth for locale settings
- Test-friendly configuration isolation (reload_settings)
"""

import os
from enum import Enum
from typing import Dict, List, Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    """Application environment types"""
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TEST = "test"


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in (value or "").split(",") if item.strip()]


class LocaleSettings(BaseSettings):
    """Locale resolution and redirect settings"""

    model_config = SettingsConfigDict(
        env_prefix="LOCALE_",
        env_file=".env" if not os.getenv("DOCKER_CONTAINER") else None,
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore"
    )

    default_locale: str = Field(
        default="en-US",
        description="Locale used when the platform language is not Chinese"
    )
    chinese_locale: str = Field(
        default="zh-CN",
        description="Locale used when the platform language starts with 'zh'"
    )
    storage_key: str = Field(
        default="lang",
        description="Key (cookie name) of the persisted language preference"
    )
    query_params: str = Field(
        default="locale,lang",
        description="Query parameters checked for a locale, in priority order (comma separated)"
    )
    path_aliases: str = Field(
        default="en=en-US",
        description="First path segment aliases, 'segment=locale' pairs (comma separated)"
    )
    platform_language: Optional[str] = Field(
        default=None,
        description="Language reported by the hosting platform (e.g. 'zh-CN')"
    )
    cookie_max_age: int = Field(
        default=60 * 60 * 24 * 365,
        description="Lifetime of the persisted preference cookie in seconds"
    )
    redirect_enabled: bool = Field(
        default=True,
        description="Redirect visitors to the canonical path of their language"
    )
    redirect_exclude_prefixes: str = Field(
        default="/api,/static,/_next,/health,/locale",
        description="Path prefixes never redirected (comma separated)"
    )
    site_ids: str = Field(
        default="",
        validation_alias=AliasChoices("LOCALE_SITE_IDS", "NOTION_PAGE_ID"),
        description="Comma separated site identifiers, optionally 'lang:id' prefixed"
    )

    @field_validator("default_locale", "chinese_locale", "storage_key", mode="before")
    @classmethod
    def strip_required(cls, v, info):
        text = str(v).strip() if v is not None else ""
        if not text:
            raise ValueError(f"{info.field_name} must not be empty")
        return text

    @field_validator("platform_language", mode="before")
    @classmethod
    def blank_platform_language(cls, v):
        if v is None:
            return None
        text = str(v).strip()
        return text or None

    @property
    def query_param_list(self) -> List[str]:
        """Parse query parameter names from the comma separated string"""
        return _split_csv(self.query_params) or ["locale", "lang"]

    @property
    def path_alias_map(self) -> Dict[str, str]:
        """Parse 'segment=locale' pairs; segments are lower-cased"""
        aliases: Dict[str, str] = {}
        for pair in _split_csv(self.path_aliases):
            if "=" not in pair:
                continue
            segment, locale = pair.split("=", 1)
            segment = segment.strip().lower()
            locale = locale.strip()
            if segment and locale:
                aliases[segment] = locale
        return aliases

    @property
    def redirect_exclude_list(self) -> List[str]:
        return _split_csv(self.redirect_exclude_prefixes)


class ApplicationSettings(BaseSettings):
    """Main application settings - aggregates all other settings"""

    model_config = SettingsConfigDict(
        env_file=".env" if not os.getenv("DOCKER_CONTAINER") else None,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment"
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode"
    )
    log_level: str = Field(
        default="INFO",
        description="Root log level"
    )

    # Nested settings
    i18n: LocaleSettings = Field(default_factory=LocaleSettings)

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        return str(v or "INFO").strip().upper()

    @property
    def is_development(self) -> bool:
        """Check if running in development mode"""
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_production(self) -> bool:
        """Check if running in production mode"""
        return self.environment == Environment.PRODUCTION

    @property
    def is_test(self) -> bool:
        """Check if running in test mode"""
        return self.environment == Environment.TEST


settings = ApplicationSettings()


def get_settings() -> ApplicationSettings:
    """
    Get the global settings instance

    Can be used with FastAPI's Depends() for dependency injection.

    Returns:
        ApplicationSettings: The global settings instance
    """
    return settings


def reload_settings() -> ApplicationSettings:
    """
    Reload settings from environment (useful for testing)

    Returns:
        ApplicationSettings: New settings instance with reloaded values
    """
    global settings
    settings = ApplicationSettings()
    return settings
