"""
Locale resolver: decides which locale a visitor should see.

Signals, highest priority first:
1. first path segment, when it maps to a registered locale
2. query parameter (``locale``, then ``lang``)
3. persisted preference
4. platform language (Chinese -> zh-CN, anything else -> en-US)
"""

from __future__ import annotations

import logging
from typing import Optional

from sitelang.config.settings import LocaleSettings, get_settings
from sitelang.i18n.builder import locale_for_language
from sitelang.i18n.environment import LocaleEnvironment
from sitelang.i18n.registry import ENGLISH_LOCALE, LocaleRegistry, load_default_registry
from sitelang.i18n.storage import PreferenceStore, load_lang_from_storage
from sitelang.utils.language import get_query_variable, split_locale

logger = logging.getLogger(__name__)


def first_path_segment(pathname: Optional[str]) -> Optional[str]:
    for segment in (pathname or "").split("/"):
        if segment:
            return segment.lower()
    return None


def locale_for_path_segment(
    segment: Optional[str],
    registry: LocaleRegistry,
    settings: LocaleSettings,
) -> Optional[str]:
    """
    Strict mapping of a path segment to a locale id.

    "en" always maps to en-US. Otherwise a configured alias, an exact
    registry key ("zh-cn"), a "lang-LANG" key ("fr" -> fr-FR) or, for a bare
    language, the first registered key of that language ("ja" -> ja-JP) is
    accepted. Unregistered languages and other segments return None.
    """
    if not segment:
        return None
    segment = segment.lower()

    if segment == "en":
        return ENGLISH_LOCALE

    alias = settings.path_alias_map.get(segment)
    if alias:
        return alias

    exact = registry.find(segment)
    if exact:
        return exact

    doubled = registry.find(f"{segment}-{segment}")
    if doubled:
        return doubled

    language, region = split_locale(segment)
    if region:
        return None
    return locale_for_language(language, registry)


def platform_default(platform_language: Optional[str], settings: LocaleSettings) -> str:
    if platform_language and platform_language.strip().lower().startswith("zh"):
        return settings.chinese_locale
    return settings.default_locale


def determine_user_lang(
    *,
    environment: LocaleEnvironment,
    storage: Optional[PreferenceStore] = None,
    registry: Optional[LocaleRegistry] = None,
    settings: Optional[LocaleSettings] = None,
) -> Optional[str]:
    """
    Resolve the visitor's locale.

    Returns None only outside a browsing context; in that case nothing is
    read from storage.
    """
    if not environment.is_browser:
        return None

    registry = registry if registry is not None else load_default_registry()
    settings = settings if settings is not None else get_settings().i18n

    segment = first_path_segment(environment.pathname)
    path_lang = locale_for_path_segment(segment, registry, settings)
    if path_lang:
        logger.debug("Locale from path segment %r: %s", segment, path_lang)
        return path_lang
    if segment:
        logger.debug("Path segment %r is not a locale; skipping", segment)

    for name in settings.query_param_list:
        query_lang = get_query_variable(environment.query, name)
        if query_lang:
            logger.debug("Locale from query parameter %r: %s", name, query_lang)
            return query_lang

    stored_lang = load_lang_from_storage(storage, settings.storage_key)
    if stored_lang:
        logger.debug("Locale from stored preference: %s", stored_lang)
        return stored_lang

    platform_lang = platform_default(environment.platform_language, settings)
    logger.debug("Locale from platform language %r: %s", environment.platform_language, platform_lang)
    return platform_lang
