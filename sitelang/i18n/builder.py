from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from sitelang.i18n.registry import LocaleRegistry, load_default_registry
from sitelang.utils.language import base_language, split_locale
from sitelang.utils.merge import merge_deep

logger = logging.getLogger(__name__)


def locale_for_language(language: Optional[str], registry: LocaleRegistry) -> Optional[str]:
    """First registry key, in registry order, whose language component is language."""
    if not language:
        return None
    wanted = language.strip().lower()
    for key in registry:
        if base_language(key) == wanted:
            return key
    return None


def match_locale(lang_string: Any, registry: LocaleRegistry) -> str:
    """
    Pick the registry key that best serves lang_string.

    First match wins (all comparisons case-insensitive):
    1. exact "language-REGION" key
    2. first key, in registry order, with the same language component
    3. the English fallback key
    """
    language, region = split_locale(lang_string)

    if language and region:
        exact = registry.find(f"{language}-{region}")
        if exact:
            logger.debug("Locale %r matched exactly: %s", lang_string, exact)
            return exact

    by_language = locale_for_language(language, registry)
    if by_language:
        logger.debug("Locale %r matched by language: %s", lang_string, by_language)
        return by_language

    logger.debug("Locale %r not registered; falling back to %s", lang_string, registry.english_key)
    return registry.english_key


def generate_locale_dict(
    lang_string: Optional[str],
    *,
    registry: Optional[LocaleRegistry] = None,
) -> Dict[str, Any]:
    """
    Merged translation dictionary for lang_string.

    The matched dictionary is deep-merged over the English one, so every key
    English defines is present. Unknown, empty or malformed input returns a
    copy of the English dictionary. Always returns a new object.
    """
    registry = registry if registry is not None else load_default_registry()
    selected = match_locale(lang_string, registry)
    return merge_deep({}, registry.english, registry[selected])
