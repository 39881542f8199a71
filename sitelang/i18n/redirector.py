from __future__ import annotations

import logging
from typing import Callable, Optional

from sitelang.config.settings import LocaleSettings
from sitelang.i18n.environment import LocaleEnvironment
from sitelang.i18n.registry import LocaleRegistry
from sitelang.i18n.resolver import determine_user_lang
from sitelang.i18n.storage import PreferenceStore
from sitelang.utils.language import base_language, same_language
from sitelang.utils.page_id import extract_lang_prefix, is_multi_locale, split_site_ids

logger = logging.getLogger(__name__)

# The Chinese site is served from the root path.
ROOT_LANGUAGE = "zh"


def canonical_path(prefix: str) -> str:
    """Path a site variant is served from: "/" for Chinese, "/<prefix>" otherwise."""
    if base_language(prefix) == ROOT_LANGUAGE:
        return "/"
    return f"/{prefix.strip().lower()}"


def redirect_user_lang(
    page_id: Optional[str],
    *,
    environment: LocaleEnvironment,
    storage: Optional[PreferenceStore] = None,
    registry: Optional[LocaleRegistry] = None,
    settings: Optional[LocaleSettings] = None,
    prefix_extractor: Callable[[str], Optional[str]] = extract_lang_prefix,
    user_lang: Optional[str] = None,
) -> Optional[str]:
    """
    Send the visitor to the canonical path of their language.

    Only multi-language sites (page_id holds more than one comma separated
    entry) are considered. The first entry whose language prefix has the
    visitor's base language decides the target path; the environment
    navigates there unless it is already the current path.

    Returns:
        The path navigated to, or None when no navigation happened
    """
    if not environment.is_browser:
        return None
    if not is_multi_locale(page_id):
        return None

    if user_lang is None:
        user_lang = determine_user_lang(
            environment=environment, storage=storage, registry=registry, settings=settings
        )
    user_base = base_language(user_lang)
    if not user_base:
        return None

    current_path = environment.pathname
    for site_id in split_site_ids(page_id):
        prefix = prefix_extractor(site_id)
        if not prefix:
            continue
        if not same_language(prefix, user_base):
            continue

        target_path = canonical_path(prefix)
        if current_path == target_path:
            logger.debug("Already on canonical path %s for %s", target_path, user_lang)
            return None
        logger.debug("Redirecting %s visitor from %s to %s", user_lang, current_path, target_path)
        environment.navigate(target_path)
        return target_path

    logger.debug("No site variant for language %r in %r", user_base, page_id)
    return None
