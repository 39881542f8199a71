from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional

from sitelang.config.settings import LocaleSettings, get_settings
from sitelang.i18n.builder import generate_locale_dict
from sitelang.i18n.environment import LocaleEnvironment
from sitelang.i18n.registry import LocaleRegistry, load_default_registry
from sitelang.i18n.resolver import determine_user_lang
from sitelang.i18n.storage import PreferenceStore, save_lang_to_storage
from sitelang.utils.language import extract_lang_code

logger = logging.getLogger(__name__)

ChangeLang = Callable[[str], Any]
UpdateLocale = Callable[[Dict[str, Any]], Any]


def init_locale(
    change_lang: ChangeLang,
    update_locale: UpdateLocale,
    *,
    environment: LocaleEnvironment,
    storage: Optional[PreferenceStore] = None,
    registry: Optional[LocaleRegistry] = None,
    settings: Optional[LocaleSettings] = None,
) -> Optional[str]:
    """
    Resolve the visitor's locale and hand it to the hosting application.

    Calls change_lang(code), then update_locale(merged_dictionary), each
    exactly once, then persists code. Return values of the callbacks are
    ignored. Does nothing outside a browsing context or when the resolved
    value holds no language code.

    Returns:
        The applied language code, or None when nothing was applied
    """
    if not environment.is_browser:
        return None

    registry = registry if registry is not None else load_default_registry()
    settings = settings if settings is not None else get_settings().i18n

    user_lang = determine_user_lang(
        environment=environment, storage=storage, registry=registry, settings=settings
    )
    if not user_lang:
        return None

    target_lang = extract_lang_code(user_lang)
    if not target_lang:
        logger.debug("Resolved locale %r holds no language code; leaving locale unchanged", user_lang)
        return None

    change_lang(target_lang)
    update_locale(generate_locale_dict(target_lang, registry=registry))
    save_lang_to_storage(storage, target_lang, settings.storage_key)
    logger.debug("Locale initialized: %s", target_lang)
    return target_lang
