"""
Site locale resolution.

- Registry of packaged translation dictionaries
- Resolver: path segment > query parameter > stored preference > platform language
- Dictionary builder merging the chosen dictionary over English
- Initializer and redirector driven by injected environment/storage
- Request-scoped language and dictionary via ContextVar (set by middleware)
"""

from .builder import generate_locale_dict
from .context import get_dictionary, get_language, reset_dictionary, reset_language, set_dictionary, set_language
from .environment import NULL_ENVIRONMENT, LocaleEnvironment, NullEnvironment, RequestEnvironment, StaticEnvironment
from .initializer import init_locale
from .redirector import redirect_user_lang
from .registry import LocaleRegistry, load_default_registry
from .resolver import determine_user_lang
from .storage import (
    CookiePreferenceStore,
    MemoryPreferenceStore,
    PreferenceStore,
    load_lang_from_storage,
    save_lang_to_storage,
)
from .translator import t

__all__ = [
    "CookiePreferenceStore",
    "LocaleEnvironment",
    "LocaleRegistry",
    "MemoryPreferenceStore",
    "NULL_ENVIRONMENT",
    "NullEnvironment",
    "PreferenceStore",
    "RequestEnvironment",
    "StaticEnvironment",
    "determine_user_lang",
    "generate_locale_dict",
    "get_dictionary",
    "get_language",
    "init_locale",
    "load_default_registry",
    "load_lang_from_storage",
    "redirect_user_lang",
    "reset_dictionary",
    "reset_language",
    "save_lang_to_storage",
    "set_dictionary",
    "set_language",
    "t",
]
