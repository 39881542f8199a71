"""
Locale endpoints
"""

from typing import Any, Dict

from fastapi import APIRouter, Request

from sitelang.i18n.builder import generate_locale_dict, match_locale
from sitelang.i18n.context import get_dictionary, get_language
from sitelang.i18n.registry import LocaleRegistry, load_default_registry

router = APIRouter(prefix="/locale", tags=["Locale"])


def _registry(request: Request) -> LocaleRegistry:
    registry = getattr(request.app.state, "locale_registry", None)
    return registry if registry is not None else load_default_registry()


@router.get("")
async def current_locale(request: Request) -> Dict[str, Any]:
    """Language and dictionary resolved for this request"""
    registry = _registry(request)
    dictionary = get_dictionary()
    if dictionary is None:
        dictionary = generate_locale_dict(get_language(), registry=registry)
    return {
        "lang": get_language(),
        "locales": list(registry),
        "dictionary": dictionary,
    }


@router.get("/{lang}")
async def locale_dictionary(lang: str, request: Request) -> Dict[str, Any]:
    """Merged dictionary for any requested locale id"""
    registry = _registry(request)
    return {
        "lang": lang,
        "matched": match_locale(lang, registry),
        "dictionary": generate_locale_dict(lang, registry=registry),
    }
