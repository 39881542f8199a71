from __future__ import annotations

from contextvars import ContextVar
from typing import Any, Dict, Optional

from sitelang.i18n.registry import ENGLISH_LOCALE

_LANGUAGE: ContextVar[str] = ContextVar("sitelang_language", default=ENGLISH_LOCALE)
_DICTIONARY: ContextVar[Optional[Dict[str, Any]]] = ContextVar("sitelang_dictionary", default=None)


def set_language(lang: str) -> object:
    return _LANGUAGE.set(lang)


def reset_language(token: object) -> None:
    _LANGUAGE.reset(token)


def get_language() -> str:
    return _LANGUAGE.get()


def set_dictionary(dictionary: Dict[str, Any]) -> object:
    return _DICTIONARY.set(dictionary)


def reset_dictionary(token: object) -> None:
    _DICTIONARY.reset(token)


def get_dictionary() -> Optional[Dict[str, Any]]:
    """Active dictionary, or None when no locale was initialized for this context"""
    return _DICTIONARY.get()
