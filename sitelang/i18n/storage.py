"""
Persisted language preference.

The preference is one string stored under a fixed key. Backends implement
the small PreferenceStore protocol so the resolver can be exercised without
a browser or a web request.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Protocol, runtime_checkable

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "lang"


@runtime_checkable
class PreferenceStore(Protocol):
    """Key-value slot for the persisted preference"""

    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...


class MemoryPreferenceStore:
    """Dict-backed store for scripts and tests"""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._values: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def to_dict(self) -> Dict[str, str]:
        return dict(self._values)


class CookiePreferenceStore:
    """
    Request-scoped store backed by cookies.

    Reads come from the incoming request's cookies (or a pending write made
    during the same request). Writes are buffered and emitted as Set-Cookie
    headers by apply().
    """

    def __init__(self, request: Any):
        self._cookies = dict(getattr(request, "cookies", None) or {})
        self._pending: Dict[str, str] = {}

    def get(self, key: str) -> Optional[str]:
        if key in self._pending:
            return self._pending[key]
        return self._cookies.get(key)

    def set(self, key: str, value: str) -> None:
        self._pending[key] = value

    @property
    def pending(self) -> Dict[str, str]:
        return dict(self._pending)

    def apply(self, response: Any, *, max_age: int) -> None:
        """Emit pending writes whose value differs from what the client sent"""
        for key, value in self._pending.items():
            if self._cookies.get(key) == value:
                continue
            response.set_cookie(key, value, max_age=max_age, path="/", samesite="lax")


def load_lang_from_storage(storage: Optional[PreferenceStore], key: str = DEFAULT_STORAGE_KEY) -> Optional[str]:
    """Read the stored preference; a failing backend counts as "nothing stored"."""
    if storage is None:
        return None
    try:
        value = storage.get(key)
    except Exception as e:
        logger.warning("Failed to read language preference %r: %s", key, e)
        return None
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def save_lang_to_storage(storage: Optional[PreferenceStore], lang: str, key: str = DEFAULT_STORAGE_KEY) -> bool:
    """Persist the preference. Returns False when the backend refused the write."""
    if storage is None:
        return False
    try:
        storage.set(key, lang)
    except Exception as e:
        logger.warning("Failed to persist language preference %r=%r: %s", key, lang, e)
        return False
    return True
