"""
Locale registry: the fixed mapping of locale id -> translation dictionary.

Iteration order is insertion order. Language-only lookups in the dictionary
builder pick the first matching key, so the order of DEFAULT_LOCALE_IDS is
part of the behavior.
"""

from __future__ import annotations

import copy
import json
import logging
from importlib import resources
from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, Mapping, Optional, Tuple, Union

from sitelang.exceptions import LocaleConfigurationError

logger = logging.getLogger(__name__)

Dictionary = Dict[str, Any]

ENGLISH_LOCALE = "en-US"

DEFAULT_LOCALE_IDS: Tuple[str, ...] = (
    "en-US",
    "zh-CN",
    "zh-HK",
    "zh-TW",
    "fr-FR",
    "tr-TR",
    "ja-JP",
)

_LOCALE_PACKAGE = "sitelang.locales"


class LocaleRegistry(Mapping):
    """
    Immutable, ordered mapping of locale identifier to dictionary.

    Dictionaries are deep-copied on construction so later changes to the
    caller's objects never leak into the registry. An English entry (a key
    starting with "en") is required because it is the universal fallback.
    """

    def __init__(self, dictionaries: Union[Mapping[str, Mapping], Iterable[Tuple[str, Mapping]]]):
        items = dictionaries.items() if isinstance(dictionaries, Mapping) else dictionaries

        entries: Dict[str, Dictionary] = {}
        for locale_id, dictionary in items:
            if not isinstance(locale_id, str) or not locale_id.strip():
                raise LocaleConfigurationError("locale id must be a non-empty string", locale=str(locale_id))
            if not isinstance(dictionary, Mapping):
                raise LocaleConfigurationError("dictionary must be a mapping", locale=locale_id)
            entries[locale_id.strip()] = copy.deepcopy(dict(dictionary))

        self._entries = MappingProxyType(entries)
        self._english_key = self._find_english_key(entries)
        if self._english_key is None:
            raise LocaleConfigurationError(
                "registry has no English dictionary",
                details={"locales": list(entries)},
            )

    @staticmethod
    def _find_english_key(entries: Mapping[str, Any]) -> Optional[str]:
        for key in entries:
            if key.lower() == ENGLISH_LOCALE.lower():
                return key
        for key in entries:
            if key.lower().startswith("en"):
                return key
        return None

    def __getitem__(self, locale_id: str) -> Dictionary:
        return self._entries[locale_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"LocaleRegistry({list(self._entries)!r})"

    @property
    def english_key(self) -> str:
        """Registry key of the English fallback dictionary"""
        return self._english_key

    @property
    def english(self) -> Dictionary:
        return self._entries[self._english_key]

    def find(self, locale_id: Optional[str]) -> Optional[str]:
        """
        Case-insensitive exact lookup.

        Returns the registry's own spelling of the key ("zh-cn" -> "zh-CN"),
        or None when the id is not registered.
        """
        if not isinstance(locale_id, str):
            return None
        wanted = locale_id.strip().lower()
        if not wanted:
            return None
        for key in self._entries:
            if key.lower() == wanted:
                return key
        return None


def load_locale_file(locale_id: str) -> Dictionary:
    """
    Load one packaged locale dictionary (sitelang/locales/<locale_id>.json).

    Raises:
        LocaleConfigurationError: when the file is missing or not a JSON object
    """
    resource = resources.files(_LOCALE_PACKAGE).joinpath(f"{locale_id}.json")
    try:
        data = json.loads(resource.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise LocaleConfigurationError("locale file not found", locale=locale_id) from e
    except json.JSONDecodeError as e:
        raise LocaleConfigurationError(
            "locale file is not valid JSON",
            locale=locale_id,
            details={"line": e.lineno, "column": e.colno},
        ) from e

    if not isinstance(data, dict):
        raise LocaleConfigurationError("locale file must contain a JSON object", locale=locale_id)
    return data


def build_registry(locale_ids: Iterable[str] = DEFAULT_LOCALE_IDS) -> LocaleRegistry:
    """Build a registry from packaged locale files, preserving the given order."""
    registry = LocaleRegistry((locale_id, load_locale_file(locale_id)) for locale_id in locale_ids)
    logger.info("Loaded %d locale dictionaries: %s", len(registry), ", ".join(registry))
    return registry


_default_registry: Optional[LocaleRegistry] = None


def load_default_registry() -> LocaleRegistry:
    """
    The packaged registry, built once per process.

    Returns:
        LocaleRegistry with every locale in DEFAULT_LOCALE_IDS
    """
    global _default_registry
    if _default_registry is None:
        _default_registry = build_registry()
    return _default_registry
