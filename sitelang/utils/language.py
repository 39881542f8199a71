"""
Language tag helpers for sitelang
"""

from __future__ import annotations

import re
from typing import Any, Mapping, Optional, Tuple

_SEPARATOR_RE = re.compile(r"[-_]")
_LANG_CODE_RE = re.compile(r"[a-zA-Z]{2}(?:-[a-zA-Z]{2})?")


def split_locale(value: Any) -> Tuple[Optional[str], Optional[str]]:
    """
    Split a locale identifier into (language, region).

    Accepts hyphen or underscore separators: "zh-CN" -> ("zh", "CN"),
    "en_us" -> ("en", "us"), "fr" -> ("fr", None). Anything that is not a
    non-empty string yields (None, None).
    """
    if not isinstance(value, str):
        return None, None

    raw = value.strip()
    if not raw:
        return None, None

    parts = _SEPARATOR_RE.split(raw)
    language = parts[0] or None
    region = parts[1] if len(parts) > 1 and parts[1] else None
    return language, region


def base_language(value: Any) -> Optional[str]:
    """
    Lower-cased language component of a locale identifier.

    Examples:
        >>> base_language("zh-CN")
        'zh'
        >>> base_language("EN_us")
        'en'
    """
    language, _ = split_locale(value)
    return language.lower() if language else None


def same_language(left: Any, right: Any) -> bool:
    """True when both identifiers carry the same (case-insensitive) language."""
    left_base = base_language(left)
    return left_base is not None and left_base == base_language(right)


def extract_lang_code(value: Any) -> Optional[str]:
    """
    First "xx" or "xx-YY" looking token in value, or None.

    Used to sanitize free-form locale signals (query strings, storage) before
    they are applied.
    """
    if not isinstance(value, str):
        return None
    match = _LANG_CODE_RE.search(value)
    return match.group(0) if match else None


def get_query_variable(query: Optional[Mapping[str, Any]], name: str) -> Optional[str]:
    """
    Read a single query-string variable.

    Returns the stripped value, or None when it is absent or blank.
    """
    if not query:
        return None
    value = query.get(name)
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        value = value[0] if value else None
        if value is None:
            return None
    text = str(value).strip()
    return text or None
