"""
Site identifier helpers.

A multi-language site is configured with a comma-separated list of site
identifiers where each entry may carry a language prefix, e.g.
``"zh:02ab3b8678004aa69e9e415905ef32a5,en:7c1d570661754c8fbc568e00a01fd70e"``.
"""

from __future__ import annotations

import re
from typing import List, Optional

_LANG_PREFIX_RE = re.compile(r"^(?:([a-zA-Z]{2}(?:-[a-zA-Z]{2})?):)?(.*)$", re.DOTALL)

SITE_ID_SEPARATOR = ","


def extract_lang_prefix(site_id: Optional[str]) -> str:
    """
    Language prefix of a site identifier, or "" when it has none.

    Examples:
        >>> extract_lang_prefix("zh-CN:abc")
        'zh-CN'
        >>> extract_lang_prefix("abc")
        ''
    """
    if not site_id:
        return ""
    match = _LANG_PREFIX_RE.match(site_id.strip())
    return match.group(1) if match and match.group(1) else ""


def extract_lang_id(site_id: Optional[str]) -> str:
    """Site identifier with its language prefix removed."""
    if not site_id:
        return ""
    match = _LANG_PREFIX_RE.match(site_id.strip())
    return match.group(2) if match else ""


def is_multi_locale(page_id: Optional[str]) -> bool:
    """A site list describes a multi-language site when it contains a separator."""
    return bool(page_id) and SITE_ID_SEPARATOR in page_id


def split_site_ids(page_id: Optional[str]) -> List[str]:
    """Split a site identifier list, keeping empty entries out."""
    if not page_id:
        return []
    return [entry.strip() for entry in page_id.split(SITE_ID_SEPARATOR) if entry.strip()]
