"""
Utility functions for sitelang
"""

from .language import base_language, extract_lang_code, get_query_variable, split_locale
from .merge import merge_deep
from .page_id import extract_lang_id, extract_lang_prefix

__all__ = [
    "base_language",
    "extract_lang_code",
    "extract_lang_id",
    "extract_lang_prefix",
    "get_query_variable",
    "merge_deep",
    "split_locale",
]
