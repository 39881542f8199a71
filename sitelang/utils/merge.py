"""
Deep merge for nested translation dictionaries
"""

from __future__ import annotations

import copy
from typing import Any, Dict, Mapping, Optional


def merge_deep(target: Dict[str, Any], *sources: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """
    Merge sources into target, left to right, recursing into nested mappings.

    Later sources win for scalar values. Keys that exist in only one side are
    kept (full union). Sources are never mutated: nested mappings and lists
    are copied into target.

    Returns target so calls can be chained: ``merge_deep({}, base, override)``.
    """
    for source in sources:
        if not source:
            continue
        for key, value in source.items():
            if isinstance(value, Mapping):
                current = target.get(key)
                if not isinstance(current, dict):
                    current = {}
                    target[key] = current
                merge_deep(current, value)
            else:
                target[key] = copy.deepcopy(value)
    return target
