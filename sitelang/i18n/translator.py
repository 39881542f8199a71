from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from sitelang.i18n.context import get_dictionary
from sitelang.i18n.registry import LocaleRegistry, load_default_registry

logger = logging.getLogger(__name__)


def lookup(dictionary: Optional[Dict[str, Any]], key: str) -> Optional[str]:
    """Resolve a dotted key ("COMMON.MORE") to a string, or None."""
    node: Any = dictionary
    for part in key.split("."):
        if not isinstance(node, dict) or part not in node:
            return None
        node = node[part]
    return node if isinstance(node, str) else None


def t(
    key: str,
    default: Optional[str] = None,
    *,
    registry: Optional[LocaleRegistry] = None,
    **params: Any,
) -> str:
    """
    Translate key using the request's active dictionary.

    Falls back to the English dictionary, then to default, then to the key
    itself. Params are applied with str.format; a template that does not
    accept them is returned unformatted.
    """
    template = lookup(get_dictionary(), key)
    if template is None:
        registry = registry if registry is not None else load_default_registry()
        template = lookup(registry.english, key)
    if template is None:
        logger.debug("Missing translation key %r", key)
        template = default if default is not None else key

    if not params:
        return template
    try:
        return template.format(**params)
    except (KeyError, IndexError, ValueError):
        return template
