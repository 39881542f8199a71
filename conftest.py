from __future__ import annotations

import os
import sys
from pathlib import Path


ROOT_DIR = Path(__file__).resolve().parent

if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))


def _isolate_locale_env() -> None:
    """Keep a developer's locale configuration out of the test run."""
    for key in list(os.environ):
        if key.upper().startswith("LOCALE_"):
            os.environ.pop(key, None)
    os.environ.pop("NOTION_PAGE_ID", None)
    os.environ.setdefault("ENVIRONMENT", "test")
    os.environ.setdefault("LOG_LEVEL", "DEBUG")


_isolate_locale_env()
