from __future__ import annotations

import pytest

from sitelang.config.settings import LocaleSettings
from sitelang.i18n.environment import StaticEnvironment
from sitelang.i18n.registry import LocaleRegistry, load_default_registry
from sitelang.i18n.storage import MemoryPreferenceStore


@pytest.fixture
def registry() -> LocaleRegistry:
    return load_default_registry()


@pytest.fixture
def locale_settings() -> LocaleSettings:
    return LocaleSettings()


@pytest.fixture
def storage() -> MemoryPreferenceStore:
    return MemoryPreferenceStore()


@pytest.fixture
def make_env():
    """Factory for browsing-context environments"""

    def _make(pathname="/", query=None, platform_language=None, is_browser=True):
        return StaticEnvironment(
            pathname=pathname,
            query=dict(query or {}),
            platform_language=platform_language,
            is_browser=is_browser,
        )

    return _make
