"""
Unit tests for locale settings
"""

import pytest
from pydantic import ValidationError

from sitelang.config.settings import (
    ApplicationSettings,
    Environment,
    LocaleSettings,
    get_settings,
    reload_settings,
)


@pytest.mark.unit
class TestLocaleSettings:
    """LocaleSettings defaults and parsing"""

    def test_defaults(self):
        settings = LocaleSettings()
        assert settings.default_locale == "en-US"
        assert settings.chinese_locale == "zh-CN"
        assert settings.storage_key == "lang"
        assert settings.query_param_list == ["locale", "lang"]
        assert settings.path_alias_map == {"en": "en-US"}
        assert settings.platform_language is None
        assert settings.site_ids == ""
        assert "/api" in settings.redirect_exclude_list

    def test_environment_variables(self, monkeypatch):
        monkeypatch.setenv("LOCALE_STORAGE_KEY", "site_lang")
        monkeypatch.setenv("LOCALE_PLATFORM_LANGUAGE", "zh-TW")
        monkeypatch.setenv("LOCALE_REDIRECT_ENABLED", "false")
        settings = LocaleSettings()
        assert settings.storage_key == "site_lang"
        assert settings.platform_language == "zh-TW"
        assert settings.redirect_enabled is False

    def test_site_ids_alias(self, monkeypatch):
        monkeypatch.setenv("NOTION_PAGE_ID", "zh:abc,en:def")
        assert LocaleSettings().site_ids == "zh:abc,en:def"

    def test_site_ids_by_name(self):
        assert LocaleSettings(site_ids="zh:a,en:b").site_ids == "zh:a,en:b"

    def test_blank_platform_language(self):
        assert LocaleSettings(platform_language="  ").platform_language is None

    def test_empty_storage_key_rejected(self):
        with pytest.raises(ValidationError):
            LocaleSettings(storage_key=" ")

    def test_list_parsing(self):
        settings = LocaleSettings(
            query_params=" hl , locale ",
            path_aliases="ja=ja-JP, bad, =x, ZH=zh-CN",
            redirect_exclude_prefixes="/api/, /assets",
        )
        assert settings.query_param_list == ["hl", "locale"]
        assert settings.path_alias_map == {"ja": "ja-JP", "zh": "zh-CN"}
        assert settings.redirect_exclude_list == ["/api/", "/assets"]

    def test_empty_query_params_fall_back(self):
        assert LocaleSettings(query_params="").query_param_list == ["locale", "lang"]


@pytest.mark.unit
class TestApplicationSettings:
    """ApplicationSettings"""

    def test_nested_locale_settings(self):
        settings = ApplicationSettings(i18n=LocaleSettings(default_locale="fr-FR"))
        assert settings.i18n.default_locale == "fr-FR"

    def test_log_level_normalized(self):
        assert ApplicationSettings(log_level="debug").log_level == "DEBUG"

    def test_environment_flags(self):
        settings = ApplicationSettings(environment=Environment.PRODUCTION)
        assert settings.is_production
        assert not settings.is_development

    def test_reload_settings(self, monkeypatch):
        monkeypatch.setenv("LOCALE_DEFAULT_LOCALE", "ja-JP")
        try:
            reloaded = reload_settings()
            assert get_settings() is reloaded
            assert reloaded.i18n.default_locale == "ja-JP"
        finally:
            monkeypatch.delenv("LOCALE_DEFAULT_LOCALE")
            reload_settings()
