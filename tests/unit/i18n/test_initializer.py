"""
Unit tests for init_locale
"""

from unittest.mock import Mock

import pytest

from sitelang.config.settings import LocaleSettings
from sitelang.i18n.initializer import init_locale
from sitelang.i18n.storage import MemoryPreferenceStore


@pytest.mark.unit
class TestInitLocale:
    """init_locale orchestration"""

    def test_applies_and_persists(self, make_env, storage, registry):
        change_lang = Mock()
        update_locale = Mock()

        result = init_locale(change_lang, update_locale, environment=make_env(pathname="/fr"), storage=storage)

        assert result == "fr-FR"
        change_lang.assert_called_once_with("fr-FR")
        update_locale.assert_called_once()
        dictionary = update_locale.call_args.args[0]
        assert dictionary["NAV"]["INDEX"] == "Accueil"
        assert dictionary["COMMON"]["SCAN_QR_CODE"] == registry.english["COMMON"]["SCAN_QR_CODE"]
        assert storage.get("lang") == "fr-FR"

    def test_callback_order(self, make_env, storage):
        calls = []
        init_locale(
            lambda code: calls.append(("change_lang", code)),
            lambda dictionary: calls.append(("update_locale", dictionary["LOCALE"])),
            environment=make_env(platform_language="zh-TW"),
            storage=storage,
        )
        assert calls == [("change_lang", "zh-CN"), ("update_locale", "zh-CN")]

    def test_not_a_browser_is_a_no_op(self, make_env, storage):
        change_lang = Mock()
        update_locale = Mock()

        result = init_locale(change_lang, update_locale, environment=make_env(is_browser=False), storage=storage)

        assert result is None
        change_lang.assert_not_called()
        update_locale.assert_not_called()
        assert storage.to_dict() == {}

    def test_extracts_language_code_from_query(self, make_env, storage):
        change_lang = Mock()
        init_locale(change_lang, Mock(), environment=make_env(query={"lang": "ja-JP?utm=x"}), storage=storage)
        change_lang.assert_called_once_with("ja-JP")
        assert storage.get("lang") == "ja-JP"

    def test_value_without_language_code_is_ignored(self, make_env, storage):
        change_lang = Mock()
        update_locale = Mock()

        result = init_locale(change_lang, update_locale, environment=make_env(query={"lang": "1"}), storage=storage)

        assert result is None
        change_lang.assert_not_called()
        update_locale.assert_not_called()

    def test_unregistered_language_gets_english_dictionary(self, make_env, storage, registry):
        update_locale = Mock()
        init_locale(Mock(), update_locale, environment=make_env(query={"locale": "de-DE"}), storage=storage)
        assert update_locale.call_args.args[0] == registry.english
        assert storage.get("lang") == "de-DE"

    def test_storage_write_failure_is_not_raised(self, make_env):
        storage = Mock()
        storage.get.return_value = None
        storage.set.side_effect = OSError("quota exceeded")
        change_lang = Mock()

        assert init_locale(change_lang, Mock(), environment=make_env(), storage=storage) == "en-US"
        change_lang.assert_called_once_with("en-US")

    def test_callback_return_values_are_ignored(self, make_env, storage):
        result = init_locale(lambda code: "ignored", lambda d: False, environment=make_env(), storage=storage)
        assert result == "en-US"

    def test_custom_storage_key(self, make_env):
        storage = MemoryPreferenceStore()
        settings = LocaleSettings(storage_key="site_lang")
        init_locale(Mock(), Mock(), environment=make_env(pathname="/en"), storage=storage, settings=settings)
        assert storage.to_dict() == {"site_lang": "en-US"}
