from __future__ import annotations

import logging
from typing import Callable, List, Optional, Tuple

from fastapi import FastAPI, Request
from starlette.responses import RedirectResponse

from sitelang.config.settings import LocaleSettings, get_settings
from sitelang.i18n.context import reset_dictionary, reset_language, set_dictionary, set_language
from sitelang.i18n.environment import RequestEnvironment
from sitelang.i18n.initializer import init_locale
from sitelang.i18n.redirector import redirect_user_lang
from sitelang.i18n.registry import LocaleRegistry, load_default_registry
from sitelang.i18n.resolver import first_path_segment, locale_for_path_segment
from sitelang.i18n.storage import CookiePreferenceStore
from sitelang.utils.page_id import is_multi_locale

logger = logging.getLogger(__name__)

_REDIRECT_METHODS = {"GET", "HEAD"}


def is_landing_path(path: str, registry: LocaleRegistry, settings: LocaleSettings) -> bool:
    """
    "/" or a bare language path such as "/en".

    Only landing paths are redirected; deeper pages keep their URL.
    """
    stripped = (path or "/").strip("/")
    if not stripped:
        return True
    if "/" in stripped:
        return False
    return locale_for_path_segment(first_path_segment(stripped), registry, settings) is not None


def should_redirect(request: Request, registry: LocaleRegistry, settings: LocaleSettings) -> bool:
    if not settings.redirect_enabled or not is_multi_locale(settings.site_ids):
        return False
    if request.method.upper() not in _REDIRECT_METHODS:
        return False
    path = request.url.path or "/"
    for prefix in settings.redirect_exclude_list:
        if path == prefix or path.startswith(prefix.rstrip("/") + "/"):
            return False
    return is_landing_path(path, registry, settings)


def install_locale_middleware(
    app: FastAPI,
    *,
    registry: Optional[LocaleRegistry] = None,
    settings: Optional[LocaleSettings] = None,
) -> None:
    """
    Install per-request locale resolution.

    This middleware guarantees:
    - visitors on a landing path of a multi-language site are redirected
      (302) to the canonical path of their language
    - the resolved language and merged dictionary are available via
      ContextVars (sitelang.i18n.get_language / get_dictionary)
    - the resolved language is persisted in a cookie and echoed in
      Content-Language
    """

    @app.middleware("http")
    async def _locale_middleware(request: Request, call_next):
        locale_settings = settings if settings is not None else get_settings().i18n
        active_registry = registry if registry is not None else load_default_registry()

        environment = RequestEnvironment(request, platform_language=locale_settings.platform_language)
        storage = CookiePreferenceStore(request)

        if should_redirect(request, active_registry, locale_settings):
            target = redirect_user_lang(
                locale_settings.site_ids,
                environment=environment,
                storage=storage,
                registry=active_registry,
                settings=locale_settings,
            )
            if target:
                logger.info("Locale redirect %s -> %s", request.url.path, target)
                return RedirectResponse(url=target, status_code=302)

        resets: List[Tuple[Callable[[object], None], object]] = []

        def _change_lang(code: str) -> None:
            resets.append((reset_language, set_language(code)))

        def _update_locale(dictionary) -> None:
            resets.append((reset_dictionary, set_dictionary(dictionary)))

        lang = init_locale(
            _change_lang,
            _update_locale,
            environment=environment,
            storage=storage,
            registry=active_registry,
            settings=locale_settings,
        )
        try:
            response = await call_next(request)
        finally:
            for reset, token in reversed(resets):
                reset(token)

        if lang:
            response.headers["Content-Language"] = lang
        storage.apply(response, max_age=locale_settings.cookie_max_age)
        return response
