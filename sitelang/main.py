"""
sitelang application factory

Run with: uvicorn sitelang.main:app
"""

import logging
from typing import Optional

from fastapi import FastAPI

from sitelang.config.settings import ApplicationSettings, get_settings
from sitelang.i18n.context import get_language
from sitelang.i18n.middleware import install_locale_middleware
from sitelang.i18n.registry import LocaleRegistry, load_default_registry
from sitelang.routers import locale_router
from sitelang.utils.app_logger import configure_logging

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[ApplicationSettings] = None,
    registry: Optional[LocaleRegistry] = None,
) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    registry = registry if registry is not None else load_default_registry()

    app = FastAPI(
        title="sitelang",
        description="Site locale resolution and language redirects",
        version="0.1.0",
        debug=settings.debug,
    )
    app.state.locale_registry = registry
    install_locale_middleware(app, registry=registry, settings=settings.i18n)
    app.include_router(locale_router)

    @app.get("/health")
    async def health():
        return {"status": "ok", "lang": get_language(), "locales": len(registry)}

    logger.info(
        "sitelang started (environment=%s, multi_locale=%s)",
        settings.environment.value,
        "," in settings.i18n.site_ids,
    )
    return app


app = create_app()
