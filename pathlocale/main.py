"""Main FastAPI application."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from datetime import UTC, datetime

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from pathlocale import __version__
from pathlocale.config import Settings, get_settings
from pathlocale.i18n import I18nMiddleware, TranslationStore
from pathlocale.utils.http_client import close_translation_client
from pathlocale.utils.logging import setup_logging
from pathlocale.web import web_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    settings: Settings = app.state.settings
    logger.info(
        f"Serving locales {settings.supported_locales} (default: {settings.default_locale}, "
        f"redirect: {settings.locale_redirect}) from {settings.translations_base}"
    )

    yield

    await close_translation_client()
    logger.info("Application shutdown complete")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application.

    The translation store is built here, so an unreadable configuration
    fails at startup instead of on the first request.
    """
    settings = settings or get_settings()
    setup_logging(settings)

    store = TranslationStore.from_settings(settings)

    app = FastAPI(
        title=settings.app_name,
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.translations = store
    app.state.started_at = datetime.now(UTC)

    app.add_middleware(I18nMiddleware, store=store, settings=settings)

    @app.get("/health", include_in_schema=True, tags=["monitoring"])
    async def health_check(request: Request) -> JSONResponse:
        """Health check endpoint for monitoring and load balancers.

        Returns:
            JSONResponse with status, uptime, and translation asset counts.
        """
        started_at: datetime = request.app.state.started_at

        health_status = {
            "status": "healthy",
            "timestamp": datetime.now(UTC).isoformat(),
            "uptime_seconds": (datetime.now(UTC) - started_at).total_seconds(),
            "version": __version__,
            "checks": {},
        }

        missing = [loc for loc in settings.supported_locales if not store.namespaces(loc)]
        health_status["checks"]["translations"] = {
            "status": "unhealthy" if missing else "healthy",
            "assets": len(store),
            "locales_without_translations": missing,
        }
        if missing:
            health_status["status"] = "degraded"

        status_code = 200 if health_status["status"] == "healthy" else 503
        return JSONResponse(content=health_status, status_code=status_code)

    # Web routes last: "/{page}" matches any single segment
    app.include_router(web_router)

    return app


app = create_app()
