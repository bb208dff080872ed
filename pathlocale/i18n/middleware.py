"""Per-request locale resolution and catalog loading."""

import logging

from fastapi import Request, Response
from fastapi.responses import RedirectResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from pathlocale.config import Settings
from pathlocale.constants import LOCALE_REDIRECT_STATUS
from pathlocale.i18n.resolver import resolve_locale
from pathlocale.i18n.state import I18nState
from pathlocale.i18n.store import TranslationStore, request_namespaces
from pathlocale.utils.logging import LogContext

logger = logging.getLogger(__name__)


class I18nMiddleware(BaseHTTPMiddleware):
    """Resolve the locale, load translations and expose them on ``request.state.i18n``.

    Unprefixed paths are either redirected to ``/{locale}/...`` (307) or
    served with the preferred locale, depending on ``settings.locale_redirect``.
    Downstream routing sees the root path, so routes are declared without a
    locale segment.
    """

    def __init__(self, app: ASGIApp, store: TranslationStore, settings: Settings) -> None:
        super().__init__(app)
        self.store = store
        self.settings = settings

    def is_excluded(self, path: str) -> bool:
        return any(
            path == prefix or path.startswith(prefix.rstrip("/") + "/")
            for prefix in self.settings.excluded_path_prefixes
        )

    async def dispatch(self, request: Request, call_next) -> Response:
        path = request.url.path
        if self.is_excluded(path):
            return await call_next(request)

        resolution = resolve_locale(
            path,
            request.headers.get("accept-language"),
            self.settings.supported_locales,
            self.settings.default_locale,
            redirect=self.settings.locale_redirect,
        )

        if resolution.needs_redirect:
            location = resolution.redirect_to
            if request.url.query:
                location = f"{location}?{request.url.query}"
            logger.debug(f"Redirecting {path} to {location}")
            return RedirectResponse(url=location, status_code=LOCALE_REDIRECT_STATUS)

        log = LogContext(logger, locale=resolution.locale, path=resolution.root_path)
        namespaces = request_namespaces(resolution.root_path, self.settings.always_namespaces)
        catalog = await self.store.load(
            resolution.locale, namespaces, path=resolution.root_path
        )
        log.debug(f"Loaded {len(catalog)}/{len(namespaces)} namespaces: {sorted(catalog)}")
        if not catalog:
            log.warning("No translations loaded")

        request.state.i18n = I18nState(
            locale=resolution.locale,
            path=resolution.root_path,
            translations=catalog,
        )
        # Route on the locale-free path
        request.scope["path"] = resolution.root_path

        response = await call_next(request)
        response.headers.setdefault("Content-Language", resolution.locale)
        return response
