"""Template context helpers."""

from functools import partial
from typing import Any

from fastapi import Request

from pathlocale.i18n import get_i18n_state, localized_href, switch_locale_href


def get_base_context(request: Request) -> dict[str, Any]:
    """Get base context for all templates."""
    i18n = get_i18n_state(request)
    settings = request.app.state.settings

    # First root path segment drives navbar highlighting
    segments = [segment for segment in i18n.path.split("/") if segment]
    current_page = segments[0] if segments else "index"

    return {
        "request": request,
        "locale": i18n.locale,
        "path": i18n.path,
        "t": i18n.t,
        "href": partial(localized_href, i18n.locale),
        "switch_locale": partial(switch_locale_href, i18n, query=request.url.query),
        "supported_locales": settings.supported_locales,
        "i18n_state": i18n,
        "current_page": current_page,
    }
