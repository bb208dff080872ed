"""Web routes for Jinja2 templates.

Paths here are locale-free: ``I18nMiddleware`` strips the locale segment
before routing, so ``/ja/about`` is served by the ``/{page}`` route.
"""

import logging
from pathlib import Path
from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from pathlocale.i18n import I18nState, get_i18n_state
from pathlocale.web.context import get_base_context

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

web_router = APIRouter()
templates = Jinja2Templates(directory=TEMPLATES_DIR)


@web_router.get("/", response_class=HTMLResponse)
async def index(request: Request) -> HTMLResponse:
    """Render the home page."""
    return templates.TemplateResponse(request, "index.html", get_base_context(request))


@web_router.get("/{page}", response_class=HTMLResponse)
async def page(
    request: Request,
    page: str,
    i18n: Annotated[I18nState, Depends(get_i18n_state)],
) -> HTMLResponse:
    """Render a content page backed by the translation namespace of the same name."""
    context = get_base_context(request)
    always_on = request.app.state.settings.always_namespaces

    # Always-on namespaces are loaded for every page; they are not pages themselves
    if page in always_on or page not in i18n.translations:
        logger.debug(f"No {i18n.locale} namespace for page {page!r}")
        return templates.TemplateResponse(request, "404.html", context, status_code=404)

    context["page"] = page
    return templates.TemplateResponse(request, "page.html", context)
