"""Per-request i18n state shared by server rendering and client hydration."""

from typing import Any

from fastapi import Request
from markupsafe import Markup, escape
from pydantic import BaseModel, ConfigDict, Field

from pathlocale.constants import HYDRATION_SCRIPT_ID
from pathlocale.i18n.translator import Catalog, format_translation, translate

# Characters that must not appear raw inside an inline <script> element
_SCRIPT_ESCAPES = {
    ord("<"): "\\u003c",
    ord(">"): "\\u003e",
    ord("&"): "\\u0026",
    ord("\u2028"): "\\u2028",
    ord("\u2029"): "\\u2029",
}


class I18nState(BaseModel):
    """Resolved locale, root path and catalog for one request.

    Built once by the middleware and read-only afterwards. A locale change
    produces a new state rather than mutating this one.
    """

    model_config = ConfigDict(frozen=True)

    locale: str
    path: str = "/"
    translations: Catalog = Field(default_factory=dict)

    def t(self, key: str, **kwargs: Any) -> str:
        """Translate a dot-path key, falling back to the key itself."""
        return format_translation(translate(self.translations, key), kwargs)

    def to_json(self) -> str:
        return self.model_dump_json()

    @classmethod
    def from_json(cls, payload: str | bytes) -> "I18nState":
        return cls.model_validate_json(payload)

    def hydration_script(self, element_id: str = HYDRATION_SCRIPT_ID) -> Markup:
        """Render the state as an inline JSON script for client-side hydration."""
        payload = self.to_json().translate(_SCRIPT_ESCAPES)
        return Markup(
            f'<script id="{escape(element_id)}" type="application/json">{payload}</script>'
        )


def get_i18n_state(request: Request) -> I18nState:
    """FastAPI dependency returning the state attached by ``I18nMiddleware``."""
    state = getattr(request.state, "i18n", None)
    if state is None:
        raise RuntimeError(
            f"No i18n state for {request.url.path!r}: "
            "I18nMiddleware is not installed or the path is excluded"
        )
    return state
