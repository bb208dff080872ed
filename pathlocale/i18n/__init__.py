"""Internationalization: locale resolution, translation loading and lookup."""

from pathlocale.i18n.exceptions import (
    NamespaceNotFoundError,
    TranslationFetchError,
    TranslationLoadError,
    TranslationParseError,
    TranslationShapeError,
)
from pathlocale.i18n.links import localized_href, switch_locale_href
from pathlocale.i18n.middleware import I18nMiddleware
from pathlocale.i18n.resolver import (
    LocaleResolution,
    parse_accept_language,
    preferred_locale,
    resolve_locale,
)
from pathlocale.i18n.state import I18nState, get_i18n_state
from pathlocale.i18n.store import TranslationStore, request_namespaces
from pathlocale.i18n.translator import Catalog, create_translator, translate

__all__ = [
    # Resolution
    "LocaleResolution",
    "parse_accept_language",
    "preferred_locale",
    "resolve_locale",
    # Loading
    "TranslationStore",
    "request_namespaces",
    "NamespaceNotFoundError",
    "TranslationFetchError",
    "TranslationLoadError",
    "TranslationParseError",
    "TranslationShapeError",
    # Lookup
    "Catalog",
    "create_translator",
    "translate",
    # Request state
    "I18nMiddleware",
    "I18nState",
    "get_i18n_state",
    "localized_href",
    "switch_locale_href",
]
