"""Locale-aware URL helpers for templates."""

from pathlocale.i18n.state import I18nState


def localized_href(locale: str, href: str) -> str:
    """Prefix a site path with a locale (``about`` -> ``/ja/about``).

    Absolute URLs, protocol-relative URLs and fragments are returned as-is.
    """
    if href.startswith(("http://", "https://", "//", "#", "mailto:")):
        return href
    path = href if href.startswith("/") else f"/{href}"
    return f"/{locale}{path}"


def switch_locale_href(state: I18nState, new_locale: str, query: str = "") -> str:
    """URL of the current page in another locale, keeping the query string."""
    href = localized_href(new_locale, state.path)
    return f"{href}?{query}" if query else href
