"""Locale resolution from the request path and Accept-Language header."""

import math
from collections.abc import Sequence
from dataclasses import dataclass

from pathlocale.constants import ACCEPT_LANGUAGE_DEFAULT_Q, LOCALE_SUBTAG_SEPARATOR


@dataclass(frozen=True)
class LocaleResolution:
    """Outcome of resolving a request path.

    When ``redirect_to`` is set the request must be answered with a redirect
    and ``locale``/``root_path`` should not be used to render anything.
    """

    locale: str
    root_path: str
    redirect_to: str | None = None

    @property
    def needs_redirect(self) -> bool:
        """Whether the request must be answered with a redirect to ``redirect_to``."""
        return self.redirect_to is not None


def _parse_q(params: list[str]) -> float:
    for param in params:
        name, _, value = param.partition("=")
        if name.strip().lower() != "q":
            continue
        try:
            q = float(value.strip())
        except ValueError:
            return ACCEPT_LANGUAGE_DEFAULT_Q
        return q if math.isfinite(q) else ACCEPT_LANGUAGE_DEFAULT_Q
    return ACCEPT_LANGUAGE_DEFAULT_Q


def parse_accept_language(header: str | None) -> list[str]:
    """Parse an Accept-Language header into tags ordered by preference.

    Entries are ``tag[;q=value]``. A missing or unparsable ``q`` counts as
    1.0. The sort is stable, so equally weighted tags keep header order.
    """
    if not header:
        return []

    weighted: list[tuple[str, float]] = []
    for entry in header.split(","):
        tag, *params = entry.split(";")
        tag = tag.strip()
        if not tag:
            continue
        weighted.append((tag, _parse_q(params)))

    weighted.sort(key=lambda item: item[1], reverse=True)
    return [tag for tag, _ in weighted]


def preferred_locale(
    header: str | None,
    supported: Sequence[str],
    default: str,
) -> str:
    """Return the most preferred supported locale, or ``default``.

    Each tag is tried as-is first, then with its regional subtags stripped
    (``en-US`` -> ``en``).
    """
    for tag in parse_accept_language(header):
        if tag in supported:
            return tag
        base = tag.split(LOCALE_SUBTAG_SEPARATOR, 1)[0].lower()
        if base in supported:
            return base
    return default


def resolve_locale(
    path: str,
    accept_language: str | None,
    supported: Sequence[str],
    default: str,
    redirect: bool = True,
) -> LocaleResolution:
    """Resolve the locale and root path for a request.

    Args:
        path: URL path of the request
        accept_language: Raw Accept-Language header value, if any
        supported: Supported locales
        default: Fallback locale, a member of ``supported``
        redirect: Redirect unprefixed paths to their locale-prefixed URL
            instead of serving them with the preferred locale

    Returns:
        LocaleResolution with either a locale/root path or a redirect target
    """
    segments = [segment for segment in path.split("/") if segment]

    if segments and segments[0] in supported:
        return LocaleResolution(
            locale=segments[0],
            root_path="/" + "/".join(segments[1:]),
        )

    locale = preferred_locale(accept_language, supported, default)
    root_path = path if path.startswith("/") else f"/{path}"

    if redirect:
        return LocaleResolution(
            locale=locale,
            root_path=root_path,
            redirect_to=f"/{locale}{root_path}",
        )
    return LocaleResolution(locale=locale, root_path=root_path)
