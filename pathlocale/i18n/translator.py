"""Dot-path translation lookup."""

from collections.abc import Callable, Mapping
from typing import Any

from pathlocale.constants import KEY_DELIMITER

Catalog = dict[str, dict[str, str]]


def translate(catalog: Mapping[str, Any], key: str) -> str:
    """Resolve ``namespace.key`` against a catalog.

    Any miss along the way (unknown namespace, unknown key, a segment past a
    string value, or a non-string result) returns ``key`` unchanged.
    """
    value: Any = catalog
    for part in key.split(KEY_DELIMITER):
        if isinstance(value, Mapping) and part in value:
            value = value[part]
        else:
            return key

    return value if isinstance(value, str) else key


def format_translation(translation: str, values: Mapping[str, Any]) -> str:
    """Interpolate ``{name}`` placeholders, leaving the text as-is on mismatch."""
    if not values:
        return translation
    try:
        return translation.format(**values)
    except (AttributeError, IndexError, KeyError, TypeError, ValueError):
        return translation


def create_translator(catalog: Mapping[str, Any]) -> Callable[..., str]:
    """Bind ``translate`` to a catalog."""

    def t(key: str, **kwargs: Any) -> str:
        return format_translation(translate(catalog, key), kwargs)

    return t
