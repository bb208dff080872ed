"""Translation loading exceptions."""


class TranslationLoadError(Exception):
    """Base error for a namespace that could not be loaded."""

    def __init__(self, locale: str, namespace: str, reason: str) -> None:
        self.locale = locale
        self.namespace = namespace
        self.reason = reason
        super().__init__(f"{locale}/{namespace}: {reason}")


class NamespaceNotFoundError(TranslationLoadError):
    """No translation asset is registered for the locale/namespace pair."""


class TranslationFetchError(TranslationLoadError):
    """The asset exists but reading or fetching it failed."""


class TranslationParseError(TranslationLoadError):
    """The asset content is not valid JSON."""


class TranslationShapeError(TranslationLoadError):
    """The decoded JSON is not a flat string-to-string mapping."""
