"""Namespaced translation store.

The set of loadable translations is fixed when the store is built: every
(locale, namespace) pair maps to a loader coroutine. Per request, a catalog
is assembled by loading the wanted namespaces concurrently. Namespaces that
fail to load are left out of the catalog and logged; loading never raises.
"""

import asyncio
import json
import logging
import re
from collections.abc import Awaitable, Callable, Iterable, Sequence
from pathlib import Path

import httpx
from pydantic import StrictStr, TypeAdapter, ValidationError

from pathlocale.config import Settings
from pathlocale.constants import KEY_DELIMITER, NAMESPACE_PATTERN, TRANSLATION_FILE_SUFFIX
from pathlocale.i18n.exceptions import (
    NamespaceNotFoundError,
    TranslationFetchError,
    TranslationLoadError,
    TranslationParseError,
    TranslationShapeError,
)
from pathlocale.i18n.translator import Catalog
from pathlocale.utils.http_client import get_translation_client
from pathlocale.utils.logging import LogContext

logger = logging.getLogger(__name__)

Loader = Callable[[], Awaitable[str]]

_NAMESPACE_RE = re.compile(NAMESPACE_PATTERN)
_TABLE_ADAPTER = TypeAdapter(dict[str, StrictStr])


def is_valid_namespace(namespace: str) -> bool:
    """Check that a namespace is a single filesystem/URL-safe identifier."""
    return bool(_NAMESPACE_RE.match(namespace))


def request_namespaces(root_path: str, always: Iterable[str]) -> list[str]:
    """Namespaces to load for a request.

    The always-on namespaces come first, followed by one namespace per
    segment of the root path (``/about`` -> ``about``). Segments that are not
    valid namespace identifiers are skipped. Duplicates are removed.
    """
    segments = [segment for segment in root_path.split("/") if segment]
    candidates = [*always, *segments]
    return list(dict.fromkeys(ns for ns in candidates if is_valid_namespace(ns)))


def _file_loader(path: Path) -> Loader:
    async def load() -> str:
        return await asyncio.to_thread(path.read_text, encoding="utf-8")

    return load


def _url_loader(url: str, client: httpx.AsyncClient | None) -> Loader:
    async def load() -> str:
        http = client or get_translation_client()
        response = await http.get(url)
        response.raise_for_status()
        return response.text

    return load


def parse_table(locale: str, namespace: str, raw: str) -> dict[str, str]:
    """Decode and validate one translation table.

    Raises:
        TranslationParseError: content is not JSON
        TranslationShapeError: content is not a flat string-to-string object
    """
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise TranslationParseError(locale, namespace, f"invalid JSON: {e}") from e

    try:
        table = _TABLE_ADAPTER.validate_python(data)
    except ValidationError as e:
        raise TranslationShapeError(
            locale, namespace, f"expected flat string mapping ({e.error_count()} errors)"
        ) from e

    dotted = [key for key in table if KEY_DELIMITER in key]
    if dotted:
        raise TranslationShapeError(
            locale, namespace, f"keys must not contain {KEY_DELIMITER!r}: {dotted}"
        )
    return table


class TranslationStore:
    """Registry of translation assets keyed by (locale, namespace)."""

    def __init__(
        self,
        assets: dict[tuple[str, str], Loader],
        timeout: float | None = None,
    ) -> None:
        self._assets = dict(assets)
        self.timeout = timeout

    @classmethod
    def from_directory(
        cls,
        base: str | Path,
        locales: Sequence[str],
        timeout: float | None = None,
    ) -> "TranslationStore":
        """Register every ``{base}/{locale}/{namespace}.json`` file."""
        base = Path(base)
        assets: dict[tuple[str, str], Loader] = {}

        for locale in locales:
            locale_dir = base / locale
            if not locale_dir.is_dir():
                logger.warning(f"No translation directory for locale {locale!r} at {locale_dir}")
                continue
            for path in sorted(locale_dir.glob(f"*{TRANSLATION_FILE_SUFFIX}")):
                namespace = path.stem
                if not is_valid_namespace(namespace):
                    logger.warning(f"Skipping translation file with unsafe name: {path}")
                    continue
                assets[(locale, namespace)] = _file_loader(path)

        logger.info(f"Registered {len(assets)} translation files from {base}")
        return cls(assets, timeout=timeout)

    @classmethod
    def from_url(
        cls,
        base_url: str,
        locales: Sequence[str],
        namespaces: Sequence[str],
        client: httpx.AsyncClient | None = None,
        timeout: float | None = None,
    ) -> "TranslationStore":
        """Register ``{base_url}/{locale}/{namespace}.json`` for every pair.

        Without an explicit ``client`` the shared persistent client is used.
        """
        base_url = base_url.rstrip("/")
        assets: dict[tuple[str, str], Loader] = {}

        for locale in locales:
            for namespace in namespaces:
                if not is_valid_namespace(namespace):
                    raise ValueError(f"Invalid translation namespace: {namespace!r}")
                url = f"{base_url}/{locale}/{namespace}{TRANSLATION_FILE_SUFFIX}"
                assets[(locale, namespace)] = _url_loader(url, client)

        logger.info(f"Registered {len(assets)} remote translation resources at {base_url}")
        return cls(assets, timeout=timeout)

    @classmethod
    def from_settings(cls, settings: Settings) -> "TranslationStore":
        """Build the store described by the application settings."""
        if settings.is_remote_source:
            return cls.from_url(
                settings.translations_base,
                settings.supported_locales,
                settings.translation_namespaces,
                timeout=settings.translation_load_timeout,
            )
        return cls.from_directory(
            settings.translations_base,
            settings.supported_locales,
            timeout=settings.translation_load_timeout,
        )

    def __len__(self) -> int:
        return len(self._assets)

    def __contains__(self, item: object) -> bool:
        return item in self._assets

    def namespaces(self, locale: str) -> list[str]:
        """List the namespaces available for a locale."""
        return sorted(ns for loc, ns in self._assets if loc == locale)

    async def load_namespace(self, locale: str, namespace: str) -> dict[str, str]:
        """Load one translation table.

        Raises:
            TranslationLoadError: one of its subclasses, describing the failure
        """
        loader = self._assets.get((locale, namespace))
        if loader is None:
            raise NamespaceNotFoundError(locale, namespace, "no translation asset registered")

        try:
            if self.timeout is not None:
                raw = await asyncio.wait_for(loader(), timeout=self.timeout)
            else:
                raw = await loader()
        except TimeoutError as e:
            raise TranslationFetchError(locale, namespace, f"timed out after {self.timeout}s") from e
        except (OSError, UnicodeDecodeError, httpx.HTTPError) as e:
            raise TranslationFetchError(locale, namespace, str(e) or type(e).__name__) from e

        return parse_table(locale, namespace, raw)

    async def _load_or_none(
        self, locale: str, namespace: str, log: LogContext
    ) -> dict[str, str] | None:
        try:
            return await self.load_namespace(locale, namespace)
        except NamespaceNotFoundError:
            log.debug(f"No {namespace!r} namespace")
        except TranslationLoadError as e:
            log.warning(f"Dropping {namespace!r} namespace: {e.reason}")
        except Exception:
            log.exception(f"Unexpected error loading {namespace!r} namespace")
        return None

    async def load(
        self,
        locale: str,
        namespaces: Iterable[str],
        **log_context: str,
    ) -> Catalog:
        """Load a catalog of namespaces for a locale.

        Namespaces are loaded concurrently, each at most once. The catalog is
        returned only when every load has finished; failed namespaces are
        omitted. ``log_context`` (e.g. the request path) is added to the
        failure log lines next to the locale.
        """
        log = LogContext(logger, locale=locale, **log_context)
        unique = list(dict.fromkeys(namespaces))
        tables = await asyncio.gather(*(self._load_or_none(locale, ns, log) for ns in unique))
        return {ns: table for ns, table in zip(unique, tables) if table is not None}
