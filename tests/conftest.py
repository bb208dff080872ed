"""Pytest configuration and fixtures."""

import json
from collections.abc import AsyncGenerator
from pathlib import Path
from typing import Any

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from pathlocale.config import Settings
from pathlocale.i18n import TranslationStore
from pathlocale.main import create_app

TRANSLATIONS: dict[str, dict[str, dict[str, Any]]] = {
    "en": {
        "common": {"title": "Welcome", "welcome": "Hello", "home": "Home", "about": "About"},
        "error": {"not_found_title": "Page not found"},
        "metadata": {"title": "Test site"},
        "about": {"title": "About", "heading": "About us", "body": "English body"},
    },
    "ja": {
        "common": {"title": "ようこそ", "welcome": "こんにちは", "home": "ホーム", "about": "概要"},
        "error": {"not_found_title": "ページが見つかりません"},
        "metadata": {"title": "テストサイト"},
        "about": {"title": "概要", "heading": "私たちについて", "body": "日本語の本文"},
        "nested": {"title": "ok", "count": 3},
        "dotted": {"a.b": "dotted key"},
    },
}


def write_table(base: Path, locale: str, namespace: str, content: Any) -> Path:
    """Write a translation file; strings are written verbatim, anything else as JSON."""
    path = base / locale / f"{namespace}.json"
    path.parent.mkdir(parents=True, exist_ok=True)
    text = content if isinstance(content, str) else json.dumps(content, ensure_ascii=False)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def locales_dir(tmp_path: Path) -> Path:
    """Create a translations directory with en/ja namespaces and a few broken files."""
    base = tmp_path / "locales"
    for locale, namespaces in TRANSLATIONS.items():
        for namespace, table in namespaces.items():
            write_table(base, locale, namespace, table)
    write_table(base, "ja", "broken", '{"title": "unterminated"')
    write_table(base, "ja", "listing", '["not", "a", "mapping"]')
    return base


@pytest.fixture
def settings(locales_dir: Path) -> Settings:
    """Settings pointing at the test translations directory."""
    return Settings(
        _env_file=None,
        app_env="test",
        supported_locales=["en", "ja"],
        default_locale="en",
        translations_base=str(locales_dir),
    )


@pytest.fixture
def store(settings: Settings) -> TranslationStore:
    """Translation store built from the test settings."""
    return TranslationStore.from_settings(settings)


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    """Application built from the test settings."""
    return create_app(settings)


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client for the application."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
