"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from typing import Literal

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from pathlocale.constants import DEFAULT_ALWAYS_NAMESPACES, DEFAULT_EXCLUDED_PREFIXES


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # App
    app_env: Literal["development", "production", "test"] = "development"
    app_name: str = "pathlocale"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] | None = None

    # Locales
    supported_locales: list[str] = ["en"]
    default_locale: str = "en"
    locale_redirect: bool = True  # Redirect unprefixed paths to /{locale}/...

    # Translations
    translations_base: str = "locales"
    translation_namespaces: list[str] = []  # Required for http(s) sources
    always_namespaces: list[str] = DEFAULT_ALWAYS_NAMESPACES
    translation_load_timeout: float | None = None

    # Paths served without locale handling
    excluded_path_prefixes: list[str] = DEFAULT_EXCLUDED_PREFIXES

    @field_validator("supported_locales")
    @classmethod
    def validate_supported_locales(cls, v: list[str]) -> list[str]:
        """Ensure the supported locale set is usable."""
        if not v:
            raise ValueError("SUPPORTED_LOCALES must contain at least one locale")
        if len(set(v)) != len(v):
            raise ValueError("SUPPORTED_LOCALES must not contain duplicates")
        if any(not locale or "/" in locale for locale in v):
            raise ValueError("SUPPORTED_LOCALES entries must be non-empty path segments")
        return v

    @model_validator(mode="after")
    def validate_default_locale(self) -> "Settings":
        """Fail at startup when the default locale cannot be served."""
        if self.default_locale not in self.supported_locales:
            raise ValueError(
                f"DEFAULT_LOCALE {self.default_locale!r} is not one of "
                f"SUPPORTED_LOCALES {self.supported_locales}"
            )
        if self.is_remote_source and not self.translation_namespaces:
            raise ValueError(
                "TRANSLATION_NAMESPACES must be set when TRANSLATIONS_BASE is a URL"
            )
        return self

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.app_env == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.app_env == "production"

    @property
    def is_remote_source(self) -> bool:
        """Check if translations are fetched over HTTP."""
        return self.translations_base.startswith(("http://", "https://"))


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
