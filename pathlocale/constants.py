"""Application constants and configuration values.

Centralized location for values shared by the resolver, the translation
store and the web layer.
"""

# =============================================================================
# Locale Resolution
# =============================================================================
LOCALE_REDIRECT_STATUS = 307  # Temporary redirect, keeps method and body
ACCEPT_LANGUAGE_DEFAULT_Q = 1.0
LOCALE_SUBTAG_SEPARATOR = "-"

# =============================================================================
# Translations
# =============================================================================
KEY_DELIMITER = "."
TRANSLATION_FILE_SUFFIX = ".json"
DEFAULT_ALWAYS_NAMESPACES = ["common", "error", "metadata"]
NAMESPACE_PATTERN = r"^[A-Za-z0-9_-]+$"

# =============================================================================
# Client Hydration
# =============================================================================
HYDRATION_SCRIPT_ID = "__i18n_state__"

# =============================================================================
# HTTP
# =============================================================================
DEFAULT_EXCLUDED_PREFIXES = ["/static", "/health", "/api"]
HTTPX_TIMEOUT = 10.0  # seconds
