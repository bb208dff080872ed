"""Utility modules for pathlocale."""

from pathlocale.utils.http_client import close_translation_client, get_translation_client
from pathlocale.utils.logging import LogContext, setup_logging

__all__ = [
    "close_translation_client",
    "get_translation_client",
    "LogContext",
    "setup_logging",
]
