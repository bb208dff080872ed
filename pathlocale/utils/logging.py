"""Logging setup and request-scoped log prefixes."""

import logging
import sys

from pathlocale.config import Settings

# Libraries that log every request or connection at INFO
_QUIET_LOGGERS = ("httpx", "httpcore", "uvicorn.access")


def setup_logging(settings: Settings) -> None:
    """Configure root logging once per process.

    ``settings.log_level`` wins; otherwise production logs at INFO and every
    other environment at DEBUG.
    """
    level = settings.log_level or ("INFO" if settings.is_production else "DEBUG")

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        stream=sys.stdout,
    )
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


class LogContext(logging.LoggerAdapter):
    """Prefix messages with request fields, e.g. ``[locale=ja] [path=/about]``.

    The fields are kept in ``extra`` too, so handlers can read them as
    record attributes.
    """

    def __init__(self, logger: logging.Logger, **context: str) -> None:
        super().__init__(logger, context)
        self.prefix = " ".join(f"[{k}={v}]" for k, v in context.items())

    def process(self, msg, kwargs):
        kwargs.setdefault("extra", {}).update(self.extra)
        return f"{self.prefix} {msg}", kwargs
