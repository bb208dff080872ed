"""Server-rendered web routes."""

from pathlocale.web.router import web_router

__all__ = ["web_router"]
