"""Path-prefixed locale resolution and namespaced translations for FastAPI apps."""

__version__ = "0.1.0"
