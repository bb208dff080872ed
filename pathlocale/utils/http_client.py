"""HTTP client for translation tables served over HTTP(S).

One client is shared by every remote namespace fetch in the process and is
closed by the application lifespan.
"""

import httpx

from pathlocale import __version__
from pathlocale.constants import HTTPX_TIMEOUT

_translation_client: httpx.AsyncClient | None = None


def get_translation_client() -> httpx.AsyncClient:
    """Return the shared client, creating it on first use."""
    global _translation_client
    if _translation_client is None or _translation_client.is_closed:
        _translation_client = httpx.AsyncClient(
            timeout=HTTPX_TIMEOUT,
            follow_redirects=True,
            headers={
                "Accept": "application/json",
                "User-Agent": f"pathlocale/{__version__}",
            },
            limits=httpx.Limits(max_connections=10, max_keepalive_connections=5),
        )
    return _translation_client


async def close_translation_client() -> None:
    """Close the shared client if one was created."""
    global _translation_client
    if _translation_client is not None:
        await _translation_client.aclose()
        _translation_client = None
