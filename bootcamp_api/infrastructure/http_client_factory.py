"""HTTP client factory for connection pooling."""
import httpx
import logging
from typing import Optional

from ..core.config import get_settings

logger = logging.getLogger(__name__)

# Global shared HTTP client instance
_shared_client: Optional[httpx.AsyncClient] = None


def get_shared_http_client() -> httpx.AsyncClient:
    """
    Get or create shared async HTTP client for connection pooling.

    The geocoder reuses this client for every request so that keep-alive
    connections to the provider survive across API calls.

    Returns:
        Shared AsyncClient instance
    """
    global _shared_client

    if _shared_client is None:
        settings = get_settings()
        _shared_client = httpx.AsyncClient(
            timeout=settings.geocoder_timeout,
            limits=httpx.Limits(
                max_keepalive_connections=10,
                max_connections=50,
                keepalive_expiry=30.0,
            ),
            http2=True,
        )
        logger.info("Created shared HTTP client for connection pooling")

    return _shared_client


async def close_shared_http_client() -> None:
    """
    Close shared HTTP client (call on application shutdown).
    """
    global _shared_client

    if _shared_client is not None:
        await _shared_client.aclose()
        _shared_client = None
        logger.info("Closed shared HTTP client")
