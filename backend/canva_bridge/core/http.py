"""
Outbound HTTP client used for all calls to Canva
"""
from typing import AsyncIterator
import httpx
from canva_bridge.core.config import settings


async def get_http_client() -> AsyncIterator[httpx.AsyncClient]:
    """
    Dependency that yields a per-request AsyncClient and closes it afterwards.
    Every upstream call inherits the configured timeout.
    """
    async with httpx.AsyncClient(timeout=settings.UPSTREAM_TIMEOUT_SECONDS) as client:
        yield client
