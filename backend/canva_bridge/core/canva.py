"""
Thin client for the Canva Connect design endpoints.

Responses are handed back untouched so the routes can relay Canva's status
code and body to the caller.
"""
from typing import Any, Dict, Optional
from urllib.parse import quote
import logging
import httpx
from canva_bridge.core.config import settings
from canva_bridge.core.exceptions import UpstreamUnreachable

logger = logging.getLogger(__name__)


class CanvaClient:
    """Issues bearer-authenticated requests on behalf of one session"""

    def __init__(self, http: httpx.AsyncClient, access_token: str, base_url: Optional[str] = None):
        self._http = http
        self._access_token = access_token
        self._base_url = (base_url or settings.api_base_url).rstrip("/")

    async def _request(
        self,
        method: str,
        path: str,
        error_message: str,
        params: Optional[Dict[str, str]] = None,
        json: Optional[Dict[str, Any]] = None,
    ) -> httpx.Response:
        headers = {"Authorization": f"Bearer {self._access_token}"}
        try:
            return await self._http.request(
                method,
                f"{self._base_url}{path}",
                params=params,
                json=json,
                headers=headers,
            )
        except httpx.RequestError as e:
            logger.error(f"{error_message}: {method} {path} failed: {e!r}")
            raise UpstreamUnreachable(error_message)

    async def list_designs(self, query: Optional[str] = None) -> httpx.Response:
        params = {"query": query} if query else None
        return await self._request("GET", "/designs", "Error listing designs", params=params)

    async def get_design(self, design_id: str) -> httpx.Response:
        path = f"/designs/{quote(design_id, safe='')}"
        return await self._request("GET", path, "Error fetching design")

    async def import_design_from_url(self, file_url: str) -> httpx.Response:
        return await self._request(
            "POST",
            "/design-imports/url",
            "Error importing design",
            json={"url": file_url},
        )
