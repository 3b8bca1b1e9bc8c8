"""
FastAPI dependencies for authentication
"""
import logging
import httpx
from fastapi import Depends, Request
from canva_bridge.core.canva import CanvaClient
from canva_bridge.core.config import settings
from canva_bridge.core.exceptions import NotAuthenticated
from canva_bridge.core.http import get_http_client
from canva_bridge.core.session import BridgeSession, get_session

logger = logging.getLogger(__name__)


def get_login_url(request: Request) -> str:
    """Absolute login URL, derived from the request when BASE_URL is unset"""
    return settings.login_url or str(request.url_for("login"))


async def require_access_token(
    request: Request,
    session: BridgeSession = Depends(get_session),
) -> str:
    """
    Gate for the design routes: the session must hold an access token.
    Expiry is not enforced here; an expired token is sent upstream and Canva's
    rejection is relayed to the caller.
    """
    access_token = session.access_token
    if not access_token:
        raise NotAuthenticated(auth_url=get_login_url(request))
    if session.is_expired:
        logger.warning("Forwarding an expired Canva access token; re-authentication is required")
    return access_token


async def get_canva_client(
    access_token: str = Depends(require_access_token),
    http: httpx.AsyncClient = Depends(get_http_client),
) -> CanvaClient:
    return CanvaClient(http, access_token)
