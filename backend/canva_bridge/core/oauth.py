"""
OAuth 2.0 authorization code flow with PKCE against Canva
"""
from typing import Dict
from urllib.parse import urlencode
import logging
import httpx
from canva_bridge.core.config import settings
from canva_bridge.core.exceptions import TokenExchangeFailed, UpstreamUnreachable
from canva_bridge.core.pkce import CODE_CHALLENGE_METHOD

logger = logging.getLogger(__name__)


def get_oauth_authorization_url(state: str, code_challenge: str) -> str:
    """Build the Canva authorize URL for one login attempt"""
    params = {
        "response_type": "code",
        "client_id": settings.CANVA_CLIENT_ID or "",
        "redirect_uri": settings.REDIRECT_URI or "",
        "scope": settings.CANVA_SCOPE,
        "code_challenge": code_challenge,
        "code_challenge_method": CODE_CHALLENGE_METHOD,
        "state": state,
    }
    return f"{settings.CANVA_AUTHORIZE_URL}?{urlencode(params)}"


async def exchange_code_for_token(
    client: httpx.AsyncClient,
    code: str,
    code_verifier: str,
) -> Dict:
    """
    Exchange an authorization code for access and refresh tokens.

    Authenticates with HTTP Basic client credentials and sends the code
    verifier from the login attempt that produced ``code``.

    Raises:
        TokenExchangeFailed: Canva answered with an error or without an access token
        UpstreamUnreachable: the token endpoint could not be reached
    """
    data = {
        "grant_type": "authorization_code",
        "code": code,
        "code_verifier": code_verifier,
        "redirect_uri": settings.REDIRECT_URI or "",
    }
    try:
        response = await client.post(
            settings.token_url,
            data=data,
            auth=(settings.CANVA_CLIENT_ID or "", settings.CANVA_CLIENT_SECRET or ""),
        )
    except httpx.RequestError as e:
        logger.error(f"OAuth callback error: token endpoint unreachable: {e!r}")
        raise UpstreamUnreachable("OAuth callback error")

    if not response.is_success:
        logger.error(f"Failed to exchange code for token: {response.status_code} - {response.text}")
        raise TokenExchangeFailed()

    try:
        token_data = response.json()
    except ValueError:
        logger.error(f"Token endpoint returned a non-JSON body: {response.text[:200]}")
        raise TokenExchangeFailed()

    if not isinstance(token_data, dict) or not token_data.get("access_token"):
        logger.error("Token endpoint response did not include an access token")
        raise TokenExchangeFailed()

    expires_in = token_data.get("expires_in")
    if expires_in is not None:
        try:
            token_data["expires_in"] = int(expires_in)
        except (TypeError, ValueError):
            logger.error(f"Token endpoint returned an invalid expires_in: {expires_in!r}")
            raise TokenExchangeFailed()

    return token_data
