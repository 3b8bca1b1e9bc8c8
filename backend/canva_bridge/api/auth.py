"""
Authentication routes - OAuth 2.0 authorization code flow with PKCE
"""
from typing import Optional
import logging
import secrets
import httpx
from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import PlainTextResponse, RedirectResponse
from canva_bridge.core import pkce
from canva_bridge.core.exceptions import BridgeError, InvalidState
from canva_bridge.core.http import get_http_client
from canva_bridge.core.oauth import exchange_code_for_token, get_oauth_authorization_url
from canva_bridge.core.session import BridgeSession, get_session
from canva_bridge.schemas.auth import SessionStatusResponse

router = APIRouter()
logger = logging.getLogger(__name__)

AUTHORIZATION_COMPLETE_MESSAGE = "Authorization complete! You can close this tab and return to ChatGPT."


def _state_matches(received: str, expected: Optional[str]) -> bool:
    if not expected:
        return False
    return secrets.compare_digest(received.encode("utf-8"), expected.encode("utf-8"))


@router.get("/login", name="login")
async def login(session: BridgeSession = Depends(get_session)):
    """
    Start the OAuth flow: store a fresh state/verifier pair in the session and
    redirect the browser to Canva's authorize page.
    """
    values = pkce.generate()
    session.begin_login(values.state, values.verifier)
    logger.debug(f"Stored pending OAuth state in session: {values.state[:8]}...")

    auth_url = get_oauth_authorization_url(values.state, values.challenge)
    return RedirectResponse(url=auth_url, status_code=status.HTTP_302_FOUND)


@router.get("/callback", response_class=PlainTextResponse)
async def oauth_callback(
    code: Optional[str] = Query(None),
    state: Optional[str] = Query(None),
    error: Optional[str] = Query(None),
    session: BridgeSession = Depends(get_session),
    http: httpx.AsyncClient = Depends(get_http_client),
):
    """OAuth callback handler. Canva redirects here after the user grants access."""
    try:
        if error:
            logger.warning(f"OAuth provider returned an error: {error}")
            raise InvalidState()

        if not code or not state or not _state_matches(state, session.oauth_state):
            logger.warning(f"Rejected OAuth callback with invalid state: {(state or '')[:8]}...")
            raise InvalidState()

        # State and verifier are single use
        code_verifier = session.consume_login()
        if not code_verifier:
            logger.warning("Rejected OAuth callback: no pending code verifier in session")
            raise InvalidState()

        token_data = await exchange_code_for_token(http, code, code_verifier)
    except BridgeError as e:
        return PlainTextResponse(e.message, status_code=e.status_code)

    session.store_tokens(
        access_token=token_data["access_token"],
        refresh_token=token_data.get("refresh_token"),
        expires_in=token_data.get("expires_in"),
    )
    logger.info("OAuth authorization complete; tokens stored in session")
    return PlainTextResponse(AUTHORIZATION_COMPLETE_MESSAGE)


@router.get("/status", response_model=SessionStatusResponse)
async def session_status(session: BridgeSession = Depends(get_session)):
    """Report whether the current browser session holds a Canva access token"""
    return SessionStatusResponse(
        authenticated=bool(session.access_token),
        expires_at=session.expires_at,
        expired=session.is_expired,
    )


@router.post("/logout")
async def logout(session: BridgeSession = Depends(get_session)):
    """Forget all tokens and pending login state for this browser"""
    session.clear()
    return {"message": "Logged out successfully"}
