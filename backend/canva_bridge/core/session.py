"""
Typed access to the per-browser session stored in the signed cookie
"""
from typing import Any, Dict, Optional
import time
from fastapi import Request

OAUTH_STATE_KEY = "oauth_state"
CODE_VERIFIER_KEY = "code_verifier"
ACCESS_TOKEN_KEY = "access_token"
REFRESH_TOKEN_KEY = "refresh_token"
EXPIRES_AT_KEY = "expires_at"


def now_ms() -> int:
    return int(time.time() * 1000)


class BridgeSession:
    """
    Wrapper around the Starlette session mapping.

    The mapping itself is serialized into the signed cookie by
    ``SessionMiddleware``; this class only names the keys and their lifecycle.
    """

    def __init__(self, data: Dict[str, Any]):
        self._data = data

    @property
    def oauth_state(self) -> Optional[str]:
        return self._data.get(OAUTH_STATE_KEY)

    @property
    def code_verifier(self) -> Optional[str]:
        return self._data.get(CODE_VERIFIER_KEY)

    @property
    def access_token(self) -> Optional[str]:
        return self._data.get(ACCESS_TOKEN_KEY)

    @property
    def refresh_token(self) -> Optional[str]:
        return self._data.get(REFRESH_TOKEN_KEY)

    @property
    def expires_at(self) -> Optional[int]:
        """Access token expiry as epoch milliseconds"""
        return self._data.get(EXPIRES_AT_KEY)

    @property
    def is_expired(self) -> bool:
        return self.expires_at is not None and self.expires_at <= now_ms()

    def begin_login(self, state: str, verifier: str) -> None:
        """Record a pending login attempt, replacing any earlier one"""
        self._data[OAUTH_STATE_KEY] = state
        self._data[CODE_VERIFIER_KEY] = verifier

    def consume_login(self) -> Optional[str]:
        """Drop the pending state and verifier, returning the verifier"""
        self._data.pop(OAUTH_STATE_KEY, None)
        return self._data.pop(CODE_VERIFIER_KEY, None)

    def store_tokens(self, access_token: str, refresh_token: Optional[str], expires_in: Optional[int]) -> None:
        self._data[ACCESS_TOKEN_KEY] = access_token
        self._data[REFRESH_TOKEN_KEY] = refresh_token
        if expires_in is not None:
            self._data[EXPIRES_AT_KEY] = now_ms() + int(expires_in) * 1000
        else:
            self._data.pop(EXPIRES_AT_KEY, None)

    def clear(self) -> None:
        self._data.clear()


def get_session(request: Request) -> BridgeSession:
    """FastAPI dependency returning the current browser session"""
    return BridgeSession(request.session)
