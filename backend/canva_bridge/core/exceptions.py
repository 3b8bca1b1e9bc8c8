"""
Error taxonomy for the bridge.

Each error carries the HTTP status and the fixed, human readable message that
is safe to return to the caller. Upstream details are logged where the error
is raised and never attached here.
"""
from typing import Any, Dict, Optional
from fastapi import status


class BridgeError(Exception):
    """Base class for errors rendered as ``{"error": message}``"""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.message}


class InvalidState(BridgeError):
    """Callback arrived without code/state or with a state that does not match the session"""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid OAuth state or missing code"


class MissingParameter(BridgeError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Missing required parameter"


class TokenExchangeFailed(BridgeError):
    """The provider rejected the authorization code grant"""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Failed to exchange code for token"


class NotAuthenticated(BridgeError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Not authenticated"

    def __init__(self, auth_url: str, message: Optional[str] = None):
        super().__init__(message)
        self.auth_url = auth_url

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.message, "authUrl": self.auth_url}


class UpstreamUnreachable(BridgeError):
    """Network-level failure talking to Canva (connection error, timeout)"""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Upstream service unreachable"
