"""
Pydantic schemas for request/response validation
"""
from canva_bridge.schemas.auth import SessionStatusResponse, NotAuthenticatedResponse
from canva_bridge.schemas.design import ImportFromUrlRequest, ErrorResponse

__all__ = [
    "SessionStatusResponse", "NotAuthenticatedResponse",
    "ImportFromUrlRequest", "ErrorResponse",
]
