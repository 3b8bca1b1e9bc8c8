"""
Authentication schemas
"""
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class SessionStatusResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    authenticated: bool
    expires_at: Optional[int] = Field(None, alias="expiresAt")
    expired: bool = False


class NotAuthenticatedResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    error: str
    auth_url: str = Field(..., alias="authUrl")
