"""
Design proxy schemas
"""
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class ImportFromUrlRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    file_url: Optional[str] = Field(None, alias="fileUrl", description="Publicly reachable URL of the file to import")


class ErrorResponse(BaseModel):
    error: str
