"""
Design routes - pass-through to the Canva Connect API
"""
from typing import Optional
import httpx
from fastapi import APIRouter, Depends, Query, Request, Response
from pydantic import ValidationError
from canva_bridge.core.canva import CanvaClient
from canva_bridge.core.dependencies import get_canva_client
from canva_bridge.core.exceptions import MissingParameter
from canva_bridge.schemas.auth import NotAuthenticatedResponse
from canva_bridge.schemas.design import ErrorResponse, ImportFromUrlRequest

router = APIRouter(
    responses={
        401: {"model": NotAuthenticatedResponse},
        500: {"model": ErrorResponse},
    },
)


def relay(upstream: httpx.Response) -> Response:
    """Return Canva's status code and body unchanged"""
    return Response(
        content=upstream.content,
        status_code=upstream.status_code,
        media_type=upstream.headers.get("content-type", "application/json"),
    )


async def read_file_url(request: Request) -> Optional[str]:
    """Extract ``fileUrl`` from a JSON object body; anything else yields None"""
    try:
        body = await request.json()
    except ValueError:
        return None
    if not isinstance(body, dict):
        return None
    try:
        payload = ImportFromUrlRequest.model_validate(body)
    except ValidationError:
        return None
    return payload.file_url


@router.get("/designs")
async def list_designs(
    q: Optional[str] = Query(None, description="Search term"),
    canva: CanvaClient = Depends(get_canva_client),
):
    """List the user's designs, optionally filtered by ``q``"""
    return relay(await canva.list_designs(q))


@router.get("/designs/{design_id}")
async def get_design(design_id: str, canva: CanvaClient = Depends(get_canva_client)):
    """Fetch one design; the body includes its edit URL"""
    return relay(await canva.get_design(design_id))


@router.post(
    "/imports/url",
    openapi_extra={
        "requestBody": {"content": {"application/json": {"schema": ImportFromUrlRequest.model_json_schema()}}},
    },
)
async def import_design_from_url(
    request: Request,
    canva: CanvaClient = Depends(get_canva_client),
):
    """Start a Canva import job for a file at a public URL"""
    file_url = await read_file_url(request)
    if not file_url:
        raise MissingParameter("fileUrl is required")
    return relay(await canva.import_design_from_url(file_url))
