"""
Thumbnail API endpoints.

Routes:
- POST /thumbnails/generate - Generate, store and record a thumbnail
- GET /thumbnails - List the caller's thumbnails with fresh presigned URLs

Dependencies: thumbnail_studio.application.services, thumbnail_studio.models
System role: Thumbnail generation HTTP API
"""

import logging

from fastapi import APIRouter, Depends, Query, Request

from thumbnail_studio.api.deps.dependencies import (
    get_bearer_token,
    get_thumbnail_service,
)
from thumbnail_studio.application.services import ThumbnailService
from thumbnail_studio.models.common import ErrorResponse
from thumbnail_studio.models.thumbnail import (
    GenerateThumbnailRequest,
    GenerateThumbnailResponse,
    ThumbnailListItem,
)

from .thumbnail_error_handling import handle_thumbnail_errors

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/thumbnails", tags=["thumbnails"])

ERROR_RESPONSES = {
    status: {"model": ErrorResponse}
    for status in (400, 401, 429, 500, 502)
}

# OpenAPI schema for the raw request body read by generate_thumbnail
GENERATE_REQUEST_BODY = {
    "requestBody": {
        "required": True,
        "content": {
            "application/json": {
                "schema": GenerateThumbnailRequest.model_json_schema(by_alias=True),
            },
        },
    },
}


@router.post(
    "/generate",
    response_model=GenerateThumbnailResponse,
    status_code=200,
    responses=ERROR_RESPONSES,
    openapi_extra=GENERATE_REQUEST_BODY,
)
@handle_thumbnail_errors
async def generate_thumbnail(
    request: Request,
    token: str = Depends(get_bearer_token),
    thumbnail_service: ThumbnailService = Depends(get_thumbnail_service),
) -> GenerateThumbnailResponse:
    """Generate a thumbnail from a text prompt.

    Pipeline:
    1. Verify the bearer token with the identity service
    2. Call Gemini once for text + image output
    3. Upload the last non-thought image part to object storage
    4. Issue a one-hour presigned URL and record metadata

    Request body:
    - prompt: Required, trimmed
    - aspectRatio: Optional, default "16:9"
    - imageSize: Optional, default "1K"

    Response:
    - thumbnail: {id, storage_bucket, storage_path, created_at}
    - imageUrl: Presigned URL
    - model: Gemini model id used
    - text: Provider commentary or null
    """
    return await thumbnail_service.generate_from_body(
        token=token,
        body=await request.body(),
    )


@router.get(
    "",
    response_model=list[ThumbnailListItem],
    status_code=200,
    responses=ERROR_RESPONSES,
)
@handle_thumbnail_errors
async def list_thumbnails(
    limit: int = Query(default=50, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
    token: str = Depends(get_bearer_token),
    thumbnail_service: ThumbnailService = Depends(get_thumbnail_service),
) -> list[ThumbnailListItem]:
    """List the caller's thumbnails, newest first, with presigned URLs valid for one hour."""
    return await thumbnail_service.list_thumbnails(
        token=token,
        limit=limit,
        offset=offset,
    )
