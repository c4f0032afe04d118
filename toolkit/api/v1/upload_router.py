"""Upload API router."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from toolkit.dependencies import get_random_string_generator, get_upload_ingestor
from toolkit.schemas.response_schema import (
    ApiResponse,
    UploadErrorResponse,
    success_response,
)
from toolkit.schemas.upload_schema import RandomStringResponse, UploadedFile
from toolkit.services.random_string_service import RandomStringGenerator
from toolkit.services.upload_service import UploadIngestor

router = APIRouter(prefix="/api/v1", tags=["uploads"])

UploadIngestorDep = Annotated[UploadIngestor, Depends(get_upload_ingestor)]
RandomStringGeneratorDep = Annotated[
    RandomStringGenerator, Depends(get_random_string_generator)
]


@router.post(
    "/uploads",
    response_model=ApiResponse[list[UploadedFile]],
    responses={
        400: {"model": UploadErrorResponse},
        413: {"model": UploadErrorResponse},
        415: {"model": UploadErrorResponse},
        500: {"model": UploadErrorResponse},
    },
)
async def upload_files(
    request: Request,
    ingestor: UploadIngestorDep,
    rename: bool = True,
) -> dict:
    """Store every file in a multipart form in the configured upload directory."""
    files = await ingestor.upload_files(
        request, ingestor.config.upload_dir, rename=rename
    )
    return success_response(files)


@router.get("/random-string", response_model=ApiResponse[RandomStringResponse])
async def random_string(
    generator: RandomStringGeneratorDep,
    length: Annotated[int, Query(ge=0, le=1024)] = 32,
) -> dict:
    """Generate a random string of the requested length."""
    value = generator.generate(length)
    return success_response(RandomStringResponse(value=value, length=length))
