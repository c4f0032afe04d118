"""Unified API response schemas."""

from typing import Generic, TypeVar

from pydantic import BaseModel

from toolkit.schemas.upload_schema import UploadedFile

T = TypeVar("T")


class ErrorDetail(BaseModel):
    """Machine-readable error code with a human-readable message."""

    code: str
    message: str


class ErrorResponse(BaseModel):
    """Error response returned for every AppException."""

    success: bool = False
    error: ErrorDetail


class UploadErrorResponse(ErrorResponse):
    """Error response for a failed upload, listing files stored before the failure."""

    uploaded_files: list[UploadedFile] = []


class ApiResponse(BaseModel, Generic[T]):
    """Success response with status, message, and data (no code field)."""

    status: int = 200
    message: str = "Success"
    data: T | None = None


def success_response(data: T, status: int = 200, message: str = "Success") -> dict:
    """Build a success response dict for returning from endpoints."""
    return {"status": status, "message": message, "data": data}
