"""Application exception classes and handlers."""

from fastapi import Request
from fastapi.responses import JSONResponse

from toolkit.schemas.response_schema import (
    ErrorDetail,
    ErrorResponse,
    UploadErrorResponse,
)
from toolkit.schemas.upload_schema import UploadedFile


class AppException(Exception):
    """Base application exception."""

    def __init__(self, message: str, code: str, status_code: int = 400) -> None:
        self.message = message
        self.code = code
        self.status_code = status_code
        super().__init__(message)


class UploadError(AppException):
    """Base upload error.

    ``uploaded_files`` holds the files stored by the failing call before the
    error was raised. Those files are left on disk.
    """

    def __init__(self, message: str, code: str, status_code: int = 500) -> None:
        super().__init__(message=message, code=code, status_code=status_code)
        self.uploaded_files: list[UploadedFile] = []


# --- Bad Request (400) ---


class MalformedFormError(UploadError):
    """Request body is not a parseable multipart form."""

    def __init__(self, message: str = "the uploaded file is too big") -> None:
        super().__init__(message=message, code="MALFORMED_FORM", status_code=400)


# --- Payload Too Large (413) ---


class UploadTooLargeError(UploadError):
    """Multipart form exceeds the configured size ceiling."""

    def __init__(self) -> None:
        super().__init__(
            message="the uploaded file is too big",
            code="UPLOAD_TOO_LARGE",
            status_code=413,
        )


# --- Unsupported Media Type (415) ---


class FiletypeNotPermittedError(UploadError):
    """Sniffed content type is not in the allow-list."""

    def __init__(self, content_type: str = "") -> None:
        self.content_type = content_type
        super().__init__(
            message="the uploaded filetype is not permitted",
            code="FILETYPE_NOT_PERMITTED",
            status_code=415,
        )


# --- Storage (500) ---


class DirectoryNotFoundError(UploadError):
    """Upload directory is missing or is not a directory."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(
            message=f"upload directory {path} does not exist",
            code="DIRECTORY_NOT_FOUND",
        )


class StreamOpenError(UploadError):
    """Uploaded part could not be opened."""

    def __init__(self, reason: object) -> None:
        super().__init__(
            message=f"error opening uploaded file: {reason}",
            code="STREAM_OPEN_ERROR",
        )


class StreamReadError(UploadError):
    """Uploaded part header could not be read."""

    def __init__(self, reason: object) -> None:
        super().__init__(
            message=f"error reading file header: {reason}",
            code="STREAM_READ_ERROR",
        )


class StreamSeekError(UploadError):
    """Uploaded part could not be rewound."""

    def __init__(self, reason: object) -> None:
        super().__init__(
            message=f"error resetting file pointer: {reason}",
            code="STREAM_SEEK_ERROR",
        )


class DestinationCreateError(UploadError):
    """Destination file could not be created."""

    def __init__(self, reason: object) -> None:
        super().__init__(
            message=f"error creating destination file: {reason}",
            code="DESTINATION_CREATE_ERROR",
        )


class CopyError(UploadError):
    """Uploaded part could not be copied to its destination."""

    def __init__(self, reason: object) -> None:
        super().__init__(
            message=f"error copying file contents: {reason}",
            code="COPY_ERROR",
        )


# --- Exception Handlers ---


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Central exception handler for AppException."""
    body = ErrorResponse(error=ErrorDetail(code=exc.code, message=exc.message))
    return JSONResponse(status_code=exc.status_code, content=body.model_dump())


async def upload_exception_handler(request: Request, exc: UploadError) -> JSONResponse:
    """Exception handler for UploadError that reports already stored files."""
    body = UploadErrorResponse(
        error=ErrorDetail(code=exc.code, message=exc.message),
        uploaded_files=exc.uploaded_files,
    )
    return JSONResponse(status_code=exc.status_code, content=body.model_dump())
