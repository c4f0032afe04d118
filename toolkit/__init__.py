"""Random string generation and multipart upload ingestion."""

from toolkit.core.content_type import detect_content_type
from toolkit.core.exceptions import (
    CopyError,
    DestinationCreateError,
    DirectoryNotFoundError,
    FiletypeNotPermittedError,
    MalformedFormError,
    StreamOpenError,
    StreamReadError,
    StreamSeekError,
    UploadError,
    UploadTooLargeError,
)
from toolkit.core.settings import UploadConfig
from toolkit.schemas.upload_schema import UploadedFile
from toolkit.services.random_string_service import RandomStringGenerator, random_string
from toolkit.services.upload_service import UploadIngestor

__all__ = [
    "CopyError",
    "DestinationCreateError",
    "DirectoryNotFoundError",
    "FiletypeNotPermittedError",
    "MalformedFormError",
    "RandomStringGenerator",
    "StreamOpenError",
    "StreamReadError",
    "StreamSeekError",
    "UploadConfig",
    "UploadError",
    "UploadIngestor",
    "UploadTooLargeError",
    "UploadedFile",
    "detect_content_type",
    "random_string",
]
