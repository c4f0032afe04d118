"""Upload and random string schemas."""

from pydantic import BaseModel, ConfigDict, Field


class UploadedFile(BaseModel):
    """Metadata for one stored upload."""

    model_config = ConfigDict(frozen=True)

    original_file_name: str = Field(..., description="Filename supplied by the client")
    new_file_name: str = Field(..., description="Filename on disk")
    file_size: int = Field(..., ge=0, description="Bytes written to disk")


class RandomStringResponse(BaseModel):
    """Random string API response schema."""

    value: str
    length: int
