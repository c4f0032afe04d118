"""File upload configuration."""

from pathlib import Path

from pydantic import BaseModel, Field

DEFAULT_MAX_FILE_SIZE = 1024 * 1024 * 1024


class UploadConfig(BaseModel, frozen=True):
    """File upload settings.

    A ``max_file_size`` of 0 means unset; the effective ceiling then falls
    back to 1 GiB. An empty ``allowed_file_types`` permits every type.
    """

    max_file_size: int = Field(default=0, ge=0)
    allowed_file_types: tuple[str, ...] = ()
    upload_dir: Path = Path("./uploads")

    @property
    def effective_max_file_size(self) -> int:
        """Get the byte ceiling applied to a whole multipart form."""
        return self.max_file_size or DEFAULT_MAX_FILE_SIZE

    def is_allowed(self, content_type: str) -> bool:
        """Check a sniffed content type against the allow-list."""
        if not self.allowed_file_types:
            return True
        wanted = content_type.casefold()
        return any(allowed.casefold() == wanted for allowed in self.allowed_file_types)
