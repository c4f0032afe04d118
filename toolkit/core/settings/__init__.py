"""Domain-specific configuration models."""

from toolkit.core.settings.app_config import AppConfig
from toolkit.core.settings.upload_config import DEFAULT_MAX_FILE_SIZE, UploadConfig

__all__ = [
    "DEFAULT_MAX_FILE_SIZE",
    "AppConfig",
    "UploadConfig",
]
