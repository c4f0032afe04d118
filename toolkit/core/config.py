"""Application configuration using Pydantic Settings V2."""

from functools import cached_property
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from toolkit.core.settings import AppConfig, UploadConfig


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Flat fields are loaded directly from environment variables.
    Domain properties provide grouped access (e.g. settings.upload.max_file_size).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = Field(
        default="toolkit",
        description="Application name",
    )
    app_env: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Application environment",
    )
    debug: bool = Field(
        default=True,
        description="Debug mode",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )

    # File Upload
    max_file_size: int = Field(
        default=0,
        ge=0,
        description="Maximum multipart form size in bytes (0 means 1 GiB)",
    )
    allowed_file_types: str = Field(
        default="",
        description="Comma-separated list of permitted MIME types (empty allows all)",
    )
    upload_dir: Path = Field(
        default=Path("./uploads"),
        description="Directory uploaded files are written to",
    )

    # --- Domain properties ---

    @cached_property
    def app(self) -> AppConfig:
        """Application environment configuration."""
        return AppConfig(
            name=self.app_name,
            env=self.app_env,
            debug=self.debug,
            version=self.app_version,
        )

    @cached_property
    def upload(self) -> UploadConfig:
        """File upload configuration."""
        return UploadConfig(
            max_file_size=self.max_file_size,
            allowed_file_types=tuple(self.allowed_file_types_list),
            upload_dir=self.upload_dir,
        )

    # --- Convenience properties (delegate to domain configs) ---

    @property
    def allowed_file_types_list(self) -> list[str]:
        """Get permitted MIME types as a list."""
        return [
            file_type.strip()
            for file_type in self.allowed_file_types.split(",")
            if file_type.strip()
        ]

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.app.is_development


# Global settings instance
settings = Settings()
