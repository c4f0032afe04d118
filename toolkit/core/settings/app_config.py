"""Host application configuration."""

from typing import Literal

from pydantic import BaseModel

Environment = Literal["development", "staging", "production"]


class AppConfig(BaseModel, frozen=True):
    """Name, version and environment of the host application."""

    name: str
    env: Environment
    debug: bool
    version: str = "0.1.0"

    @property
    def is_development(self) -> bool:
        return self.env == "development"

    @property
    def is_production(self) -> bool:
        return self.env == "production"

    @property
    def openapi_url(self) -> str | None:
        """OpenAPI schema path; production deployments do not publish it."""
        return None if self.is_production else "/openapi.json"
