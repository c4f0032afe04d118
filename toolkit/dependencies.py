"""Global dependencies for the application."""

from functools import lru_cache

from toolkit.core.config import settings
from toolkit.services.random_string_service import RandomStringGenerator
from toolkit.services.upload_service import UploadIngestor


@lru_cache
def get_random_string_generator() -> RandomStringGenerator:
    """Get the shared secure random string generator."""
    return RandomStringGenerator()


def get_upload_ingestor() -> UploadIngestor:
    """Get an UploadIngestor bound to the configured upload settings."""
    return UploadIngestor(
        config=settings.upload,
        generator=get_random_string_generator(),
    )
