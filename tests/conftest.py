"""Pytest configuration and fixtures."""

from collections.abc import AsyncGenerator, Callable
from pathlib import Path
from typing import Any

import httpx
import pytest
from httpx import ASGITransport, AsyncClient
from starlette.requests import Request

from toolkit.core.settings import UploadConfig
from toolkit.services.upload_service import UploadIngestor

HTML_CONTENT = (
    b"<!DOCTYPE html><html><head><title>Test HTML</title></head>"
    b"<body><h1>Test Content</h1></body></html>"
)
PNG_CONTENT = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64
HTML_TYPE = "text/html; charset=utf-8"

RequestFactory = Callable[..., Request]


def make_request(
    files: Any = None,
    data: dict[str, str] | None = None,
    headers: dict[str, str] | None = None,
    content: bytes | None = None,
    drop_headers: tuple[str, ...] = (),
) -> Request:
    """Build a Starlette request carrying a multipart (or raw) body."""
    outgoing = httpx.Request(
        "POST",
        "http://test/upload",
        files=files,
        data=data,
        content=content,
        headers=headers,
    )
    body = outgoing.read()
    raw_headers = [
        (key.lower().encode("latin-1"), value.encode("latin-1"))
        for key, value in outgoing.headers.items()
        if key.lower() not in drop_headers
    ]
    scope = {
        "type": "http",
        "method": "POST",
        "path": "/upload",
        "query_string": b"",
        "headers": raw_headers,
    }

    async def receive() -> dict[str, Any]:
        return {"type": "http.request", "body": body, "more_body": False}

    return Request(scope, receive)


# --- Upload fixtures ---


@pytest.fixture
def upload_dir(tmp_path: Path) -> Path:
    """Provide an empty upload directory."""
    directory = tmp_path / "uploads"
    directory.mkdir()
    return directory


@pytest.fixture
def build_request() -> RequestFactory:
    """Factory for multipart requests."""
    return make_request


@pytest.fixture
def upload_config(upload_dir: Path) -> UploadConfig:
    """Upload config allowing HTML files up to 1 MiB."""
    return UploadConfig(
        max_file_size=1024 * 1024,
        allowed_file_types=(HTML_TYPE,),
        upload_dir=upload_dir,
    )


@pytest.fixture
def ingestor(upload_config: UploadConfig) -> UploadIngestor:
    """Create an UploadIngestor with the test config."""
    return UploadIngestor(upload_config)


# --- App client fixtures ---


@pytest.fixture
async def async_client(
    ingestor: UploadIngestor,
) -> AsyncGenerator[AsyncClient, None]:
    """Create an async test client whose uploads land in the test directory."""
    from toolkit.dependencies import get_upload_ingestor
    from toolkit.main import app

    app.dependency_overrides[get_upload_ingestor] = lambda: ingestor
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
