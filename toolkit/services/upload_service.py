"""Multipart upload ingestion: validate, rename and store uploaded files."""

from collections.abc import AsyncGenerator
from pathlib import Path, PurePosixPath

import structlog
from starlette.datastructures import FormData, UploadFile
from starlette.formparsers import MultiPartException, MultiPartParser
from starlette.requests import Request

from toolkit.core.content_type import SNIFF_LEN, detect_content_type
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
from toolkit.services.random_string_service import RandomStringGenerator

logger = structlog.get_logger()

RANDOM_NAME_LENGTH = 25
COPY_CHUNK_SIZE = 64 * 1024


def file_extension(filename: str) -> str:
    """Return the text from the last dot of ``filename``, dot included."""
    index = filename.rfind(".")
    return filename[index:] if index != -1 else ""


def client_file_name(filename: str) -> str:
    """Reduce a client supplied filename to its final path element."""
    return PurePosixPath(filename.replace("\\", "/")).name


class UploadIngestor:
    """Parses multipart uploads and writes each file part to a directory.

    Files are processed one at a time in the order they appear in the form.
    Processing stops at the first failing file; files stored before it stay
    on disk and are attached to the raised error as ``uploaded_files``.
    """

    def __init__(
        self,
        config: UploadConfig,
        generator: RandomStringGenerator | None = None,
    ) -> None:
        self.config = config
        self._generator = generator or RandomStringGenerator()

    async def upload_files(
        self,
        request: Request,
        upload_dir: str | Path,
        rename: bool = True,
    ) -> list[UploadedFile]:
        """Store every file part of a multipart request in ``upload_dir``.

        Args:
            request: Incoming request carrying a multipart/form-data body.
            upload_dir: Existing directory the files are written to.
            rename: Replace each filename with a random name, keeping the
                extension. When False the final path element of the client
                filename is used.

        Returns:
            One UploadedFile per file part, in encounter order.

        Raises:
            UploadError: The subclass names the failing step.
        """
        target_dir = Path(upload_dir)
        if not target_dir.is_dir():
            raise DirectoryNotFoundError(str(upload_dir))

        form = await self._parse_form(request)
        uploaded_files: list[UploadedFile] = []
        try:
            for _, value in form.multi_items():
                if not isinstance(value, UploadFile) or not value.filename:
                    continue
                uploaded_files.append(
                    await self._process_file(value, target_dir, rename)
                )
        except UploadError as e:
            e.uploaded_files = uploaded_files
            raise
        finally:
            await form.close()

        return uploaded_files

    async def _parse_form(self, request: Request) -> FormData:
        """Parse the request body as a size-bounded multipart form."""
        max_size = self.config.effective_max_file_size

        content_type = request.headers.get("content-type", "")
        media_type = content_type.split(";", 1)[0].strip().lower()
        if media_type != "multipart/form-data" or "boundary=" not in content_type:
            raise MalformedFormError

        content_length = request.headers.get("content-length", "")
        if content_length.isdecimal() and int(content_length) > max_size:
            logger.warning(
                "Upload rejected", reason="too_large", content_length=content_length
            )
            raise UploadTooLargeError

        async def bounded_stream() -> AsyncGenerator[bytes, None]:
            received = 0
            async for chunk in request.stream():
                received += len(chunk)
                if received > max_size:
                    logger.warning(
                        "Upload rejected", reason="too_large", received=received
                    )
                    raise UploadTooLargeError
                yield chunk

        parser = MultiPartParser(request.headers, bounded_stream())
        try:
            return await parser.parse()
        except (MultiPartException, ValueError) as e:
            raise MalformedFormError from e

    async def _process_file(
        self,
        upload: UploadFile,
        target_dir: Path,
        rename: bool,
    ) -> UploadedFile:
        """Validate and store a single file part, closing it afterwards."""
        try:
            if upload.file.closed:
                raise StreamOpenError("file part is closed")

            try:
                head = await upload.read(SNIFF_LEN)
            except (OSError, ValueError) as e:
                raise StreamReadError(e) from e

            content_type = detect_content_type(head)
            if not self.config.is_allowed(content_type):
                logger.warning(
                    "Upload rejected",
                    reason="filetype",
                    filename=upload.filename,
                    content_type=content_type,
                )
                raise FiletypeNotPermittedError(content_type)

            try:
                await upload.seek(0)
            except (OSError, ValueError) as e:
                raise StreamSeekError(e) from e

            original_file_name = client_file_name(upload.filename or "")
            if rename:
                new_file_name = (
                    self._generator.generate(RANDOM_NAME_LENGTH)
                    + file_extension(original_file_name)
                )
            else:
                new_file_name = original_file_name

            file_size = await self._copy_to(upload, target_dir / new_file_name)
        finally:
            await upload.close()

        logger.info(
            "Stored uploaded file",
            original_file_name=original_file_name,
            new_file_name=new_file_name,
            file_size=file_size,
            content_type=content_type,
        )
        return UploadedFile(
            original_file_name=original_file_name,
            new_file_name=new_file_name,
            file_size=file_size,
        )

    async def _copy_to(self, upload: UploadFile, destination: Path) -> int:
        """Copy the whole part to ``destination`` and return the byte count."""
        try:
            outfile = destination.open("wb")
        except (OSError, ValueError) as e:
            raise DestinationCreateError(e) from e

        file_size = 0
        with outfile:
            try:
                while chunk := await upload.read(COPY_CHUNK_SIZE):
                    outfile.write(chunk)
                    file_size += len(chunk)
            except (OSError, ValueError) as e:
                raise CopyError(e) from e

        return file_size
