"""
File upload helper.

Validates a file locally (size and MIME type) before sending it to the
CVKing `/upload` endpoint as a single multipart POST.
"""
import logging
import mimetypes
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Union

import httpx
from pydantic import TypeAdapter, ValidationError

from cvking.core.config import UPLOAD_MAX_SIZE_MB
from cvking.core.errors import ApiError, UploadValidationError
from cvking.schemas.upload import UploadResponse, UploadType, ValidationResult

logger = logging.getLogger(__name__)

BYTES_PER_MB = 1024 * 1024

ALLOWED_MIME_TYPES = (
    "application/pdf",
    "application/msword",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "text/plain",
)

UNSUPPORTED_TYPE_ERROR = "File type not supported. Please upload PDF, DOC, DOCX, or TXT files only."

# mimetypes does not know .docx on every platform
EXTENSION_MIME_TYPES = {
    ".pdf": "application/pdf",
    ".doc": "application/msword",
    ".docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    ".txt": "text/plain",
}
DEFAULT_MIME_TYPE = "application/octet-stream"

_upload_type_adapter = TypeAdapter(UploadType)


@dataclass
class LocalFile:
    """An in-memory file ready for upload."""
    filename: str
    content_type: str
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)

    @classmethod
    def from_path(cls, path: Union[str, Path], content_type: Optional[str] = None) -> "LocalFile":
        path = Path(path)
        return cls(
            filename=path.name,
            content_type=content_type or guess_content_type(path.name),
            data=path.read_bytes(),
        )


def guess_content_type(filename: str) -> str:
    suffix = Path(filename).suffix.lower()
    if suffix in EXTENSION_MIME_TYPES:
        return EXTENSION_MIME_TYPES[suffix]
    guessed, _ = mimetypes.guess_type(filename)
    return guessed or DEFAULT_MIME_TYPE


def _format_megabytes(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


def validate_file(file, max_size_mb: float = UPLOAD_MAX_SIZE_MB) -> ValidationResult:
    """
    Check a file against the size ceiling and the MIME allow-list.

    Works with any object exposing `size` (bytes) and `content_type`.
    The ceiling is inclusive; the MIME type must match an allowed value
    exactly, parameters such as `;charset=` included.
    """
    max_size_bytes = max_size_mb * BYTES_PER_MB
    if file.size > max_size_bytes:
        return ValidationResult(
            valid=False,
            error=f"File size must be less than {_format_megabytes(max_size_mb)}MB",
        )

    if file.content_type not in ALLOWED_MIME_TYPES:
        return ValidationResult(valid=False, error=UNSUPPORTED_TYPE_ERROR)

    return ValidationResult(valid=True)


def upload_file(
    http_client: httpx.Client,
    file: LocalFile,
    type: UploadType = "resume",
    headers: Optional[Mapping[str, str]] = None,
    max_size_mb: float = UPLOAD_MAX_SIZE_MB,
) -> str:
    """
    Upload a file and return the URL the server assigned to it.

    Raises:
        UploadValidationError: If the type tag is unknown or the file fails validate_file()
        ApiError: If the request fails or the response has no URL
    """
    try:
        _upload_type_adapter.validate_python(type)
    except ValidationError as e:
        raise UploadValidationError(f"Unsupported upload type: {type!r}") from e

    result = validate_file(file, max_size_mb)
    if not result.valid:
        logger.warning(f"Upload rejected locally: filename={file.filename}, reason={result.error}")
        raise UploadValidationError(result.error)

    try:
        response = http_client.post(
            "/upload",
            files={"file": (file.filename, file.data, file.content_type)},
            data={"type": type},
            headers=headers,
        )
    except httpx.HTTPError as e:
        logger.error(f"Upload request failed: {e}")
        raise ApiError(None, str(e)) from e

    if response.is_error:
        raise ApiError.from_response(response)

    try:
        url = UploadResponse.model_validate(response.json()).url
    except (ValueError, ValidationError) as e:
        raise ApiError(response.status_code, response.text, "Upload response did not include a URL") from e

    logger.info(f"Uploaded {file.filename} ({file.size} bytes) as {type}: {url}")
    return url
