"""
Tests for client-side upload validation.
"""
import pytest

from cvking.services.upload_service import (
    ALLOWED_MIME_TYPES,
    BYTES_PER_MB,
    UNSUPPORTED_TYPE_ERROR,
    LocalFile,
    guess_content_type,
    validate_file,
)

PDF = "application/pdf"
DOCX = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


class SizedFile:
    """Stands in for a large file without allocating its bytes."""

    def __init__(self, size, content_type=PDF):
        self.size = size
        self.content_type = content_type


def test_file_at_exact_ceiling_is_accepted():
    result = validate_file(SizedFile(5 * BYTES_PER_MB))
    assert result.valid is True
    assert result.error is None


def test_file_one_byte_over_ceiling_is_rejected():
    result = validate_file(SizedFile(5 * BYTES_PER_MB + 1))
    assert result.valid is False
    assert result.error == "File size must be less than 5MB"


def test_six_megabyte_file_rejected_with_default_ceiling():
    result = validate_file(SizedFile(6 * BYTES_PER_MB))
    assert result.valid is False
    assert "size" in result.error


def test_custom_ceiling():
    assert validate_file(SizedFile(2 * BYTES_PER_MB), max_size_mb=2).valid is True
    result = validate_file(SizedFile(2 * BYTES_PER_MB + 1), max_size_mb=2)
    assert result.error == "File size must be less than 2MB"


def test_size_checked_before_type():
    result = validate_file(SizedFile(10 * BYTES_PER_MB, "image/png"))
    assert result.error == "File size must be less than 5MB"


@pytest.mark.parametrize("content_type", ALLOWED_MIME_TYPES)
def test_allowed_types_accepted(content_type):
    assert validate_file(SizedFile(1024, content_type)).valid is True


@pytest.mark.parametrize("content_type", [
    "image/png",
    "application/pdf;charset=utf-8",
    "APPLICATION/PDF",
    "text/plain ",
    "",
    None,
])
def test_other_types_rejected(content_type):
    result = validate_file(SizedFile(1024, content_type))
    assert result.valid is False
    assert result.error == UNSUPPORTED_TYPE_ERROR


def test_empty_allowed_file_is_valid():
    assert validate_file(LocalFile("empty.txt", "text/plain", b"")).valid is True


def test_local_file_from_path(tmp_path):
    path = tmp_path / "resume.docx"
    path.write_bytes(b"PK\x03\x04data")

    file = LocalFile.from_path(path)

    assert file.filename == "resume.docx"
    assert file.content_type == DOCX
    assert file.size == 8


def test_local_file_explicit_content_type(tmp_path):
    path = tmp_path / "notes"
    path.write_text("hello")
    assert LocalFile.from_path(path, content_type="text/plain").content_type == "text/plain"


@pytest.mark.parametrize("filename,expected", [
    ("cv.PDF", PDF),
    ("cv.doc", "application/msword"),
    ("cv.txt", "text/plain"),
    ("photo.png", "image/png"),
    ("mystery", "application/octet-stream"),
])
def test_guess_content_type(filename, expected):
    assert guess_content_type(filename) == expected


def test_fractional_ceiling_message():
    result = validate_file(SizedFile(3 * BYTES_PER_MB), max_size_mb=2.5)
    assert result.error == "File size must be less than 2.5MB"
    assert validate_file(SizedFile(int(2.5 * BYTES_PER_MB)), max_size_mb=2.5).valid is True
