"""
Unit tests for file acquisition.

PDF parsing goes through the fake_pdf fixture, which replaces
pdfplumber.open with a double serving fixed page texts.
"""

import pytest

from embedgen.acquire import acquire, acquire_file, join_page_tokens, resolve_mime_type
from embedgen.errors import ErrorKind, FileReadError, ValidationError
from embedgen.types import FileSource


def test_two_page_pdf_joins_tokens_and_pages(fake_pdf):
    fake_pdf(["Hello", "World"])

    text = acquire_file(FileSource(b"%PDF-1.4", "application/pdf", "doc.pdf"))

    assert text == "Hello \nWorld \n"


def test_pdf_tokens_on_one_page_are_space_separated(fake_pdf):
    fake_pdf(["Lorem ipsum dolor", ""])

    text = acquire_file(FileSource(b"%PDF", "application/pdf"))

    assert text == "Lorem ipsum dolor \n\n"


def test_pdf_detected_by_extension_when_mime_is_generic(fake_pdf):
    opened = fake_pdf(["Hello"])

    text = acquire_file(FileSource(b"%PDF", "application/octet-stream", "report.PDF"))

    assert text == "Hello \n"
    assert len(opened) == 1


def test_unparseable_pdf_raises_file_read_error():
    # Real pdfplumber on bytes that are not a PDF.
    with pytest.raises(FileReadError) as excinfo:
        acquire_file(FileSource(b"definitely not a pdf", "application/pdf"))

    assert excinfo.value.kind is ErrorKind.FILE_READ


def test_plain_text_file_is_decoded_as_utf8():
    data = "\ufeffcafé\nline two".encode("utf-8")

    assert acquire_file(FileSource(data, "text/plain", "notes.txt")) == "café\nline two"


def test_text_mime_with_charset_parameter():
    assert acquire_file(FileSource(b"abc", "text/plain; charset=utf-8")) == "abc"


def test_undecodable_text_raises_file_read_error():
    with pytest.raises(FileReadError, match="UTF-8"):
        acquire_file(FileSource(b"\xff\xfe\xfa", "text/plain"))


def test_unsupported_mime_type_is_rejected():
    with pytest.raises(ValidationError, match="Unsupported file type"):
        acquire_file(FileSource(b"PK\x03\x04", "application/zip", "archive.zip"))


def test_oversize_upload_is_rejected_before_parsing(fake_pdf):
    opened = fake_pdf(["Hello"])

    with pytest.raises(ValidationError, match="too large"):
        acquire_file(FileSource(b"x" * 11, "application/pdf"), max_bytes=10)

    assert opened == []


def test_blank_pdf_fails_normalization(fake_pdf, settings):
    fake_pdf(["", ""])

    with pytest.raises(ValidationError, match="No text could be extracted"):
        acquire(FileSource(b"%PDF", "application/pdf"), settings)


@pytest.mark.parametrize(
    "mime, filename, expected",
    [
        ("application/pdf", None, "application/pdf"),
        ("", "a.pdf", "application/pdf"),
        (None, "a.txt", "text/plain"),
        ("TEXT/PLAIN", None, "text/plain"),
        ("", "a.bin", ""),
    ],
)
def test_resolve_mime_type(mime, filename, expected):
    assert resolve_mime_type(mime, filename) == expected


def test_join_page_tokens_empty_page():
    assert join_page_tokens([]) == "\n"
