"""
File acquisition: plain text and PDF uploads.

PDF text is scraped page by page. Every word token on a page is emitted
followed by a single space and each page ends with a newline, so a document
whose two pages read "Hello" and "World" becomes:

    "Hello \nWorld \n"

Plain-text files are decoded as UTF-8 (a leading byte-order mark is
dropped). Any other MIME type is rejected before reading.
"""

from __future__ import annotations

import io
from typing import Iterable, List, Optional

import pdfplumber

from embedgen.errors import FileReadError, ValidationError
from embedgen.types import FileSource

PDF_MIME = "application/pdf"

# Browsers and HTTP clients send these when they do not know the type.
GENERIC_MIME_TYPES = {"", "application/octet-stream", "binary/octet-stream"}


def resolve_mime_type(mime_type: Optional[str], filename: Optional[str]) -> str:
    """
    Decide which reader handles an upload.

    The declared MIME type wins. When it is missing or generic, the file
    extension decides between PDF and plain text.
    """
    mime = (mime_type or "").split(";", 1)[0].strip().lower()
    if mime not in GENERIC_MIME_TYPES:
        return mime

    name = (filename or "").lower()
    if name.endswith(".pdf"):
        return PDF_MIME
    if name.endswith(".txt") or name.endswith(".md"):
        return "text/plain"
    return mime


def join_page_tokens(tokens: Iterable[str]) -> str:
    """Render one page: each token followed by a space, then a newline."""
    return "".join(f"{token} " for token in tokens) + "\n"


def extract_pdf_text(data: bytes) -> str:
    """
    Extract text from PDF bytes, page by page.

    Raises
    ------
    FileReadError
        If the bytes cannot be parsed as a PDF.
    """
    pages: List[str] = []
    try:
        with pdfplumber.open(io.BytesIO(data)) as pdf:
            for page in pdf.pages:
                words = page.extract_words() or []
                pages.append(join_page_tokens(word["text"] for word in words))
    except Exception as e:
        raise FileReadError(f"Could not read PDF: {e}") from e
    return "".join(pages)


def decode_text_file(data: bytes) -> str:
    """Decode a plain-text upload as UTF-8."""
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise FileReadError(f"Could not decode file as UTF-8 text: {e}") from e


def acquire_file(
    source: FileSource, max_bytes: Optional[int] = None
) -> str:
    """
    Convert an uploaded file into a single text blob.

    Raises
    ------
    ValidationError
        If the file is too large or its type is neither PDF nor text.
    FileReadError
        If the content cannot be decoded or parsed.
    """
    if max_bytes is not None and len(source.data) > max_bytes:
        raise ValidationError(
            f"File is too large ({len(source.data)} bytes, limit {max_bytes} bytes)."
        )

    mime = resolve_mime_type(source.mime_type, source.filename)

    if mime == PDF_MIME:
        return extract_pdf_text(source.data)
    if mime.startswith("text/"):
        return decode_text_file(source.data)

    raise ValidationError(
        f"Unsupported file type '{source.mime_type or 'unknown'}'. "
        "Upload a plain-text (.txt) or PDF (.pdf) file."
    )
