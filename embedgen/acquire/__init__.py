"""
Input acquisition: turn any InputSource into one text blob.

    from embedgen.acquire import acquire

    text = acquire(UrlSource("https://example.com"), settings)
"""

from typing import Optional

from embedgen.config import Settings
from embedgen.types import FileSource, InputSource, TextSource, UrlSource

from .files import acquire_file, extract_pdf_text, join_page_tokens, resolve_mime_type
from .text import acquire_text, normalize_text
from .url import build_relay_url, fetch_url_text, validate_url


def acquire(source: InputSource, settings: Optional[Settings] = None) -> str:
    """
    Dispatch on the source variant and return the normalized text.

    Raises whatever the variant's acquirer raises (ValidationError,
    FetchError, FileReadError).
    """
    settings = settings or Settings()

    if isinstance(source, TextSource):
        text = acquire_text(source.text)
    elif isinstance(source, UrlSource):
        text = fetch_url_text(
            source.url,
            relay=settings.cors_relay,
            timeout=settings.fetch_timeout,
        )
    elif isinstance(source, FileSource):
        text = acquire_file(source, max_bytes=settings.max_upload_bytes)
    else:
        raise TypeError(f"Unknown input source: {source!r}")

    return normalize_text(text)


__all__ = [
    "acquire",
    "acquire_file",
    "acquire_text",
    "build_relay_url",
    "extract_pdf_text",
    "fetch_url_text",
    "join_page_tokens",
    "normalize_text",
    "resolve_mime_type",
    "validate_url",
]
