"""
Remote URL acquisition.

Targets are fetched through a CORS relay endpoint,

    <relay>?url=<percent-encoded target>

with a GET request and a fixed deadline for the whole fetch. Any non-2xx
response, connection failure or timeout is reported as a FetchError; no
partial text is returned.
"""

import time
from typing import Optional
from urllib.parse import quote, urlparse

import requests

from embedgen.config import DEFAULT_CORS_RELAY, DEFAULT_FETCH_TIMEOUT
from embedgen.errors import FetchError, ValidationError

ALLOWED_SCHEMES = ("http", "https")
CHUNK_SIZE = 8192


def validate_url(url: str) -> str:
    """
    Check that `url` is an absolute http(s) URL with a host.

    Raises
    ------
    ValidationError
        Before any network call, for anything that is not a full URL
        (e.g. "example.com").
    """
    candidate = (url or "").strip()
    try:
        parsed = urlparse(candidate)
    except ValueError as e:
        raise ValidationError(f"Invalid URL: {e}") from e

    if parsed.scheme.lower() not in ALLOWED_SCHEMES or not parsed.netloc:
        raise ValidationError(
            "Invalid URL. Please enter a complete URL starting with http:// or https://"
        )
    return candidate


def build_relay_url(url: str, relay: Optional[str] = DEFAULT_CORS_RELAY) -> str:
    """Wrap the target URL in the relay endpoint; an empty relay means direct."""
    if not relay:
        return url
    return f"{relay}?url={quote(url, safe='')}"


def _aborted(target: str, timeout: float) -> FetchError:
    return FetchError(
        f"Request aborted: no complete response from {target} within {timeout:g} seconds"
    )


def fetch_url_text(
    url: str,
    relay: Optional[str] = DEFAULT_CORS_RELAY,
    timeout: float = DEFAULT_FETCH_TIMEOUT,
    session: Optional[requests.Session] = None,
) -> str:
    """
    Validate and fetch a URL, returning the response body as text.

    `timeout` is a deadline for the whole fetch, body included. The body is
    streamed so a server that trickles bytes cannot keep the request alive
    past it.

    Raises
    ------
    ValidationError
        If the URL is malformed.
    FetchError
        On timeout, connection failure or a non-2xx status.
    """
    target = validate_url(url)
    request_url = build_relay_url(target, relay)
    http = session or requests

    deadline = time.monotonic() + timeout
    try:
        response = http.get(request_url, timeout=timeout, stream=True)
    except requests.Timeout as e:
        raise _aborted(target, timeout) from e
    except requests.RequestException as e:
        raise FetchError(f"Could not fetch {target}: {e}") from e

    try:
        if not 200 <= response.status_code < 300:
            reason = response.reason or "error"
            raise FetchError(
                f"Error fetching content: HTTP {response.status_code} {reason}"
            )

        chunks = []
        if time.monotonic() > deadline:
            raise _aborted(target, timeout)
        for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
            if time.monotonic() > deadline:
                raise _aborted(target, timeout)
            chunks.append(chunk)
    except requests.Timeout as e:
        raise _aborted(target, timeout) from e
    except requests.RequestException as e:
        raise FetchError(f"Could not fetch {target}: {e}") from e
    finally:
        response.close()

    return decode_body(b"".join(chunks), response.encoding)


def decode_body(body: bytes, encoding: Optional[str]) -> str:
    """Decode a response body; UTF-8 when no charset was declared or it is unknown."""
    try:
        return body.decode(encoding or "utf-8", errors="replace")
    except LookupError:
        return body.decode("utf-8", errors="replace")
