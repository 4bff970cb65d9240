# embedgen/config.py

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_MODEL = "sentence-transformers/all-MiniLM-L6-v2"
DEFAULT_PROVIDER = "placeholder"
DEFAULT_CORS_RELAY = "https://api.allorigins.win/raw"
DEFAULT_FETCH_TIMEOUT = 15.0
DEFAULT_MAX_UPLOAD_BYTES = 10 * 1024 * 1024
DEFAULT_PREVIEW_SIZE = 5


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be a number, got {raw!r}") from e
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {raw!r}")
    return value


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {raw!r}")
    return value


@dataclass(frozen=True)
class Settings:
    """
    Runtime configuration, read from the environment (and `.env`).

    The CORS relay mirrors the browser app's indirection: targets are fetched
    as `<relay>?url=<encoded-target>`. An empty relay fetches targets directly.
    """

    model_name: str = DEFAULT_MODEL
    provider: str = DEFAULT_PROVIDER
    cors_relay: str = DEFAULT_CORS_RELAY
    fetch_timeout: float = DEFAULT_FETCH_TIMEOUT
    max_upload_bytes: int = DEFAULT_MAX_UPLOAD_BYTES
    preview_size: int = DEFAULT_PREVIEW_SIZE


def load_settings(dotenv: bool = True) -> Settings:
    """Build Settings from environment variables, loading `.env` first."""
    if dotenv:
        # Load environment variables from the .env file into the process
        load_dotenv()

    return Settings(
        model_name=os.getenv("EMBEDGEN_MODEL", DEFAULT_MODEL),
        provider=os.getenv("EMBEDGEN_PROVIDER", DEFAULT_PROVIDER),
        cors_relay=os.getenv("EMBEDGEN_CORS_RELAY", DEFAULT_CORS_RELAY),
        fetch_timeout=_env_float("EMBEDGEN_FETCH_TIMEOUT", DEFAULT_FETCH_TIMEOUT),
        max_upload_bytes=_env_int("EMBEDGEN_MAX_UPLOAD_BYTES", DEFAULT_MAX_UPLOAD_BYTES),
        preview_size=_env_int("EMBEDGEN_PREVIEW_SIZE", DEFAULT_PREVIEW_SIZE),
    )
