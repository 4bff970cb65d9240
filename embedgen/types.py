"""
embedgen/types.py

Centralized type definitions for embedgen.

This module defines the value objects that flow through the pipeline:

    InputSource  →  text blob  →  EmbeddingVector  →  ProcessingState

Keeping these in one place gives the acquirers, the vectorizers, the session
controller and both presentation layers (CLI, HTTP API) a single contract.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Protocol, Tuple, TypedDict, Union

from embedgen.errors import ErrorKind


# ---------------------------------------------------------------------------
# EmbeddingVector
# ---------------------------------------------------------------------------
# An ordered, immutable sequence of floats. The length is fixed by the
# backend model (384 for MiniLM) or equals the input's character count on the
# placeholder path.
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class EmbeddingVector:
    values: Tuple[float, ...]
    provider: str

    @property
    def dimensions(self) -> int:
        return len(self.values)

    def preview(self, size: int = 5) -> List[float]:
        return list(self.values[:size])


# ---------------------------------------------------------------------------
# InputSource
# ---------------------------------------------------------------------------
# Tagged variant describing where the text comes from. Created on user
# action and discarded once converted to plain text.
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class TextSource:
    text: str


@dataclass(frozen=True)
class FileSource:
    data: bytes = field(repr=False)
    mime_type: str
    filename: Optional[str] = None


@dataclass(frozen=True)
class UrlSource:
    url: str


InputSource = Union[TextSource, FileSource, UrlSource]


# ---------------------------------------------------------------------------
# ProcessingState
# ---------------------------------------------------------------------------
# Owned by exactly one session. Transitions:
#
#     Idle → Processing → Succeeded | Failed
#
# Succeeded always carries a non-empty vector.
# ---------------------------------------------------------------------------
class Status(str, Enum):
    IDLE = "idle"
    PROCESSING = "processing"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class Idle:
    status: Status = Status.IDLE


@dataclass(frozen=True)
class Processing:
    source_kind: str
    status: Status = Status.PROCESSING


@dataclass(frozen=True)
class Succeeded:
    vector: EmbeddingVector
    status: Status = Status.SUCCEEDED

    def __post_init__(self) -> None:
        if not self.vector.values:
            raise ValueError("Succeeded requires a non-empty embedding vector")


@dataclass(frozen=True)
class Failed:
    kind: ErrorKind
    message: str
    status: Status = Status.FAILED


ProcessingState = Union[Idle, Processing, Succeeded, Failed]


# ---------------------------------------------------------------------------
# SessionSnapshot
# ---------------------------------------------------------------------------
# JSON-serializable view of a session, consumed by the CLI and the HTTP API.
# total=False because only the fields relevant to the current status are set.
# ---------------------------------------------------------------------------
class SessionSnapshot(TypedDict, total=False):
    status: str
    provider: str
    dimensions: int
    preview: List[float]
    error: Dict[str, str]


# ---------------------------------------------------------------------------
# Vectorizer
# ---------------------------------------------------------------------------
# Anything with a generate(text) method returning floats can act as the
# session's vectorizer: EmbeddingClient, or a test double.
# ---------------------------------------------------------------------------
class Vectorizer(Protocol):
    provider: str

    def generate(self, text: str) -> List[float]: ...


# Parameters forwarded to the backend encode() call.
EncodeOptions = Dict[str, Any]
