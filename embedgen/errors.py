"""
Error kinds raised by the embedgen pipeline.

Every failure site in the pipeline raises one of the exceptions below. The
set is closed: each exception carries an ErrorKind so that presentation
layers (CLI, HTTP API) can branch on the kind instead of parsing messages.

    ValidationError   → empty text, malformed URL, unsupported upload
    FetchError        → network failure, timeout, non-2xx response
    FileReadError     → undecodable text file, unreadable PDF
    ModelLoadError    → embedding backend could not be initialized
    InferenceError    → embedding backend failed on the given input
    SessionBusyError  → a submission arrived while one was in flight
"""

from enum import Enum


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    FETCH = "fetch"
    FILE_READ = "file_read"
    MODEL_LOAD = "model_load"
    INFERENCE = "inference"
    BUSY = "busy"


class EmbedGenError(Exception):
    """Base class for every error the pipeline surfaces to a user."""

    kind: ErrorKind = ErrorKind.INFERENCE

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(EmbedGenError):
    kind = ErrorKind.VALIDATION


class FetchError(EmbedGenError):
    kind = ErrorKind.FETCH


class FileReadError(EmbedGenError):
    kind = ErrorKind.FILE_READ


class ModelLoadError(EmbedGenError):
    kind = ErrorKind.MODEL_LOAD


class InferenceError(EmbedGenError):
    kind = ErrorKind.INFERENCE


class SessionBusyError(EmbedGenError):
    kind = ErrorKind.BUSY
