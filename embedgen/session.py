"""
Session controller for the interactive app.

An EmbeddingSession owns one ProcessingState and runs at most one
acquire → vectorize cycle at a time:

    Idle → Processing → Succeeded | Failed

A new submission may start from any state except Processing. Submitting
while a cycle is in flight raises SessionBusyError and leaves the in-flight
cycle's state untouched.

Every pipeline error is caught here and recorded as Failed(kind, message).
Nothing is retried and nothing escapes except SessionBusyError, which the
caller must report itself because the session state belongs to the other
request.
"""

import threading
import uuid
from collections import OrderedDict
from typing import Callable, Optional, Tuple

from embedgen.acquire import acquire
from embedgen.config import Settings
from embedgen.errors import EmbedGenError, InferenceError, SessionBusyError
from embedgen.types import (
    EmbeddingVector,
    Failed,
    FileSource,
    Idle,
    InputSource,
    Processing,
    ProcessingState,
    SessionSnapshot,
    Succeeded,
    TextSource,
    UrlSource,
    Vectorizer,
)

Acquirer = Callable[[InputSource, Settings], str]

SOURCE_KINDS = {TextSource: "text", FileSource: "file", UrlSource: "url"}


class EmbeddingSession:
    """
    One user's processing state plus the dependencies needed to advance it.

    Parameters
    ----------
    vectorizer : Vectorizer
        Usually an EmbeddingClient. Anything with `.provider` and
        `.generate(text)` works, which keeps tests free of model downloads.
    settings : Settings, optional
        Relay, timeout, upload limit and preview size.
    acquirer : callable, optional
        Converts an InputSource into text. Defaults to `embedgen.acquire.acquire`.
    """

    def __init__(
        self,
        vectorizer: Vectorizer,
        settings: Optional[Settings] = None,
        acquirer: Acquirer = acquire,
    ) -> None:
        self.vectorizer = vectorizer
        self.settings = settings or Settings()
        self._acquirer = acquirer
        self._state: ProcessingState = Idle()
        self._guard = threading.Lock()

    @property
    def state(self) -> ProcessingState:
        return self._state

    # ------------------------------------------------------------------
    # Submissions
    # ------------------------------------------------------------------
    def submit(self, source: InputSource) -> ProcessingState:
        """
        Run one acquire → vectorize cycle and return the resulting state.

        Raises
        ------
        SessionBusyError
            If another cycle is still Processing.
        """
        if not self._guard.acquire(blocking=False):
            raise SessionBusyError(
                "A request is already being processed. Wait for it to finish."
            )
        try:
            self._state = Processing(source_kind=SOURCE_KINDS.get(type(source), "unknown"))
            try:
                text = self._acquirer(source, self.settings)
                vector = self._vectorize(text)
            except EmbedGenError as e:
                self._state = Failed(kind=e.kind, message=e.message)
            except Exception as e:
                error = InferenceError(f"Error processing input: {e}")
                self._state = Failed(kind=error.kind, message=error.message)
            else:
                self._state = Succeeded(vector=vector)
            return self._state
        finally:
            self._guard.release()

    def submit_text(self, text: str) -> ProcessingState:
        return self.submit(TextSource(text=text))

    def submit_url(self, url: str) -> ProcessingState:
        return self.submit(UrlSource(url=url))

    def submit_file(
        self, data: bytes, mime_type: str, filename: Optional[str] = None
    ) -> ProcessingState:
        return self.submit(FileSource(data=data, mime_type=mime_type, filename=filename))

    def reset(self) -> ProcessingState:
        """Return to Idle. Not allowed while a cycle is in flight."""
        if not self._guard.acquire(blocking=False):
            raise SessionBusyError("Cannot reset while a request is being processed.")
        try:
            self._state = Idle()
            return self._state
        finally:
            self._guard.release()

    def _vectorize(self, text: str) -> EmbeddingVector:
        try:
            values = self.vectorizer.generate(text)
        except EmbedGenError:
            raise
        except Exception as e:
            raise InferenceError(f"Error generating embeddings: {e}") from e

        if not values:
            raise InferenceError("The vectorizer returned an empty vector.")
        return EmbeddingVector(
            values=tuple(float(v) for v in values),
            provider=self.vectorizer.provider,
        )

    # ------------------------------------------------------------------
    # Presentation
    # ------------------------------------------------------------------
    def snapshot(self) -> SessionSnapshot:
        """JSON-serializable view of the current state."""
        state = self._state
        snap: SessionSnapshot = {
            "status": state.status.value,
            "provider": self.vectorizer.provider,
        }
        if isinstance(state, Succeeded):
            snap["dimensions"] = state.vector.dimensions
            snap["preview"] = state.vector.preview(self.settings.preview_size)
        elif isinstance(state, Failed):
            snap["error"] = {"kind": state.kind.value, "message": state.message}
        return snap


class SessionRegistry:
    """
    Bounded map of session id → EmbeddingSession for the web app.

    When the registry is full the least recently used session is evicted.
    """

    def __init__(
        self,
        factory: Callable[[], EmbeddingSession],
        max_sessions: int = 256,
    ) -> None:
        self._factory = factory
        self._max_sessions = max_sessions
        self._sessions: "OrderedDict[str, EmbeddingSession]" = OrderedDict()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._sessions)

    def get_or_create(self, session_id: Optional[str]) -> Tuple[str, EmbeddingSession]:
        with self._lock:
            if session_id and session_id in self._sessions:
                self._sessions.move_to_end(session_id)
                return session_id, self._sessions[session_id]

            new_id = session_id or uuid.uuid4().hex
            session = self._factory()
            self._sessions[new_id] = session
            while len(self._sessions) > self._max_sessions:
                self._sessions.popitem(last=False)
            return new_id, session
