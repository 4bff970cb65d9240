"""
FastAPI server for the browser app.

Serves a small HTML page and JSON endpoints that run the acquire → vectorize
pipeline for text, uploaded files and URLs. Each browser gets its own
EmbeddingSession, tracked with a cookie, so one user's request never touches
another user's state.
"""

from typing import Callable, Optional

from fastapi import Cookie, FastAPI, File, UploadFile
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import BaseModel, Field

from embedgen import __version__
from embedgen.config import Settings, load_settings
from embedgen.embedding import EmbeddingClient
from embedgen.errors import ErrorKind, SessionBusyError
from embedgen.session import EmbeddingSession, SessionRegistry
from embedgen.types import Failed, ProcessingState, Vectorizer

SESSION_COOKIE = "embedgen_session"

STATUS_BY_KIND = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.FILE_READ: 422,
    ErrorKind.FETCH: 502,
    ErrorKind.MODEL_LOAD: 503,
    ErrorKind.INFERENCE: 500,
    ErrorKind.BUSY: 409,
}


class TextRequest(BaseModel):
    """Request for vectorizing text."""
    text: str = Field(..., description="Text to vectorize")


class UrlRequest(BaseModel):
    """Request for vectorizing the content behind a URL."""
    url: str = Field(..., description="Absolute http(s) URL to fetch")


class HealthResponse(BaseModel):
    status: str
    provider: str
    model: str
    version: str


INDEX_HTML = """<!doctype html>
<html lang="en">
<head><meta charset="utf-8"><title>Embedding Generator</title></head>
<body>
<h1>Embedding Generator</h1>
<form id="text-form"><textarea name="text" rows="6" cols="60"
 placeholder="Enter text to generate embeddings..."></textarea><br>
<button type="submit">Generate from text</button></form>
<form id="url-form"><input name="url" size="60"
 placeholder="https://example.com/document"> <button type="submit">Generate from URL</button></form>
<form id="file-form"><input type="file" name="file" accept=".txt,.pdf"></form>
<p id="status"></p>
<pre id="result"></pre>
<script>
const statusEl = document.getElementById("status");
const resultEl = document.getElementById("result");
async function show(responsePromise) {
  statusEl.textContent = "Processing...";
  resultEl.textContent = "";
  const body = await (await responsePromise).json();
  if (body.status === "succeeded") {
    statusEl.textContent = "Dimensions: " + body.dimensions;
    resultEl.textContent = "First values:\\n" + JSON.stringify(body.preview, null, 2);
  } else {
    statusEl.textContent = body.error ? body.error.message : body.status;
  }
}
function postJson(path, payload) {
  return fetch(path, {method: "POST", headers: {"Content-Type": "application/json"},
                      body: JSON.stringify(payload)});
}
document.getElementById("text-form").onsubmit = (e) => {
  e.preventDefault(); show(postJson("/embeddings/text", {text: e.target.text.value}));
};
document.getElementById("url-form").onsubmit = (e) => {
  e.preventDefault(); show(postJson("/embeddings/url", {url: e.target.url.value}));
};
document.querySelector("#file-form input").onchange = (e) => {
  const data = new FormData(); data.append("file", e.target.files[0]);
  show(fetch("/embeddings/file", {method: "POST", body: data}));
};
</script>
</body>
</html>
"""


def create_app(
    settings: Optional[Settings] = None,
    vectorizer_factory: Optional[Callable[[], Vectorizer]] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Parameters
    ----------
    settings : Settings, optional
        Defaults to `load_settings()`.
    vectorizer_factory : callable, optional
        Builds the vectorizer for each new session. Defaults to an
        EmbeddingClient for the configured provider.
    """
    settings = settings or load_settings()

    def default_vectorizer() -> Vectorizer:
        return EmbeddingClient(provider=settings.provider, model_name=settings.model_name)

    make_vectorizer = vectorizer_factory or default_vectorizer
    registry = SessionRegistry(
        factory=lambda: EmbeddingSession(vectorizer=make_vectorizer(), settings=settings)
    )

    app = FastAPI(
        title="Embedding Generator",
        description="Generate embedding vectors from text, files or URLs",
        version=__version__,
    )
    app.state.settings = settings
    app.state.registry = registry

    def respond(
        session_id: str,
        session: EmbeddingSession,
        state: ProcessingState,
        always_ok: bool = False,
    ) -> JSONResponse:
        status_code = 200
        if isinstance(state, Failed) and not always_ok:
            status_code = STATUS_BY_KIND[state.kind]
        response = JSONResponse(content=dict(session.snapshot()), status_code=status_code)
        response.set_cookie(SESSION_COOKIE, session_id, httponly=True, samesite="lax")
        return response

    def busy(
        session_id: str, session: EmbeddingSession, error: SessionBusyError
    ) -> JSONResponse:
        content = dict(session.snapshot())
        content["error"] = {"kind": error.kind.value, "message": error.message}
        response = JSONResponse(content=content, status_code=STATUS_BY_KIND[ErrorKind.BUSY])
        response.set_cookie(SESSION_COOKIE, session_id, httponly=True, samesite="lax")
        return response

    @app.get("/", response_class=HTMLResponse)
    def index() -> str:
        return INDEX_HTML

    @app.get("/health", response_model=HealthResponse)
    def health_check() -> HealthResponse:
        return HealthResponse(
            status="ok",
            provider=settings.provider,
            model=settings.model_name,
            version=__version__,
        )

    # Endpoints are plain `def` so FastAPI runs them in its thread pool;
    # model inference and PDF parsing block.
    @app.post("/embeddings/text")
    def embed_text(
        req: TextRequest,
        embedgen_session: Optional[str] = Cookie(None),
    ) -> JSONResponse:
        session_id, session = registry.get_or_create(embedgen_session)
        try:
            state = session.submit_text(req.text)
        except SessionBusyError as e:
            return busy(session_id, session, e)
        return respond(session_id, session, state)

    @app.post("/embeddings/url")
    def embed_url(
        req: UrlRequest,
        embedgen_session: Optional[str] = Cookie(None),
    ) -> JSONResponse:
        session_id, session = registry.get_or_create(embedgen_session)
        try:
            state = session.submit_url(req.url)
        except SessionBusyError as e:
            return busy(session_id, session, e)
        return respond(session_id, session, state)

    @app.post("/embeddings/file")
    def embed_file(
        file: UploadFile = File(...),
        embedgen_session: Optional[str] = Cookie(None),
    ) -> JSONResponse:
        session_id, session = registry.get_or_create(embedgen_session)
        # Read one byte past the limit so oversize uploads are still rejected.
        data = file.file.read(settings.max_upload_bytes + 1)
        try:
            state = session.submit_file(
                data, file.content_type or "", filename=file.filename
            )
        except SessionBusyError as e:
            return busy(session_id, session, e)
        return respond(session_id, session, state)

    @app.get("/session")
    def get_session(embedgen_session: Optional[str] = Cookie(None)) -> JSONResponse:
        session_id, session = registry.get_or_create(embedgen_session)
        return respond(session_id, session, session.state, always_ok=True)

    @app.post("/session/reset")
    def reset_session(embedgen_session: Optional[str] = Cookie(None)) -> JSONResponse:
        session_id, session = registry.get_or_create(embedgen_session)
        try:
            state = session.reset()
        except SessionBusyError as e:
            return busy(session_id, session, e)
        return respond(session_id, session, state)

    return app


app = create_app()
