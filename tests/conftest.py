"""
Shared pytest configuration for the embedgen test suite.

All external boundaries are replaced here so that no test downloads a model,
opens a real PDF parser on fabricated bytes, or makes a network request:

    • fake_model      → sentence-transformers model double
    • fake_pdf        → pdfplumber.open double serving fixed page texts
    • fake_http       → requests.get double with a configurable response
    • fake_clock      → deadline clock for URL fetches
"""

import pytest
from typer.testing import CliRunner

import embedgen.acquire.files as files_module
import embedgen.acquire.url as url_module
import embedgen.embedding.sentence_transformer as st_module
from embedgen.config import Settings
from embedgen.session import EmbeddingSession
from tests.fixtures.fakes import (
    FakeClock,
    FakePdf,
    FakeResponse,
    FakeSentenceTransformer,
    MockVectorizer,
)


# ============================================================================
# SHARED TEST INFRASTRUCTURE
# ============================================================================


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Drop EMBEDGEN_* variables so every test starts from the defaults."""
    for name in (
        "EMBEDGEN_MODEL",
        "EMBEDGEN_PROVIDER",
        "EMBEDGEN_CORS_RELAY",
        "EMBEDGEN_FETCH_TIMEOUT",
        "EMBEDGEN_MAX_UPLOAD_BYTES",
        "EMBEDGEN_PREVIEW_SIZE",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provides a fresh Typer CliRunner instance for CLI tests."""
    return CliRunner()


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def mock_vectorizer() -> MockVectorizer:
    return MockVectorizer()


@pytest.fixture
def session(mock_vectorizer, settings) -> EmbeddingSession:
    return EmbeddingSession(vectorizer=mock_vectorizer, settings=settings)


# ============================================================================
# THIRD-PARTY DOUBLES
# ============================================================================


@pytest.fixture
def fake_model(monkeypatch):
    """
    Replace SentenceTransformer with FakeSentenceTransformer and clear the
    model cache before and after the test.
    """
    FakeSentenceTransformer.instances = []
    st_module.clear_model_cache()
    monkeypatch.setattr(st_module, "_SentenceTransformer", FakeSentenceTransformer)
    yield FakeSentenceTransformer
    st_module.clear_model_cache()


@pytest.fixture
def fake_pdf(monkeypatch):
    """
    Serve fixed page texts from pdfplumber.open.

    Usage:
        fake_pdf(["Hello", "World"])
    """

    def _install(pages):
        opened = []

        def _open(stream, *args, **kwargs):
            opened.append(stream)
            return FakePdf(pages)

        monkeypatch.setattr(files_module.pdfplumber, "open", _open)
        return opened

    return _install


@pytest.fixture
def fake_http(monkeypatch):
    """
    Replace requests.get.

    Usage:
        calls = fake_http(FakeResponse(200, "body"))
        calls = fake_http(requests.Timeout("slow"))   # raised instead
    """

    def _install(result):
        calls = []

        def _get(url, **kwargs):
            calls.append({"url": url, **kwargs})
            if isinstance(result, BaseException):
                raise result
            return result

        monkeypatch.setattr(url_module.requests, "get", _get)
        return calls

    return _install


@pytest.fixture
def ok_response():
    def _make(text: str = "<html>remote text</html>") -> FakeResponse:
        return FakeResponse(200, text)

    return _make


@pytest.fixture
def fake_clock(monkeypatch):
    """Replace the clock url.py measures its fetch deadline with."""
    clock = FakeClock()
    monkeypatch.setattr(url_module, "time", clock)
    return clock
