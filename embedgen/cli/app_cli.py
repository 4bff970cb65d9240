"""
Interactive app commands.

Runs the acquire → vectorize pipeline from the terminal, one command per
input source:

    embedgen app text "some text"
    embedgen app file notes.pdf
    embedgen app url https://example.com
    embedgen app interactive

Each command drives an EmbeddingSession and prints its final state: the
vector's dimensions and first values on success, or the error message (and
exit code 1) on failure.
"""

import mimetypes
from pathlib import Path
from typing import Optional

import typer

from embedgen.config import load_settings
from embedgen.embedding import SUPPORTED_PROVIDERS, EmbeddingClient
from embedgen.logging_utils import format_vector_summary, log_verbose
from embedgen.session import EmbeddingSession
from embedgen.types import Failed, ProcessingState, Succeeded

app_app = typer.Typer(
    help=(
        "Generate a vector from text, a file (plain text or PDF) or a URL.\n\n"
        "The vectorizer is chosen with --provider or EMBEDGEN_PROVIDER:\n\n"
        "    placeholder            character codes divided by 255\n"
        "    sentence-transformers  pre-trained MiniLM embeddings"
    )
)

PROVIDER_HELP = f"Vectorizer to use ({', '.join(SUPPORTED_PROVIDERS)})."

INTERACTIVE_HELP = (
    "Enter 'text: <text>', 'file: <path>' or 'url: <url>'. "
    "Plain input is treated as text. Type 'quit' to exit."
)


def build_session(provider: Optional[str] = None) -> EmbeddingSession:
    """Create a session wired to the configured vectorizer."""
    settings = load_settings()
    chosen = provider or settings.provider
    if chosen not in SUPPORTED_PROVIDERS:
        typer.echo(f"Error: {PROVIDER_HELP} Got '{chosen}'.", err=True)
        raise typer.Exit(code=1)
    client = EmbeddingClient(provider=chosen, model_name=settings.model_name)
    return EmbeddingSession(vectorizer=client, settings=settings)


def report_state(session: EmbeddingSession) -> bool:
    """Print the session's final state. Returns True on success."""
    state: ProcessingState = session.state
    if isinstance(state, Succeeded):
        typer.echo("Embeddings generated:")
        for line in format_vector_summary(state.vector.values, session.settings.preview_size):
            typer.echo(line)
        return True
    if isinstance(state, Failed):
        typer.echo(f"Error: {state.message}", err=True)
    return False


def read_file_source(path: Path):
    mime_type, _ = mimetypes.guess_type(path.name)
    return path.read_bytes(), mime_type or ""


@app_app.command("text")
def text_command(
    text: str = typer.Argument(..., help="Text to vectorize."),
    provider: Optional[str] = typer.Option(None, "--provider", help=PROVIDER_HELP),
    verbose: bool = typer.Option(False, "--verbose", help="Show progress messages."),
) -> None:
    """Vectorize text given on the command line."""
    session = build_session(provider)
    log_verbose("Processing text...", verbose)
    session.submit_text(text)
    if not report_state(session):
        raise typer.Exit(code=1)


@app_app.command("file")
def file_command(
    path: Path = typer.Argument(
        ...,
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        help="Plain-text (.txt) or PDF (.pdf) file.",
    ),
    provider: Optional[str] = typer.Option(None, "--provider", help=PROVIDER_HELP),
    verbose: bool = typer.Option(False, "--verbose", help="Show progress messages."),
) -> None:
    """Extract text from a file and vectorize it."""
    session = build_session(provider)
    data, mime_type = read_file_source(path)
    log_verbose(f"Reading {path.name} ({mime_type or 'unknown type'})...", verbose)
    session.submit_file(data, mime_type, filename=path.name)
    if not report_state(session):
        raise typer.Exit(code=1)


@app_app.command("url")
def url_command(
    url: str = typer.Argument(..., help="Absolute http(s) URL to fetch."),
    provider: Optional[str] = typer.Option(None, "--provider", help=PROVIDER_HELP),
    verbose: bool = typer.Option(False, "--verbose", help="Show progress messages."),
) -> None:
    """Fetch a URL through the CORS relay and vectorize the response body."""
    session = build_session(provider)
    log_verbose(f"Fetching {url}...", verbose)
    session.submit_url(url)
    if not report_state(session):
        raise typer.Exit(code=1)


@app_app.command("interactive")
def interactive_command(
    provider: Optional[str] = typer.Option(None, "--provider", help=PROVIDER_HELP),
) -> None:
    """
    Prompt for inputs until 'quit'. Errors are reported and the prompt
    returns; they never end the loop.
    """
    session = build_session(provider)
    typer.echo(INTERACTIVE_HELP)

    while True:
        line = typer.prompt(">", default="", show_default=False).strip()
        if line.lower() in ("quit", "exit"):
            break

        prefix, _, rest = line.partition(":")
        kind = prefix.strip().lower()
        value = rest.strip()

        if kind == "file":
            if not value:
                typer.echo("Error: Please enter a file path after 'file:'.", err=True)
                continue
            path = Path(value)
            if not path.is_file():
                typer.echo(f"Error: File not found: {path}", err=True)
                continue
            data, mime_type = read_file_source(path)
            session.submit_file(data, mime_type, filename=path.name)
        elif kind == "url":
            session.submit_url(value)
        elif kind == "text":
            session.submit_text(value)
        else:
            session.submit_text(line)

        report_state(session)
