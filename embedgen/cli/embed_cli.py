"""
Embedding script command.

Loads the pre-trained embedding model, embeds one sentence and prints the
vector's summary statistics:

    embedgen embed
    embedgen embed --text "some other sentence" --verbose
"""

from typing import List, Optional

import typer

from embedgen.config import load_settings
from embedgen.embedding import SENTENCE_TRANSFORMERS, EmbeddingClient
from embedgen.errors import EmbedGenError
from embedgen.logging_utils import format_vector_summary, log_debug, log_verbose

EXAMPLE_TEXT = "Este es un ejemplo de texto para generar embeddings."


def run_embed(
    text: str = EXAMPLE_TEXT,
    model_name: Optional[str] = None,
    verbose: bool = False,
    debug: bool = False,
) -> List[float]:
    """
    Generate and report the embedding for `text`.

    Returns the vector so tests and callers can inspect it. Errors from the
    backend (ModelLoadError, InferenceError) propagate unchanged.
    """
    settings = load_settings()
    client = EmbeddingClient(
        provider=SENTENCE_TRANSFORMERS,
        model_name=model_name or settings.model_name,
    )

    log_verbose(f"Loading model {client.model_name}...", verbose)
    log_verbose(f"Generating embeddings for: {text}", verbose)

    embedding = client.generate(text)

    typer.echo("Embeddings generated successfully:")
    for line in format_vector_summary(embedding, settings.preview_size):
        typer.echo(line)

    log_debug(f"Full vector: {embedding}", debug)
    return embedding


def embed_command(
    text: str = typer.Option(
        EXAMPLE_TEXT,
        "--text",
        help="Sentence to embed.",
        show_default=True,
    ),
    model: Optional[str] = typer.Option(
        None,
        "--model",
        help="sentence-transformers model name (defaults to EMBEDGEN_MODEL).",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Show progress messages."),
    debug: bool = typer.Option(False, "--debug", help="Print the full vector to stderr."),
) -> None:
    """
    Embed a sentence with the pre-trained model and print its dimensions
    and first values.
    """
    try:
        run_embed(text=text, model_name=model, verbose=verbose, debug=debug)
    except EmbedGenError as e:
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(code=1)
