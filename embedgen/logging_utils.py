"""
logging_utils.py

Logging helpers shared by the embedgen CLI commands.

Output goes through Typer's echo so it behaves the same under a real
terminal and under `typer.testing.CliRunner`. Verbose messages go to stdout;
debug messages (full vectors, raw payloads) go to stderr so they never mix
with the command's actual result.
"""

from typing import List, Sequence

import typer


def log_verbose(message: str, verbose: bool) -> None:
    """
    Print a high‑level progress message when verbose mode is enabled.

    Parameters
    ----------
    message : str
        Short, plain‑English description of the current pipeline stage
        (e.g., "Loading model...", "Fetching URL...").

    verbose : bool
        Whether verbose mode is active. When False, this function does
        nothing.
    """
    if verbose:
        typer.echo(message)


def log_debug(message: str, debug: bool) -> None:
    """Print a diagnostic message to stderr when debug mode is enabled."""
    if debug:
        typer.echo(f"[debug] {message}", err=True)


def format_vector_summary(values: Sequence[float], preview_size: int = 5) -> List[str]:
    """
    Build the human-readable summary lines for an embedding vector.

    The summary is the same for the embedding script and the interactive
    app: the dimension count followed by the first few values.
    """
    preview = [round(float(v), 6) for v in values[:preview_size]]
    return [
        f"Dimensions: {len(values)}",
        f"First {preview_size} values: {preview}",
    ]
