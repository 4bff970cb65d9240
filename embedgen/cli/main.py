"""
Root entrypoint for the embedgen CLI.

This module defines the top‑level `embedgen` command and mounts:

    • `embedgen embed`   →  embedding script (pre-trained model, fixed sentence)
    • `embedgen app ...` →  interactive app pipeline (text, file, url)
    • `embedgen serve`   →  the browser app (FastAPI, served by uvicorn)
"""

from dotenv import load_dotenv
import typer
import uvicorn

from .app_cli import app_app
from .embed_cli import embed_command

# Load environment variables
load_dotenv()

cli = typer.Typer(
    help=(
        "Text embedding demos.\n\n"
        "  embedgen embed            embed a sample sentence with MiniLM\n"
        "  embedgen app text|file|url|interactive\n"
        "                            vectorize text, a file or a URL\n"
        "  embedgen serve            run the browser app"
    )
)

cli.command("embed")(embed_command)
cli.add_typer(app_app, name="app")


@cli.command("serve")
def serve_command(
    host: str = typer.Option("127.0.0.1", "--host", help="Interface to bind."),
    port: int = typer.Option(8000, "--port", help="Port to listen on."),
) -> None:
    """Run the browser app."""
    uvicorn.run("embedgen.api:app", host=host, port=port, log_level="info")


if __name__ == "__main__":
    cli()
