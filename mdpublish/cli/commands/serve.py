"""``mdpublish serve`` — run the HTTP API under uvicorn."""

from __future__ import annotations

from pathlib import Path

import typer
import uvicorn
from rich.console import Console

from mdpublish.api.app import create_app
from mdpublish.config import AppConfig
from mdpublish.log import configure_logging

console = Console()


def serve_cmd(
    host: str = typer.Option(None, "--host", help="Interface to bind."),
    port: int = typer.Option(None, "--port", "-p", help="Port to listen on."),
    pages_dir: Path = typer.Option(
        None, "--pages", help="Directory holding published pages."
    ),
) -> None:
    """Serve the upload, listing and page routes.

    Unset options fall back to MDPUBLISH_* environment variables.
    """
    overrides = {
        key: value
        for key, value in {"host": host, "port": port, "pages_path": pages_dir}.items()
        if value is not None
    }
    cfg = AppConfig(**overrides)
    configure_logging(cfg.log_level)

    app = create_app(cfg)
    console.print(f"[bold green]Server is running on[/bold green] {cfg.base_url}")
    console.print(f"[dim]API docs available at {cfg.base_url}/docs[/dim]")
    uvicorn.run(app, host=cfg.host, port=cfg.port, log_config=None)
