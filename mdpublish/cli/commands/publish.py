"""``mdpublish publish FILE`` — publish a Markdown file from disk.

Runs the same pipeline as ``POST /upload`` against the configured page
directory and prints the resulting URL.
"""

from __future__ import annotations

import mimetypes
from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel

from mdpublish.config import AppConfig
from mdpublish.core.errors import PublishError, UploadRejectedError
from mdpublish.core.page_store import FileSystemPageStore
from mdpublish.core.publisher import PublishService
from mdpublish.core.renderer import MarkdownRenderer
from mdpublish.models.pages import UploadRequest

console = Console()


def publish_cmd(
    source: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        readable=True,
        help="Markdown file to publish.",
    ),
    pages_dir: Path = typer.Option(
        None, "--pages", help="Directory holding published pages."
    ),
) -> None:
    """Publish a local Markdown file and print its URL."""
    cfg = AppConfig(pages_path=pages_dir) if pages_dir else AppConfig()

    service = PublishService(
        FileSystemPageStore(cfg.pages_path),
        cfg.base_url,
        renderer=MarkdownRenderer(allow_raw_html=cfg.allow_raw_html),
    )
    content_type, _ = mimetypes.guess_type(source.name)
    upload = UploadRequest(
        filename=source.name,
        content_type=content_type,
        data=source.read_bytes(),
    )

    try:
        published = service.publish(upload)
    except UploadRejectedError as exc:
        console.print(f"[bold red]Rejected ({exc.code}):[/bold red] {exc.detail}")
        raise typer.Exit(code=2)
    except PublishError as exc:
        console.print(f"[bold red]Publish failed ({exc.code}):[/bold red] {exc.detail}")
        raise typer.Exit(code=1)

    console.print(
        Panel(
            "\n".join([
                "[bold green]File uploaded and converted successfully[/bold green]",
                "",
                f"[bold]Page ID:[/bold]  {published.page_id}",
                f"[bold]Size:[/bold]     {published.size_bytes} bytes",
                f"[bold]Stored in:[/bold] {cfg.pages_path}",
            ]),
            title="[bold]mdpublish[/bold]",
            border_style="green",
            padding=(1, 2),
        )
    )

    # Print the URL plainly for scripting
    console.print(published.url, soft_wrap=True)
