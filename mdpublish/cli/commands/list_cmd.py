"""``mdpublish list`` — show published pages as a Rich table."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from mdpublish.config import AppConfig
from mdpublish.core.errors import StoreUnavailableError
from mdpublish.core.listing import ListingService
from mdpublish.core.page_store import FileSystemPageStore
from mdpublish.core.publisher import build_page_url

console = Console()


def list_cmd(
    pages_dir: Path = typer.Option(
        None, "--pages", help="Directory holding published pages."
    ),
) -> None:
    """List every published page, oldest first."""
    cfg = AppConfig(pages_path=pages_dir) if pages_dir else AppConfig()

    try:
        pages = ListingService(FileSystemPageStore(cfg.pages_path)).list_published()
    except StoreUnavailableError as exc:
        console.print(f"[bold red]Page store unavailable:[/bold red] {exc.detail}")
        raise typer.Exit(code=1)

    if not pages:
        console.print("[dim]No converted files yet.[/dim]")
        return

    table = Table(title=f"Published Pages ({len(pages)})")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Created", style="green")
    table.add_column("Size", justify="right")
    table.add_column("URL", overflow="fold")

    for page in pages:
        table.add_row(
            page.id,
            page.created_at.strftime("%Y-%m-%d %H:%M:%S UTC"),
            f"{page.size_bytes / 1024:.1f} KB",
            build_page_url(cfg.base_url, page.id),
        )

    console.print(table)
