"""Main Typer application — imports and registers all CLI commands.

Entry point: ``mdpublish`` (configured via pyproject.toml [project.scripts]).
"""

from __future__ import annotations

import typer

from mdpublish.cli.commands.list_cmd import list_cmd
from mdpublish.cli.commands.publish import publish_cmd
from mdpublish.cli.commands.serve import serve_cmd

app = typer.Typer(
    name="mdpublish",
    help="mdpublish: convert Markdown files into published webpages.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)

app.command(name="serve", help="Run the HTTP API server.")(serve_cmd)
app.command(name="publish", help="Publish a local Markdown file.")(publish_cmd)
app.command(name="list", help="List published pages.")(list_cmd)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
