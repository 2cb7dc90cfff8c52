"""mdpublish CLI — Typer-based command-line interface.

Provides the ``mdpublish`` command with subcommands for serving the HTTP
API, publishing a local Markdown file, and listing published pages.

All output uses Rich for formatted terminal display.
"""
