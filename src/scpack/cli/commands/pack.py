"""`scp-pack pack` command.

Converts a pack directory (db.json + repository/) into an SCP file.
"""

from __future__ import annotations

from pathlib import Path

import typer

from scpack.cli.errors import reported_errors
from scpack.convert import Converter


def register(app: typer.Typer) -> None:
    @app.command("pack")
    def pack(
        ctx: typer.Context,
        input: str = typer.Option(..., "--input", "-i", help="Input pack directory."),
        output: str = typer.Option(..., "--output", "-o", help="Output SCP file."),
    ) -> None:
        """Convert pack directory to SCP file."""
        converter: Converter = ctx.obj
        with reported_errors():
            count = converter.pack_to_scp(Path(input), Path(output))
        typer.echo(f"Successfully created SCP file: {output} ({count} entries)")
