"""`scp-pack unpack` command.

Converts an SCP file back into a pack directory.
"""

from __future__ import annotations

from pathlib import Path

import typer

from scpack.cli.errors import reported_errors
from scpack.convert import Converter


def register(app: typer.Typer) -> None:
    @app.command("unpack")
    def unpack(
        ctx: typer.Context,
        input: str = typer.Option(..., "--input", "-i", help="Input SCP file."),
        output: str = typer.Option(..., "--output", "-o", help="Output pack directory."),
    ) -> None:
        """Convert SCP file to pack directory."""
        converter: Converter = ctx.obj
        with reported_errors():
            converter.scp_to_pack(Path(input), Path(output))
        typer.echo(f"Successfully extracted to: {output}")
