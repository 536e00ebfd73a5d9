"""`scp-pack list` command."""

from __future__ import annotations

from pathlib import Path

import typer

from scpack.cli.errors import reported_errors
from scpack.convert import Converter


def register(app: typer.Typer) -> None:
    @app.command("list")
    def list_scp(
        ctx: typer.Context,
        file: str = typer.Option(..., "--file", "-f", help="SCP file to list."),
    ) -> None:
        """List contents of SCP file."""
        converter: Converter = ctx.obj
        with reported_errors():
            contents = converter.list_scp_contents(Path(file))

        typer.echo(f"Contents of {file}:")
        for index, line in enumerate(contents, start=1):
            typer.echo(f"  {index}: {line}")
