"""`scp-pack show` command.

Prints one archive entry: as text when it decodes as UTF-8, otherwise only
its size.
"""

from __future__ import annotations

from pathlib import Path

import typer

from scpack.cli.errors import reported_errors
from scpack.convert import Converter


def register(app: typer.Typer) -> None:
    @app.command("show")
    def show(
        ctx: typer.Context,
        scp: str = typer.Option(..., "--scp", "-s", help="SCP file."),
        file: str = typer.Option(..., "--file", "-f", help="File path within SCP."),
    ) -> None:
        """Show content of specific file in SCP."""
        converter: Converter = ctx.obj
        with reported_errors():
            content = converter.read_scp_file(Path(scp), file)

        try:
            text = content.decode("utf-8")
        except UnicodeDecodeError:
            typer.echo(f"File {file} is binary ({len(content)} bytes)")
            return
        typer.echo(f"Content of {file} in {scp}:")
        typer.echo(text)
