"""scp-pack CLI entrypoint.

Global options (compression level, verbosity) are handled by the callback,
which stores a configured Converter on the Typer context for subcommands.
"""

from __future__ import annotations

import logging

import typer

from scpack.archive.io import DEFAULT_COMPRESSION_LEVEL
from scpack.convert import Converter

app = typer.Typer(
    name="scp-pack",
    add_completion=False,
    no_args_is_help=True,
    help="Convert between SCP files and pack directories.",
)


@app.callback()
def _callback(
    ctx: typer.Context,
    compression: int = typer.Option(
        DEFAULT_COMPRESSION_LEVEL,
        "--compression",
        "-c",
        min=0,
        max=9,
        envvar="SCPACK_COMPRESSION",
        help="Compression level (0-9, higher = better compression).",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        envvar="SCPACK_VERBOSE",
        help="Log every archive entry as it is added or extracted.",
    ),
) -> None:
    """scp-pack CLI."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = Converter(compression_level=compression)


@app.command("version")
def version() -> None:
    """Print the installed scp-pack version."""
    from scpack import __version__

    typer.echo(__version__)


def _register_commands() -> None:
    """Register CLI subcommands.

    Importing these modules must remain lightweight so `scp-pack --help` is fast.
    """
    from scpack.cli.commands import list_scp as list_scp_cmd
    from scpack.cli.commands import pack as pack_cmd
    from scpack.cli.commands import show as show_cmd
    from scpack.cli.commands import unpack as unpack_cmd

    pack_cmd.register(app)
    unpack_cmd.register(app)
    list_scp_cmd.register(app)
    show_cmd.register(app)


_register_commands()
