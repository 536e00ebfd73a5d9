"""Map conversion failures to CLI output and exit codes."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

import typer

from scpack.core.errors import ScpError


@contextmanager
def reported_errors() -> Iterator[None]:
    """Print `Error: <message>` to stderr and exit 1 on conversion failures."""
    try:
        yield
    except (ScpError, OSError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e
