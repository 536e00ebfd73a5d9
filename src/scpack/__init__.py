"""scp-pack: convert between Sonolus pack directories and SCP archives.

A pack is `db.json` plus a flat `repository/` of content-addressed assets; an
SCP file is a zip laid out for static serving under `static/sonolus/`.
"""

from __future__ import annotations

from scpack.convert import Converter
from scpack.core import ScpError

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Converter",
    "ScpError",
]
