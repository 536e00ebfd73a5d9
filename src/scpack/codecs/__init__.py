"""Transformers between the pack layout and the SCP static layout.

- `static_export`: db.json + repository/ -> archive entries
- `static_import`: archive entries -> db.json manifest + repository assets
"""

from __future__ import annotations

from .static_export import STATIC_ROOT, build_archive_entries
from .static_import import StaticImport, reconstruct_pack

__all__ = [
    "STATIC_ROOT",
    "build_archive_entries",
    "StaticImport",
    "reconstruct_pack",
]
