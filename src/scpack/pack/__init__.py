"""Pack directory I/O (package-on-disk format).

- `db.json` manifest read/write
- flat `repository/` asset listing and extraction
"""

from __future__ import annotations

from .io import PackBundle, load_pack, repository_files, save_pack
from .manifest import decode_document, encode_document, read_manifest, write_manifest

__all__ = [
    "PackBundle",
    "load_pack",
    "save_pack",
    "repository_files",
    "encode_document",
    "decode_document",
    "read_manifest",
    "write_manifest",
]
