"""Conversion facade: pack directory <-> SCP file.

Sequences validation, the transformers and container I/O. Each call owns its
manifest and entries for its whole duration; a Converter holds only its
compression level and can be shared between threads.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from scpack.archive.io import (
    DEFAULT_COMPRESSION_LEVEL,
    ArchiveReader,
    ArchiveWriter,
    check_compression_level,
    list_entries,
)
from scpack.codecs.static_export import build_archive_entries
from scpack.codecs.static_import import reconstruct_pack
from scpack.core.paths import prepare_output_dir, validate_scp_file
from scpack.pack.io import load_pack, save_pack

logger = logging.getLogger(__name__)


class Converter:
    def __init__(self, *, compression_level: int = DEFAULT_COMPRESSION_LEVEL):
        self.compression_level = check_compression_level(compression_level)

    def with_compression_level(self, level: int) -> "Converter":
        return Converter(compression_level=level)

    def pack_to_scp(self, pack_dir: Path, scp_file: Path) -> int:
        """Convert a pack directory into an SCP file; return the entry count.

        All entries are built before the output file is opened.
        """
        pack_dir = Path(pack_dir)
        scp_file = Path(scp_file)
        logger.info("Converting pack directory %s to SCP file %s", pack_dir, scp_file)

        bundle = load_pack(pack_dir)
        entries = build_archive_entries(bundle.manifest, bundle.root)

        with ArchiveWriter(scp_file, compression_level=self.compression_level) as writer:
            writer.add_entries(entries)

        logger.info("Successfully created SCP file: %s (%d entries)", scp_file, len(entries))
        return len(entries)

    def scp_to_pack(self, scp_file: Path, pack_dir: Path) -> dict[str, Any]:
        """Convert an SCP file into a pack directory; return the manifest."""
        scp_file = Path(scp_file)
        pack_dir = Path(pack_dir)
        logger.info("Converting SCP file %s to pack directory %s", scp_file, pack_dir)

        validate_scp_file(scp_file)
        with ArchiveReader(scp_file) as reader:
            result = reconstruct_pack(reader)

        if result.unused_entries:
            logger.debug(
                "Dropped %d entries outside the static layout: %s",
                len(result.unused_entries),
                ", ".join(result.unused_entries),
            )

        prepare_output_dir(pack_dir)
        save_pack(pack_dir, manifest=result.manifest, assets=result.assets)

        logger.info("Successfully extracted to: %s (%d assets)", pack_dir, len(result.assets))
        return result.manifest

    def list_scp_contents(self, scp_file: Path) -> list[str]:
        """Return `"<name> (<size> bytes)"` for every entry in the archive."""
        validate_scp_file(scp_file)
        with ArchiveReader(scp_file) as reader:
            return list_entries(reader)

    def read_scp_file(self, scp_file: Path, entry_name: str) -> bytes:
        validate_scp_file(scp_file)
        with ArchiveReader(scp_file) as reader:
            return reader.read(entry_name)
