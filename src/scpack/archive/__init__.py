"""SCP archive container I/O (zip)."""

from __future__ import annotations

from .io import (
    DEFAULT_COMPRESSION_LEVEL,
    ArchiveEntry,
    ArchiveReader,
    ArchiveWriter,
    MemoryArchive,
    format_entry,
    list_entries,
)

__all__ = [
    "DEFAULT_COMPRESSION_LEVEL",
    "ArchiveEntry",
    "ArchiveReader",
    "ArchiveWriter",
    "MemoryArchive",
    "format_entry",
    "list_entries",
]
