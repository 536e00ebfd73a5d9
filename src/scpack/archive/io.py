"""SCP container I/O (zip).

An SCP file is a plain zip archive. This module is the only place that talks
to `zipfile`; the transformers work against the small read view exposed by
`ArchiveReader` / `MemoryArchive`:

- names()           entry names in archive order
- read(name)        entry bytes (KeyError-compatible EntryNotFoundError)
- name in view      membership by exact name

Writes go to a temporary sibling file and are moved into place by
`finalize()`, so a failed conversion never leaves a truncated archive behind.
"""

from __future__ import annotations

import logging
import os
import zipfile
import zlib
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Optional

from scpack.core.errors import ArchiveFormatError, EntryNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_COMPRESSION_LEVEL = 6


@dataclass(frozen=True)
class ArchiveEntry:
    name: str
    size: int
    is_dir: bool = False


def format_entry(entry: ArchiveEntry) -> str:
    return f"{entry.name} ({entry.size} bytes)"


def check_compression_level(level: int) -> int:
    if isinstance(level, bool) or not isinstance(level, int):
        raise TypeError(f"compression level: expected int, got {type(level).__name__}")
    if not 0 <= level <= 9:
        raise ValueError(f"compression level must be between 0 and 9, got {level}")
    return level


class ArchiveWriter:
    """Create a new SCP archive at `path`.

    Use as a context manager: leaving the block without an exception calls
    `finalize()`, an exception discards the partial file.
    """

    def __init__(self, path: Path, *, compression_level: int = DEFAULT_COMPRESSION_LEVEL):
        self.path = Path(path)
        self.compression_level = check_compression_level(compression_level)
        self._tmp_path = self.path.with_name(self.path.name + ".part")
        self._zip: Optional[zipfile.ZipFile] = None

    def __enter__(self) -> "ArchiveWriter":
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            self.finalize()
        else:
            self.discard()

    def open(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._zip = zipfile.ZipFile(
            self._tmp_path,
            "w",
            compression=zipfile.ZIP_DEFLATED,
            compresslevel=self.compression_level,
        )

    def add_entry(self, name: str, data: bytes) -> None:
        if self._zip is None:
            raise RuntimeError("archive writer is not open")
        self._zip.writestr(name, data)
        logger.debug("Added: %s", name)

    def add_entries(self, entries: Iterable[tuple[str, bytes]]) -> None:
        for name, data in entries:
            self.add_entry(name, data)

    def finalize(self) -> None:
        """Close the zip and atomically move it to its final path."""
        if self._zip is None:
            raise RuntimeError("archive writer is not open")
        self._zip.close()
        self._zip = None
        os.replace(self._tmp_path, self.path)

    def discard(self) -> None:
        if self._zip is not None:
            self._zip.close()
            self._zip = None
        self._tmp_path.unlink(missing_ok=True)


class ArchiveReader:
    """Random-access read view over an SCP archive on disk."""

    def __init__(self, path: Path):
        self.path = Path(path)
        try:
            self._zip = zipfile.ZipFile(self.path, "r")
        except zipfile.BadZipFile as e:
            raise ArchiveFormatError(f"ZIP error: {self.path}: {e}") from e
        self._infos = self._zip.infolist()

    def __enter__(self) -> "ArchiveReader":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        self._zip.close()

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        try:
            self._zip.getinfo(name)
        except KeyError:
            return False
        return True

    def __iter__(self) -> Iterator[ArchiveEntry]:
        for i in range(self.entry_count()):
            yield self.entry_by_index(i)

    def entry_count(self) -> int:
        return len(self._infos)

    def entry_by_index(self, index: int) -> ArchiveEntry:
        info = self._infos[index]
        return ArchiveEntry(name=info.filename, size=info.file_size, is_dir=info.is_dir())

    def entry_by_name(self, name: str) -> Optional[bytes]:
        """Return entry bytes, or None when no entry has this exact name."""
        try:
            info = self._zip.getinfo(name)
        except KeyError:
            return None
        # NotImplementedError: unsupported compression method; RuntimeError: encrypted entry
        try:
            return self._zip.read(info)
        except (zipfile.BadZipFile, zlib.error, EOFError, NotImplementedError, RuntimeError) as e:
            raise ArchiveFormatError(f"ZIP error: {name}: {e}") from e

    def names(self) -> list[str]:
        return [info.filename for info in self._infos]

    def read(self, name: str) -> bytes:
        data = self.entry_by_name(name)
        if data is None:
            raise EntryNotFoundError(name)
        return data


class MemoryArchive:
    """The same read view over in-memory (name, bytes) pairs.

    Later entries with a duplicate name shadow earlier ones for `read`, while
    `names()` keeps every name in insertion order (zip semantics).
    """

    def __init__(self, entries: Iterable[tuple[str, bytes]]):
        self._entries: list[tuple[str, bytes]] = [(str(n), bytes(d)) for n, d in entries]
        self._by_name: dict[str, bytes] = dict(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[ArchiveEntry]:
        for name, data in self._entries:
            yield ArchiveEntry(name=name, size=len(data), is_dir=name.endswith("/"))

    def entry_by_name(self, name: str) -> Optional[bytes]:
        return self._by_name.get(name)

    def names(self) -> list[str]:
        return [name for name, _ in self._entries]

    def read(self, name: str) -> bytes:
        data = self.entry_by_name(name)
        if data is None:
            raise EntryNotFoundError(name)
        return data


def list_entries(view: Iterable[ArchiveEntry]) -> list[str]:
    """One `"<name> (<size> bytes)"` line per entry, in archive order."""
    return [format_entry(entry) for entry in view]
