"""Error types raised by scp-pack.

Plain `OSError` is used for filesystem failures and is never wrapped. Every
other failure is an `ScpError` subclass so callers (the CLI) can report them
uniformly. The value-shaped errors also subclass `ValueError`, following the
rest of the code base.
"""

from __future__ import annotations


class ScpError(Exception):
    """Base class for conversion failures."""


class InvalidPathError(ScpError, ValueError):
    """A required file/directory is missing, or a path escapes its base."""


class InvalidFormatError(ScpError, ValueError):
    """A pack or archive does not have the expected on-disk shape."""


class ArchiveFormatError(ScpError):
    """The archive container is corrupt or unreadable."""


class DocumentParseError(ScpError, ValueError):
    """A JSON document could not be decoded."""

    def __init__(self, where: str, reason: str):
        super().__init__(f"{where}: {reason}")
        self.where = where
        self.reason = reason


class DocumentFormatError(ScpError, ValueError):
    """A decoded document does not have the expected structure."""


class EntryNotFoundError(ScpError, KeyError):
    """A named archive entry does not exist."""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"entry not found in archive: {self.name}"
