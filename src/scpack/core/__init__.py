"""scp-pack core: category table, text field shapes, errors and path checks.

Everything here is shared by the pack, archive and codec layers; nothing in
this package reads or writes files except the path checks.
"""

from __future__ import annotations

from .categories import CATEGORIES, CATEGORY_KEYS, RESERVED_ENTRY_NAMES, Category
from .errors import (
    ArchiveFormatError,
    DocumentFormatError,
    DocumentParseError,
    EntryNotFoundError,
    InvalidFormatError,
    InvalidPathError,
    ScpError,
)
from .fields import TEXT_FIELDS, localized_text, to_pack_item, to_static_item

__all__ = [
    "CATEGORIES",
    "CATEGORY_KEYS",
    "RESERVED_ENTRY_NAMES",
    "Category",
    "ScpError",
    "InvalidPathError",
    "InvalidFormatError",
    "ArchiveFormatError",
    "DocumentParseError",
    "DocumentFormatError",
    "EntryNotFoundError",
    "TEXT_FIELDS",
    "localized_text",
    "to_static_item",
    "to_pack_item",
]
