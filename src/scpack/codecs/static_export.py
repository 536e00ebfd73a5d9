"""Pack -> static layout transformer.

Decomposes a db.json manifest into the documents a Sonolus static server
expects under `static/sonolus/`:

    static/sonolus/info                   manifest["info"], verbatim
    static/sonolus/package                {}
    static/sonolus/repository/<hash>      one per asset file
    static/sonolus/<category>/list        {"pageCount": 1, "items": [...]}
    static/sonolus/<category>/<name>      detail document per named item
    static/sonolus/<category>/info        {"search": {"options": []}}

The output is an ordered list of (entry name, bytes). Nothing is written to
disk here; the manifest passed in is never mutated.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from scpack.core.categories import CATEGORIES, RESERVED_ENTRY_NAMES, Category
from scpack.core.errors import DocumentFormatError
from scpack.core.fields import item_description, item_name, to_static_item
from scpack.core.paths import REPOSITORY_DIRNAME, normalize_path
from scpack.pack.io import repository_files
from scpack.pack.manifest import encode_document

logger = logging.getLogger(__name__)

STATIC_ROOT = "static/sonolus"
INFO_PATH = f"{STATIC_ROOT}/info"
PACKAGE_PATH = f"{STATIC_ROOT}/package"
REPOSITORY_PREFIX = f"{STATIC_ROOT}/repository/"

Entry = tuple[str, bytes]


def category_prefix(category: Category) -> str:
    return f"{STATIC_ROOT}/{category.path}/"


def build_list_document(items: list[Any]) -> dict[str, Any]:
    return {"pageCount": 1, "items": [to_static_item(item) for item in items]}


def build_detail_document(item: Any, *, category: Category) -> dict[str, Any]:
    return {
        "item": to_static_item(item),
        "description": item_description(item),
        "actions": [],
        "hasCommunity": False,
        "leaderboards": [],
        "sections": [
            {
                "title": "#RECOMMENDED",
                "icon": "star",
                "itemType": category.item_type,
                "items": [],
            }
        ],
    }


def build_category_info_document() -> dict[str, Any]:
    return {"search": {"options": []}}


def _category_items(manifest: dict[str, Any], category: Category) -> list[Any]:
    items = manifest.get(category.key)
    if items is None:
        return []
    if not isinstance(items, list):
        raise DocumentFormatError(f"db.json: {category.key} must be an array, got {type(items).__name__}")
    return items


def _check_item_names(items: list[Any], category: Category) -> None:
    """Reject names whose detail entry would collide with another entry."""
    seen: set[str] = set()
    for i, item in enumerate(items):
        name = item_name(item)
        if name is None:
            continue
        if name in RESERVED_ENTRY_NAMES:
            raise DocumentFormatError(f"db.json: {category.key}[{i}]: item name {name!r} is reserved")
        if name in seen:
            raise DocumentFormatError(f"db.json: {category.key}[{i}]: duplicate item name {name!r}")
        seen.add(name)


def category_entries(manifest: dict[str, Any], category: Category) -> list[Entry]:
    """Entries for one category: list, one detail per named item, info.

    Absent or empty collections produce nothing.
    """
    items = _category_items(manifest, category)
    if not items:
        return []
    _check_item_names(items, category)

    prefix = category_prefix(category)
    out: list[Entry] = [(prefix + "list", encode_document(build_list_document(items)))]

    for i, item in enumerate(items):
        name = item_name(item)
        if name is None:
            logger.debug("%s[%d]: no name, detail document skipped", category.key, i)
            continue
        out.append((prefix + name, encode_document(build_detail_document(item, category=category))))

    out.append((prefix + "info", encode_document(build_category_info_document())))
    return out


def asset_entries(base_dir: Path) -> list[Entry]:
    """One entry per file in `<base_dir>/repository/`, sorted by filename."""
    repo = base_dir / REPOSITORY_DIRNAME
    return [(REPOSITORY_PREFIX + normalize_path(p, repo), p.read_bytes()) for p in repository_files(base_dir)]


def build_archive_entries(manifest: dict[str, Any], base_dir: Path) -> list[Entry]:
    """Build every archive entry for a pack.

    `info` is passed through as-is (a missing `info` is written as null).
    Categories absent from the manifest are skipped. A category that is
    present but not an array, or that reuses an item name or names an item
    `list`/`info`, raises DocumentFormatError.
    """
    if not isinstance(manifest, dict):
        raise DocumentFormatError(f"db.json: expected JSON object, got {type(manifest).__name__}")

    entries: list[Entry] = [
        (INFO_PATH, encode_document(manifest.get("info"))),
        (PACKAGE_PATH, encode_document({})),
    ]
    entries.extend(asset_entries(Path(base_dir)))

    for category in CATEGORIES:
        entries.extend(category_entries(manifest, category))

    logger.debug("Built %d archive entries from %s", len(entries), base_dir)
    return entries
