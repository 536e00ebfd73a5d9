"""Static layout -> pack transformer.

Rebuilds a db.json manifest from the entries of an SCP archive. The static
layout has no central index of categories, so membership is inferred from
entry paths alone:

- `static/sonolus/<category>/list` supplies the items, in list order
- `static/sonolus/<category>/<name>` detail documents supply descriptions,
  which list documents never carry
- `static/sonolus/repository/<hash>` entries become `repository/<hash>`

Missing pieces fall back to defaults (`info = {"title": {}}`, empty
collections) so the result is always a complete manifest. A detail document
that cannot be read or parsed only costs that item its description; a broken list
document is fatal. Entries outside these paths are ignored.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Protocol

from scpack.core.categories import CATEGORIES, RESERVED_ENTRY_NAMES, Category
from scpack.core.errors import ArchiveFormatError, DocumentFormatError, DocumentParseError
from scpack.core.fields import DESCRIPTION_FIELD, item_name, to_pack_item
from scpack.core.paths import REPOSITORY_DIRNAME
from scpack.pack.manifest import decode_document

from .static_export import INFO_PATH, PACKAGE_PATH, REPOSITORY_PREFIX, category_prefix

logger = logging.getLogger(__name__)


class EntryView(Protocol):
    def names(self) -> list[str]: ...

    def read(self, name: str) -> bytes: ...

    def __contains__(self, name: object) -> bool: ...


@dataclass(frozen=True)
class StaticImport:
    manifest: dict[str, Any]
    assets: list[tuple[str, bytes]] = field(default_factory=list)
    # Entries outside the static layout; not carried into the pack.
    unused_entries: tuple[str, ...] = ()


def default_manifest() -> dict[str, Any]:
    manifest: dict[str, Any] = {"info": {"title": {}}}
    for category in CATEGORIES:
        manifest[category.key] = []
    return manifest


def _is_dir_marker(name: str) -> bool:
    return name.endswith("/")


def _is_known_entry(name: str) -> bool:
    if name in (INFO_PATH, PACKAGE_PATH) or name.startswith(REPOSITORY_PREFIX):
        return True
    return any(name.startswith(category_prefix(c)) for c in CATEGORIES)


def collect_assets(entries: EntryView, names: list[str]) -> list[tuple[str, bytes]]:
    """Stage `repository/<hash>` assets in archive order."""
    assets: list[tuple[str, bytes]] = []
    for name in names:
        if not name.startswith(REPOSITORY_PREFIX) or _is_dir_marker(name):
            continue
        asset_hash = name.rsplit("/", 1)[-1]
        if not asset_hash:
            continue
        assets.append((f"{REPOSITORY_DIRNAME}/{asset_hash}", entries.read(name)))
    return assets


def recover_descriptions(entries: EntryView, names: list[str], category: Category) -> dict[str, str]:
    """Map item name -> description text from the category's detail documents."""
    prefix = category_prefix(category)
    descriptions: dict[str, str] = {}
    for name in names:
        if not name.startswith(prefix) or _is_dir_marker(name):
            continue
        item = name[len(prefix):]
        if not item or item in RESERVED_ENTRY_NAMES:
            continue
        try:
            doc = decode_document(entries.read(name), where=name)
        except (DocumentParseError, ArchiveFormatError) as e:
            logger.debug("No description for %s: %s", name, e)
            continue
        text = doc.get(DESCRIPTION_FIELD) if isinstance(doc, dict) else None
        if isinstance(text, str):
            descriptions[item] = text
    return descriptions


def read_category(entries: EntryView, category: Category, descriptions: dict[str, str]) -> list[Any]:
    """Rebuild one category collection from its list document."""
    list_name = category_prefix(category) + "list"
    if list_name not in entries:
        return []

    doc = decode_document(entries.read(list_name), where=list_name)
    if not isinstance(doc, dict):
        raise DocumentFormatError(f"{list_name}: expected JSON object, got {type(doc).__name__}")
    items = doc.get("items")
    if not isinstance(items, list):
        raise DocumentFormatError(f"{list_name}: items must be an array")

    out: list[Any] = []
    for item in items:
        name = item_name(item)
        description = descriptions.get(name) if name is not None else None
        out.append(to_pack_item(item, description=description))
    return out


def reconstruct_pack(entries: EntryView) -> StaticImport:
    """Rebuild the manifest and staged assets from an archive view."""
    names = entries.names()
    manifest = default_manifest()

    assets = collect_assets(entries, names)

    if INFO_PATH in entries:
        manifest["info"] = decode_document(entries.read(INFO_PATH), where=INFO_PATH)

    for category in CATEGORIES:
        descriptions = recover_descriptions(entries, names, category)
        manifest[category.key] = read_category(entries, category, descriptions)

    unused = tuple(n for n in names if not _is_dir_marker(n) and not _is_known_entry(n))
    return StaticImport(manifest=manifest, assets=assets, unused_entries=unused)
