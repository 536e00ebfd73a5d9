"""Category descriptor table (single source of truth).

Every pack manifest carries nine category collections. The same key is used
as the manifest field name and as the static path segment under
`static/sonolus/<category>/`; detail documents additionally need the
singular `itemType` label for their recommendation section.

Both transformation directions read this table; it must never be mutated.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Category:
    key: str
    item_type: str

    @property
    def path(self) -> str:
        """Static path segment (identical to the manifest key)."""
        return self.key


# Canonical order: also the key order of reconstructed manifests.
CATEGORIES: tuple[Category, ...] = (
    Category("skins", "skin"),
    Category("backgrounds", "background"),
    Category("effects", "effect"),
    Category("particles", "particle"),
    Category("engines", "engine"),
    Category("levels", "level"),
    Category("replays", "replay"),
    Category("playlists", "playlist"),
    Category("posts", "post"),
)

CATEGORY_KEYS: tuple[str, ...] = tuple(c.key for c in CATEGORIES)

# Names under `static/sonolus/<category>/` that are not item detail documents.
RESERVED_ENTRY_NAMES: frozenset[str] = frozenset({"list", "info"})
