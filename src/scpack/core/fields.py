"""Localized text field shapes.

Items carry their display text in one of two shapes:

- pack shape:   {"en": "<text>"}   (db.json)
- static shape: "<text>"           (static/sonolus list and detail documents)

Only the `en` locale is read or written. The helpers here are shared by the
export and import transformers so the two directions cannot drift apart.
They never mutate their input; a new item dict is returned every time.
"""

from __future__ import annotations

from typing import Any

# Fields converted in both list and detail documents.
TEXT_FIELDS: tuple[str, ...] = ("title", "subtitle", "author")

DESCRIPTION_FIELD = "description"

LOCALE = "en"


def localized_text(value: Any) -> str | None:
    """Decode a text field in either shape.

    Returns the bare string for static shape, the `en` text for pack shape,
    and None for anything else (caller leaves the field untouched).
    """
    if isinstance(value, str):
        return value
    if isinstance(value, dict):
        text = value.get(LOCALE)
        if isinstance(text, str):
            return text
    return None


def localize(text: str) -> dict[str, str]:
    return {LOCALE: text}


def to_static_item(item: Any) -> Any:
    """Build the list/detail view of a pack item.

    Text fields become bare strings and `description` is dropped; every other
    field is copied as-is. Non-object items are returned unchanged.
    """
    if not isinstance(item, dict):
        return item
    out: dict[str, Any] = {}
    for key, value in item.items():
        if key == DESCRIPTION_FIELD:
            continue
        if key in TEXT_FIELDS:
            text = localized_text(value)
            out[key] = text if text is not None else value
        else:
            out[key] = value
    return out


def to_pack_item(item: Any, *, description: str | None = None) -> Any:
    """Build the db.json shape of a static list item.

    String text fields are wrapped as {"en": text}; non-string values are left
    alone so already pack-shaped or malformed input passes through. A
    non-empty `description` is attached in pack shape.
    """
    if not isinstance(item, dict):
        return item
    out: dict[str, Any] = {}
    for key, value in item.items():
        if key in TEXT_FIELDS and isinstance(value, str):
            out[key] = localize(value)
        else:
            out[key] = value
    if description:
        out[DESCRIPTION_FIELD] = localize(description)
    return out


def item_name(item: Any) -> str | None:
    """Return the item's non-empty string `name`, else None."""
    if not isinstance(item, dict):
        return None
    name = item.get("name")
    if isinstance(name, str) and name:
        return name
    return None


def item_description(item: Any) -> str:
    """Return the description text for a detail document ("" when absent)."""
    if not isinstance(item, dict):
        return ""
    text = localized_text(item.get(DESCRIPTION_FIELD))
    return text if text is not None else ""
