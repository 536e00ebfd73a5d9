"""Manifest (db.json) and synthetic document codec.

Both directions share one JSON codec:
- encode/decode for the documents stored inside an SCP archive, with parse
  failures reported against the entry name
- db.json read/write

Archive documents are written compactly and without key sorting, so item
field order survives a round trip. db.json is written with `indent=2` and a
trailing newline for readable diffs.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from scpack.core.errors import DocumentFormatError, DocumentParseError


def encode_document(obj: Any) -> bytes:
    """Serialize a document for storage as an archive entry."""
    return json.dumps(obj, ensure_ascii=False, separators=(",", ":")).encode("utf-8")


def decode_document(data: bytes, *, where: str) -> Any:
    """Parse an archive entry; raise DocumentParseError naming `where`."""
    try:
        return json.loads(data.decode("utf-8"))
    except UnicodeDecodeError as e:
        raise DocumentParseError(where, f"not valid UTF-8 ({e.reason})") from e
    except json.JSONDecodeError as e:
        raise DocumentParseError(where, f"invalid JSON ({e.msg} at line {e.lineno} column {e.colno})") from e


def read_manifest(path: Path) -> dict[str, Any]:
    p = Path(path)
    obj = decode_document(p.read_bytes(), where=p.name)
    if not isinstance(obj, dict):
        raise DocumentFormatError(f"{p.name}: expected JSON object")
    return obj


def write_manifest(path: Path, manifest: dict[str, Any]) -> None:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    text = json.dumps(manifest, indent=2, ensure_ascii=False) + "\n"
    p.write_text(text, encoding="utf-8")
