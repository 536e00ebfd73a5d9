"""Pytest configuration.

This repo follows the `src/` layout. Some environments may invoke a `pytest`
entrypoint from a different Python install than the one used for
`python -m pip install -e ...`, which can cause `import scpack` to fail.

To keep the suite robust, we ensure `src/` is on `sys.path` during tests.
"""

from __future__ import annotations

import json
import sys
import zipfile
from pathlib import Path
from typing import Any


def pytest_configure() -> None:
    repo_root = Path(__file__).resolve().parents[1]
    src_dir = repo_root / "src"
    sys.path.insert(0, str(src_dir))


# =============================================================================
# Shared Test Helpers
# =============================================================================


def make_item(name: str | None, title: str, **extra: Any) -> dict[str, Any]:
    """Create a pack-shaped item; keyword text fields are wrapped as {"en": ...}."""
    item: dict[str, Any] = {}
    if name is not None:
        item["name"] = name
    item["title"] = {"en": title}
    for key in ("subtitle", "author", "description"):
        if key in extra:
            item[key] = {"en": extra.pop(key)}
    item.update(extra)
    return item


def make_manifest(**categories: list[dict[str, Any]]) -> dict[str, Any]:
    manifest: dict[str, Any] = {"info": {"title": {"en": "Test Server"}}}
    manifest.update(categories)
    return manifest


def write_pack(root: Path, manifest: Any, assets: dict[str, bytes] | None = None) -> Path:
    """Write db.json (and optional repository files) under `root`."""
    root.mkdir(parents=True, exist_ok=True)
    (root / "db.json").write_text(json.dumps(manifest, indent=2) + "\n", encoding="utf-8")
    repo = root / "repository"
    repo.mkdir(exist_ok=True)
    for name, data in (assets or {}).items():
        (repo / name).write_bytes(data)
    return root


def entries_dict(entries: list[tuple[str, bytes]]) -> dict[str, Any]:
    """Decode archive entries into {name: parsed JSON} (assets left as bytes)."""
    out: dict[str, Any] = {}
    for name, data in entries:
        if name.startswith("static/sonolus/repository/"):
            out[name] = data
        else:
            out[name] = json.loads(data.decode("utf-8"))
    return out


def write_stored_zip(path: Path, entries: list[tuple[str, bytes]]) -> bytes:
    """Write an uncompressed zip so payload bytes can be located and patched."""
    with zipfile.ZipFile(path, "w", compression=zipfile.ZIP_STORED) as zf:
        for name, data in entries:
            zf.writestr(name, data)
    return path.read_bytes()


def set_compress_method(raw: bytes, method: int) -> bytes:
    """Rewrite the compression method of every local and central header."""
    buf = bytearray(raw)
    for sig, offset in ((b"PK\x03\x04", 8), (b"PK\x01\x02", 10)):
        pos = buf.find(sig)
        while pos != -1:
            buf[pos + offset : pos + offset + 2] = method.to_bytes(2, "little")
            pos = buf.find(sig, pos + 4)
    return bytes(buf)
