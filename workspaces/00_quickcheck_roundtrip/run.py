"""Quickcheck workspace: pack -> scp -> pack -> compare.

This workspace is self-contained (no repo-level assets required). It writes a
small synthetic pack under `workspaces/00_quickcheck_roundtrip/outputs/pack/`,
converts it to `outputs/demo.scp`, converts that back into
`outputs/restored/`, and writes a JSON report.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from scpack.convert import Converter


def _fixture_manifest() -> dict[str, Any]:
    return {
        "info": {"title": {"en": "Quickcheck Server"}},
        "levels": [
            {
                "name": "lv1",
                "title": {"en": "Level 1"},
                "author": {"en": "someone"},
                "description": {"en": "first level"},
            },
            {"name": "lv2", "title": {"en": "Level 2"}, "subtitle": {"en": "no description"}},
        ],
        "skins": [{"name": "default", "title": {"en": "Default Skin"}}],
    }


def _fixture_assets() -> dict[str, bytes]:
    return {
        "0a1b2c": b"\x89PNG\r\n\x1a\n fake image",
        "ffee00": b"engine data",
    }


def _write_json(path: Path, obj: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(obj, indent=2, sort_keys=True) + "\n", encoding="utf-8")


def main() -> None:
    here = Path(__file__).resolve().parent
    outputs = here / "outputs"
    outputs.mkdir(parents=True, exist_ok=True)

    pack_root = outputs / "pack"
    manifest1 = _fixture_manifest()
    assets1 = _fixture_assets()
    _write_json(pack_root / "db.json", manifest1)
    for name, data in assets1.items():
        p = pack_root / "repository" / name
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_bytes(data)

    converter = Converter()
    scp_path = outputs / "demo.scp"
    entry_count = converter.pack_to_scp(pack_root, scp_path)

    restored = outputs / "restored"
    manifest2 = converter.scp_to_pack(scp_path, restored)

    ok_info = manifest2["info"] == manifest1["info"]
    ok_categories = all(manifest2[key] == manifest1.get(key, []) for key in ("levels", "skins", "posts"))
    ok_assets = all((restored / "repository" / name).read_bytes() == data for name, data in assets1.items())

    report = {
        "pack_root": str(pack_root),
        "scp_path": str(scp_path),
        "entry_count": entry_count,
        "entries": converter.list_scp_contents(scp_path),
        "info_equal": ok_info,
        "categories_equal": ok_categories,
        "assets_equal": ok_assets,
    }
    _write_json(outputs / "roundtrip_report.json", report)

    if not (ok_info and ok_categories and ok_assets):
        raise SystemExit("roundtrip failed; see outputs/roundtrip_report.json")


if __name__ == "__main__":
    main()
