from __future__ import annotations

import copy
import json
from pathlib import Path

import pytest

from conftest import entries_dict, make_item, make_manifest, write_pack
from scpack.codecs.static_export import build_archive_entries
from scpack.core.errors import DocumentFormatError


def test_level_scenario_list_and_detail_documents(tmp_path: Path) -> None:
    manifest = {
        "info": {"title": {"en": "T"}},
        "levels": [{"name": "lv1", "title": {"en": "Level 1"}, "description": {"en": "desc"}}],
    }
    root = write_pack(tmp_path / "pack", manifest)

    docs = entries_dict(build_archive_entries(manifest, root))

    assert docs["static/sonolus/levels/list"] == {"pageCount": 1, "items": [{"name": "lv1", "title": "Level 1"}]}

    detail = docs["static/sonolus/levels/lv1"]
    assert detail["item"]["title"] == "Level 1"
    assert "description" not in detail["item"]
    assert detail["description"] == "desc"
    assert detail["actions"] == []
    assert detail["hasCommunity"] is False
    assert detail["leaderboards"] == []
    assert detail["sections"] == [
        {"title": "#RECOMMENDED", "icon": "star", "itemType": "level", "items": []},
    ]

    assert docs["static/sonolus/levels/info"] == {"search": {"options": []}}


def test_fixed_entries_and_order(tmp_path: Path) -> None:
    manifest = make_manifest(skins=[make_item("s1", "Skin"), make_item("s2", "Skin 2")])
    root = write_pack(tmp_path / "pack", manifest, {"bbb": b"2", "aaa": b"1"})

    names = [name for name, _ in build_archive_entries(manifest, root)]

    assert names == [
        "static/sonolus/info",
        "static/sonolus/package",
        "static/sonolus/repository/aaa",
        "static/sonolus/repository/bbb",
        "static/sonolus/skins/list",
        "static/sonolus/skins/s1",
        "static/sonolus/skins/s2",
        "static/sonolus/skins/info",
    ]


def test_info_passthrough_and_package_constant(tmp_path: Path) -> None:
    info = {"title": {"en": "Server"}, "banner": {"hash": "abc", "url": ""}, "buttons": [{"type": "level"}]}
    manifest = {"info": info}
    root = write_pack(tmp_path / "pack", manifest)

    entries = dict(build_archive_entries(manifest, root))

    assert json.loads(entries["static/sonolus/info"]) == info
    assert entries["static/sonolus/package"] == b"{}"


def test_missing_info_is_written_as_null(tmp_path: Path) -> None:
    root = write_pack(tmp_path / "pack", {})
    entries = dict(build_archive_entries({}, root))
    assert entries["static/sonolus/info"] == b"null"


def test_category_isolation_only_levels(tmp_path: Path) -> None:
    manifest = make_manifest(levels=[make_item("lv1", "L")])
    root = write_pack(tmp_path / "pack", manifest)

    names = [name for name, _ in build_archive_entries(manifest, root)]
    category_names = [n for n in names if n.count("/") >= 3 and "/repository/" not in n]

    assert category_names == [
        "static/sonolus/levels/list",
        "static/sonolus/levels/lv1",
        "static/sonolus/levels/info",
    ]


def test_empty_and_missing_categories_emit_nothing(tmp_path: Path) -> None:
    manifest = make_manifest(skins=[], posts=None)
    root = write_pack(tmp_path / "pack", manifest)

    names = [name for name, _ in build_archive_entries(manifest, root)]

    assert names == ["static/sonolus/info", "static/sonolus/package"]


def test_items_without_name_are_listed_but_get_no_detail(tmp_path: Path) -> None:
    manifest = make_manifest(effects=[make_item(None, "Anon"), make_item("", "Empty"), make_item("fx", "Named")])
    root = write_pack(tmp_path / "pack", manifest)

    docs = entries_dict(build_archive_entries(manifest, root))

    assert [item["title"] for item in docs["static/sonolus/effects/list"]["items"]] == ["Anon", "Empty", "Named"]
    details = [n for n in docs if n.startswith("static/sonolus/effects/") and n.rsplit("/", 1)[1] not in ("list", "info")]
    assert details == ["static/sonolus/effects/fx"]


def test_detail_description_defaults_to_empty_string(tmp_path: Path) -> None:
    manifest = make_manifest(particles=[make_item("p", "P", author="me")])
    root = write_pack(tmp_path / "pack", manifest)

    docs = entries_dict(build_archive_entries(manifest, root))

    detail = docs["static/sonolus/particles/p"]
    assert detail["description"] == ""
    assert detail["item"] == {"name": "p", "title": "P", "author": "me"}
    assert detail["sections"][0]["itemType"] == "particle"


def test_manifest_is_not_mutated(tmp_path: Path) -> None:
    manifest = make_manifest(levels=[make_item("lv1", "L", description="d")])
    before = copy.deepcopy(manifest)
    root = write_pack(tmp_path / "pack", manifest)

    build_archive_entries(manifest, root)

    assert manifest == before


def test_assets_are_copied_byte_for_byte(tmp_path: Path) -> None:
    blobs = {"3f2a": bytes(range(256)), "empty": b""}
    root = write_pack(tmp_path / "pack", {}, blobs)

    entries = dict(build_archive_entries({}, root))

    for name, data in blobs.items():
        assert entries[f"static/sonolus/repository/{name}"] == data


def test_missing_repository_dir_is_tolerated(tmp_path: Path) -> None:
    root = tmp_path / "pack"
    root.mkdir()
    (root / "db.json").write_text("{}", encoding="utf-8")

    names = [name for name, _ in build_archive_entries({}, root)]

    assert names == ["static/sonolus/info", "static/sonolus/package"]


def test_nested_repository_directories_are_skipped(tmp_path: Path) -> None:
    root = write_pack(tmp_path / "pack", {}, {"a": b"1"})
    (root / "repository" / "nested").mkdir()
    (root / "repository" / "nested" / "b").write_bytes(b"2")

    names = [name for name, _ in build_archive_entries({}, root)]

    assert "static/sonolus/repository/a" in names
    assert not any("nested" in n for n in names)


def test_category_must_be_array(tmp_path: Path) -> None:
    manifest = make_manifest(skins={"name": "oops"})
    root = write_pack(tmp_path / "pack", manifest)

    with pytest.raises(DocumentFormatError, match="skins must be an array"):
        build_archive_entries(manifest, root)


def test_manifest_must_be_object(tmp_path: Path) -> None:
    with pytest.raises(DocumentFormatError):
        build_archive_entries([], tmp_path)  # type: ignore[arg-type]


@pytest.mark.parametrize("name", ["list", "info"])
def test_reserved_item_names_are_rejected(tmp_path: Path, name: str) -> None:
    manifest = make_manifest(levels=[make_item(name, "L")])
    root = write_pack(tmp_path / "pack", manifest)

    with pytest.raises(DocumentFormatError, match=rf"levels\[0\].*{name!r} is reserved"):
        build_archive_entries(manifest, root)


def test_duplicate_item_names_are_rejected(tmp_path: Path) -> None:
    manifest = make_manifest(skins=[make_item("a", "One"), make_item("a", "Two")])
    root = write_pack(tmp_path / "pack", manifest)

    with pytest.raises(DocumentFormatError, match=r"skins\[1\].*duplicate item name 'a'"):
        build_archive_entries(manifest, root)
