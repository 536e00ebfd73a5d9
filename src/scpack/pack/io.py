"""Pack directory load/save.

A pack is a folder containing:
- db.json            the manifest
- repository/<hash>  flat directory of content-addressed assets

Asset files are never inspected; they are copied byte-for-byte. Only flat
files directly under repository/ count as assets.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable

from scpack.core.paths import MANIFEST_FILENAME, REPOSITORY_DIRNAME, ensure_within, validate_pack_dir

from .manifest import read_manifest, write_manifest

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PackBundle:
    root: Path
    manifest: dict[str, Any]


def repository_files(root: Path) -> list[Path]:
    """Return asset files under `<root>/repository/`, sorted by filename.

    A missing repository directory yields an empty list. Nested directories
    are not part of the pack layout and are skipped.
    """
    repo = Path(root) / REPOSITORY_DIRNAME
    if not repo.is_dir():
        logger.debug("No %s/ directory in %s", REPOSITORY_DIRNAME, root)
        return []
    files: list[Path] = []
    for p in sorted(repo.iterdir(), key=lambda x: x.name):
        if p.is_file():
            files.append(p)
        else:
            logger.warning("Skipping non-file entry in repository: %s", p.name)
    return files


def load_pack(root: Path) -> PackBundle:
    """Validate a pack directory and load its manifest."""
    root = Path(root)
    validate_pack_dir(root)
    manifest = read_manifest(root / MANIFEST_FILENAME)
    return PackBundle(root=root, manifest=manifest)


def save_pack(root: Path, *, manifest: dict[str, Any], assets: Iterable[tuple[str, bytes]]) -> Path:
    """Write db.json and asset files under `root`; return the manifest path.

    `assets` are (relative path, bytes) pairs, eg ("repository/<hash>", b"...").
    Paths that resolve outside `root` raise InvalidPathError before anything
    is written for that asset.
    """
    root = Path(root)
    root.mkdir(parents=True, exist_ok=True)

    for rel, data in assets:
        target = ensure_within(root, rel)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(data)
        logger.debug("Extracted: %s", rel)

    manifest_path = root / MANIFEST_FILENAME
    write_manifest(manifest_path, manifest)
    return manifest_path
