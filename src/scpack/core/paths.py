"""Path and precondition checks shared by the converter."""

from __future__ import annotations

from pathlib import Path

from scpack.core.errors import InvalidFormatError, InvalidPathError

MANIFEST_FILENAME = "db.json"
REPOSITORY_DIRNAME = "repository"
SCP_EXTENSION = ".scp"


def normalize_path(path: Path, base: Path) -> str:
    """Return `path` relative to `base` with forward slashes."""
    try:
        rel = Path(path).relative_to(base)
    except ValueError:
        raise InvalidPathError(f"Invalid path: {path} is not under {base}") from None
    return rel.as_posix()


def ensure_within(base: Path, rel: str) -> Path:
    """Join `rel` onto `base`, rejecting results that escape `base`."""
    base_resolved = Path(base).resolve()
    target = (base_resolved / rel).resolve()
    if target == base_resolved or base_resolved not in target.parents:
        raise InvalidPathError(f"Invalid path: {rel!r} escapes {base}")
    return target


def validate_pack_dir(pack_dir: Path) -> None:
    pack_dir = Path(pack_dir)
    if not pack_dir.is_dir():
        raise InvalidPathError(f"Pack directory does not exist: {pack_dir}")
    if not (pack_dir / MANIFEST_FILENAME).is_file():
        raise InvalidFormatError(f"{MANIFEST_FILENAME} not found in pack directory")


def validate_scp_file(scp_file: Path) -> None:
    scp_file = Path(scp_file)
    if not scp_file.is_file():
        raise InvalidPathError(f"SCP file does not exist: {scp_file}")
    if scp_file.suffix != SCP_EXTENSION:
        raise InvalidFormatError(f"File must have {SCP_EXTENSION} extension")


def prepare_output_dir(output_dir: Path) -> None:
    Path(output_dir).mkdir(parents=True, exist_ok=True)
