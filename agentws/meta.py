"""The ``.agent-workspace/`` metadata files stored in each workspace."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from agentws.paths import AwError

META_DIR = ".agent-workspace"


@dataclass(frozen=True)
class WorkspaceMeta:
    """Name, base and creation stamp of a workspace."""

    name: str
    base: str
    created: str


def _read_trimmed(path: Path) -> str | None:
    try:
        return path.read_text(encoding="utf-8").strip()
    except (OSError, UnicodeDecodeError):
        return None


def read_meta(workspace_dir: Path | str) -> WorkspaceMeta | None:
    """Read a workspace's metadata; ``None`` when it has no name file."""
    meta_dir = Path(workspace_dir) / META_DIR
    name = _read_trimmed(meta_dir / "name")
    if name is None:
        return None
    base = _read_trimmed(meta_dir / "base")
    created = _read_trimmed(meta_dir / "created")
    return WorkspaceMeta(
        name=name,
        base="default" if base is None else base,
        created="unknown" if created is None else created,
    )


def write_meta(workspace_dir: Path | str, name: str, base: str, created: str) -> None:
    """Write the metadata files, creating the metadata directory."""
    meta_dir = Path(workspace_dir) / META_DIR
    try:
        meta_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise AwError(f"mkdir {meta_dir}: {exc}") from exc
    for field, value in (("name", name), ("base", base), ("created", created)):
        (meta_dir / field).write_text(f"{value}\n", encoding="utf-8")