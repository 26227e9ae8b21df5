"""Enumerating workspaces on disk, including the printer used by tab completion.

These helpers are silent on errors: a missing directory means no workspaces.
"""

from __future__ import annotations

from pathlib import Path

from agentws.meta import META_DIR, WorkspaceMeta, read_meta
from agentws.paths import AwError, Paths


def _workspace_subdirs() -> list[Path]:
    try:
        paths = Paths.from_env()
    except AwError:
        return []
    try:
        return [entry for entry in paths.workspaces_dir.iterdir() if entry.is_dir()]
    except OSError:
        return []


def enumerate_workspaces() -> list[WorkspaceMeta]:
    """Metadata of every workspace on disk, sorted by name."""
    metas = (read_meta(d) for d in _workspace_subdirs())
    return sorted((m for m in metas if m is not None), key=lambda m: m.name)


def workspace_names() -> list[str]:
    """Directory names of every workspace, sorted."""
    return sorted(
        d.name for d in _workspace_subdirs() if (d / META_DIR / "name").is_file()
    )


def list_workspaces() -> None:
    """Print one workspace name per line."""
    for name in workspace_names():
        print(name)