"""Finding the workspace that contains a directory, for the auto-cd hook."""

from __future__ import annotations

import os
from pathlib import Path

_MARKER = Path(".agent-workspace") / "name"


def _default_root() -> Path | None:
    value = os.environ.get("AW_WORKSPACES_DIR")
    if value is not None:
        # An empty value places no restriction on where workspaces live.
        return Path(value) if value else None
    try:
        return Path.home() / "agent-workspaces"
    except (RuntimeError, KeyError):
        return None


def detect(start: Path | str, workspaces_dir: Path | str | None = None) -> Path | None:
    """The nearest ancestor of ``start`` (itself included) that is a workspace.

    Only directories under ``workspaces_dir`` count; when it is not given it
    comes from ``$AW_WORKSPACES_DIR`` or ``~/agent-workspaces``.
    """
    root = Path(workspaces_dir) if workspaces_dir is not None else _default_root()
    start = Path(start)
    for current in (start, *start.parents):
        if not (current / _MARKER).is_file():
            continue
        if root is None or current.is_relative_to(root):
            return current
    return None


def run(cwd: Path | str) -> Path | None:
    """Print the workspace containing ``cwd``; print nothing when there is none."""
    found = detect(cwd)
    if found is not None:
        print(found)
    return found