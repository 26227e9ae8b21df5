"""``aw list``: every workspace with its base and creation stamp.

Workspaces with a live ``aw-<name>`` tmux session get a green bullet.
"""

from __future__ import annotations

import subprocess

from agentws.listing import enumerate_workspaces
from agentws.meta import WorkspaceMeta
from agentws.paths import Paths

_ACTIVE_BULLET = "\x1b[32m●\x1b[0m"
_IDLE_BULLET = "•"


def live_aw_sessions() -> set[str]:
    """Names of live tmux sessions starting with ``aw-``; empty without tmux."""
    try:
        result = subprocess.run(
            ["tmux", "list-sessions", "-F", "#{session_name}"],
            capture_output=True,
            check=False,
        )
    except OSError:
        return set()
    if result.returncode != 0:
        return set()
    text = result.stdout.decode("utf-8", errors="replace")
    return {line for line in text.splitlines() if line.startswith("aw-")}


def format_entry(meta: WorkspaceMeta, active: bool) -> str:
    """One listing line for ``meta``."""
    bullet = _ACTIVE_BULLET if active else _IDLE_BULLET
    return f"  {bullet} {meta.name} (base: {meta.base}, created: {meta.created})"


def run() -> list[WorkspaceMeta]:
    """Print the workspace listing; return the workspaces shown."""
    paths = Paths.from_env()
    print(f"📂 Workspaces in: {paths.workspaces_dir}")
    print()

    if not paths.workspaces_dir.is_dir():
        print("  No workspaces directory found")
        return []

    live = live_aw_sessions()
    entries = enumerate_workspaces()
    if not entries:
        print("  No workspaces found")
        print("  💡 Run 'aw create <name>' to create your first workspace")
        return []

    for meta in entries:
        print(format_entry(meta, f"aw-{meta.name}" in live))
    return entries