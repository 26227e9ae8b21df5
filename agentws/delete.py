"""``aw delete <name>``: remove a workspace after confirmation."""

from __future__ import annotations

import shutil
import sys

from agentws.paths import AwError, Paths


def is_confirmed(answer: str) -> bool:
    """Whether an answer to the prompt means yes (starts with ``y`` or ``Y``)."""
    return answer[:1] in ("y", "Y")


def run(name: str) -> bool:
    """Ask, then delete workspace ``name``; return whether it was deleted."""
    workspace_dir = Paths.from_env().workspace_dir(name)
    if not workspace_dir.is_dir():
        raise AwError(f"Workspace '{name}' not found")

    print(f"⚠️  This will permanently delete workspace: {name}")
    print(f"📂 Location: {workspace_dir}")
    print("Are you sure? (y/N) ", end="", flush=True)

    answer = sys.stdin.readline()
    print()
    if not is_confirmed(answer):
        print("Cancelled")
        return False

    print("🗑️  Deleting workspace...")
    shutil.rmtree(workspace_dir)
    print(f"✅ Workspace '{name}' deleted")
    return True