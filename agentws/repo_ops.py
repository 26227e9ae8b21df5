"""Git helpers shared by ``aw sync`` and ``aw reset``.

Also holds detection of the current workspace:
    1. ``$AGENT_WORKSPACE`` if it points at a workspace directory.
    2. The working directory if it has ``.agent-workspace/name``.
    3. The nearest parent that has one.
"""

from __future__ import annotations

import os
import subprocess
from pathlib import Path

from agentws.meta import META_DIR
from agentws.paths import AwError

_NAME_FILE = Path(META_DIR) / "name"
_REMOTE_PREFIX = "refs/remotes/origin/"


class GitError(AwError):
    """Raised when a git command fails or cannot be started."""


def git(directory: Path | str, *args: str) -> None:
    """Run ``git -C directory args...`` quietly; raise ``GitError`` on failure."""
    argv = ["git", "-C", str(directory), *args]
    try:
        result = subprocess.run(
            argv,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=False,
        )
    except OSError as exc:
        raise GitError(f"git {' '.join(args)}: {exc}") from exc
    if result.returncode != 0:
        raise GitError(f"git {' '.join(args)} failed")


def capture(directory: Path | str, *args: str) -> str:
    """Trimmed standard output of a git command; empty when it fails."""
    argv = ["git", "-C", str(directory), *args]
    try:
        result = subprocess.run(
            argv,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            check=False,
        )
    except OSError:
        return ""
    if result.returncode != 0:
        return ""
    return result.stdout.decode("utf-8", errors="replace").strip()


def ref_exists(directory: Path | str, refname: str) -> bool:
    """Whether ``refname`` exists in the repository."""
    try:
        git(directory, "show-ref", "--verify", "--quiet", refname)
    except GitError:
        return False
    return True


def resolve_default_branch(directory: Path | str) -> str | None:
    """The remote's default branch: ``origin/HEAD``, else ``main``, else ``master``."""
    head_ref = capture(directory, "symbolic-ref", "refs/remotes/origin/HEAD")
    if head_ref.startswith(_REMOTE_PREFIX):
        return head_ref[len(_REMOTE_PREFIX):]
    return next(
        (c for c in ("main", "master") if ref_exists(directory, _REMOTE_PREFIX + c)),
        None,
    )


def detect_workspace() -> Path | None:
    """The workspace the user is in, from the environment or the working directory."""
    env_ws = os.environ.get("AGENT_WORKSPACE")
    if env_ws:
        candidate = Path(env_ws)
        if (candidate / META_DIR).is_dir():
            return candidate
    try:
        pwd = Path.cwd()
    except OSError:
        return None
    if (pwd / _NAME_FILE).is_file():
        return pwd
    # The filesystem root itself is never taken as a workspace.
    for current in (pwd, *pwd.parents[:-1]):
        if (current / _NAME_FILE).is_file():
            return current
    return None


def workspace_name(workspace_dir: Path | str) -> str:
    """The name recorded in the workspace's metadata, else its directory name."""
    workspace_dir = Path(workspace_dir)
    try:
        return (workspace_dir / _NAME_FILE).read_text(encoding="utf-8").strip()
    except (OSError, UnicodeDecodeError):
        return workspace_dir.name


def repo_dirs(workspace_dir: Path | str) -> list[Path]:
    """Sorted subdirectories of the workspace that are git repositories."""
    try:
        entries = list(Path(workspace_dir).iterdir())
    except OSError:
        return []
    return sorted(p for p in entries if p.is_dir() and (p / ".git").exists())