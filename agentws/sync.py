"""``aw sync``: fetch and fast-forward the default branch of every repo in the workspace."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path

from agentws.paths import AwError
from agentws.repo_ops import (
    GitError,
    capture,
    detect_workspace,
    git,
    ref_exists,
    repo_dirs,
    resolve_default_branch,
    workspace_name,
)


@dataclass(frozen=True)
class SyncOutcome:
    """What happened to one repository during a sync."""

    class Kind(enum.Enum):
        UP_TO_DATE = "up_to_date"
        FAST_FORWARDED = "fast_forwarded"
        SKIPPED_NO_BRANCH = "skipped_no_branch"
        SKIPPED_DIVERGED = "skipped_diverged"
        SKIPPED_NO_LOCAL = "skipped_no_local"
        FAILED_FETCH = "failed_fetch"
        FAILED_UPDATE = "failed_update"

    kind: Kind
    branch: str | None = None
    ahead: int = 0

    @property
    def category(self) -> str:
        """``synced``, ``skipped`` or ``failed``."""
        k = SyncOutcome.Kind
        if self.kind in (k.UP_TO_DATE, k.FAST_FORWARDED):
            return "synced"
        if self.kind in (k.FAILED_FETCH, k.FAILED_UPDATE):
            return "failed"
        return "skipped"

    def describe(self, repo_name: str) -> str:
        """The report line for this outcome."""
        k = SyncOutcome.Kind
        b = self.branch
        return {
            k.UP_TO_DATE: f"  ✓ {repo_name} ({b}): already up to date",
            k.FAST_FORWARDED: f"  ✓ {repo_name} ({b}): fast-forwarded {self.ahead} commit(s)",
            k.SKIPPED_NO_BRANCH: f"  ⚠️  {repo_name}: could not determine default branch, skipping",
            k.SKIPPED_DIVERGED: f"  ⚠️  {repo_name} ({b}): local has diverged, skipping (rebase manually)",
            k.SKIPPED_NO_LOCAL: f"  ⚠️  {repo_name}: local branch '{b}' not found, skipping",
            k.FAILED_FETCH: f"  ❌ {repo_name}: fetch failed",
            k.FAILED_UPDATE: f"  ❌ {repo_name} ({b}): update failed",
        }[self.kind]


def sync_repo(directory: Path | str) -> SyncOutcome:
    """Fast-forward the local default branch of one repository to its remote."""
    kind = SyncOutcome.Kind
    branch = resolve_default_branch(directory)
    if branch is None:
        return SyncOutcome(kind.SKIPPED_NO_BRANCH)

    try:
        git(directory, "fetch", "origin", branch, "--quiet")
    except GitError:
        return SyncOutcome(kind.FAILED_FETCH)

    local_ref = f"refs/heads/{branch}"
    remote_ref = f"refs/remotes/origin/{branch}"
    if not ref_exists(directory, local_ref):
        return SyncOutcome(kind.SKIPPED_NO_LOCAL, branch)

    local_sha = capture(directory, "rev-parse", local_ref)
    remote_sha = capture(directory, "rev-parse", remote_ref)
    if not local_sha or not remote_sha:
        return SyncOutcome(kind.FAILED_FETCH)
    if local_sha == remote_sha:
        return SyncOutcome(kind.UP_TO_DATE, branch)

    try:
        git(directory, "merge-base", "--is-ancestor", local_ref, remote_ref)
    except GitError:
        return SyncOutcome(kind.SKIPPED_DIVERGED, branch)

    try:
        git(directory, "update-ref", local_ref, remote_sha, local_sha)
    except GitError:
        return SyncOutcome(kind.FAILED_UPDATE, branch)

    count = capture(directory, "rev-list", f"{local_sha}..{remote_sha}", "--count")
    try:
        ahead = int(count)
    except ValueError:
        ahead = 0
    return SyncOutcome(kind.FAST_FORWARDED, branch, ahead)


def run() -> dict[str, int]:
    """Sync every repository of the current workspace; return counts per category."""
    workspace_dir = detect_workspace()
    if workspace_dir is None:
        raise AwError(
            "Not inside a workspace. Navigate to a workspace or use 'aw open <name>' first."
        )

    print(f"🔄 Syncing repos in workspace: {workspace_name(workspace_dir)}")
    print(f"📂 {workspace_dir}")
    print()

    counts = {"synced": 0, "skipped": 0, "failed": 0}
    for directory in repo_dirs(workspace_dir):
        outcome = sync_repo(directory)
        print(outcome.describe(directory.name))
        counts[outcome.category] += 1

    print()
    print(
        f"📈 Sync complete: {counts['synced']} synced, "
        f"{counts['skipped']} skipped, {counts['failed']} failed"
    )
    return counts