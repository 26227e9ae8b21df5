"""``aw reset [--hard]``: reset every repo in the workspace to its remote default branch.

Without ``hard``, repositories with uncommitted changes or with commits not
on the remote branch are skipped. The worktree is switched to the default
branch on a successful reset.
"""

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
    repo_dirs,
    resolve_default_branch,
    workspace_name,
)


@dataclass(frozen=True)
class ResetOutcome:
    """What happened to one repository during a reset."""

    class Kind(enum.Enum):
        RESET = "reset"
        SKIPPED_NO_BRANCH = "skipped_no_branch"
        SKIPPED_DIRTY = "skipped_dirty"
        SKIPPED_DIVERGED = "skipped_diverged"
        FAILED_FETCH = "failed_fetch"
        FAILED_CHECKOUT = "failed_checkout"
        FAILED_RESET = "failed_reset"

    kind: Kind
    branch: str | None = None

    @property
    def category(self) -> str:
        """``reset``, ``skipped`` or ``failed``."""
        k = ResetOutcome.Kind
        if self.kind is k.RESET:
            return "reset"
        if self.kind in (k.SKIPPED_NO_BRANCH, k.SKIPPED_DIRTY, k.SKIPPED_DIVERGED):
            return "skipped"
        return "failed"

    def describe(self, repo_name: str) -> str:
        """The report line for this outcome."""
        k = ResetOutcome.Kind
        b = self.branch
        return {
            k.RESET: f"  ✓ {repo_name}: reset to origin/{b}",
            k.SKIPPED_NO_BRANCH: f"  ⚠️  {repo_name}: could not determine default branch, skipping",
            k.SKIPPED_DIRTY: f"  ⚠️  {repo_name}: uncommitted changes, skipping",
            k.SKIPPED_DIVERGED: f"  ⚠️  {repo_name}: HEAD has commits not on origin/{b}, skipping",
            k.FAILED_FETCH: f"  ❌ {repo_name}: fetch failed",
            k.FAILED_CHECKOUT: f"  ❌ {repo_name}: failed to checkout {b}",
            k.FAILED_RESET: f"  ❌ {repo_name} ({b}): reset failed",
        }[self.kind]

    def warning(self, repo_name: str) -> str | None:
        """The summary warning for a skipped repository, if any."""
        k = ResetOutcome.Kind
        return {
            k.SKIPPED_NO_BRANCH: f"{repo_name}: could not determine default branch",
            k.SKIPPED_DIRTY: f"{repo_name}: uncommitted changes (use --hard to discard)",
            k.SKIPPED_DIVERGED: f"{repo_name}: divergent commits on HEAD (use --hard to discard)",
        }.get(self.kind)


def reset_repo(directory: Path | str, hard: bool = False) -> ResetOutcome:
    """Reset one repository to ``origin/<default>``."""
    kind = ResetOutcome.Kind
    branch = resolve_default_branch(directory)
    if branch is None:
        return ResetOutcome(kind.SKIPPED_NO_BRANCH)

    try:
        git(directory, "fetch", "origin", branch, "--quiet")
    except GitError:
        return ResetOutcome(kind.FAILED_FETCH)

    remote_ref = f"refs/remotes/origin/{branch}"

    if not hard:
        if capture(directory, "status", "--porcelain"):
            return ResetOutcome(kind.SKIPPED_DIRTY)
        head_sha = capture(directory, "rev-parse", "HEAD")
        if head_sha:
            try:
                git(directory, "merge-base", "--is-ancestor", head_sha, remote_ref)
            except GitError:
                return ResetOutcome(kind.SKIPPED_DIVERGED, branch)

    try:
        git(directory, "checkout", "-q", branch)
    except GitError:
        try:
            git(directory, "checkout", "-q", "-B", branch, remote_ref)
        except GitError:
            return ResetOutcome(kind.FAILED_CHECKOUT, branch)

    try:
        git(directory, "reset", "--hard", "--quiet", remote_ref)
    except GitError:
        return ResetOutcome(kind.FAILED_RESET, branch)

    return ResetOutcome(kind.RESET, branch)


def run(hard: bool = False) -> dict[str, int]:
    """Reset every repository of the current workspace; return counts per category."""
    workspace_dir = detect_workspace()
    if workspace_dir is None:
        raise AwError(
            "Not inside a workspace. Navigate to a workspace or use 'aw open <name>' first."
        )

    name = workspace_name(workspace_dir)
    verb = "Hard-resetting" if hard else "Resetting"
    print(f"🔧 {verb} repos in workspace: {name}")
    print(f"📂 {workspace_dir}")
    print()

    counts = {"reset": 0, "skipped": 0, "failed": 0}
    warnings: list[str] = []
    for directory in repo_dirs(workspace_dir):
        outcome = reset_repo(directory, hard)
        print(outcome.describe(directory.name))
        counts[outcome.category] += 1
        warning = outcome.warning(directory.name)
        if warning is not None:
            warnings.append(warning)

    print()
    print(
        f"📈 Reset complete: {counts['reset']} reset, "
        f"{counts['skipped']} skipped, {counts['failed']} failed"
    )

    if warnings:
        print()
        print("⚠️  Skipped repos:")
        for warning in warnings:
            print(f"  - {warning}")
        if not hard:
            print()
            print("Re-run with 'aw reset --hard' to force-reset and discard local changes.")

    return counts