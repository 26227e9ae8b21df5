from pathlib import Path

import pytest

from agentws import reset
from agentws.paths import AwError
from agentws.reset import ResetOutcome


@pytest.fixture
def no_git(tmp_path, monkeypatch):
    empty = tmp_path / "empty-bin"
    empty.mkdir()
    monkeypatch.setenv("PATH", str(empty))
    return empty


def make_workspace(root: Path, name: str) -> Path:
    meta = root / name / ".agent-workspace"
    meta.mkdir(parents=True)
    (meta / "name").write_text(f"{name}\n", encoding="utf-8")
    return root / name


@pytest.mark.parametrize("hard", [False, True])
def test_reset_repo_without_default_branch(tmp_path, no_git, hard):
    outcome = reset.reset_repo(tmp_path, hard)
    assert outcome.kind is ResetOutcome.Kind.SKIPPED_NO_BRANCH
    assert outcome.category == "skipped"


def test_warnings_only_for_skips():
    kind = ResetOutcome.Kind
    assert ResetOutcome(kind.RESET, "main").warning("api") is None
    assert ResetOutcome(kind.FAILED_FETCH).warning("api") is None
    assert ResetOutcome(kind.SKIPPED_DIRTY).warning("api") == (
        "api: uncommitted changes (use --hard to discard)"
    )


def test_describe_lines():
    kind = ResetOutcome.Kind
    assert ResetOutcome(kind.RESET, "main").describe("api") == "  ✓ api: reset to origin/main"
    assert ResetOutcome(kind.FAILED_CHECKOUT, "main").category == "failed"
    assert "failed to checkout main" in ResetOutcome(kind.FAILED_CHECKOUT, "main").describe("api")


def test_run_outside_workspace_raises(tmp_path, monkeypatch):
    plain = tmp_path / "plain"
    plain.mkdir()
    monkeypatch.delenv("AGENT_WORKSPACE", raising=False)
    monkeypatch.chdir(plain)
    with pytest.raises(AwError, match="Not inside a workspace"):
        reset.run(False)


def test_run_soft_lists_skips_and_hint(tmp_path, monkeypatch, capsys, no_git):
    ws = make_workspace(tmp_path, "alpha")
    (ws / "repo" / ".git").mkdir(parents=True)
    monkeypatch.setenv("AGENT_WORKSPACE", str(ws))
    counts = reset.run(False)
    out = capsys.readouterr().out
    assert counts == {"reset": 0, "skipped": 1, "failed": 0}
    assert "🔧 Resetting repos in workspace: alpha" in out
    assert "  - repo: could not determine default branch" in out
    assert "Re-run with 'aw reset --hard'" in out


def test_run_hard_omits_hint(tmp_path, monkeypatch, capsys, no_git):
    ws = make_workspace(tmp_path, "beta")
    (ws / "repo" / ".git").mkdir(parents=True)
    monkeypatch.setenv("AGENT_WORKSPACE", str(ws))
    counts = reset.run(True)
    out = capsys.readouterr().out
    assert counts["skipped"] == 1
    assert "🔧 Hard-resetting repos in workspace: beta" in out
    assert "Re-run with" not in out