import io
import sys

import pytest

from agentws.cli import build_parser, main
from agentws.installer import AgentKind
from agentws.shell_rc import ShellKind


def _make_workspace(root, name):
    meta = root / name / ".agent-workspace"
    meta.mkdir(parents=True)
    (meta / "name").write_text(f"{name}\n")
    (meta / "base").write_text("default\n")
    (meta / "created").write_text("2026-03-01T10:00:00Z\n")
    return root / name


@pytest.fixture
def isolated(tmp_path, monkeypatch):
    home = tmp_path / "home"
    home.mkdir()
    workspaces = tmp_path / "ws"
    workspaces.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("AW_WORKSPACES_DIR", str(workspaces))
    monkeypatch.setenv("AW_INSTALL_DIR", str(tmp_path / "install"))
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    monkeypatch.delenv("AGENT_WORKSPACE", raising=False)
    monkeypatch.delenv("TMUX", raising=False)
    return home, workspaces


def test_aliases_share_handlers():
    parser = build_parser()
    assert parser.parse_args(["ls"]).func is parser.parse_args(["list"]).func
    assert parser.parse_args(["open", "x"]).func is parser.parse_args(["start", "x"]).func
    assert parser.parse_args(["rm", "x"]).func is parser.parse_args(["delete", "x"]).func


def test_parses_enums_and_flags():
    parser = build_parser()
    assert parser.parse_args(["shell-init", "fish"]).shell is ShellKind.FISH
    assert parser.parse_args(["install", "hooks"]).agent is AgentKind.ALL
    assert parser.parse_args(["install", "hooks", "--agent", "codex"]).agent is AgentKind.CODEX
    assert parser.parse_args(["reset", "--hard"]).hard is True
    assert parser.parse_args(["start", "demo", "--no-tmux"]).no_tmux is True


def test_missing_command_is_an_error():
    with pytest.raises(SystemExit):
        main([])


def test_invalid_shell_is_an_error():
    with pytest.raises(SystemExit):
        main(["shell-init", "tcsh"])


def test_shell_init_prints_hook(capsys):
    assert main(["shell-init", "bash"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("# >>> aw shell-init (bash) >>>")
    assert out.rstrip().endswith("# <<< aw shell-init (bash) <<<")


def test_detect_workspace_prints_root(isolated, capsys):
    _home, workspaces = isolated
    ws = _make_workspace(workspaces, "demo")
    inner = ws / "repo" / "src"
    inner.mkdir(parents=True)
    assert main(["_detect-workspace", str(inner)]) == 0
    assert capsys.readouterr().out.strip() == str(ws)


def test_detect_workspace_prints_nothing_outside(isolated, tmp_path, capsys):
    assert main(["_detect-workspace", str(tmp_path)]) == 0
    assert capsys.readouterr().out == ""


def test_list_workspaces_sorted(isolated, capsys):
    _home, workspaces = isolated
    _make_workspace(workspaces, "zeta")
    _make_workspace(workspaces, "alpha")
    (workspaces / "plain").mkdir()
    assert main(["_list-workspaces"]) == 0
    assert capsys.readouterr().out.splitlines() == ["alpha", "zeta"]


def test_delete_missing_workspace_fails(isolated, capsys):
    assert main(["delete", "ghost"]) == 1
    assert "not found" in capsys.readouterr().err


def test_delete_confirmed_removes_workspace(isolated, monkeypatch):
    _home, workspaces = isolated
    ws = _make_workspace(workspaces, "demo")
    monkeypatch.setattr(sys, "stdin", io.StringIO("y\n"))
    assert main(["delete", "demo"]) == 0
    assert not ws.exists()


def test_delete_declined_keeps_workspace(isolated, monkeypatch):
    _home, workspaces = isolated
    ws = _make_workspace(workspaces, "demo")
    monkeypatch.setattr(sys, "stdin", io.StringIO("n\n"))
    assert main(["delete", "demo"]) == 0
    assert ws.is_dir()


def test_shell_start_without_tmux(isolated, capsys):
    _home, workspaces = isolated
    ws = _make_workspace(workspaces, "demo")
    assert main(["_shell-start", "demo", "--no-tmux"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == f"cd '{ws}'"
    assert "export AGENT_WORKSPACE_NAME='demo'" in lines


def test_shell_start_missing_workspace(isolated, capsys):
    assert main(["_shell-start", "ghost", "--no-tmux"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "ghost" in captured.err


def test_install_shell_writes_rc(isolated):
    home, _ = isolated
    assert main(["install", "shell", "--shell", "fish"]) == 0
    text = (home / ".config" / "fish" / "config.fish").read_text()
    assert 'eval "$(aw shell-init fish)"' in text
    assert "# >>> aw shell-init >>>" in text


def test_install_tmux_bindings_with_config(isolated, tmp_path):
    target = tmp_path / "custom" / "tmux.conf"
    assert main(["install", "tmux-bindings", "--config", str(target)]) == 0
    text = target.read_text()
    assert "# >>> aw tmux bindings >>>" in text
    assert 'bind-key N run-shell "aw dash next-ready"' in text


def test_install_claude_hooks(isolated):
    home, _ = isolated
    assert main(["install", "hooks", "--agent", "claude"]) == 0
    text = (home / ".claude" / "settings.json").read_text()
    assert "aw hook --agent claude --event Stop" in text


def test_reset_outside_workspace_fails(isolated, tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["reset"]) == 1
    assert "Not inside a workspace" in capsys.readouterr().err