from pathlib import Path

from agentws import detect


def make_workspace(root: Path, name: str) -> Path:
    ws = root / name
    meta = ws / ".agent-workspace"
    meta.mkdir(parents=True)
    (meta / "name").write_text(f"{name}\n")
    return ws


def test_detects_from_nested_directory(tmp_path):
    root = tmp_path / "workspaces"
    ws = make_workspace(root, "alpha")
    deep = ws / "repo" / "src"
    deep.mkdir(parents=True)
    assert detect.detect(deep, root) == ws


def test_detects_workspace_root_itself(tmp_path):
    root = tmp_path / "workspaces"
    ws = make_workspace(root, "alpha")
    assert detect.detect(ws, root) == ws


def test_ignores_workspace_outside_root(tmp_path):
    other = make_workspace(tmp_path / "elsewhere", "beta")
    root = tmp_path / "workspaces"
    root.mkdir()
    assert detect.detect(other, root) is None


def test_none_without_marker(tmp_path):
    root = tmp_path / "workspaces"
    plain = root / "plain" / "dir"
    plain.mkdir(parents=True)
    assert detect.detect(plain, root) is None


def test_directory_without_name_file_is_skipped(tmp_path):
    root = tmp_path / "workspaces"
    ws = root / "partial"
    (ws / ".agent-workspace").mkdir(parents=True)
    assert detect.detect(ws, root) is None


def test_uses_env_root(tmp_path, monkeypatch):
    root = tmp_path / "workspaces"
    ws = make_workspace(root, "gamma")
    monkeypatch.setenv("AW_WORKSPACES_DIR", str(root))
    assert detect.detect(ws / "x") == ws


def test_env_root_excludes_other_tree(tmp_path, monkeypatch):
    other = make_workspace(tmp_path / "elsewhere", "delta")
    monkeypatch.setenv("AW_WORKSPACES_DIR", str(tmp_path / "workspaces"))
    assert detect.detect(other) is None


def test_run_prints_path(tmp_path, monkeypatch, capsys):
    root = tmp_path / "workspaces"
    ws = make_workspace(root, "alpha")
    monkeypatch.setenv("AW_WORKSPACES_DIR", str(root))
    assert detect.run(str(ws)) == ws
    assert capsys.readouterr().out == f"{ws}\n"


def test_run_prints_nothing_when_absent(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("AW_WORKSPACES_DIR", str(tmp_path / "workspaces"))
    assert detect.run(str(tmp_path)) is None
    assert capsys.readouterr().out == ""