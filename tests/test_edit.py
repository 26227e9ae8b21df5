import os
import sys

import pytest

from agentws.edit import (
    capitalize,
    edit_base,
    edit_config,
    open_home,
    preferred_text_editor,
    which,
)
from agentws.paths import AwError


def _make_exec(directory, name, executable=True):
    path = directory / name
    path.write_text("")
    os.chmod(path, 0o755 if executable else 0o644)
    return path


def _recording_exec(directory, name, log):
    """An executable that writes each argument it receives to ``log``."""
    path = directory / name
    path.write_text(f"#!/bin/sh\nprintf '%s\\n' \"$@\" > '{log}'\n")
    os.chmod(path, 0o755)
    return path


@pytest.fixture
def env(tmp_path, monkeypatch):
    bindir = tmp_path / "bin"
    bindir.mkdir()
    install = tmp_path / "install"
    install.mkdir()
    monkeypatch.setenv("PATH", str(bindir))
    monkeypatch.setenv("AW_INSTALL_DIR", str(install))
    monkeypatch.delenv("EDITOR", raising=False)
    monkeypatch.delenv("DISPLAY", raising=False)
    monkeypatch.delenv("WAYLAND_DISPLAY", raising=False)
    monkeypatch.setattr(sys, "platform", "linux")
    return bindir, install


def test_which_finds_executable(env):
    bindir, _ = env
    _make_exec(bindir, "nano")
    assert which("nano") is True
    assert which("vim") is False


def test_which_ignores_non_executable(env):
    bindir, _ = env
    _make_exec(bindir, "vim", executable=False)
    assert which("vim") is (os.name != "posix")


def test_which_without_path(monkeypatch):
    monkeypatch.delenv("PATH", raising=False)
    assert which("sh") is False


def test_preferred_editor_follows_order(env):
    bindir, _ = env
    _make_exec(bindir, "nano")
    _make_exec(bindir, "vim")
    assert preferred_text_editor() == "vim"


def test_preferred_editor_none(env):
    assert preferred_text_editor() is None


def test_capitalize():
    assert capitalize("base workspace") == "Base workspace"
    assert capitalize("") == ""


def test_edit_config_without_editor_raises(env):
    with pytest.raises(AwError, match="No suitable editor found"):
        edit_config()


def test_edit_config_runs_editor(env, tmp_path, capsys):
    bindir, install = env
    log = tmp_path / "args.log"
    _recording_exec(bindir, "nano", log)
    edit_config()
    assert "nano" in capsys.readouterr().out
    assert log.read_text().splitlines() == [str(install / "config.yaml")]


def test_edit_base_missing_lists_bases(env):
    _, install = env
    (install / "base" / "python").mkdir(parents=True)
    (install / "base" / "default").mkdir(parents=True)
    with pytest.raises(AwError) as info:
        edit_base("ghost")
    message = str(info.value)
    assert "Base workspace 'ghost' not found" in message
    assert message.index("default") < message.index("python")


def test_edit_base_uses_cursor(env, tmp_path, capsys):
    bindir, install = env
    base = install / "base" / "default"
    base.mkdir(parents=True)
    log = tmp_path / "args.log"
    _recording_exec(bindir, "cursor", log)
    edit_base("default")
    assert "Cursor" in capsys.readouterr().out
    assert log.read_text().splitlines() == [str(base)]


def test_edit_base_prints_location_without_tools(env, capsys):
    _, install = env
    base = install / "base" / "default"
    base.mkdir(parents=True)
    edit_base("default")
    assert f"Base workspace location: {base}" in capsys.readouterr().out


def test_open_home_prefers_editor_env(env, tmp_path, monkeypatch, capsys):
    bindir, install = env
    log = tmp_path / "args.log"
    _recording_exec(bindir, "myeditor", log)
    monkeypatch.setenv("EDITOR", "myeditor")
    open_home()
    assert "myeditor" in capsys.readouterr().out
    assert log.read_text().splitlines() == [str(install)]