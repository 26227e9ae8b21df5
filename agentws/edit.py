"""``aw edit-config``, ``aw edit-base`` and ``aw open-home``: open an editor.

``open-home`` prefers ``$EDITOR``. Otherwise the first editor found on
``PATH`` is used, falling back to the platform's file manager, and finally
to printing the location.
"""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

from agentws.paths import AwError, Paths

_TEXT_EDITORS = ("cursor", "code", "nvim", "vim", "nano")


def which(cmd: str) -> bool:
    """Whether ``cmd`` is an executable file in a ``PATH`` directory."""
    path = os.environ.get("PATH")
    if path is None:
        return False
    for directory in path.split(os.pathsep):
        candidate = Path(directory) / cmd
        if not candidate.is_file():
            continue
        if os.name != "posix":
            return True
        try:
            if candidate.stat().st_mode & 0o111:
                return True
        except OSError:
            continue
    return False


def preferred_text_editor() -> str | None:
    """The first available editor from the preference list."""
    return next((cmd for cmd in _TEXT_EDITORS if which(cmd)), None)


def capitalize(s: str) -> str:
    """``s`` with its first character upper-cased."""
    return s[:1].upper() + s[1:]


def _launch(program: str, path: Path) -> None:
    try:
        subprocess.run([program, str(path)], check=False)
    except OSError:
        pass


def _open_in_editor_or_filemanager(path: Path, label: str) -> None:
    if which("cursor"):
        print(f"📝 Opening {label} with Cursor...")
        _launch("cursor", path)
        return
    if which("code"):
        print(f"📝 Opening {label} with VS Code...")
        _launch("code", path)
        return
    if sys.platform == "darwin":
        print(f"📂 Opening {label} in file manager...")
        _launch("open", path)
        return
    has_display = "DISPLAY" in os.environ or "WAYLAND_DISPLAY" in os.environ
    if has_display and which("xdg-open"):
        print(f"📂 Opening {label} in file manager...")
        _launch("xdg-open", path)
        return
    print(f"📂 {capitalize(label)} location: {path}")


def edit_config() -> None:
    """Open the config file in the preferred editor."""
    paths = Paths.from_env()
    editor = preferred_text_editor()
    if editor is None:
        raise AwError("No suitable editor found")
    print(f"📝 Opening config with {editor}...")
    _launch(editor, paths.config_file)


def edit_base(base_name: str) -> None:
    """Open base ``base_name`` in an editor or file manager."""
    paths = Paths.from_env()
    base_dir = paths.base_dir(base_name)
    if not base_dir.is_dir():
        try:
            names = sorted(e.name for e in paths.bases_root().iterdir() if e.is_dir())
        except OSError:
            names = []
        lines = [f"Base workspace '{base_name}' not found", "Available bases:"]
        lines.extend(f"  • {n}" for n in names)
        raise AwError("\n".join(lines))
    _open_in_editor_or_filemanager(base_dir, "base workspace")


def open_home() -> None:
    """Open the installation directory, preferring ``$EDITOR``."""
    paths = Paths.from_env()
    editor = os.environ.get("EDITOR")
    if editor:
        print(f"📝 Opening installation directory with {editor}...")
        _launch(editor, paths.install_dir)
        return
    _open_in_editor_or_filemanager(paths.install_dir, "installation directory")