"""Entering a workspace, either directly or through the shell wrapper.

``run`` starts or attaches to the workspace's tmux session, or replaces the
process with the user's shell. ``shell_start`` prints shell text that the
``aw`` wrapper function evaluates in the calling shell.
"""

from __future__ import annotations

import os
import subprocess
from pathlib import Path

from agentws.paths import AwError, Paths


def sh_quote(s: str) -> str:
    """POSIX single-quote ``s``; embedded single quotes become ``'\\''``."""
    if not s:
        return "''"
    return "'" + s.replace("'", "'\\''") + "'"


def collect_hooks(install_dir: Path | str, workspace_dir: Path | str) -> list[Path]:
    """``.sh`` files of the global ``hooks.d`` then the workspace's, each sorted."""
    hooks: list[Path] = []
    for directory in (
        Path(install_dir) / "hooks.d",
        Path(workspace_dir) / ".agent-workspace" / "hooks.d",
    ):
        try:
            entries = list(directory.iterdir())
        except OSError:
            continue
        hooks.extend(sorted(p for p in entries if p.suffix == ".sh"))
    return hooks


def _tmux_available() -> bool:
    path = os.environ.get("PATH")
    if path is None:
        return False
    return any((Path(d) / "tmux").is_file() for d in path.split(os.pathsep))


def _existing_workspace(name: str) -> tuple[Paths, Path]:
    paths = Paths.from_env()
    workspace_dir = paths.workspace_dir(name)
    if not workspace_dir.is_dir():
        raise AwError(f"Workspace '{name}' not found")
    return paths, workspace_dir


def _session_exists(session: str) -> bool:
    try:
        result = subprocess.run(
            ["tmux", "has-session", "-t", session],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=False,
        )
    except OSError:
        return False
    return result.returncode == 0


def _exec(argv: list[str], cwd: Path | None = None, env: dict[str, str] | None = None) -> None:
    if cwd is not None:
        os.chdir(cwd)
    if os.name == "posix":
        try:
            if env is None:
                os.execvp(argv[0], argv)
            else:
                os.execvpe(argv[0], argv, env)
        except OSError as exc:
            raise AwError(f"could not run {argv[0]}: {exc}") from exc
    else:
        try:
            subprocess.run(argv, env=env, check=False)
        except OSError as exc:
            raise AwError(f"could not run {argv[0]}: {exc}") from exc


def run(name: str, no_tmux: bool = False) -> None:
    """Enter workspace ``name`` through tmux, or by replacing this process with a shell."""
    _paths, workspace_dir = _existing_workspace(name)
    print(f"🎯 Entering workspace: {name}")
    print(f"📂 Location: {workspace_dir}")

    if not no_tmux and _tmux_available():
        session = f"aw-{name}"
        if _session_exists(session):
            print(f"⚠️  Tmux session '{session}' already exists")
            args = ["tmux", "attach", "-t", session]
        else:
            print(f"Creating tmux session: {session}")
            args = ["tmux", "new-session", "-s", session, "-c", str(workspace_dir)]
        try:
            subprocess.run(args, check=False)
        except OSError:
            pass
        return

    print()
    print(f"✅ Workspace activated! You're now in: {workspace_dir}")
    print()

    shell = os.environ.get("SHELL", "/bin/sh")
    env = dict(os.environ)
    env["AGENT_WORKSPACE"] = str(workspace_dir)
    env["AGENT_WORKSPACE_NAME"] = name
    _exec([shell], cwd=workspace_dir, env=env)


def open_or_attach_session(name: str) -> None:
    """Switch to (inside tmux) or attach to the ``aw-<name>`` session, creating it if missing."""
    paths = Paths.from_env()
    workspace_dir = paths.workspace_dir(name)
    if not workspace_dir.is_dir():
        raise AwError(f"workspace '{name}' not found")
    session = f"aw-{name}"
    directory = str(workspace_dir)

    if "TMUX" in os.environ:
        if not _session_exists(session):
            try:
                result = subprocess.run(
                    ["tmux", "new-session", "-d", "-s", session, "-c", directory],
                    capture_output=True,
                    check=False,
                )
            except OSError as exc:
                raise AwError(f"tmux new-session failed: {exc}") from exc
            if result.returncode != 0:
                stderr = result.stderr.decode("utf-8", errors="replace")
                raise AwError(f"tmux new-session failed: {stderr}")
        try:
            subprocess.run(["tmux", "switch-client", "-t", session], check=False)
        except OSError:
            pass
        return

    _exec(["tmux", "new-session", "-A", "-s", session, "-c", directory])


def shell_start_script(name: str, no_tmux: bool = False) -> str:
    """Shell text that activates workspace ``name`` when evaluated."""
    paths, workspace_dir = _existing_workspace(name)
    directory = sh_quote(str(workspace_dir))

    if not no_tmux and _tmux_available():
        session = sh_quote(f"aw-{name}")
        if "TMUX" in os.environ:
            lines = [
                f"if ! tmux has-session -t {session} 2>/dev/null; then",
                f"  tmux new-session -d -s {session} -c {directory}",
                "fi",
                f"tmux switch-client -t {session}",
            ]
        else:
            lines = [f"exec tmux new-session -A -s {session} -c {directory}"]
    else:
        lines = [
            f"cd {directory}",
            f"export AGENT_WORKSPACE={directory}",
            f"export AGENT_WORKSPACE_NAME={sh_quote(name)}",
        ]
        lines.extend(
            f"source {sh_quote(str(hook))}"
            for hook in collect_hooks(paths.install_dir, workspace_dir)
        )
    return "\n".join(lines) + "\n"


def shell_start(name: str, no_tmux: bool = False) -> None:
    """Print the activation text for the shell wrapper to evaluate."""
    print(shell_start_script(name, no_tmux), end="")