"""Installing the shell-init hook into the user's shell rc file."""

from __future__ import annotations

import enum
from pathlib import Path

from agentws import marker

LABEL = "shell-init"


class ShellKind(enum.Enum):
    """Shells the tool integrates with."""

    ZSH = "zsh"
    BASH = "bash"
    FISH = "fish"


def rc_path(shell: ShellKind, home: Path | str | None = None) -> Path:
    """The rc file that ``shell`` reads at start-up."""
    home = Path.home() if home is None else Path(home)
    return {
        ShellKind.ZSH: home / ".zshrc",
        ShellKind.BASH: home / ".bashrc",
        ShellKind.FISH: home / ".config" / "fish" / "config.fish",
    }[shell]


def install(shell: ShellKind, home: Path | str | None = None) -> Path:
    """Write the eval line into the rc file; return the file's path."""
    rc = rc_path(shell, home)
    body = f'eval "$(aw shell-init {shell.value})"'
    marker.apply(rc, LABEL, body)
    print(f"✅ Shell hook installed in {rc}")
    print(f"   Open a new shell or run: source {rc}")
    return rc