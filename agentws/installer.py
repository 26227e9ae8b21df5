"""Interactive setup helpers: shell integration, agent hooks and tmux bindings.

Every step is idempotent.
"""

from __future__ import annotations

import enum
import os

from agentws import claude_hooks, codex_hooks, shell_rc, tmux_bindings
from agentws.paths import AwError
from agentws.shell_rc import ShellKind


class AgentKind(enum.Enum):
    """Agents whose hooks can be wired."""

    CLAUDE = "claude"
    CODEX = "codex"
    ALL = "all"


def detect_shell() -> ShellKind | None:
    """Best-effort shell detection from ``$SHELL``."""
    value = os.environ.get("SHELL")
    if value is None:
        return None
    if "zsh" in value:
        return ShellKind.ZSH
    if "fish" in value:
        return ShellKind.FISH
    if "bash" in value:
        return ShellKind.BASH
    return None


def run_shell(shell: ShellKind | None = None) -> None:
    """Install the shell hook for ``shell``, detected when not given (zsh fallback)."""
    chosen = shell or detect_shell() or ShellKind.ZSH
    shell_rc.install(chosen)


def run_hooks(agent: AgentKind = AgentKind.ALL) -> None:
    """Wire hooks for ``agent``; for all agents, failures do not stop the rest."""
    if agent is AgentKind.CLAUDE:
        claude_hooks.install()
    elif agent is AgentKind.CODEX:
        codex_hooks.install()
    else:
        for step in (claude_hooks.install, codex_hooks.install):
            try:
                step()
            except (AwError, OSError):
                pass


def run_all() -> None:
    """Run every setup step, continuing past failures."""
    print("🛠️  aw install all")
    print()
    print("→ Shell integration")
    try:
        run_shell(None)
    except (AwError, OSError):
        pass
    print()
    print("→ Agent hooks")
    run_hooks(AgentKind.ALL)
    print()
    print("→ Tmux key bindings")
    try:
        tmux_bindings.install(None)
    except (AwError, OSError):
        pass
    print()
    print("✅ Done. You may need to restart your shell.")