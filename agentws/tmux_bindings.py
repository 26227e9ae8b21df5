"""Writing the key-binding block into the tmux config file that is in effect.

tmux loads ``~/.tmux.conf`` and then ``$XDG_CONFIG_HOME/tmux/tmux.conf``;
the later file wins on conflicts. The block goes into the XDG file when it
exists, else the legacy file when it exists, else a new XDG file. Stale
blocks in the other existing file are removed.
"""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass
from pathlib import Path

from agentws import marker
from agentws.paths import AwError

TMUX_BLOCK = (
    'bind-key a display-popup -E -w 80% -h 60% -b rounded "aw dash"\n'
    'bind-key / display-popup -E -w 80% -h 60% -b rounded "aw dash --filter"\n'
    'bind-key N run-shell "aw dash next-ready"\n'
    'bind-key C-p run-shell "aw dash park"\n'
    'bind-key o run-shell "aw dash sidebar"\n'
)
LABEL = "tmux bindings"


class CandidateKind(enum.Enum):
    """Which of tmux's user config locations a candidate is."""

    XDG = "xdg"
    LEGACY = "legacy"


@dataclass(frozen=True)
class CandidatePath:
    """A config path tmux probes, and whether it exists."""

    path: Path
    kind: CandidateKind
    exists: bool


def tmux_candidate_configs(home: Path | str | None = None) -> list[CandidatePath]:
    """The config paths tmux probes, in its load order."""
    home = Path.home() if home is None else Path(home)
    xdg_env = os.environ.get("XDG_CONFIG_HOME")
    xdg_root = Path(xdg_env) if xdg_env else home / ".config"
    legacy = home / ".tmux.conf"
    xdg = xdg_root / "tmux" / "tmux.conf"
    return [
        CandidatePath(path=legacy, kind=CandidateKind.LEGACY, exists=legacy.is_file()),
        CandidatePath(path=xdg, kind=CandidateKind.XDG, exists=xdg.is_file()),
    ]


def pick_target(candidates: list[CandidatePath]) -> Path:
    """The candidate whose bindings tmux would actually honour."""
    xdg = next((c for c in candidates if c.kind is CandidateKind.XDG), None)
    legacy = next((c for c in candidates if c.kind is CandidateKind.LEGACY), None)
    if xdg is not None and xdg.exists:
        return xdg.path
    if legacy is not None and legacy.exists:
        return legacy.path
    if xdg is None:
        raise AwError("xdg candidate always present")
    return xdg.path


def install(override_path: Path | str | None = None, home: Path | str | None = None) -> Path:
    """Write the bindings block; return the file it was written to."""
    candidates = tmux_candidate_configs(home)
    target = Path(override_path) if override_path is not None else pick_target(candidates)

    print("Detected tmux config candidates (in tmux's load order):")
    for c in candidates:
        mark = "✓" if c.exists else "·"
        kind = "legacy" if c.kind is CandidateKind.LEGACY else "xdg   "
        here = " ← installing here" if c.path == target else ""
        print(f"  {mark} {kind} {c.path}{here}")
    if override_path is not None:
        print("  ↳ overridden via --config")
    print()

    marker.apply(target, LABEL, TMUX_BLOCK)
    print(f"✅ Tmux bindings written to {target}")

    for c in candidates:
        if c.path == target or not c.exists:
            continue
        try:
            removed = marker.remove(c.path, LABEL)
        except AwError:
            removed = False
        if removed:
            print(f"ℹ️  Removed stale block from {c.path}")

    print(f"   Reload: tmux source-file {target}")
    return target