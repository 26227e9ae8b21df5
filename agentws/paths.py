"""Resolution of the directories used by the tool, with environment overrides.

Defaults:
    AW_INSTALL_DIR    -> ~/.agent-workspaces
    AW_WORKSPACES_DIR -> ~/agent-workspaces
    AW_BIN_DIR        -> ~/.local/bin
    AW_CONFIG_FILE    -> $AW_INSTALL_DIR/config.yaml
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


class AwError(Exception):
    """Raised for failures the command line reports to the user."""


def _env_path(key: str) -> Path | None:
    value = os.environ.get(key)
    if not value:
        return None
    return Path(value)


def _home_dir() -> Path:
    try:
        return Path.home()
    except (RuntimeError, KeyError) as exc:
        raise AwError("could not determine home directory") from exc


@dataclass(frozen=True)
class Paths:
    """The set of directories and files the tool works with."""

    install_dir: Path
    workspaces_dir: Path
    bin_dir: Path
    config_file: Path

    @classmethod
    def from_env(cls) -> "Paths":
        """Build paths from environment variables, falling back to defaults."""
        home = _home_dir()
        install_dir = _env_path("AW_INSTALL_DIR") or home / ".agent-workspaces"
        workspaces_dir = _env_path("AW_WORKSPACES_DIR") or home / "agent-workspaces"
        bin_dir = _env_path("AW_BIN_DIR") or home / ".local" / "bin"
        config_file = _env_path("AW_CONFIG_FILE") or install_dir / "config.yaml"
        return cls(
            install_dir=install_dir,
            workspaces_dir=workspaces_dir,
            bin_dir=bin_dir,
            config_file=config_file,
        )

    def base_dir(self, name: str) -> Path:
        """Directory holding the cached tree of base ``name``."""
        return self.bases_root() / name

    def bases_root(self) -> Path:
        """Directory under which every base lives."""
        return self.install_dir / "base"

    def workspace_dir(self, name: str) -> Path:
        """Directory where workspace ``name`` is materialized."""
        return self.workspaces_dir / name