"""Isolated workspaces for AI agents: listing, entering, syncing and resetting them, with shell, agent-hook and tmux setup."""

__version__ = "1.5.0"