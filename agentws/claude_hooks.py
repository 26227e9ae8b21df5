"""Wiring ``aw hook`` into the Claude settings file.

Entries are added for each event, leaving other tools' entries intact;
running it again changes nothing.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from agentws.paths import AwError

EVENTS = ("UserPromptSubmit", "PreToolUse", "Notification", "Stop")


def _command_for(event: str) -> str:
    return f"aw hook --agent claude --event {event}"


def _already_has(groups: list[Any], command: str) -> bool:
    return any(
        isinstance(group, dict)
        and isinstance(group.get("hooks"), list)
        and any(isinstance(h, dict) and h.get("command") == command for h in group["hooks"])
        for group in groups
    )


def ensure_entries(root: dict[str, Any]) -> int:
    """Add missing hook entries to ``root`` in place; return how many were added."""
    if not isinstance(root, dict):
        raise AwError("Claude settings root must be an object")
    hooks = root.get("hooks")
    if not isinstance(hooks, dict):
        hooks = root["hooks"] = {}

    added = 0
    for event in EVENTS:
        command = _command_for(event)
        groups = hooks.get(event)
        if not isinstance(groups, list):
            groups = hooks[event] = []
        if _already_has(groups, command):
            continue
        groups.append({"hooks": [{"type": "command", "command": command}]})
        added += 1
    return added


def _read_json_or_default(path: Path) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return {}
    if not text.strip():
        return {}
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return {}


def install(home: Path | str | None = None) -> int:
    """Update the settings file under ``home``; return how many entries were added."""
    home = Path.home() if home is None else Path(home)
    path = home / ".claude" / "settings.json"

    root = _read_json_or_default(path)
    added = ensure_entries(root)

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError:
        pass
    try:
        path.write_text(json.dumps(root, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    except OSError as exc:
        raise AwError(f"write {path}: {exc}") from exc

    if added == 0:
        print(f"✅ Claude hooks already wired in {path}")
    else:
        print(f"✅ Wired {added} Claude hook entries in {path}")
    return added