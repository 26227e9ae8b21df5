"""Wiring ``aw hook`` into the Codex hooks file and enabling hooks in its config."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import tomlkit
from tomlkit.exceptions import TOMLKitError

from agentws.paths import AwError

EVENTS = ("SessionStart", "UserPromptSubmit", "PreToolUse", "Stop")


def _command_for(event: str) -> str:
    return f"aw hook --agent codex --event {event}"


def _has_command(groups: list[Any], command: str) -> bool:
    return any(
        isinstance(group, dict)
        and isinstance(group.get("hooks"), list)
        and any(isinstance(h, dict) and h.get("command") == command for h in group["hooks"])
        for group in groups
    )


def ensure_entries(root: dict[str, Any]) -> int:
    """Add missing hook entries to ``root`` in place; return how many were added."""
    if not isinstance(root, dict):
        raise AwError("Codex hooks root must be object")
    hooks = root.setdefault("hooks", {})
    if not isinstance(hooks, dict):
        raise AwError("hooks must be a table")

    added = 0
    for event in EVENTS:
        command = _command_for(event)
        groups = hooks.setdefault(event, [])
        if not isinstance(groups, list):
            raise AwError("event entry must be array")
        if _has_command(groups, command):
            continue
        groups.append({"hooks": [{"type": "command", "command": command}]})
        added += 1
    return added


def ensure_hooks_json(path: Path | str) -> int:
    """Update the hooks file at ``path``; return how many entries were added."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        text = ""
    if text.strip():
        try:
            root = json.loads(text)
        except json.JSONDecodeError as exc:
            raise AwError(f"parse {path}: {exc}") from exc
    else:
        root = {}
    added = ensure_entries(root)
    try:
        path.write_text(json.dumps(root, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    except OSError as exc:
        raise AwError(f"write {path}: {exc}") from exc
    return added


def ensure_codex_hooks_enabled(path: Path | str) -> bool:
    """Set ``features.codex_hooks = true`` in the config; ``True`` if it was changed."""
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        raw = ""
    if raw.strip():
        try:
            doc = tomlkit.parse(raw)
        except TOMLKitError as exc:
            raise AwError(f"parse {path}: {exc}") from exc
    else:
        doc = tomlkit.document()

    features = doc.unwrap().get("features")
    if isinstance(features, dict) and features.get("codex_hooks") is True:
        return False

    if "features" not in doc:
        doc["features"] = tomlkit.table()
    table = doc["features"]
    if not isinstance(table, dict):
        raise AwError(f"{path}: 'features' is not a table")
    table["codex_hooks"] = True
    try:
        path.write_text(tomlkit.dumps(doc), encoding="utf-8")
    except OSError as exc:
        raise AwError(f"write {path}: {exc}") from exc
    return True


def install(home: Path | str | None = None) -> tuple[int, bool]:
    """Wire hooks under ``home``; return entries added and whether config changed."""
    home = Path.home() if home is None else Path(home)
    directory = home / ".codex"
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError:
        pass

    hooks_path = directory / "hooks.json"
    added = ensure_hooks_json(hooks_path)
    if added == 0:
        print(f"✅ Codex hooks already wired in {hooks_path}")
    else:
        print(f"✅ Wired {added} Codex hook entries in {hooks_path}")

    cfg_path = directory / "config.toml"
    touched = ensure_codex_hooks_enabled(cfg_path)
    if touched:
        print(f"✅ Enabled codex_hooks in {cfg_path}")
    else:
        print(f"✅ codex_hooks already enabled in {cfg_path}")
    return added, touched