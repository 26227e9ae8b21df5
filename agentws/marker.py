"""Idempotent edits of line-based config files using marker blocks.

Block format::

    # >>> aw <label> >>>
    <body lines>
    # <<< aw <label> <<<
"""

from __future__ import annotations

from pathlib import Path

from agentws.paths import AwError


def open_marker(label: str) -> str:
    """Opening marker line for ``label``."""
    return f"# >>> aw {label} >>>"


def close_marker(label: str) -> str:
    """Closing marker line for ``label``."""
    return f"# <<< aw {label} <<<"


def render(existing: str, label: str, body: str) -> str:
    """Return ``existing`` with the block replaced in place, or appended."""
    opening = open_marker(label)
    closing = close_marker(label)
    block = f"{opening}\n{body.rstrip(chr(10))}\n{closing}\n"

    before, found_open, rest = existing.partition(opening)
    if found_open:
        _old, found_close, after = rest.partition(closing)
        if found_close:
            if after.startswith("\n"):
                after = after[1:]
            before_clean = before.rstrip("\n")
            separator = "\n" if before_clean else ""
            return before_clean + separator + block + after

    out = existing
    if existing and not existing.endswith("\n"):
        out += "\n"
    if existing:
        out += "\n"
    return out + block


def strip(existing: str, label: str) -> tuple[str, bool]:
    """Remove the whole lines of the block; report whether one was found."""
    opening = open_marker(label)
    closing = close_marker(label)
    open_idx = existing.find(opening)
    if open_idx < 0:
        return existing, False
    close_idx = existing.find(closing, open_idx)
    if close_idx < 0:
        return existing, False
    line_start = existing.rfind("\n", 0, open_idx) + 1
    close_end = close_idx + len(closing)
    newline = existing.find("\n", close_end)
    line_end = len(existing) if newline < 0 else newline + 1
    return existing[:line_start] + existing[line_end:], True


def apply(path: Path | str, label: str, body: str) -> None:
    """Write the block for ``label`` into ``path``, creating it if needed."""
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise AwError(f"mkdir {path.parent}: {exc}") from exc
    try:
        existing = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        existing = ""
    try:
        path.write_text(render(existing, label, body), encoding="utf-8")
    except OSError as exc:
        raise AwError(f"write {path}: {exc}") from exc


def remove(path: Path | str, label: str) -> bool:
    """Strip the block from ``path``; ``True`` when one was removed."""
    path = Path(path)
    try:
        existing = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return False
    new, found = strip(existing, label)
    if not found:
        return False
    try:
        path.write_text(new, encoding="utf-8")
    except OSError as exc:
        raise AwError(f"write {path}: {exc}") from exc
    return True