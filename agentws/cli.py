"""Command-line entry point for ``aw``."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence

from agentws import (
    delete,
    detect,
    edit,
    installer,
    list_cmd,
    listing,
    reset,
    shell_init,
    start,
    sync,
    tmux_bindings,
)
from agentws.installer import AgentKind
from agentws.paths import AwError
from agentws.shell_rc import ShellKind

Handler = Callable[[argparse.Namespace], object]


def _shell_kind(value: str) -> ShellKind:
    try:
        return ShellKind(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid shell: {value!r}") from exc


def _agent_kind(value: str) -> AgentKind:
    try:
        return AgentKind(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid agent: {value!r}") from exc


def _run_install(args: argparse.Namespace) -> None:
    if args.install_command == "shell":
        installer.run_shell(args.shell)
    elif args.install_command == "hooks":
        installer.run_hooks(args.agent)
    elif args.install_command == "tmux-bindings":
        tmux_bindings.install(args.config)
    else:
        installer.run_all()


def build_parser() -> argparse.ArgumentParser:
    """The argument parser for every subcommand."""
    parser = argparse.ArgumentParser(
        prog="aw",
        description="Manage isolated workspaces for AI agents.",
    )
    sub = parser.add_subparsers(dest="command", metavar="<command>")
    sub.required = True

    def add(name: str, handler: Handler, help_text: str | None, aliases: Sequence[str] = ()):
        kwargs = {"aliases": list(aliases)}
        if help_text is not None:
            kwargs["help"] = help_text
        p = sub.add_parser(name, **kwargs)
        p.set_defaults(func=handler)
        return p

    add("list", lambda a: list_cmd.run(), "List all workspaces", ["ls"])

    p = add("start", lambda a: start.run(a.name, a.no_tmux), "Enter workspace", ["enter", "open"])
    p.add_argument("name")
    p.add_argument("--no-tmux", action="store_true", help="Do not use tmux")

    p = add("delete", lambda a: delete.run(a.name), "Delete a workspace", ["rm"])
    p.add_argument("name")

    add("edit-config", lambda a: edit.edit_config(), "Open config in editor")

    p = add("edit-base", lambda a: edit.edit_base(a.base), "Open a base workspace in editor")
    p.add_argument("base", nargs="?", default="default")

    add("sync", lambda a: sync.run(), "Sync repos in current workspace")

    p = add("reset", lambda a: reset.run(a.hard), "Reset repos to their default branch")
    p.add_argument("--hard", action="store_true", help="Discard local changes")

    add("open-home", lambda a: edit.open_home(), "Open install dir")

    p = add("shell-init", lambda a: shell_init.run(a.shell), "Print shell hook for eval")
    p.add_argument("shell", type=_shell_kind, metavar="{zsh,bash,fish}")

    p = add("install", _run_install, "Interactive setup helpers")
    inst = p.add_subparsers(dest="install_command", metavar="<step>")
    inst.required = True
    ip = inst.add_parser("shell", help="Install the shell hook into the rc file")
    ip.add_argument("--shell", type=_shell_kind, default=None, metavar="{zsh,bash,fish}")
    ip = inst.add_parser("hooks", help="Wire agent hooks")
    ip.add_argument("--agent", type=_agent_kind, default=AgentKind.ALL, metavar="{claude,codex,all}")
    ip = inst.add_parser("tmux-bindings", help="Write tmux key bindings")
    ip.add_argument("--config", default=None, help="Config file to write to")
    inst.add_parser("all", help="Run every setup step")

    p = add("_shell-start", lambda a: start.shell_start(a.name, a.no_tmux), None)
    p.add_argument("name")
    p.add_argument("--no-tmux", action="store_true")

    p = add("_detect-workspace", lambda a: detect.run(a.cwd), None)
    p.add_argument("cwd")

    add("_list-workspaces", lambda a: listing.list_workspaces(), None)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Parse ``argv`` and run the chosen command; return the exit status."""
    args = build_parser().parse_args(argv)
    try:
        args.func(args)
    except AwError as exc:
        print(f"❌ {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())