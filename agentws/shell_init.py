"""Shell hooks printed by ``aw shell-init <shell>`` for the user's shell to eval.

Each hook defines an ``aw`` wrapper that evaluates ``aw _shell-start``
output in the calling shell, activates the workspace environment when the
working directory changes, and installs tab completion.
"""

from __future__ import annotations

from typing import Callable

from agentws.shell_rc import ShellKind

_ENTER_COMMANDS = ("start", "enter", "open")
_WORKSPACE_COMMANDS = _ENTER_COMMANDS + ("delete", "rm")

_SUBCOMMANDS = (
    ("init", "Initialize base workspace"),
    ("create", "Create a new workspace from a base"),
    ("list", "List all workspaces"),
    ("ls", "List all workspaces"),
    ("start", "Enter workspace"),
    ("enter", "Enter workspace"),
    ("open", "Enter workspace"),
    ("delete", "Delete a workspace"),
    ("rm", "Delete a workspace"),
    ("config", "Show configuration file location"),
    ("edit-config", "Open config in editor"),
    ("edit-base", "Open a base workspace in editor"),
    ("sync", "Sync repos in current workspace"),
    ("open-home", "Open install dir"),
    ("dash", "Tmux-based agent dashboard"),
    ("hook", "Agent state writer (called by hooks)"),
    ("shell-init", "Print shell hook for eval"),
    ("completions", "Print shell completions"),
    ("install", "Interactive setup helpers"),
)

_DASH_SUBCOMMANDS = ("sidebar", "status-line", "next-ready", "park", "json", "gc")
_INSTALL_SUBCOMMANDS = ("shell", "hooks", "tmux-bindings", "all")
_INSTALL_AGENTS = ("claude", "codex", "pi", "all")
_HOOK_AGENTS = ("claude", "codex", "pi")
_SHELL_NAMES = ("zsh", "bash", "fish")

_HOOK_DIRS = ("$HOME/.agent-workspaces/hooks.d", "$ws/.agent-workspace/hooks.d")

_LIST_WORKSPACES = "command aw _list-workspaces 2>/dev/null"
_LIST_BASES = "command aw _list-bases 2>/dev/null"


def _words(items: tuple[str, ...]) -> str:
    return " ".join(items)


def _subcommand_names() -> str:
    return " ".join(name for name, _ in _SUBCOMMANDS)


def _framed(shell: str, sections: list[list[str]]) -> str:
    body = "\n\n".join("\n".join(section) for section in sections)
    return f"# >>> aw shell-init ({shell}) >>>\n{body}\n# <<< aw shell-init ({shell}) <<<\n"


def _posix_wrapper() -> list[str]:
    return [
        "# Commands that change the calling shell are evaluated in place.",
        "aw() {",
        '  case "${1-}" in',
        "    " + "|".join(_ENTER_COMMANDS) + ")",
        "      shift",
        "      local __aw_script",
        '      __aw_script=$(command aw _shell-start "$@") || return $?',
        '      eval "$__aw_script"',
        "      ;;",
        "    *)",
        '      command aw "$@"',
        "      ;;",
        "  esac",
        "}",
    ]


def _posix_chpwd(name_expr: str, glob_suffix: str) -> list[str]:
    globs = " ".join(f'"{d}"/*.sh{glob_suffix}' for d in _HOOK_DIRS)
    return [
        "# Export the workspace variables whenever the directory changes.",
        "__aw_chpwd() {",
        "  local ws",
        '  ws=$(command aw _detect-workspace "$PWD" 2>/dev/null) || return 0',
        "  if [[ -z $ws ]]; then",
        "    unset AGENT_WORKSPACE AGENT_WORKSPACE_NAME",
        "    return 0",
        "  fi",
        '  export AGENT_WORKSPACE="$ws"',
        f'  export AGENT_WORKSPACE_NAME="{name_expr}"',
        "  local h",
        f"  for h in {globs}; do",
        '    [[ -r $h ]] && source "$h"',
        "  done",
        "}",
    ]


def _zsh_activation() -> list[str]:
    return [
        "typeset -ag chpwd_functions",
        "chpwd_functions+=(__aw_chpwd)",
        "__aw_chpwd",
    ]


def _zsh_completion() -> list[str]:
    top = [f"    '{name}:{description}'" for name, description in _SUBCOMMANDS]
    return [
        "# Completion: names come from `aw _list-*` so they stay current.",
        "__aw_workspaces() {",
        "  local -a ws",
        '  ws=("${(@f)$(' + _LIST_WORKSPACES + ')}")',
        "  [[ ${#ws} -gt 0 ]] && _describe -t workspaces 'workspace' ws",
        "}",
        "__aw_bases() {",
        "  local -a bs",
        '  bs=("${(@f)$(' + _LIST_BASES + ')}")',
        "  [[ ${#bs} -gt 0 ]] && _describe -t bases 'base' bs",
        "}",
        "_aw() {",
        "  local -a top",
        "  top=(",
        *top,
        "  )",
        "  if (( CURRENT == 2 )); then",
        "    _describe 'subcommand' top",
        "    return",
        "  fi",
        "  case ${words[2]} in",
        "    (" + "|".join(_WORKSPACE_COMMANDS) + ")",
        "      __aw_workspaces ;;",
        "    (edit-base)",
        "      __aw_bases ;;",
        "    (init)",
        "      if (( CURRENT == 3 )); then __aw_bases; fi ;;",
        "    (create)",
        "      _arguments '--base[base name]:base:__aw_bases' '*::name:' ;;",
        "    (dash)",
        "      if (( CURRENT == 3 )); then",
        f"        local -a sub=({_words(_DASH_SUBCOMMANDS)})",
        "        _describe 'dash subcommand' sub",
        "      fi ;;",
        "    (install)",
        "      if (( CURRENT == 3 )); then",
        f"        local -a sub=({_words(_INSTALL_SUBCOMMANDS)})",
        "        _describe 'install subcommand' sub",
        "      elif [[ ${words[3]} == hooks ]]; then",
        f"        _arguments '--agent[which agent to wire]:agent:({_words(_INSTALL_AGENTS)})'",
        "      elif [[ ${words[3]} == shell ]]; then",
        f"        _arguments '--shell[which shell rc to write]:shell:({_words(_SHELL_NAMES)})'",
        "      fi ;;",
        "    (shell-init|completions)",
        "      if (( CURRENT == 3 )); then",
        f"        local -a shells=({_words(_SHELL_NAMES)})",
        "        _describe 'shell' shells",
        "      fi ;;",
        "    (hook)",
        "      _arguments \\",
        f"        '--agent[which agent fired]:agent:({_words(_HOOK_AGENTS)})' \\",
        "        '--event[event name]:event:' \\",
        "        '--prompt[prompt text]:prompt:' ;;",
        "  esac",
        "}",
        "compdef _aw aw",
    ]


def _bash_activation() -> list[str]:
    return [
        "# No chpwd hook here: check for a changed PWD from PROMPT_COMMAND.",
        '__aw_last_pwd="$PWD"',
        "__aw_check_chpwd() {",
        "  if [[ $PWD != $__aw_last_pwd ]]; then",
        '    __aw_last_pwd="$PWD"',
        "    __aw_chpwd",
        "  fi",
        "}",
        'case "$PROMPT_COMMAND" in',
        "  *__aw_check_chpwd*) ;;",
        '  *) PROMPT_COMMAND="__aw_check_chpwd${PROMPT_COMMAND:+;$PROMPT_COMMAND}" ;;',
        "esac",
        "__aw_chpwd",
    ]


def _compgen(word_list: str) -> str:
    return f'COMPREPLY=( $(compgen -W "{word_list}" -- "$cur") )'


def _bash_completion() -> list[str]:
    workspaces = "$(" + _LIST_WORKSPACES + ")"
    bases = "$(" + _LIST_BASES + ")"
    return [
        "# Completion: names come from `aw _list-*` so they stay current.",
        "__aw_complete() {",
        "  local cur prev cmd",
        "  COMPREPLY=()",
        '  cur="${COMP_WORDS[COMP_CWORD]}"',
        '  prev="${COMP_WORDS[COMP_CWORD-1]}"',
        '  cmd="${COMP_WORDS[1]}"',
        "",
        f'  local subs="{_subcommand_names()}"',
        '  if [ "$COMP_CWORD" -eq 1 ]; then',
        "    " + _compgen("$subs") + "; return 0",
        "  fi",
        "",
        '  case "$cmd" in',
        "    " + "|".join(_WORKSPACE_COMMANDS) + ")",
        "      " + _compgen(workspaces) + " ;;",
        "    edit-base|init)",
        "      " + _compgen(bases) + " ;;",
        "    create)",
        '      if [ "$prev" = "--base" ]; then',
        "        " + _compgen(bases),
        "      else",
        "        " + _compgen("--base"),
        "      fi ;;",
        "    dash)",
        '      [ "$COMP_CWORD" -eq 2 ] && ' + _compgen(_words(_DASH_SUBCOMMANDS)) + " ;;",
        "    install)",
        '      if [ "$COMP_CWORD" -eq 2 ]; then',
        "        " + _compgen(_words(_INSTALL_SUBCOMMANDS)),
        '      elif [ "$prev" = "--agent" ]; then',
        "        " + _compgen(_words(_INSTALL_AGENTS)),
        '      elif [ "$prev" = "--shell" ]; then',
        "        " + _compgen(_words(_SHELL_NAMES)),
        "      fi ;;",
        "    shell-init|completions)",
        '      [ "$COMP_CWORD" -eq 2 ] && ' + _compgen(_words(_SHELL_NAMES)) + " ;;",
        "    hook)",
        '      case "$prev" in',
        "        --agent) " + _compgen(_words(_HOOK_AGENTS)) + " ;;",
        "        *) " + _compgen("--agent --event --prompt") + " ;;",
        "      esac ;;",
        "  esac",
        "  return 0",
        "}",
        "complete -F __aw_complete aw",
    ]


def _fish_wrapper() -> list[str]:
    return [
        "function aw",
        "  switch $argv[1]",
        f"    case {_words(_ENTER_COMMANDS)}",
        "      set -l rest $argv[2..-1]",
        "      set -l script (command aw _shell-start $rest)",
        "      or return $status",
        "      eval $script",
        "    case '*'",
        "      command aw $argv",
        "  end",
        "end",
    ]


def _fish_chpwd() -> list[str]:
    globs = " ".join(f"{d}/*.sh" for d in _HOOK_DIRS)
    return [
        "function __aw_chpwd --on-variable PWD",
        "  set -l ws (command aw _detect-workspace $PWD 2>/dev/null)",
        '  if test -z "$ws"',
        "    set -e AGENT_WORKSPACE",
        "    set -e AGENT_WORKSPACE_NAME",
        "    return 0",
        "  end",
        "  set -gx AGENT_WORKSPACE $ws",
        "  set -gx AGENT_WORKSPACE_NAME (basename $ws)",
        f"  for h in {globs}",
        "    if test -r $h",
        "      bass source $h ^/dev/null; or source $h",
        "    end",
        "  end",
        "end",
        "__aw_chpwd",
    ]


def _fish_complete(condition: str, rest: str) -> str:
    return f"complete -c aw -n '{condition}' {rest}"


def _fish_seen(commands: str, rest: str) -> str:
    return _fish_complete(f"__fish_seen_subcommand_from {commands}", rest)


def _fish_completion() -> list[str]:
    return [
        "# Completion.",
        "complete -c aw -f",
        _fish_complete("__fish_use_subcommand", f"-a '{_subcommand_names()}'"),
        _fish_seen(_words(_WORKSPACE_COMMANDS), f"-a '({_LIST_WORKSPACES})'"),
        _fish_seen("edit-base init", f"-a '({_LIST_BASES})'"),
        _fish_seen("create", f"-l base -d 'base name' -xa '({_LIST_BASES})'"),
        _fish_seen("dash", f"-a '{_words(_DASH_SUBCOMMANDS)}'"),
        _fish_seen("install", f"-a '{_words(_INSTALL_SUBCOMMANDS)}'"),
        _fish_seen("install", f"-l agent -xa '{_words(_INSTALL_AGENTS)}'"),
        _fish_seen("install", f"-l shell -xa '{_words(_SHELL_NAMES)}'"),
        _fish_seen("shell-init completions", f"-a '{_words(_SHELL_NAMES)}'"),
        _fish_seen("hook", f"-l agent -xa '{_words(_HOOK_AGENTS)}'"),
    ]


def _zsh() -> str:
    return _framed(
        "zsh",
        [
            _posix_wrapper(),
            _posix_chpwd("${ws:t}", "(N)") + _zsh_activation(),
            _zsh_completion(),
        ],
    )


def _bash() -> str:
    return _framed(
        "bash",
        [
            _posix_wrapper(),
            _posix_chpwd('$(basename "$ws")', ""),
            _bash_activation(),
            _bash_completion(),
        ],
    )


def _fish() -> str:
    return _framed("fish", [_fish_wrapper(), _fish_chpwd(), _fish_completion()])


_BUILDERS: dict[ShellKind, Callable[[], str]] = {
    ShellKind.ZSH: _zsh,
    ShellKind.BASH: _bash,
    ShellKind.FISH: _fish,
}


def script_for(shell: ShellKind | str) -> str:
    """The hook text for ``shell``; a name such as ``"zsh"`` is accepted too."""
    return _BUILDERS[ShellKind(shell)]()


def run(shell: ShellKind | str) -> None:
    """Print the hook for ``shell`` to standard output."""
    print(script_for(shell), end="")