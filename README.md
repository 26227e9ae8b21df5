# agentws

A command-line tool for working with separate workspaces for AI coding
agents. A workspace is a directory under `~/agent-workspaces/` whose
`.agent-workspace/` subdirectory records its name, the base it came from and
when it was created. The tool lists workspaces, enters them (through tmux
when it is available), keeps their git repositories in line with the remote
default branch, and sets up shell integration, agent hooks and tmux key
bindings.

## Installation

```
pip install agentws
```

This installs the `aw` command.

## Locations

Every location can be changed with an environment variable:

| Variable            | Default                          |
|---------------------|----------------------------------|
| `AW_INSTALL_DIR`    | `~/.agent-workspaces`            |
| `AW_WORKSPACES_DIR` | `~/agent-workspaces`             |
| `AW_BIN_DIR`        | `~/.local/bin`                   |
| `AW_CONFIG_FILE`    | `$AW_INSTALL_DIR/config.yaml`    |

Bases are looked for under `$AW_INSTALL_DIR/base/<name>`.

## Everyday use

```
aw list                 # also: aw ls; live aw-<name> tmux sessions are marked green
aw start <name>         # also: aw enter, aw open
aw start <name> --no-tmux
aw delete <name>        # also: aw rm; asks "Are you sure? (y/N)" first
aw sync                 # fast-forward the default branch of every repo
aw reset                # reset repos to origin/<default>, skipping unsaved work
aw reset --hard         # reset even when that discards local work
aw edit-config          # open the config file in an editor
aw edit-base [<base>]   # open a base directory (default: "default")
aw open-home            # open the install directory
```

`aw start` attaches to the `aw-<name>` tmux session, or creates it in the
workspace directory. With `--no-tmux`, or when tmux is not on `PATH`, it
replaces itself with `$SHELL` started in the workspace, with
`AGENT_WORKSPACE` and `AGENT_WORKSPACE_NAME` set.

`aw sync` and `aw reset` act on the current workspace: `$AGENT_WORKSPACE`
if it points at a workspace, otherwise the nearest directory at or above the
current one that holds `.agent-workspace/name`. They go through every
subdirectory that is a git repository. The default branch is taken from
`origin/HEAD`, else `main`, else `master`. `aw sync` only fast-forwards the
local branch and skips repos that have diverged. `aw reset` without `--hard`
skips repos with uncommitted changes or with commits on `HEAD` that are not
on the remote branch, and lists them at the end.

`aw edit-config` and `aw edit-base` use the first of `cursor`, `code`,
`nvim`, `vim`, `nano` found on `PATH`. `aw open-home` prefers `$EDITOR`.
When no editor is found for a directory, the platform file manager is used
(`open` on macOS, `xdg-open` under a display), and failing that the location
is printed.

## Shell integration

```
aw shell-init zsh       # also: bash, fish
```

prints a hook meant for `eval`. It wraps `aw start|enter|open` so that the
workspace is entered in the current shell (through `aw _shell-start`),
exports `AGENT_WORKSPACE` and `AGENT_WORKSPACE_NAME` whenever you `cd` into
a workspace (through `aw _detect-workspace`), sources `hooks.d/*.sh` scripts
from the install directory and from the workspace, and adds tab completion
for workspace names (through `aw _list-workspaces`).

## Setup helpers

Each step is idempotent and can be run again safely:

```
aw install shell [--shell zsh|bash|fish]
aw install hooks [--agent claude|codex|all]
aw install tmux-bindings [--config <path>]
aw install all
```

- `install shell` adds a marked `eval "$(aw shell-init <shell>)"` block to
  `~/.zshrc`, `~/.bashrc` or `~/.config/fish/config.fish`. Without
  `--shell`, the shell is guessed from `$SHELL`, falling back to zsh.
- `install hooks` adds `aw hook --agent <agent> --event <event>` entries to
  `~/.claude/settings.json` and to `~/.codex/hooks.json`, and turns on
  `features.codex_hooks` in `~/.codex/config.toml`, leaving other entries
  untouched.
- `install tmux-bindings` writes a marked block of key bindings into the tmux
  configuration that tmux will actually honour: the XDG file if it exists,
  else `~/.tmux.conf` if that exists, else a new XDG file. A stale block left
  in the other file is removed.
- `install all` runs the three steps above, carrying on past failures.

Marked blocks look like this and are replaced in place on a re-run:

```
# >>> aw tmux bindings >>>
...
# <<< aw tmux bindings <<<
```

## What this package does not do

- It does not set up bases or create workspaces, and it does not read the
  config file: there is no `init`, `create` or `config` command. `aw list`
  and the other commands work with workspace directories that already exist.
- It has no dashboard and no `aw hook` or `aw dash` commands. The agent hook
  entries and the tmux key bindings it installs call those commands, so they
  have no effect with this package alone.
- It has no `aw completions` command, no self-update command and no
  `aw _list-bases`; base-name completion in the shell hook therefore offers
  nothing.

## Requirements

`git` for `aw sync` and `aw reset`; `tmux` for session handling.