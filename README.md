# pmx

pmx keeps a library of Markdown prompt profiles and applies them as the
system prompt of coding agents. Applying a profile for Claude copies it to
`~/.claude/CLAUDE.md`. Applying one for Codex copies it to `~/.codex/AGENTS.md`.

## Installation

```
pip install .
```

This installs the `pmx` command. It needs Python 3.11 or later.

## Storage

Profiles live in a storage directory with this layout:

```
<storage>/
  config.toml
  repo/
    <profile>.md
    nested/<profile>.md
```

pmx looks for the storage directory in this order:

1. the `--config` option;
2. the `PMX_CONFIG_FILE` environment variable;
3. `$XDG_CONFIG_HOME` itself, or `~/.config/pmx` if that variable is unset.

With `--config` or `PMX_CONFIG_FILE`, the directory must already exist with
`repo/` and `config.toml` in it, or pmx stops with an error. In the last case,
if the directory cannot be loaded, pmx prints a warning and creates
`~/.config/pmx` with an empty `repo/` and this `config.toml`:

```toml
[agents]
disable_claude = false
disable_codex = false
disable_cline = false
```

All three keys must be present and must be booleans. Set `disable_claude` or
`disable_codex` to `true` to turn off the commands for that agent.

## Usage

```
pmx list                          # list every stored profile
pmx set-claude-profile <name>     # copy a profile to ~/.claude/CLAUDE.md
pmx reset-claude-profile          # remove ~/.claude/CLAUDE.md
pmx set-codex-profile <name>      # copy a profile to ~/.codex/AGENTS.md
pmx reset-codex-profile           # remove ~/.codex/AGENTS.md

pmx profile create <name>         # write a new profile in the editor
pmx profile edit <name>           # edit an existing profile in the editor
pmx profile show <name>           # print a profile
pmx profile copy <name>           # copy a profile to the clipboard
pmx profile delete <name>         # show a profile and delete it after confirmation

pmx completion zsh                # print the zsh completion script
pmx --version
```

Errors are printed to standard error as `Error: ...` and the command exits
with status 1.

Profile names are paths relative to `repo/`, without the `.md` suffix. For
example, `work/review` refers to `repo/work/review.md`. `profile create`
accepts only plain names: no `/`, `\`, `..`, control characters or any of
`< > : " | ? *`, and at most 255 bytes. Nested profiles can be placed in
`repo/` by hand and are then listed, shown and applied like any other.

The editor is taken from `$EDITOR`, then `$VISUAL`, then the first of `vi`,
`nano` or `emacs` found on the `PATH`. A new profile starts from a short
template and is not saved if only headings, HTML comments or blank lines are
left in it.

`profile copy` uses `pbcopy` on macOS, `clip` on Windows, and the first of
`wl-copy`, `xclip` or `xsel` found elsewhere.

To enable zsh completion, save the script where zsh looks for completions:

```
pmx completion zsh > ~/.zfunc/_pmx
```

The script calls the hidden `pmx internal-completion` command, which prints
candidate words for `claude-profiles`, `codex-profiles`, `enabled-commands`
and `profile-names`; the agent-specific queries print nothing when that agent
is disabled.

## Library use

The modules can be used directly:

- `pmx.storage.Storage` opens (`Storage.open`), creates (`Storage.initialize`)
  or locates (`Storage.auto`) a storage directory, and lists, reads, writes and
  deletes profiles. Problems raise `pmx.storage.StorageError`.
- `pmx.agents` has `set_claude_profile`, `reset_claude_profile`,
  `set_codex_profile` and `reset_codex_profile`.
- `pmx.profile` has `create`, `edit`, `show`, `copy`, `delete`,
  `get_editor`, `validate_profile_name` and `is_effectively_empty`.
- `pmx.listing` has `list_profiles`, `copy_profile`, `completion_candidates`
  and `internal_completion`. `copy` and `copy_profile` accept a `clipboard`
  callable that receives the text in place of the system clipboard.

## Limitations

- The `disable_cline` setting is read and written, but pmx has no commands
  for that agent.
- Shell completion is provided for zsh only.
- The home directory is not looked up on Windows, so the agent commands and
  the default storage location do not work there.