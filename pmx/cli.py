"""Command-line interface for managing prompt profiles."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Callable, Sequence
from pathlib import Path

from pmx import agents, listing, profile
from pmx.listing import InternalCompletion
from pmx.storage import Storage, StorageError

VERSION = "0.1.0"
CONFIG_ENV = "PMX_CONFIG_FILE"
SHELLS = ("zsh",)

_PROFILE_ACTIONS: dict[str, tuple[str, Callable[[Storage, str], object]]] = {
    "edit": ("Edit an existing profile using $EDITOR", profile.edit),
    "delete": ("Delete a profile (with confirmation)", profile.delete),
    "create": ("Create a new profile using $EDITOR", profile.create),
    "show": ("Show profile content", profile.show),
    "copy": ("Copy profile contents to clipboard", profile.copy),
}


def _zsh_script() -> str:
    actions = " ".join(_PROFILE_ACTIONS)
    shells = " ".join(SHELLS)
    return f"""#compdef pmx

_pmx() {{
  local -a candidates
  if (( CURRENT == 2 )); then
    candidates=(${{(f)"$(pmx internal-completion enabled-commands 2>/dev/null)"}})
    compadd -- $candidates
    return
  fi
  case ${{words[2]}} in
    set-claude-profile)
      candidates=(${{(f)"$(pmx internal-completion claude-profiles 2>/dev/null)"}})
      compadd -- $candidates
      ;;
    set-codex-profile)
      candidates=(${{(f)"$(pmx internal-completion codex-profiles 2>/dev/null)"}})
      compadd -- $candidates
      ;;
    profile)
      if (( CURRENT == 3 )); then
        compadd -- {actions}
      else
        candidates=(${{(f)"$(pmx internal-completion profile-names 2>/dev/null)"}})
        compadd -- $candidates
      fi
      ;;
    completion)
      compadd -- {shells}
      ;;
  esac
}}

_pmx "$@"
"""


def _print_completion(shell: str) -> str:
    if shell != "zsh":
        raise ValueError(f"Unsupported shell: {shell}")
    script = _zsh_script()
    print(script, end="")
    return script


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the ``pmx`` command."""
    parser = argparse.ArgumentParser(prog="pmx", description="A prompt management suite")
    parser.add_argument("--version", action="version", version=f"pmx {VERSION}")
    parser.add_argument("--config", type=Path, help="Path to the storage directory")
    commands = parser.add_subparsers(dest="command", required=True, metavar="COMMAND")

    def add(name: str, help_text: str | None, handler: Callable) -> argparse.ArgumentParser:
        kwargs = {"help": help_text} if help_text is not None else {}
        sub = commands.add_parser(name, **kwargs)
        sub.set_defaults(handler=handler)
        return sub

    sub = add(
        "set-claude-profile",
        "Set Claude profile from a stored configuration",
        lambda storage, args: agents.set_claude_profile(storage, args.path),
    )
    sub.add_argument("path", help="Path to the profile to apply")
    add(
        "reset-claude-profile",
        "Reset the current Claude profile",
        lambda storage, args: agents.reset_claude_profile(storage),
    )
    sub = add(
        "set-codex-profile",
        "Set Codex profile from a stored configuration",
        lambda storage, args: agents.set_codex_profile(storage, args.path),
    )
    sub.add_argument("path", help="Path to the profile to apply")
    add(
        "reset-codex-profile",
        "Reset the current Codex profile",
        lambda storage, args: agents.reset_codex_profile(storage),
    )
    add(
        "list",
        "List all available profiles",
        lambda storage, args: listing.list_profiles(storage),
    )

    profile_parser = commands.add_parser("profile", help="Profile management commands")
    actions = profile_parser.add_subparsers(dest="action", required=True, metavar="ACTION")
    for name, (help_text, func) in _PROFILE_ACTIONS.items():
        action = actions.add_parser(name, help=help_text)
        action.add_argument("name", help="Name of the profile")
        action.set_defaults(
            handler=lambda storage, args, func=func: func(storage, args.name)
        )

    sub = add(
        "completion",
        "Generate shell completions",
        lambda storage, args: _print_completion(args.shell),
    )
    sub.add_argument("shell", choices=SHELLS, help="Shell to generate completions for")

    sub = add(
        "internal-completion",
        None,
        lambda storage, args: listing.internal_completion(storage, args.query),
    )
    sub.add_argument("query", choices=[member.value for member in InternalCompletion])

    return parser


def _open_storage(config: Path | None) -> Storage:
    if config is None:
        env_value = os.environ.get(CONFIG_ENV)
        if env_value is not None:
            config = Path(env_value)
    if config is not None:
        return Storage.open(config)
    return Storage.auto()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return the exit status."""
    args = build_parser().parse_args(argv)
    try:
        storage = _open_storage(args.config)
        args.handler(storage, args)
    except (StorageError, RuntimeError, ValueError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())