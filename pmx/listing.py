"""Listing profiles, copying them, and shell completion candidates."""

from __future__ import annotations

import shutil
import subprocess
import sys
from collections.abc import Callable
from enum import Enum

from pmx.storage import Storage


class InternalCompletion(Enum):
    """Hidden completion queries used by the shell completion script."""

    CLAUDE_PROFILES = "claude-profiles"
    CODEX_PROFILES = "codex-profiles"
    ENABLED_COMMANDS = "enabled-commands"
    PROFILE_NAMES = "profile-names"


_ALWAYS_AVAILABLE = ["list", "copy-profile", "completion", "profile"]
_CLAUDE_COMMANDS = ["set-claude-profile", "reset-claude-profile"]
_CODEX_COMMANDS = ["set-codex-profile", "reset-codex-profile"]


def list_profiles(storage: Storage) -> list[str]:
    """Print every profile name, one per line, and return the names."""
    profiles = storage.list_repos()
    if not profiles:
        print("No profiles found.")
        return []
    for profile in profiles:
        print(profile)
    return profiles


def _clipboard_commands() -> list[list[str]]:
    if sys.platform == "darwin":
        return [["pbcopy"]]
    if sys.platform == "win32":
        return [["clip"]]
    return [
        ["wl-copy"],
        ["xclip", "-selection", "clipboard"],
        ["xsel", "--clipboard", "--input"],
    ]


def _system_clipboard(text: str) -> None:
    for command in _clipboard_commands():
        if shutil.which(command[0]) is None:
            continue
        try:
            subprocess.run(command, input=text, text=True, check=True)
        except (OSError, subprocess.CalledProcessError) as exc:
            raise RuntimeError(f"Failed to copy to clipboard: {exc}") from exc
        return
    raise RuntimeError("No clipboard utility available")


def copy_profile(
    path: str,
    storage: Storage,
    clipboard: Callable[[str], None] | None = None,
) -> str:
    """Put a profile's content on the clipboard and return that content.

    ``clipboard`` receives the text; by default the system clipboard is used.
    """
    content = storage.get_profile_content(path)
    (clipboard or _system_clipboard)(content)
    print(f"Profile content copied to clipboard: {path}")
    return content


def completion_candidates(
    storage: Storage, command: InternalCompletion | str
) -> list[str]:
    """Words offered by the shell completion for the given query."""
    command = InternalCompletion(command)
    agents = storage.config.agents
    if command is InternalCompletion.CLAUDE_PROFILES:
        return [] if agents.disable_claude else storage.list_repos()
    if command is InternalCompletion.CODEX_PROFILES:
        return [] if agents.disable_codex else storage.list_repos()
    if command is InternalCompletion.ENABLED_COMMANDS:
        words = list(_ALWAYS_AVAILABLE)
        if not agents.disable_claude:
            words += _CLAUDE_COMMANDS
        if not agents.disable_codex:
            words += _CODEX_COMMANDS
        return words
    return storage.list_repos()


def internal_completion(
    storage: Storage, command: InternalCompletion | str
) -> list[str]:
    """Print the completion candidates, one per line, and return them."""
    words = completion_candidates(storage, command)
    for word in words:
        print(word)
    return words