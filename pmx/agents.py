"""Applying stored profiles as the system prompt of coding agents."""

from __future__ import annotations

import shutil
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from pmx.paths import home_dir
from pmx.storage import PROFILE_SUFFIX, Agents, Storage, StorageError


@dataclass(frozen=True)
class _Agent:
    label: str
    directory: str
    filename: str
    is_disabled: Callable[[Agents], bool]

    def target(self) -> Path:
        return home_dir() / self.directory / self.filename

    def ensure_enabled(self, storage: Storage) -> None:
        if self.is_disabled(storage.config.agents):
            raise StorageError(
                f"{self.label} profiles are disabled in the configuration."
            )


_CLAUDE = _Agent("Claude", ".claude", "CLAUDE.md", lambda a: a.disable_claude)
_CODEX = _Agent("Codex", ".codex", "AGENTS.md", lambda a: a.disable_codex)


def _apply(agent: _Agent, storage: Storage, profile: str) -> Path:
    agent.ensure_enabled(storage)
    source_file = storage.repo / f"{profile}{PROFILE_SUFFIX}"
    if not source_file.exists():
        raise StorageError(f"Profile '{profile}' not found at {source_file}")

    target = agent.target()
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise StorageError(
            f"Failed to create {agent.directory} directory: {exc}"
        ) from exc
    try:
        shutil.copy(source_file, target)
    except OSError as exc:
        raise StorageError(f"Failed to apply profile '{profile}': {exc}") from exc

    print(f"Successfully applied profile '{profile}' to {target}")
    return target


def _reset(agent: _Agent, storage: Storage) -> bool:
    agent.ensure_enabled(storage)
    target = agent.target()
    if not target.exists():
        print(f"No {agent.label} profile found at {target} (already reset)")
        return False
    try:
        target.unlink()
    except OSError as exc:
        raise StorageError(f"Failed to remove {target}: {exc}") from exc
    print(f"Successfully reset {agent.label} profile (removed {target})")
    return True


def set_claude_profile(storage: Storage, profile: str) -> Path:
    """Copy a stored profile to ~/.claude/CLAUDE.md and return that path."""
    return _apply(_CLAUDE, storage, profile)


def reset_claude_profile(storage: Storage) -> bool:
    """Remove ~/.claude/CLAUDE.md; return whether a file was removed."""
    return _reset(_CLAUDE, storage)


def set_codex_profile(storage: Storage, profile: str) -> Path:
    """Copy a stored profile to ~/.codex/AGENTS.md and return that path."""
    return _apply(_CODEX, storage, profile)


def reset_codex_profile(storage: Storage) -> bool:
    """Remove ~/.codex/AGENTS.md; return whether a file was removed."""
    return _reset(_CODEX, storage)