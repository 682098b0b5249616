"""Creating, editing, showing and deleting profiles."""

from __future__ import annotations

import os
import shutil
import subprocess
import sys
import tempfile
import unicodedata
from collections.abc import Callable
from pathlib import Path

from pmx.listing import copy_profile
from pmx.storage import Storage, StorageError

_TEMPLATE_COMMENT = "<!-- Add your profile content here -->"
_INVALID_CHARS = frozenset('<>:"|?*')
_UNIX_EDITORS = ("vi", "nano", "emacs")


def get_editor() -> str:
    """The editor to use: $EDITOR, then $VISUAL, then a platform default."""
    for variable in ("EDITOR", "VISUAL"):
        editor = os.environ.get(variable)
        if editor:
            return editor
    if sys.platform == "win32":
        return "notepad"
    for editor in _UNIX_EDITORS:
        if shutil.which(editor) is not None:
            return editor
    raise RuntimeError("No editor found. Please set the EDITOR environment variable.")


def _run_editor(path: Path | str) -> None:
    editor = get_editor()
    try:
        result = subprocess.run([editor, str(path)])
    except OSError as exc:
        raise RuntimeError(f"Failed to execute editor: {editor}") from exc
    if result.returncode != 0:
        raise RuntimeError("Editor exited with non-zero status")


def validate_profile_name(name: str) -> None:
    """Raise ValueError unless ``name`` is usable as a new profile name."""
    if not name:
        raise ValueError("Profile name cannot be empty")
    if len(name.encode("utf-8")) > 255:
        raise ValueError("Profile name too long (max 255 characters)")
    if ".." in name or "/" in name or "\\" in name:
        raise ValueError("Profile name cannot contain path separators or '..'")
    if any(c in _INVALID_CHARS or unicodedata.category(c) == "Cc" for c in name):
        raise ValueError("Profile name contains invalid characters")


def is_effectively_empty(content: str, name: str) -> bool:
    """True if the text holds nothing beyond headings, comments and blanks."""
    trimmed = content.strip()
    header = f"# {name}"
    if not trimmed or trimmed == header:
        return True
    if trimmed == f"{header}\n\n{_TEMPLATE_COMMENT}".strip():
        return True
    return all(
        not line or line.startswith("#") or line.startswith("<!--")
        for line in (raw.strip() for raw in trimmed.split("\n"))
    )


def _confirm(prompt: str, default: bool = False) -> bool:
    hint = "[Y/n]" if default else "[y/N]"
    while True:
        try:
            answer = input(f"{prompt} {hint} ")
        except EOFError as exc:
            raise RuntimeError("Failed to get confirmation") from exc
        answer = answer.strip().lower()
        if not answer:
            return default
        if answer in ("y", "yes"):
            return True
        if answer in ("n", "no"):
            return False


def edit(storage: Storage, name: str) -> None:
    """Open an existing profile in the editor."""
    profile_path = storage.get_repo_path(name)
    _run_editor(profile_path)
    print(f"Profile '{name}' edited successfully")


def delete(storage: Storage, name: str) -> bool:
    """Show a profile, ask for confirmation and delete it; return whether deleted."""
    profile_path = storage.get_repo_path(name)
    try:
        content = profile_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise StorageError(f"Failed to read profile: {name}") from exc

    print(f"Profile '{name}' contents:")
    print(content)
    print()

    if not _confirm(f"Delete profile '{name}'?", default=False):
        print("Deletion cancelled")
        return False

    storage.delete_profile(name)
    print(f"Profile '{name}' deleted successfully")
    return True


def create(storage: Storage, name: str) -> bool:
    """Write a new profile in the editor; return whether one was created."""
    if storage.profile_exists(name):
        raise StorageError(
            f"Profile '{name}' already exists. Use 'edit' to modify it."
        )
    validate_profile_name(name)

    fd, temp_name = tempfile.mkstemp()
    os.close(fd)
    temp_path = Path(temp_name)
    try:
        template = f"# {name}\n\n{_TEMPLATE_COMMENT}\n"
        try:
            temp_path.write_text(template, encoding="utf-8")
        except OSError as exc:
            raise RuntimeError("Failed to write template to temporary file") from exc

        _run_editor(temp_path)

        try:
            content = temp_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise RuntimeError("Failed to read content from temporary file") from exc
    finally:
        temp_path.unlink(missing_ok=True)

    if is_effectively_empty(content, name):
        print("Profile creation cancelled - no content added")
        return False

    storage.create_profile(name, content)
    print(f"Profile '{name}' created successfully")
    return True


def show(storage: Storage, name: str) -> str:
    """Print a profile's content and return it."""
    content = storage.get_profile_content(name)
    print(content)
    return content


def copy(
    storage: Storage,
    name: str,
    clipboard: Callable[[str], None] | None = None,
) -> str:
    """Copy a profile's content to the clipboard and return it."""
    return copy_profile(name, storage, clipboard)