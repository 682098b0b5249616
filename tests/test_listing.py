from pathlib import Path

import pytest

from pmx.listing import (
    InternalCompletion,
    completion_candidates,
    copy_profile,
    internal_completion,
    list_profiles,
)
from pmx.storage import Agents, Config, Storage, StorageError

PROFILE_TEXT = "# Test Profile\nThis is a test profile."


def create_test_storage(root: Path, disable_claude=False, disable_codex=False) -> Storage:
    root.mkdir()
    (root / "repo").mkdir()
    Config(
        agents=Agents(
            disable_claude=disable_claude,
            disable_codex=disable_codex,
            disable_cline=False,
        )
    ).persist(root)
    (root / "repo" / "test_profile.md").write_text(PROFILE_TEXT, encoding="utf-8")
    return Storage.open(root)


def test_internal_completion_claude_profiles_enabled(tmp_path, capsys):
    storage = create_test_storage(tmp_path / "s")
    result = internal_completion(storage, InternalCompletion.CLAUDE_PROFILES)
    assert result == ["test_profile"]
    assert capsys.readouterr().out == "test_profile\n"


def test_internal_completion_claude_profiles_disabled(tmp_path, capsys):
    storage = create_test_storage(tmp_path / "s", disable_claude=True)
    result = internal_completion(storage, InternalCompletion.CLAUDE_PROFILES)
    assert result == []
    assert capsys.readouterr().out == ""


def test_internal_completion_codex_profiles_enabled(tmp_path):
    storage = create_test_storage(tmp_path / "s")
    assert internal_completion(storage, InternalCompletion.CODEX_PROFILES) == [
        "test_profile"
    ]


def test_internal_completion_codex_profiles_disabled(tmp_path):
    storage = create_test_storage(tmp_path / "s", disable_codex=True)
    assert internal_completion(storage, InternalCompletion.CODEX_PROFILES) == []


def test_internal_completion_enabled_commands_all_enabled(tmp_path, capsys):
    storage = create_test_storage(tmp_path / "s")
    result = internal_completion(storage, InternalCompletion.ENABLED_COMMANDS)
    assert result == [
        "list",
        "copy-profile",
        "completion",
        "profile",
        "set-claude-profile",
        "reset-claude-profile",
        "set-codex-profile",
        "reset-codex-profile",
    ]
    assert capsys.readouterr().out.splitlines() == result


def test_internal_completion_enabled_commands_claude_disabled(tmp_path):
    storage = create_test_storage(tmp_path / "s", disable_claude=True)
    assert internal_completion(storage, InternalCompletion.ENABLED_COMMANDS) == [
        "list",
        "copy-profile",
        "completion",
        "profile",
        "set-codex-profile",
        "reset-codex-profile",
    ]


def test_internal_completion_enabled_commands_codex_disabled(tmp_path):
    storage = create_test_storage(tmp_path / "s", disable_codex=True)
    assert internal_completion(storage, InternalCompletion.ENABLED_COMMANDS) == [
        "list",
        "copy-profile",
        "completion",
        "profile",
        "set-claude-profile",
        "reset-claude-profile",
    ]


def test_internal_completion_enabled_commands_all_disabled(tmp_path):
    storage = create_test_storage(tmp_path / "s", disable_claude=True, disable_codex=True)
    assert internal_completion(storage, InternalCompletion.ENABLED_COMMANDS) == [
        "list",
        "copy-profile",
        "completion",
        "profile",
    ]


def test_profile_names_ignore_agent_flags(tmp_path):
    storage = create_test_storage(tmp_path / "s", disable_claude=True, disable_codex=True)
    assert completion_candidates(storage, InternalCompletion.PROFILE_NAMES) == [
        "test_profile"
    ]


def test_completion_accepts_command_name(tmp_path):
    storage = create_test_storage(tmp_path / "s")
    assert completion_candidates(storage, "profile-names") == ["test_profile"]
    with pytest.raises(ValueError):
        completion_candidates(storage, "bogus")


def test_list_profiles(tmp_path, capsys):
    storage = create_test_storage(tmp_path / "s")
    storage.create_profile("a/nested", "x")
    result = list_profiles(storage)
    assert sorted(result) == ["a/nested", "test_profile"]
    assert sorted(capsys.readouterr().out.splitlines()) == sorted(result)


def test_list_profiles_empty(tmp_path, capsys):
    storage = create_test_storage(tmp_path / "s")
    storage.delete_profile("test_profile")
    assert list_profiles(storage) == []
    assert capsys.readouterr().out == "No profiles found.\n"


def test_copy_profile_uses_clipboard(tmp_path, capsys):
    storage = create_test_storage(tmp_path / "s")
    copied = []
    result = copy_profile("test_profile", storage, copied.append)
    assert copied == [PROFILE_TEXT]
    assert result == PROFILE_TEXT
    assert "Profile content copied to clipboard: test_profile" in capsys.readouterr().out


def test_copy_profile_missing(tmp_path):
    storage = create_test_storage(tmp_path / "s")
    copied = []
    with pytest.raises(StorageError, match="Profile not found: nope"):
        copy_profile("nope", storage, copied.append)
    assert copied == []