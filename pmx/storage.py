"""On-disk storage of profiles and configuration."""

from __future__ import annotations

import os
import sys
import tomllib
from collections.abc import Iterator
from dataclasses import dataclass, field, asdict
from pathlib import Path

import tomli_w

from pmx.paths import home_dir

CONFIG_FILE = "config.toml"
REPO_DIR = "repo"
PROFILE_SUFFIX = ".md"


class StorageError(Exception):
    """Raised when the storage directory or a profile cannot be used."""


@dataclass
class Agents:
    """Which agent integrations are switched off."""

    disable_claude: bool = False
    disable_codex: bool = False
    disable_cline: bool = False


@dataclass
class Config:
    """Contents of the storage's config.toml."""

    agents: Agents = field(default_factory=Agents)

    def persist(self, path: Path | str) -> None:
        """Write the configuration to ``config.toml`` inside ``path``."""
        config_path = Path(path) / CONFIG_FILE
        try:
            content = tomli_w.dumps(asdict(self))
        except (TypeError, ValueError) as exc:
            raise StorageError(f"Failed to serialize config: {exc}") from exc
        try:
            config_path.write_text(content, encoding="utf-8")
        except OSError as exc:
            raise StorageError(f"Failed to write config file: {exc}") from exc

    @classmethod
    def load(cls, path: Path | str) -> Config:
        """Read the configuration from ``config.toml`` inside ``path``."""
        config_path = Path(path) / CONFIG_FILE
        if not config_path.exists():
            raise StorageError(f"Config file does not exist: {config_path}")
        try:
            content = config_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise StorageError(f"Failed to read config file: {exc}") from exc
        try:
            data = tomllib.loads(content)
            return cls(agents=_parse_agents(data))
        except (tomllib.TOMLDecodeError, ValueError) as exc:
            raise StorageError(f"Failed to parse config file: {exc}") from exc


def _parse_agents(data: dict) -> Agents:
    table = data.get("agents")
    if not isinstance(table, dict):
        raise ValueError("missing table `agents`")
    values = {}
    for name in ("disable_claude", "disable_codex", "disable_cline"):
        if name not in table:
            raise ValueError(f"missing field `{name}`")
        value = table[name]
        if not isinstance(value, bool):
            raise ValueError(f"invalid type for `{name}`: expected a boolean")
        values[name] = value
    return Agents(**values)


def _validate(path: Path) -> None:
    checks = [
        (path.exists(), f"Storage path does not exist: {path}"),
        (path.is_dir(), f"Storage path is not a directory: {path}"),
    ]
    repo_path = path / REPO_DIR
    checks += [
        (repo_path.exists(), f"Repository path does not exist: {repo_path}"),
        (repo_path.is_dir(), f"Repository path is not a directory: {repo_path}"),
    ]
    config_path = path / CONFIG_FILE
    checks += [
        (config_path.exists(), f"Config file does not exist: {config_path}"),
        (config_path.is_file(), f"Config path is not a file: {config_path}"),
    ]
    for ok, message in checks:
        if not ok:
            raise StorageError(message)


def _walk_files(path: Path) -> Iterator[Path]:
    if path.is_dir():
        try:
            entries = sorted(path.iterdir())
        except OSError as exc:
            raise StorageError(f"Failed to read directory: {exc}") from exc
        for entry in entries:
            if entry.is_file() or entry.is_dir():
                yield from _walk_files(entry)
    elif path.is_file():
        yield path
    else:
        raise StorageError(f"Path is neither a file nor a directory: {path}")


def _strip_suffixes(text: str) -> str:
    while text.endswith(PROFILE_SUFFIX):
        text = text[: -len(PROFILE_SUFFIX)]
    return text


@dataclass
class Storage:
    """A storage directory holding ``config.toml`` and a ``repo`` of profiles."""

    path: Path
    config: Config

    @property
    def repo(self) -> Path:
        return self.path / REPO_DIR

    @classmethod
    def open(cls, path: Path | str) -> Storage:
        """Open an existing storage directory after checking its layout."""
        path = Path(path)
        _validate(path)
        return cls(path=path, config=Config.load(path))

    @classmethod
    def initialize(cls, path: Path | str) -> Storage:
        """Create a fresh storage directory with a default configuration."""
        path = Path(path)
        if path.exists():
            raise StorageError(f"Storage path already exists: {path}")
        try:
            path.mkdir(parents=True)
        except OSError as exc:
            raise StorageError(f"Failed to create storage directory: {exc}") from exc
        try:
            (path / REPO_DIR).mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StorageError(f"Failed to create repo directory: {exc}") from exc
        config = Config()
        config.persist(path)
        _validate(path)
        return cls(path=path, config=config)

    @classmethod
    def auto(cls) -> Storage:
        """Open the default storage, creating it under ~/.config/pmx if needed."""
        fallback = home_dir() / ".config" / "pmx"
        xdg = os.environ.get("XDG_CONFIG_HOME")
        path = Path(xdg) if xdg is not None else fallback
        try:
            return cls.open(path)
        except StorageError as exc:
            print(f"Failed to load storage from {str(fallback)!r}: {exc}", file=sys.stderr)
            return cls.initialize(fallback)

    def list_repos(self) -> list[str]:
        """Names of all profiles, relative to the repo, without the .md suffix."""
        repo = self.repo
        try:
            files = list(_walk_files(repo))
        except StorageError as exc:
            raise StorageError(f"Failed to list repositories: {exc}") from exc
        names = []
        for file in files:
            if not file.is_file() or file.suffix != PROFILE_SUFFIX:
                continue
            try:
                relative = str(file.relative_to(repo))
            except ValueError:
                relative = str(file)
            names.append(_strip_suffixes(relative))
        return names

    def _profile_path(self, name: str) -> Path:
        return self.repo / f"{name}{PROFILE_SUFFIX}"

    def get_repo_path(self, name: str) -> Path:
        """Path of an existing profile; raises StorageError if it is missing."""
        profile_path = self._profile_path(name)
        if not profile_path.exists():
            raise StorageError(f"Profile not found: {name}")
        return profile_path

    def profile_exists(self, name: str) -> bool:
        return self._profile_path(name).exists()

    def create_profile(self, name: str, content: str) -> None:
        """Write a profile, creating intermediate directories."""
        profile_path = self._profile_path(name)
        try:
            profile_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StorageError(f"Failed to create profile directory: {exc}") from exc
        try:
            profile_path.write_text(content, encoding="utf-8")
        except OSError as exc:
            raise StorageError(f"Failed to create profile '{name}': {exc}") from exc

    def delete_profile(self, name: str) -> None:
        profile_path = self.get_repo_path(name)
        try:
            profile_path.unlink()
        except OSError as exc:
            raise StorageError(f"Failed to delete profile '{name}': {exc}") from exc

    def get_profile_content(self, name: str) -> str:
        profile_path = self.get_repo_path(name)
        try:
            return profile_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise StorageError(f"Failed to read profile '{name}': {exc}") from exc