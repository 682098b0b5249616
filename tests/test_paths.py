import sys
from pathlib import Path

import pytest

from pmx.paths import home_dir


def test_home_dir_follows_home_variable(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    assert home_dir() == tmp_path


def test_home_dir_returns_path(monkeypatch, tmp_path):
    target = tmp_path / "someone"
    target.mkdir()
    monkeypatch.setenv("HOME", str(target))
    result = home_dir()
    assert isinstance(result, Path) and result.name == "someone"


def test_home_dir_rejected_on_windows(monkeypatch):
    monkeypatch.setattr(sys, "platform", "win32")
    with pytest.raises(RuntimeError, match="not supported on Windows"):
        home_dir()