"""Locating the user's home directory."""

from __future__ import annotations

import os
import sys
from pathlib import Path


def home_dir() -> Path:
    """Return the current user's home directory.

    Raises RuntimeError on Windows, where the home directory is not looked
    up automatically, and when the directory cannot be determined.
    """
    if sys.platform == "win32":
        raise RuntimeError(
            "Home directory retrieval is not supported on Windows. "
            "Please set the environment variable manually."
        )
    expanded = os.path.expanduser("~")
    if not expanded or expanded == "~":
        raise RuntimeError("Failed to get home directory")
    return Path(expanded)