"""Utility Module.

This module contains a variety of small helper functions used across the project.
"""
import os
import sys
from pathlib import Path

APP_DIR_NAME = 'release-catalog'


def _env_or(name: str, default: Path) -> Path:
    # An empty variable counts as unset.
    return Path(os.getenv(name) or default)


def get_app_dir() -> Path:
    """Return the per-user application state directory (not created).

    On Windows this lives under `LOCALAPPDATA`, elsewhere under `XDG_STATE_HOME`
    (falling back to `~/.local/state` when the variable is missing or empty).
    """
    if sys.platform == 'win32':
        base = _env_or('LOCALAPPDATA', Path.home() / 'AppData' / 'Local')
    else:
        base = _env_or('XDG_STATE_HOME', Path.home() / '.local' / 'state')
    return base / APP_DIR_NAME


def get_env_path(name: str, *, default: Path) -> Path:
    """Return the path stored in environment variable `name`, or `default` when unset or empty."""
    value = os.getenv(name)
    if not value:
        return default
    return Path(value).expanduser()
