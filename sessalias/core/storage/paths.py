"""Locate the alias database file."""

from __future__ import annotations

import os
from pathlib import Path

DATA_DIR_ENV = "SESSALIAS_DATA_DIR"
ALIASES_FILE = "session-aliases.json"


def get_data_dir(home: Path | None = None) -> Path:
    """Return the data dir. Honors SESSALIAS_DATA_DIR, defaults to <home>/.claude/."""
    env = os.environ.get(DATA_DIR_ENV)
    if env:
        return Path(env)
    return (home if home is not None else Path.home()) / ".claude"


def get_default_aliases_path(home: Path | None = None) -> Path:
    """Get the default alias database path for a user."""
    return get_data_dir(home) / ALIASES_FILE
