"""
Storage layer: JSON persistence for the alias database.

Components:
    - AliasStore: Loads the database (self-healing on corruption) and saves it atomically
    - get_default_aliases_path: Resolves the per-user database location

File Format:
    {
      "version": "1.0",
      "aliases": {"<name>": {"sessionPath", "createdAt", "updatedAt", "title"}},
      "metadata": {"totalCount", "lastUpdated"}
    }

The database is stored at ~/.claude/session-aliases.json unless
SESSALIAS_DATA_DIR points elsewhere.
"""

from sessalias.core.storage.paths import ALIASES_FILE, get_data_dir, get_default_aliases_path
from sessalias.core.storage.store import AliasStore

__all__ = [
    "ALIASES_FILE",
    "AliasStore",
    "get_data_dir",
    "get_default_aliases_path",
]
