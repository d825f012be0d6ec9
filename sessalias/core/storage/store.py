"""Store that owns loading and saving the alias database file."""

from __future__ import annotations

import json
import logging
import os
import stat
import tempfile
from pathlib import Path

from sessalias.core.exceptions import StorageError
from sessalias.core.models import AliasDatabase
from sessalias.core.storage.paths import get_default_aliases_path

logger = logging.getLogger(__name__)


class AliasStore:
    """Reads and atomically rewrites the whole alias database.

    Nothing is cached: every ``load`` reads the file again.
    """

    def __init__(self, path: Path | None = None) -> None:
        self._path = path if path is not None else get_default_aliases_path()

    @property
    def path(self) -> Path:
        """Location of the database file."""
        return self._path

    def exists(self) -> bool:
        return self._path.is_file()

    def load(self) -> AliasDatabase:
        """Read the database, falling back to an empty default on any failure.

        A missing, unreadable, malformed, or structurally invalid file yields
        ``AliasDatabase.default()``. The file on disk is left as it is until
        the next save replaces it.
        """
        try:
            text = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("No alias database at %s, using defaults", self._path)
            return AliasDatabase.default()
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Cannot read alias database %s: %s", self._path, exc)
            return AliasDatabase.default()

        try:
            return AliasDatabase.from_dict(json.loads(text))
        except (ValueError, RecursionError) as exc:
            logger.warning("Ignoring corrupt alias database %s: %s", self._path, exc)
            return AliasDatabase.default()

    def write(self, db: AliasDatabase) -> None:
        """Recompute metadata and atomically replace the database file.

        Writes to a temp file in the same directory, then renames it over the
        destination, so readers never see a partially written file.
        An existing file keeps its permission bits; a new one is created
        owner-only (0600), as mkstemp leaves it.

        Raises:
            StorageError: If the file cannot be serialized or written. The
                original file is left untouched.
        """
        db.refresh_metadata()

        tmp_path: str | None = None
        try:
            payload = json.dumps(db.to_dict(), indent=2, ensure_ascii=False) + "\n"
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                dir=self._path.parent, prefix=f".{self._path.name}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as tmp_file:
                tmp_file.write(payload)
            if self._path.exists():
                os.chmod(tmp_path, stat.S_IMODE(self._path.stat().st_mode))
            os.replace(tmp_path, self._path)
        except (OSError, TypeError, ValueError) as exc:
            if tmp_path is not None:
                try:
                    os.unlink(tmp_path)
                except OSError:
                    pass
            raise StorageError(f"Failed to write {self._path}: {exc}") from exc

        logger.debug("Saved %d aliases to %s", db.metadata.total_count, self._path)

    def save(self, db: AliasDatabase) -> bool:
        """Persist the database. Returns False instead of raising on failure."""
        try:
            self.write(db)
        except StorageError as exc:
            logger.error("%s", exc)
            return False
        return True
