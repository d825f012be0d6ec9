"""Write-side operations: set, delete, rename, and retitle aliases."""

from __future__ import annotations

import logging

from sessalias.core.models import (
    AliasEntry,
    DeleteAliasResult,
    RenameAliasResult,
    SetAliasResult,
    TitleUpdateResult,
)
from sessalias.core.storage import AliasStore
from sessalias.core.validation import validate_alias_name, validate_session_path

logger = logging.getLogger(__name__)

_SAVE_FAILED = "Failed to save alias database"


class AliasMutations:
    """Mutating operations. Each one loads, changes, and saves the whole database."""

    def __init__(self, store: AliasStore) -> None:
        self._store = store

    def set_alias(
        self, name: str, session_path: str, title: str | None = None
    ) -> SetAliasResult:
        """Create an alias, or point an existing one at a new session.

        Updating keeps the original created_at. A title of None leaves the
        existing title alone.
        """
        error = validate_alias_name(name) or validate_session_path(session_path)
        if error:
            return SetAliasResult(success=False, error=error)

        db = self._store.load()
        entry = db.aliases.get(name)
        is_new = entry is None

        if entry is None:
            db.unparsed.pop(name, None)
            db.aliases[name] = AliasEntry.new(session_path, title)
        else:
            entry.session_path = session_path
            if title is not None:
                entry.set_title(title)
            entry.touch()

        if not self._store.save(db):
            return SetAliasResult(success=False, error=_SAVE_FAILED)

        logger.debug("%s alias %s -> %s", "Created" if is_new else "Updated", name, session_path)
        return SetAliasResult(success=True, alias=name, is_new=is_new)

    def delete_alias(self, name: str) -> DeleteAliasResult:
        """Delete an alias."""
        db = self._store.load()
        if name not in db.stored_names():
            return DeleteAliasResult(success=False, error=f"Alias '{name}' not found")

        db.aliases.pop(name, None)
        db.unparsed.pop(name, None)
        if not self._store.save(db):
            return DeleteAliasResult(success=False, error=_SAVE_FAILED)

        logger.debug("Deleted alias %s", name)
        return DeleteAliasResult(success=True, alias=name)

    def rename_alias(self, old_name: str, new_name: str) -> RenameAliasResult:
        """Move an entry to a new name, keeping its target, title, and created_at."""
        db = self._store.load()
        entry = db.aliases.get(old_name)
        if entry is None:
            return RenameAliasResult(success=False, error=f"Alias '{old_name}' not found")

        error = validate_alias_name(new_name)
        if error:
            return RenameAliasResult(success=False, error=error)

        if new_name != old_name and new_name in db.stored_names():
            return RenameAliasResult(success=False, error=f"Alias '{new_name}' already exists")

        del db.aliases[old_name]
        entry.touch()
        db.aliases[new_name] = entry

        if not self._store.save(db):
            return RenameAliasResult(success=False, error=_SAVE_FAILED)

        logger.debug("Renamed alias %s -> %s", old_name, new_name)
        return RenameAliasResult(success=True, old_alias=old_name, new_alias=new_name)

    def update_alias_title(self, name: str, title: object) -> TitleUpdateResult:
        """Set or clear an alias title. An empty string clears it like None does."""
        db = self._store.load()
        entry = db.aliases.get(name)
        if entry is None:
            return TitleUpdateResult(success=False, error=f"Alias '{name}' not found")

        if title is not None and not isinstance(title, str):
            return TitleUpdateResult(success=False, error="Title must be a string or None")

        entry.set_title(title or None)
        entry.touch()

        if not self._store.save(db):
            return TitleUpdateResult(success=False, error=_SAVE_FAILED)

        return TitleUpdateResult(success=True, title=entry.title)
