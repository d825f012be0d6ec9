"""Read-side operations: resolve, list, reverse lookup, and reconciliation."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timezone

from sessalias.core.models import AliasListing, CleanupResult, ResolvedAlias
from sessalias.core.storage import AliasStore
from sessalias.core.validation import has_valid_alias_chars

logger = logging.getLogger(__name__)

SessionExists = Callable[[str], bool]

_OLDEST = datetime.min.replace(tzinfo=timezone.utc)


class AliasQueries:
    """Query operations over the alias database."""

    def __init__(self, store: AliasStore) -> None:
        self._store = store

    def resolve_alias(self, name: str | None) -> ResolvedAlias | None:
        """Look up an alias by exact name.

        Returns None for empty input, names with characters outside
        ``[A-Za-z0-9_-]`` (so path-like input never reaches the lookup),
        and unknown names.
        """
        if not isinstance(name, str) or not name:
            return None
        if not has_valid_alias_chars(name):
            return None

        entry = self._store.load().aliases.get(name)
        if entry is None:
            return None
        return ResolvedAlias(alias=name, session_path=entry.session_path, title=entry.title)

    def resolve_session_alias(self, value: str) -> str:
        """Return the session path for an alias, or the input unchanged if it is not one."""
        resolved = self.resolve_alias(value)
        if resolved is None:
            return value
        return resolved.session_path

    def list_aliases(self, search: str | None = None, limit: int | None = None) -> list[AliasListing]:
        """List aliases, most recently updated first.

        Args:
            search: Case-insensitive substring matched against name and title
            limit: Maximum number of results; None, zero, or negative means no limit

        Returns:
            AliasListing rows sorted by updated_at (falling back to created_at),
            entries without a usable timestamp last
        """
        db = self._store.load()
        rows = [AliasListing.from_entry(name, entry) for name, entry in db.aliases.items()]
        recency = {name: entry.recency or _OLDEST for name, entry in db.aliases.items()}

        if search:
            needle = search.lower()
            rows = [
                row
                for row in rows
                if needle in row.name.lower()
                or (isinstance(row.title, str) and needle in row.title.lower())
            ]

        # sorted() is stable, so ties keep their stored order
        rows = sorted(rows, key=lambda row: recency[row.name], reverse=True)

        if isinstance(limit, int) and not isinstance(limit, bool) and limit > 0:
            rows = rows[:limit]
        return rows

    def get_aliases_for_session(self, session_path: str) -> list[AliasListing]:
        """Get every alias pointing at exactly this session path."""
        db = self._store.load()
        return [
            AliasListing.from_entry(name, entry)
            for name, entry in db.aliases.items()
            if entry.session_path == session_path
        ]

    def cleanup_aliases(self, session_exists: SessionExists) -> CleanupResult:
        """Remove aliases whose session path is rejected by ``session_exists``.

        The predicate comes from the caller, which knows which sessions are
        still real. Exceptions it raises propagate and nothing is saved.
        """
        if not callable(session_exists):
            return CleanupResult(error="session_exists must be a callable")

        db = self._store.load()
        removed: list[str] = []
        for name, entry in list(db.aliases.items()):
            if not session_exists(entry.session_path):
                del db.aliases[name]
                removed.append(name)

        total = len(removed) + len(db.aliases)
        if total and not self._store.save(db):
            return CleanupResult(
                total_checked=total,
                error="Failed to save alias database after cleanup",
            )

        if removed:
            logger.info("Removed %d stale aliases: %s", len(removed), ", ".join(removed))
        return CleanupResult(total_checked=total, removed=len(removed), removed_aliases=removed)
