"""Registry that coordinates the alias store, queries, and mutations."""

from __future__ import annotations

from pathlib import Path

from sessalias.core.models import AliasDatabase
from sessalias.core.mutations import AliasMutations
from sessalias.core.queries import AliasQueries
from sessalias.core.storage import AliasStore


class AliasRegistry:
    """Facade over a single alias database file.

    Usage:
        registry = AliasRegistry(tmp_path / "aliases.json")
        registry.mutations.set_alias("api", "/sessions/2026-01-01-api")
        registry.queries.resolve_session_alias("api")
    """

    def __init__(self, path: Path | None = None) -> None:
        self.store = AliasStore(path)
        self.queries = AliasQueries(self.store)
        self.mutations = AliasMutations(self.store)

    @property
    def path(self) -> Path:
        return self.store.path

    def load(self) -> AliasDatabase:
        """Read the raw database."""
        return self.store.load()

    def save(self, db: AliasDatabase) -> bool:
        """Persist a raw database edited by the caller."""
        return self.store.save(db)

    def get_stats(self) -> dict[str, int | str | None]:
        """Get database statistics."""
        db = self.store.load()
        sessions = {
            entry.session_path
            for entry in db.aliases.values()
            if isinstance(entry.session_path, str)
        }
        return {
            "path": str(self.store.path),
            "aliases": len(db.aliases),
            "sessions": len(sessions),
            "last_updated": db.metadata.last_updated if self.store.exists() else None,
        }
