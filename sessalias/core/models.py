"""Data models for Sessalias."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

logger = logging.getLogger(__name__)

FORMAT_VERSION = "1.0"

_KNOWN_ENTRY_KEYS = ("sessionPath", "createdAt", "updatedAt", "title")


def now_iso() -> str:
    """Current UTC time as ISO-8601 with milliseconds and a Z suffix."""
    stamp = datetime.now(timezone.utc).isoformat(timespec="milliseconds")
    return stamp.replace("+00:00", "Z")


def parse_timestamp(value: object) -> datetime | None:
    """Parse an ISO-8601 timestamp, or None if it is missing or malformed.

    Naive timestamps are read as UTC so they compare with aware ones.
    """
    if not isinstance(value, str) or not value:
        return None
    text = value[:-1] + "+00:00" if value.endswith(("Z", "z")) else value
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


@dataclass
class AliasEntry:
    """A single alias target with its timestamps and optional title."""

    session_path: str
    created_at: str | None = None
    updated_at: str | None = None
    title: str | None = None
    # Keys found on disk that this version does not know about
    extra: dict[str, Any] = field(default_factory=dict)
    # False when the file had no "title" key and nothing has set one since
    title_stored: bool = field(default=True, repr=False, compare=False)

    @classmethod
    def new(cls, session_path: str, title: str | None = None) -> AliasEntry:
        """Create an entry stamped with the current time."""
        stamp = now_iso()
        return cls(session_path=session_path, created_at=stamp, updated_at=stamp, title=title)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AliasEntry:
        """Create an AliasEntry from its JSON object."""
        return cls(
            session_path=data.get("sessionPath"),  # type: ignore[arg-type]
            created_at=data.get("createdAt"),
            updated_at=data.get("updatedAt"),
            title=data.get("title"),
            title_stored="title" in data,
            extra={k: v for k, v in data.items() if k not in _KNOWN_ENTRY_KEYS},
        )

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"sessionPath": self.session_path}
        if self.created_at is not None:
            result["createdAt"] = self.created_at
        if self.updated_at is not None:
            result["updatedAt"] = self.updated_at
        if self.title is not None or self.title_stored:
            result["title"] = self.title
        result.update(self.extra)
        return result

    def set_title(self, title: str | None) -> None:
        self.title = title
        self.title_stored = True

    def touch(self) -> None:
        """Refresh updated_at after a mutation."""
        self.updated_at = now_iso()

    @property
    def recency(self) -> datetime | None:
        """Effective timestamp for ordering: updated_at, then created_at."""
        return parse_timestamp(self.updated_at) or parse_timestamp(self.created_at)


@dataclass
class AliasMetadata:
    """Derived information recomputed on every save."""

    total_count: int = 0
    last_updated: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: object) -> AliasMetadata:
        if not isinstance(data, dict):
            return cls()
        total = data.get("totalCount")
        return cls(
            total_count=total if isinstance(total, int) else 0,
            last_updated=data.get("lastUpdated"),
            extra={k: v for k, v in data.items() if k not in ("totalCount", "lastUpdated")},
        )

    def to_dict(self) -> dict[str, Any]:
        return {"totalCount": self.total_count, "lastUpdated": self.last_updated, **self.extra}


@dataclass
class AliasDatabase:
    """The whole alias database as stored on disk."""

    version: Any = FORMAT_VERSION
    aliases: dict[str, AliasEntry] = field(default_factory=dict)
    metadata: AliasMetadata = field(default_factory=AliasMetadata)
    # Alias values that are not objects, written back as found
    unparsed: dict[str, Any] = field(default_factory=dict)
    # Top-level keys other than version, aliases, and metadata
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def default(cls) -> AliasDatabase:
        """An empty database with fresh metadata."""
        return cls(metadata=AliasMetadata(total_count=0, last_updated=now_iso()))

    @classmethod
    def from_dict(cls, data: object) -> AliasDatabase:
        """Create an AliasDatabase from the decoded JSON document.

        Raises:
            ValueError: If the document is not an object with an ``aliases`` object.
        """
        if not isinstance(data, dict):
            raise ValueError("top-level value is not an object")
        raw_aliases = data.get("aliases")
        if not isinstance(raw_aliases, dict):
            raise ValueError("missing 'aliases' object")

        aliases: dict[str, AliasEntry] = {}
        unparsed: dict[str, Any] = {}
        for name, raw_entry in raw_aliases.items():
            if isinstance(raw_entry, dict):
                aliases[name] = AliasEntry.from_dict(raw_entry)
            else:
                logger.warning("Ignoring alias %r: entry is not an object", name)
                unparsed[name] = raw_entry

        return cls(
            version=data.get("version", FORMAT_VERSION),
            aliases=aliases,
            metadata=AliasMetadata.from_dict(data.get("metadata")),
            unparsed=unparsed,
            extra={k: v for k, v in data.items() if k not in ("version", "aliases", "metadata")},
        )

    def stored_names(self) -> list[str]:
        """Every alias key that will be written, readable or not."""
        return [*self.aliases, *(name for name in self.unparsed if name not in self.aliases)]

    def to_dict(self) -> dict[str, Any]:
        aliases: dict[str, Any] = {
            name: value for name, value in self.unparsed.items() if name not in self.aliases
        }
        aliases.update((name, entry.to_dict()) for name, entry in self.aliases.items())
        return {
            "version": self.version,
            "aliases": aliases,
            "metadata": self.metadata.to_dict(),
            **self.extra,
        }

    def refresh_metadata(self) -> None:
        """Recompute the derived metadata."""
        self.metadata.total_count = len(self.stored_names())
        self.metadata.last_updated = now_iso()


@dataclass
class ResolvedAlias:
    """An alias resolved to its target."""

    alias: str
    session_path: str
    title: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"alias": self.alias, "sessionPath": self.session_path, "title": self.title}


@dataclass
class AliasListing:
    """A materialized alias row as returned by list and lookup queries."""

    name: str
    session_path: str
    title: str | None
    created_at: str | None
    updated_at: str | None

    @classmethod
    def from_entry(cls, name: str, entry: AliasEntry) -> AliasListing:
        return cls(
            name=name,
            session_path=entry.session_path,
            title=entry.title,
            created_at=entry.created_at,
            updated_at=entry.updated_at,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "sessionPath": self.session_path,
            "title": self.title,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }


@dataclass
class SetAliasResult:
    """Outcome of creating or updating an alias."""

    success: bool
    alias: str | None = None
    is_new: bool | None = None
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        if not self.success:
            return {"success": False, "error": self.error}
        return {"success": True, "isNew": self.is_new, "alias": self.alias}


@dataclass
class DeleteAliasResult:
    """Outcome of deleting an alias."""

    success: bool
    alias: str | None = None
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        if not self.success:
            return {"success": False, "error": self.error}
        return {"success": True, "alias": self.alias}


@dataclass
class RenameAliasResult:
    """Outcome of renaming an alias."""

    success: bool
    old_alias: str | None = None
    new_alias: str | None = None
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        if not self.success:
            return {"success": False, "error": self.error}
        return {"success": True, "oldAlias": self.old_alias, "newAlias": self.new_alias}


@dataclass
class TitleUpdateResult:
    """Outcome of changing an alias title."""

    success: bool
    title: str | None = None
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        if not self.success:
            return {"success": False, "error": self.error}
        return {"success": True, "title": self.title}


@dataclass
class CleanupResult:
    """Outcome of pruning aliases whose session no longer exists."""

    total_checked: int = 0
    removed: int = 0
    removed_aliases: list[str] = field(default_factory=list)
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"totalChecked": self.total_checked, "removed": self.removed}
        if self.error is not None:
            result["error"] = self.error
        else:
            result["removedAliases"] = list(self.removed_aliases)
        return result
