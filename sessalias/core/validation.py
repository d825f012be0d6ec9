"""Validation rules for alias names and session paths.

Every check returns an error message, or None when the value is acceptable.
Nothing here raises or touches the filesystem.
"""

from __future__ import annotations

import re

MAX_ALIAS_LENGTH = 128

RESERVED_ALIASES = frozenset({"list", "help", "remove", "delete", "create", "set"})

_ALIAS_PATTERN = re.compile(r"[A-Za-z0-9_-]+")


def has_valid_alias_chars(name: str) -> bool:
    """Check that a name only contains letters, digits, underscores, and dashes."""
    return _ALIAS_PATTERN.fullmatch(name) is not None


def validate_alias_name(name: object) -> str | None:
    """Check whether a name can be used as an alias."""
    if not isinstance(name, str) or not name.strip():
        return "Alias name cannot be empty"

    if not has_valid_alias_chars(name):
        return "Alias name must contain only letters, numbers, dashes, and underscores"

    if len(name) > MAX_ALIAS_LENGTH:
        return f"Alias name cannot exceed {MAX_ALIAS_LENGTH} characters"

    if name in RESERVED_ALIASES:
        return f"'{name}' is a reserved alias name"

    return None


def validate_session_path(session_path: object) -> str | None:
    """Check whether a value can be stored as an alias target."""
    if not isinstance(session_path, str):
        return "Session path must be a string"

    if not session_path.strip():
        return "Session path cannot be empty"

    return None
