"""
Core module: data models, validation, storage, and alias operations.

Models (models.py):
    - AliasDatabase: The persisted root object (version, aliases, metadata)
    - AliasEntry: Target session path, timestamps, and optional title
    - Result descriptors returned by every operation

Validation (validation.py):
    - validate_alias_name / validate_session_path: Return an error message or None

Storage (storage/):
    - AliasStore: Self-healing load and atomic save of the JSON database

Operations:
    - AliasQueries: resolve, list/search/sort, reverse lookup, cleanup
    - AliasMutations: set, delete, rename, retitle
    - AliasRegistry: Facade wiring the three together
"""

from sessalias.core.exceptions import SessaliasError, StorageError
from sessalias.core.models import (
    AliasDatabase,
    AliasEntry,
    AliasListing,
    AliasMetadata,
    CleanupResult,
    DeleteAliasResult,
    RenameAliasResult,
    ResolvedAlias,
    SetAliasResult,
    TitleUpdateResult,
)
from sessalias.core.mutations import AliasMutations
from sessalias.core.queries import AliasQueries
from sessalias.core.registry import AliasRegistry
from sessalias.core.storage import AliasStore, get_default_aliases_path
from sessalias.core.validation import (
    MAX_ALIAS_LENGTH,
    RESERVED_ALIASES,
    validate_alias_name,
    validate_session_path,
)

__all__ = [
    # Models
    "AliasDatabase",
    "AliasEntry",
    "AliasMetadata",
    "AliasListing",
    "ResolvedAlias",
    "SetAliasResult",
    "DeleteAliasResult",
    "RenameAliasResult",
    "TitleUpdateResult",
    "CleanupResult",
    # Exceptions
    "SessaliasError",
    "StorageError",
    # Validation
    "MAX_ALIAS_LENGTH",
    "RESERVED_ALIASES",
    "validate_alias_name",
    "validate_session_path",
    # Storage and operations
    "AliasStore",
    "AliasQueries",
    "AliasMutations",
    "AliasRegistry",
    "get_default_aliases_path",
]
