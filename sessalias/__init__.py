"""
Sessalias: Short, memorable names for long session paths.

Sessalias keeps a small JSON registry that lets you:
- Give a session a short alias and an optional title
- Resolve an alias (or pass a raw path straight through)
- Search, rename, and prune aliases whose sessions are gone

Usage:
    from sessalias.core import AliasRegistry

    registry = AliasRegistry()
    registry.mutations.set_alias("auth-fix", "/home/me/.claude/sessions/2026-02-01-abc")
    path = registry.queries.resolve_session_alias("auth-fix")
"""

__version__ = "0.1.0"
