"""
MCP server exposing the session alias registry over stdio.

The server reads and writes the same database as the ``sessalias`` CLI:
~/.claude/session-aliases.json, or session-aliases.json inside
$SESSALIAS_DATA_DIR when that variable is set. Each tool call loads the
file afresh, so edits made by the CLI are visible immediately.

Tool results are the JSON form of the registry's result objects, e.g.
``alias_set`` returns ``{"success": true, "isNew": true, "alias": "api"}``
and failures carry an ``error`` message instead of raising.

Run with ``sessalias-mcp``, or register it in an MCP client config as
``{"command": "sessalias-mcp"}`` with ``env`` holding SESSALIAS_DATA_DIR
to point it at another profile.
"""

import asyncio

from sessalias.mcp.server import serve as _serve


def serve() -> None:
    """Run the stdio server until the client disconnects."""
    asyncio.run(_serve())


__all__ = ["serve"]
