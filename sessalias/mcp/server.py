"""MCP server implementation for Sessalias."""

from __future__ import annotations

import json
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from sessalias.core import AliasRegistry

server = Server("sessalias")


def _get_registry() -> AliasRegistry:
    """Get the registry for the default database location."""
    return AliasRegistry()


@server.list_tools()  # type: ignore[no-untyped-call, untyped-decorator]
async def list_tools() -> list[Tool]:
    """List available tools."""
    return [
        Tool(
            name="alias_resolve",
            description=(
                "Resolve a session alias to its session path. "
                "Input that is not a known alias is returned unchanged as the path."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "name": {
                        "type": "string",
                        "description": "Alias name or session path",
                    },
                },
                "required": ["name"],
            },
        ),
        Tool(
            name="alias_list",
            description=(
                "List session aliases, most recently updated first. "
                "Supports case-insensitive search over names and titles."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "search": {
                        "type": "string",
                        "description": "Substring to match against alias name or title (optional)",
                    },
                    "limit": {
                        "type": "integer",
                        "description": "Maximum number of aliases to return (optional)",
                    },
                },
            },
        ),
        Tool(
            name="alias_set",
            description="Create an alias for a session path, or repoint an existing alias.",
            inputSchema={
                "type": "object",
                "properties": {
                    "name": {
                        "type": "string",
                        "description": "Alias name (letters, digits, dashes, underscores)",
                    },
                    "session_path": {
                        "type": "string",
                        "description": "Session path the alias points to",
                    },
                    "title": {
                        "type": "string",
                        "description": "Human-readable title (optional)",
                    },
                },
                "required": ["name", "session_path"],
            },
        ),
        Tool(
            name="alias_delete",
            description="Delete a session alias.",
            inputSchema={
                "type": "object",
                "properties": {
                    "name": {
                        "type": "string",
                        "description": "Alias name to delete",
                    },
                },
                "required": ["name"],
            },
        ),
        Tool(
            name="alias_for_session",
            description="Find every alias that points at a given session path.",
            inputSchema={
                "type": "object",
                "properties": {
                    "session_path": {
                        "type": "string",
                        "description": "Exact session path",
                    },
                },
                "required": ["session_path"],
            },
        ),
    ]


@server.call_tool()  # type: ignore[untyped-decorator]
async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
    """Handle tool calls."""
    try:
        result = handle_tool(_get_registry(), name, arguments)
        return [TextContent(type="text", text=json.dumps(result, indent=2))]
    except KeyError as e:
        return [TextContent(type="text", text=json.dumps({"error": f"Missing argument: {e}"}))]


def handle_tool(registry: AliasRegistry, name: str, arguments: dict[str, Any]) -> Any:
    """Dispatch a tool call against a registry and return a JSON-serializable result."""
    if name == "alias_resolve":
        resolved = registry.queries.resolve_alias(arguments["name"])
        if resolved is None:
            return {"alias": None, "sessionPath": arguments["name"], "title": None}
        return resolved.to_dict()
    if name == "alias_list":
        rows = registry.queries.list_aliases(
            search=arguments.get("search"),
            limit=arguments.get("limit"),
        )
        return {"results": [row.to_dict() for row in rows]}
    if name == "alias_set":
        return registry.mutations.set_alias(
            arguments["name"],
            arguments["session_path"],
            arguments.get("title"),
        ).to_dict()
    if name == "alias_delete":
        return registry.mutations.delete_alias(arguments["name"]).to_dict()
    if name == "alias_for_session":
        rows = registry.queries.get_aliases_for_session(arguments["session_path"])
        return {"results": [row.to_dict() for row in rows]}
    return {"error": f"Unknown tool: {name}"}


async def serve() -> None:
    """Run the MCP server."""
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())
