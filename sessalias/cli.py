"""CLI entry point for Sessalias."""

import json
import logging
from pathlib import Path
from typing import Annotated, Any, NoReturn

import typer
from rich.console import Console
from rich.table import Table

from sessalias.core import AliasListing, AliasRegistry

app = typer.Typer(
    name="sessalias",
    help="Short aliases for session paths.",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)

_MAX_PATH_DISPLAY = 60

FileOption = Annotated[
    Path | None,
    typer.Option("--file", "-f", envvar="SESSALIAS_FILE", help="Alias database file"),
]
JsonOption = Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")]


def get_registry(file: Path | None) -> AliasRegistry:
    """Get a registry for the given file, or the default location."""
    return AliasRegistry(file)


def fail(message: str | None) -> NoReturn:
    """Print an error and exit with status 1."""
    err_console.print(f"[red]Error:[/red] {message}")
    raise typer.Exit(1)


def shorten(text: str) -> str:
    if len(text) <= _MAX_PATH_DISPLAY:
        return text
    return "..." + text[-(_MAX_PATH_DISPLAY - 3) :]


def emit_json(payload: Any) -> None:
    print(json.dumps(payload))


def print_listings(rows: list[AliasListing]) -> None:
    table = Table(show_edge=False, header_style="bold")
    table.add_column("Alias", style="cyan")
    table.add_column("Session")
    table.add_column("Title")
    table.add_column("Updated", style="dim")
    for row in rows:
        table.add_row(
            row.name,
            shorten(str(row.session_path)),
            row.title or "",
            (row.updated_at or row.created_at or "")[:16].replace("T", " "),
        )
    console.print(table)


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
) -> None:
    """Manage session aliases."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@app.command("set")
def set_command(
    name: Annotated[str, typer.Argument(help="Alias name")],
    session_path: Annotated[str, typer.Argument(help="Session path the alias points to")],
    title: Annotated[str | None, typer.Option("--title", "-t", help="Display title")] = None,
    file: FileOption = None,
    output_json: JsonOption = False,
) -> None:
    """Create an alias or repoint an existing one."""
    result = get_registry(file).mutations.set_alias(name, session_path, title)

    if output_json:
        emit_json(result.to_dict())
        if not result.success:
            raise typer.Exit(1)
        return
    if not result.success:
        fail(result.error)

    verb = "Created" if result.is_new else "Updated"
    console.print(f"[green]{verb}[/green] [cyan]{name}[/cyan] -> {session_path}")


@app.command()
def show(
    name: Annotated[str, typer.Argument(help="Alias name")],
    file: FileOption = None,
    output_json: JsonOption = False,
) -> None:
    """Show what an alias points to."""
    resolved = get_registry(file).queries.resolve_alias(name)

    if output_json:
        emit_json(resolved.to_dict() if resolved else None)
        if resolved is None:
            raise typer.Exit(1)
        return
    if resolved is None:
        fail(f"Alias '{name}' not found")

    console.print(f"[cyan]{resolved.alias}[/cyan]")
    console.print(f"  Session: {resolved.session_path}")
    if resolved.title:
        console.print(f"  Title:   {resolved.title}")


@app.command()
def resolve(
    value: Annotated[str, typer.Argument(help="Alias name or session path")],
    file: FileOption = None,
) -> None:
    """Print the session path for an alias, or the input if it is not an alias."""
    print(get_registry(file).queries.resolve_session_alias(value))


@app.command("ls")
def list_command(
    search: Annotated[
        str | None, typer.Option("--search", "-s", help="Filter by name or title")
    ] = None,
    limit: Annotated[int, typer.Option("--limit", "-n", help="Maximum results (0 = all)")] = 0,
    file: FileOption = None,
    output_json: JsonOption = False,
) -> None:
    """List aliases, most recently updated first."""
    rows = get_registry(file).queries.list_aliases(search=search, limit=limit)

    if output_json:
        emit_json([row.to_dict() for row in rows])
        return
    if not rows:
        if search:
            console.print(f"No aliases matching '[cyan]{search}[/cyan]'")
        else:
            console.print("No aliases yet.")
        return
    print_listings(rows)


@app.command("rm")
def remove_command(
    name: Annotated[str, typer.Argument(help="Alias name")],
    file: FileOption = None,
    output_json: JsonOption = False,
) -> None:
    """Delete an alias."""
    result = get_registry(file).mutations.delete_alias(name)

    if output_json:
        emit_json(result.to_dict())
        if not result.success:
            raise typer.Exit(1)
        return
    if not result.success:
        fail(result.error)
    console.print(f"[green]Deleted[/green] [cyan]{name}[/cyan]")


@app.command("mv")
def rename_command(
    old_name: Annotated[str, typer.Argument(help="Current alias name")],
    new_name: Annotated[str, typer.Argument(help="New alias name")],
    file: FileOption = None,
    output_json: JsonOption = False,
) -> None:
    """Rename an alias."""
    result = get_registry(file).mutations.rename_alias(old_name, new_name)

    if output_json:
        emit_json(result.to_dict())
        if not result.success:
            raise typer.Exit(1)
        return
    if not result.success:
        fail(result.error)
    console.print(f"[green]Renamed[/green] [cyan]{old_name}[/cyan] -> [cyan]{new_name}[/cyan]")


@app.command()
def title(
    name: Annotated[str, typer.Argument(help="Alias name")],
    new_title: Annotated[
        str | None, typer.Argument(metavar="TITLE", help="New title (omit to clear)")
    ] = None,
    file: FileOption = None,
    output_json: JsonOption = False,
) -> None:
    """Set or clear an alias title."""
    result = get_registry(file).mutations.update_alias_title(name, new_title)

    if output_json:
        emit_json(result.to_dict())
        if not result.success:
            raise typer.Exit(1)
        return
    if not result.success:
        fail(result.error)
    if result.title is None:
        console.print(f"Cleared title of [cyan]{name}[/cyan]")
    else:
        console.print(f"Title of [cyan]{name}[/cyan] set to '{result.title}'")


@app.command("for-session")
def for_session(
    session_path: Annotated[str, typer.Argument(help="Session path to look up")],
    file: FileOption = None,
    output_json: JsonOption = False,
) -> None:
    """Show every alias pointing at a session."""
    rows = get_registry(file).queries.get_aliases_for_session(session_path)

    if output_json:
        emit_json([row.to_dict() for row in rows])
        return
    if not rows:
        console.print(f"No aliases for [dim]{session_path}[/dim]")
        return
    print_listings(rows)


@app.command()
def cleanup(
    root: Annotated[
        Path | None,
        typer.Option("--root", "-r", help="Directory relative session paths live under"),
    ] = None,
    file: FileOption = None,
    output_json: JsonOption = False,
) -> None:
    """Remove aliases whose session path no longer exists on disk."""

    def session_exists(session_path: str) -> bool:
        if not isinstance(session_path, str) or not session_path.strip():
            return False
        path = Path(session_path).expanduser()
        if root is not None and not path.is_absolute():
            path = root / path
        return path.exists()

    result = get_registry(file).queries.cleanup_aliases(session_exists)

    if output_json:
        emit_json(result.to_dict())
        if result.error:
            raise typer.Exit(1)
        return
    if result.error:
        fail(result.error)

    console.print(f"Checked {result.total_checked} aliases")
    if result.removed:
        console.print(f"[yellow]Removed {result.removed}:[/yellow] {', '.join(result.removed_aliases)}")
    else:
        console.print("[green]Nothing to remove[/green]")


@app.command()
def stats(
    file: FileOption = None,
    output_json: JsonOption = False,
) -> None:
    """Show alias database statistics."""
    result = get_registry(file).get_stats()

    if output_json:
        emit_json(result)
        return
    console.print(f"Database: {result['path']}")
    console.print(f"Aliases: {result['aliases']}")
    console.print(f"Sessions: {result['sessions']}")
    if result["last_updated"]:
        console.print(f"Last updated: {result['last_updated']}")


if __name__ == "__main__":
    app()
