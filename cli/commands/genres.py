"""
Genres command - list the ID3v1 genre table.
"""

from typing import Optional

import typer
from rich.console import Console

from cli.display.tables import display_genre_table
from id3v1kit.models.genre import Genre

console = Console()
app = typer.Typer()


@app.command()
def genres(
    search: Optional[str] = typer.Option(
        None, "--search", "-s", help="Only show genres whose name contains this text"
    ),
) -> None:
    """
    List the ID3v1 genre codes.

    Codes 0-79 are the original ID3v1 list, 80-191 the Winamp extensions.

    Examples:

        id3v1kit genres

        id3v1kit genres --search rock
    """
    items = list(Genre)
    if search:
        needle = search.casefold()
        items = [g for g in items if needle in g.label.casefold()]

    if not items:
        console.print(f"[yellow]No genres match '{search}'[/yellow]")
        raise typer.Exit(1)

    display_genre_table(items)
