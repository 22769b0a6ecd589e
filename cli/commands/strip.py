"""
Strip command - remove the ID3v1 trailer from a file.
"""

from pathlib import Path

import typer
from rich.console import Console

from id3v1kit.formats.file_io import strip_trailer

console = Console()
app = typer.Typer()


@app.command()
def strip(
    file: Path = typer.Argument(..., help="Media file to strip"),
) -> None:
    """
    Remove the 128 byte ID3v1 trailer from a file.

    Files without a trailer are left untouched.

    Examples:

        id3v1kit strip song.mp3
    """
    if not file.exists():
        console.print(f"[red]Error: File not found: {file}[/red]")
        raise typer.Exit(1)

    try:
        removed = strip_trailer(file)
    except OSError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    if removed:
        console.print(f"[green]Removed ID3v1 tag:[/green] {file}")
    else:
        console.print(f"[dim]No ID3v1 tag in {file}[/dim]")
