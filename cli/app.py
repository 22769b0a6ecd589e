"""
id3v1kit - Read and write ID3v1 / ID3v1.1 tags.

A CLI tool for inspecting and editing the 128 byte metadata trailer at the
end of media files.
"""

import typer
from rich.console import Console

from cli.commands.dump import dump
from cli.commands.genres import genres
from cli.commands.info import info
from cli.commands.strip import strip
from cli.commands.validate import validate
from cli.commands.write import write
from cli.log_setup import setup_logging
from id3v1kit import __version__

console = Console()

# Main app
app = typer.Typer(
    name="id3v1kit",
    help="Read and write ID3v1 / ID3v1.1 tags.",
    add_completion=False,
    rich_markup_mode="rich",
)

# Add commands directly
app.command(name="info")(info)
app.command(name="dump")(dump)
app.command(name="validate")(validate)
app.command(name="write")(write)
app.command(name="strip")(strip)
app.command(name="genres")(genres)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]id3v1kit[/bold] version {__version__}")
    console.print("[dim]ID3v1 / ID3v1.1 tag reader and writer[/dim]")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version_flag: bool = typer.Option(False, "--version", "-V", help="Show version"),
    verbose: bool = typer.Option(False, "--verbose", help="Log debug details to stderr"),
) -> None:
    """
    id3v1kit - Inspect and edit ID3v1 tags.

    Handles both tag variants:

    - [cyan]ID3v1[/cyan]   title, artist, album, year, comment, genre
    - [cyan]ID3v1.1[/cyan] the same plus a track number

    [bold]Inspection Commands:[/bold]

        id3v1kit info song.mp3        # Decoded tag fields
        id3v1kit dump song.mp3        # Annotated trailer hex dump
        id3v1kit validate song.mp3    # Structural checks

    [bold]Editing Commands:[/bold]

        id3v1kit write song.mp3 --title "Song" --track 3
        id3v1kit strip song.mp3       # Remove the tag

    [bold]Reference:[/bold]

        id3v1kit genres --search rock

    Text fields default to Latin-1; use --encoding or ID3V1KIT_ENCODING
    to change it.
    """
    setup_logging(verbose)

    if version_flag:
        version()
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


def run() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    run()
