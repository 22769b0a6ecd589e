"""
Write command - create or update the ID3v1 tag of a file.
"""

from dataclasses import replace
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from cli.display.tables import display_tag_info
from id3v1kit.codec import detect_version
from id3v1kit.formats.file_io import read_trailing_bytes, write_trailer
from id3v1kit.formats.id3v1 import ID3v1Writer
from id3v1kit.formats.id3v11 import ID3v11Reader, ID3v11Writer
from id3v1kit.formats.layout import DEFAULT_ENCODING
from id3v1kit.models.fields import ID3v11Fields
from id3v1kit.models.genre import find_genre
from id3v1kit.utils.validation import TagError

console = Console()
app = typer.Typer()


@app.command()
def write(
    file: Path = typer.Argument(..., help="Media file to tag"),
    title: Optional[str] = typer.Option(None, "--title", "-t", help="Title (30 bytes)"),
    artist: Optional[str] = typer.Option(None, "--artist", "-a", help="Artist (30 bytes)"),
    album: Optional[str] = typer.Option(None, "--album", "-A", help="Album (30 bytes)"),
    year: Optional[str] = typer.Option(None, "--year", "-y", help="Year (4 bytes)"),
    comment: Optional[str] = typer.Option(
        None, "--comment", "-c", help="Comment (30 bytes, 28 with a track number)"
    ),
    track: Optional[int] = typer.Option(None, "--track", "-n", help="Track number 1-255"),
    no_track: bool = typer.Option(False, "--no-track", help="Remove the track number"),
    genre: Optional[str] = typer.Option(
        None, "--genre", "-g", help="Genre name or code (see 'id3v1kit genres')"
    ),
    tag_format: str = typer.Option("1.1", "--format", "-f", help="Tag variant: 1 or 1.1"),
    encoding: str = typer.Option(
        DEFAULT_ENCODING,
        "--encoding",
        "-e",
        envvar="ID3V1KIT_ENCODING",
        help="Text encoding of the tag fields",
    ),
    clear: bool = typer.Option(False, "--clear", help="Ignore the existing tag's fields"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Show the tag without writing it"),
) -> None:
    """
    Write an ID3v1 / ID3v1.1 tag to the end of a file.

    Fields not given on the command line keep their current values.
    An existing trailer is replaced in place; otherwise one is appended.
    Text that does not fit its field is an error, never truncated.

    Examples:

        id3v1kit write song.mp3 --title "Song" --artist "Band" --track 3

        id3v1kit write song.mp3 --genre "Hip-Hop" --format 1

        id3v1kit write song.mp3 --clear --title "Fresh start"
    """
    if tag_format not in ("1", "1.1"):
        console.print(f"[red]Error: Unknown format: {tag_format}[/red]")
        console.print("Supported formats: 1, 1.1")
        raise typer.Exit(1)

    if track is not None and (no_track or tag_format == "1"):
        console.print("[red]Error: --track needs --format 1.1 and no --no-track[/red]")
        raise typer.Exit(1)

    base = ID3v11Fields()
    if file.exists() and not clear:
        try:
            data = read_trailing_bytes(file)
            if detect_version(data) is not None:
                base = ID3v11Reader.decode(data, encoding).fields
        except (OSError, TagError) as e:
            console.print(f"[red]Error: Cannot read the existing tag: {e}[/red]")
            console.print("Pick another --encoding, or use --clear to discard the old fields")
            raise typer.Exit(1)

    changes = {
        name: value
        for name, value in (
            ("title", title),
            ("artist", artist),
            ("album", album),
            ("year", year),
            ("comment", comment),
        )
        if value is not None
    }

    if genre is not None:
        found = find_genre(genre)
        if found is None:
            console.print(f"[red]Error: Unknown genre: {genre}[/red]")
            raise typer.Exit(1)
        changes["genre"] = found

    if no_track:
        changes["track_number"] = None
    elif track is not None:
        changes["track_number"] = track

    fields = replace(base, **changes)

    try:
        if tag_format == "1":
            tag = ID3v1Writer.encode(fields.to_v1(), encoding)
        else:
            tag = ID3v11Writer.encode(fields, encoding)
    except TagError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    if dry_run:
        console.print("[yellow]Dry run, file not modified[/yellow]")
        display_tag_info(tag, str(file))
        return

    try:
        replaced = write_trailer(file, tag.data)
    except OSError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    action = "Replaced" if replaced else "Added"
    console.print(f"[green]{action} ID3v{tag.version} tag:[/green] {file}")
    display_tag_info(tag, str(file), file.stat().st_size)
