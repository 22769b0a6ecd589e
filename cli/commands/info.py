"""
Info command - display the ID3v1 tag of a file.
"""

from pathlib import Path

import typer
from rich.console import Console

from cli.commands.dump import print_trailer_dump
from cli.display.tables import display_tag_info
from id3v1kit.codec import decode_any, decode_v1, decode_v11
from id3v1kit.formats.file_io import read_trailing_bytes
from id3v1kit.formats.layout import DEFAULT_ENCODING
from id3v1kit.utils.validation import TagError

console = Console()
app = typer.Typer()

DECODERS = {
    "auto": decode_any,
    "1": decode_v1,
    "1.1": decode_v11,
}


@app.command()
def info(
    file: Path = typer.Argument(..., help="Media file to inspect"),
    tag_format: str = typer.Option(
        "auto", "--format", "-f", help="Tag variant to decode: auto, 1 or 1.1"
    ),
    encoding: str = typer.Option(
        DEFAULT_ENCODING,
        "--encoding",
        "-e",
        envvar="ID3V1KIT_ENCODING",
        help="Text encoding of the tag fields",
    ),
    raw: bool = typer.Option(False, "--raw", "-r", help="Also show the trailer bytes"),
) -> None:
    """
    Show the ID3v1 / ID3v1.1 tag at the end of a file.

    With --format auto the tag is reported as ID3v1.1 when it carries a
    track number and as ID3v1 otherwise.

    Examples:

        id3v1kit info song.mp3

        id3v1kit info song.mp3 --encoding cp1251

        id3v1kit info song.mp3 --format 1 --raw
    """
    if not file.exists():
        console.print(f"[red]Error: File not found: {file}[/red]")
        raise typer.Exit(1)

    decoder = DECODERS.get(tag_format)
    if decoder is None:
        console.print(f"[red]Error: Unknown format: {tag_format}[/red]")
        console.print("Supported formats: " + ", ".join(DECODERS))
        raise typer.Exit(1)

    try:
        tag = decoder(read_trailing_bytes(file), encoding)
    except (OSError, TagError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    display_tag_info(tag, str(file), file.stat().st_size)

    if raw:
        console.print()
        print_trailer_dump(tag.data)
