"""
Dump command - annotated hex dump of a file's ID3v1 trailer.
"""

from pathlib import Path
from typing import List, Tuple

import typer
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from id3v1kit.formats.file_io import read_trailing_bytes
from id3v1kit.formats.layout import TAG_SIZE, has_track_number
from id3v1kit.utils.validation import validate_tag_header

console = Console()
app = typer.Typer()


# Trailer regions with start, end, name, description, and color
REGIONS: List[Tuple[int, int, str, str, str]] = [
    (0, 3, "HEADER", "TAG marker", "bright_blue"),
    (3, 33, "TITLE", "Title", "cyan"),
    (33, 63, "ARTIST", "Artist", "green"),
    (63, 93, "ALBUM", "Album", "magenta"),
    (93, 97, "YEAR", "Year", "yellow"),
    (97, 127, "COMMENT", "Comment", "blue"),
    (127, 128, "GENRE", "Genre code", "red"),
]

# ID3v1.1 regions replacing the 30 byte comment
TRACK_REGIONS: List[Tuple[int, int, str, str, str]] = [
    (97, 125, "COMMENT", "Comment (short)", "blue"),
    (125, 126, "SEP", "Zero separator", "dim"),
    (126, 127, "TRACK", "Track number", "bright_yellow"),
]


def get_regions(trailer: bytes) -> List[Tuple[int, int, str, str, str]]:
    """Get the region list matching the trailer's variant."""
    if len(trailer) == TAG_SIZE and has_track_number(trailer):
        regions = [r for r in REGIONS if r[2] != "COMMENT"]
        return sorted(regions + TRACK_REGIONS)
    return REGIONS


def get_region_for_offset(
    offset: int, regions: List[Tuple[int, int, str, str, str]]
) -> Tuple[str, str, str]:
    """Get region name, description, and color for an offset."""
    for start, end, name, desc, color in regions:
        if start <= offset < end:
            return name, desc, color
    return "UNKNOWN", "Unknown region", "white"


def format_hex_line(
    data: bytes,
    offset: int,
    regions: List[Tuple[int, int, str, str, str]],
    bytes_per_line: int = 16,
) -> Text:
    """
    Format a single line of hex dump, colouring each byte by its region.

    Returns Rich Text object with colored output.
    """
    text = Text()

    text.append(f"0x{offset:02X} ", style="dim")

    for i, byte in enumerate(data):
        _, _, color = get_region_for_offset(offset + i, regions)
        style = "dim" if byte == 0x00 else f"bold {color}"
        text.append(f"{byte:02X}", style=style)
        text.append(" ")

    if len(data) < bytes_per_line:
        text.append("   " * (bytes_per_line - len(data)))

    text.append(" ", style="dim")
    for i, byte in enumerate(data):
        _, _, color = get_region_for_offset(offset + i, regions)
        if 32 <= byte < 127:
            text.append(chr(byte), style=color)
        elif byte == 0x00:
            text.append("·", style="dim")
        else:
            text.append(".", style="yellow")

    return text


def create_legend(regions: List[Tuple[int, int, str, str, str]]) -> Table:
    """Create a legend for the hex dump colors."""
    table = Table(title="Legend", box=box.SIMPLE, show_header=False, expand=False)
    table.add_column("Region", width=10)
    table.add_column("Description", width=36)

    for start, end, name, desc, color in regions:
        size = end - start
        table.add_row(
            Text(name, style=color),
            f"{desc} ({size} bytes, 0x{start:02X}-0x{end - 1:02X})",
        )

    return table


def print_trailer_dump(trailer: bytes, width: int = 16) -> None:
    """Print the colour-coded hex lines of a trailer."""
    regions = get_regions(trailer)
    for offset in range(0, len(trailer), width):
        console.print(format_hex_line(trailer[offset : offset + width], offset, regions, width))


@app.command()
def dump(
    file: Path = typer.Argument(..., help="Media file whose trailer to dump"),
    width: int = typer.Option(16, "--width", "-w", help="Bytes per line"),
    no_legend: bool = typer.Option(False, "--no-legend", help="Hide the legend"),
) -> None:
    """
    Annotated hex dump of the 128 byte ID3v1 trailer.

    Bytes are coloured by field (title, artist, album, year, comment,
    track, genre); zero padding is dimmed.

    Examples:

        id3v1kit dump song.mp3

        id3v1kit dump song.mp3 --width 32 --no-legend
    """
    if not file.exists():
        console.print(f"[red]Error: File not found: {file}[/red]")
        raise typer.Exit(1)

    try:
        trailer = read_trailing_bytes(file)
    except OSError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    if len(trailer) < TAG_SIZE or not validate_tag_header(trailer):
        console.print(f"[yellow]No ID3v1 trailer in {file}, showing last {len(trailer)} bytes[/yellow]")

    file_size = file.stat().st_size
    regions = get_regions(trailer)

    if not no_legend:
        console.print(create_legend(regions))
        console.print()

    variant = "ID3v1.1" if len(trailer) == TAG_SIZE and has_track_number(trailer) else "ID3v1"
    console.print(
        Panel(
            f"[bold]File:[/bold] {file}\n"
            f"[bold]Size:[/bold] {file_size} bytes\n"
            f"[bold]Trailer offset:[/bold] {file_size - len(trailer)}\n"
            f"[bold]Layout:[/bold] {variant}",
            title="[bold]Trailer Hex Dump[/bold]",
            border_style="blue",
        )
    )
    console.print()

    header = Text()
    header.append("OFF  ", style="dim")
    header.append(" ".join(f"{i:02X}" for i in range(width)), style="dim")
    header.append("  ASCII", style="dim")
    console.print(header)
    console.print("─" * (5 + width * 3 + 2 + width))

    print_trailer_dump(trailer, width)
