"""
Rich table displays for tag information.
"""

from typing import Iterable, Optional, Union

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from cli.display.formatters import format_genre, format_text, format_track, usage_bar
from id3v1kit.formats.layout import field_width
from id3v1kit.models.genre import Genre
from id3v1kit.models.tag import ID3v1Tag, ID3v11Tag

console = Console()


def _encoded_length(text: str, encoding: str) -> int:
    return len(text.encode(encoding, errors="replace"))


def display_tag_info(
    tag: Union[ID3v1Tag, ID3v11Tag], filepath: Optional[str] = None, file_size: int = 0
) -> None:
    """Display a decoded tag with Rich formatting."""
    fields = tag.fields
    track_number = getattr(fields, "track_number", None)

    header_content = f"""[bold]File:[/bold] {filepath or "N/A"}
[bold]Version:[/bold] ID3v{tag.version}
[bold]Encoding:[/bold] {tag.encoding}"""
    if file_size:
        header_content += (
            f"\n[bold]Trailer:[/bold] bytes {file_size - len(tag)}-{file_size - 1} of {file_size}"
        )

    console.print(
        Panel(
            header_content,
            title="[bold blue]ID3v1 Tag[/bold blue]",
            border_style="blue",
            expand=False,
        )
    )

    comment_width = field_width("comment") - (2 if track_number is not None else 0)

    table = Table(box=box.ROUNDED, show_header=True, header_style="bold magenta")
    table.add_column("Field", style="cyan", width=8)
    table.add_column("Value", width=32)
    table.add_column("Bytes", width=20)

    for name in ("title", "artist", "album", "year"):
        text = getattr(fields, name)
        table.add_row(
            name.capitalize(),
            format_text(text),
            usage_bar(_encoded_length(text, tag.encoding), field_width(name)),
        )

    table.add_row(
        "Comment",
        format_text(fields.comment),
        usage_bar(_encoded_length(fields.comment, tag.encoding), comment_width),
    )

    if tag.version == "1.1":
        table.add_row("Track", format_track(track_number), "")

    table.add_row("Genre", format_genre(fields.genre), "")

    console.print(table)


def display_genre_table(genres: Iterable[Genre], title: str = "ID3v1 Genres") -> None:
    """Display genres as a code/name table."""
    table = Table(title=title, box=box.SIMPLE, show_header=True, header_style="bold")
    table.add_column("Code", style="dim", justify="right", width=5)
    table.add_column("Name", style="cyan", width=24)
    table.add_column("Identifier", style="dim", width=24)

    count = 0
    for genre in genres:
        table.add_row(str(genre.code), genre.label, genre.name)
        count += 1

    console.print(table)
    console.print(f"[dim]{count} genres[/dim]")
