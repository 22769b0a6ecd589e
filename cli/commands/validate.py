"""
Validate command - check a file's ID3v1 trailer structure and content.
"""

from pathlib import Path

import typer
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from id3v1kit.analysis.trailer_analyzer import TrailerAnalysis, TrailerAnalyzer
from id3v1kit.formats.file_io import read_trailing_bytes
from id3v1kit.formats.layout import DEFAULT_ENCODING
from id3v1kit.utils.validation import TagError

console = Console()
app = typer.Typer()


def display_validation(result: TrailerAnalysis, filepath: str, verbose: bool = False) -> None:
    """Display validation result with Rich formatting."""
    if result.valid:
        status = "[bold green]VALID[/bold green]"
        border = "green"
    else:
        status = "[bold red]INVALID[/bold red]"
        border = "red"

    version = f"ID3v{result.version}" if result.version else "none"

    console.print(
        Panel(
            f"[bold]File:[/bold] {filepath}\n"
            f"[bold]Status:[/bold] {status}\n"
            f"[bold]Layout:[/bold] {version}\n\n"
            f"Errors: [red]{len(result.errors)}[/red]  "
            f"Warnings: [yellow]{len(result.warnings)}[/yellow]  "
            f"Info: [blue]{len(result.info)}[/blue]",
            title="[bold]Validation Result[/bold]",
            border_style=border,
        )
    )

    if result.errors or result.warnings:
        table = Table(title="Issues", box=box.ROUNDED, show_header=True, header_style="bold cyan")
        table.add_column("Severity", width=10)
        table.add_column("Area", style="cyan", width=10)
        table.add_column("Offset", style="dim", width=8)
        table.add_column("Message", width=40)
        table.add_column("Expected / Actual", style="dim", width=24)

        rows = [("[red]ERROR[/red]", i) for i in result.errors]
        rows += [("[yellow]WARN[/yellow]", i) for i in result.warnings]

        for label, issue in rows:
            detail = ""
            if issue.expected or issue.actual:
                detail = f"{issue.expected} / {issue.actual}"
            table.add_row(label, issue.area, f"0x{issue.offset:02X}", issue.message, detail)

        console.print(table)

    if result.info and (verbose or (not result.errors and not result.warnings)):
        info_table = Table(title="Validation Checks", box=box.SIMPLE, show_header=False)
        info_table.add_column("", width=60)

        for issue in result.info:
            info_table.add_row(f"[green]OK[/green] {issue.area}: {issue.message}")

        console.print(info_table)


@app.command()
def validate(
    file: Path = typer.Argument(..., help="Media file to validate"),
    encoding: str = typer.Option(
        DEFAULT_ENCODING,
        "--encoding",
        "-e",
        envvar="ID3V1KIT_ENCODING",
        help="Text encoding of the tag fields",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show all validation details"),
    strict: bool = typer.Option(False, "--strict", "-s", help="Treat warnings as errors"),
) -> None:
    """
    Validate the ID3v1 trailer of a file.

    Checks for:

    - A 128 byte trailer starting with TAG
    - Text fields decodable in the selected encoding
    - Stray bytes after a field's zero terminator
    - A four digit year
    - A known genre code

    Examples:

        id3v1kit validate song.mp3

        id3v1kit validate song.mp3 --strict
    """
    if not file.exists():
        console.print(f"[red]Error: File not found: {file}[/red]")
        raise typer.Exit(1)

    try:
        data = read_trailing_bytes(file)
        result = TrailerAnalyzer(encoding).analyze(data)
    except (OSError, TagError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    # In strict mode, treat warnings as errors
    if strict and result.warnings:
        result.valid = False

    display_validation(result, str(file), verbose)

    if not result.valid:
        raise typer.Exit(1)
