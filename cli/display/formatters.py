"""
Display formatting utilities for CLI output.

Provides byte usage bars plus genre and track formatting.
"""

from typing import Optional

from id3v1kit.models.genre import GenreClassification


def usage_bar(
    used: int,
    width_bytes: int,
    width: int = 10,
    filled_char: str = "█",
    empty_char: str = "░",
) -> str:
    """
    Create a text bar showing how much of a field's byte budget is used.

    Args:
        used: Bytes used by the encoded text
        width_bytes: Field width in bytes
        width: Bar width in characters

    Returns:
        Formatted string like " 4/30 [█░░░░░░░░░]"
    """
    if width_bytes <= 0:
        width_bytes = 1

    clamped = max(0, min(used, width_bytes))
    fill_count = int((clamped / width_bytes) * width)
    bar = filled_char * fill_count + empty_char * (width - fill_count)

    style = "red" if used > width_bytes else ("yellow" if used == width_bytes else "green")
    return f"{used:2d}/{width_bytes} [{style}]{bar}[/{style}]"


def format_text(text: str) -> str:
    """Format a text field value, dimming empty ones."""
    if not text:
        return "[dim]-[/dim]"
    return text


def format_genre(genre: GenreClassification) -> str:
    """
    Format a genre with its byte code.

    Returns:
        "Hip-Hop (7)" or "[yellow]Unknown (200)[/yellow]"
    """
    if genre.is_recognized:
        return f"{genre.label} [dim]({genre.code})[/dim]"
    return f"[yellow]Unknown ({genre.code})[/yellow]"


def format_track(track_number: Optional[int]) -> str:
    """
    Format an ID3v1.1 track number.

    Returns:
        "3" or "[dim]none[/dim]"
    """
    if track_number is None:
        return "[dim]none[/dim]"
    return str(track_number)
