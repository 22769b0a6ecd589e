"""
CLI display modules.
"""

from cli.display.tables import display_genre_table, display_tag_info

__all__ = [
    "display_tag_info",
    "display_genre_table",
]
