"""
Field records for ID3v1 and ID3v1.1 tags.
"""

from dataclasses import dataclass, field
from typing import Optional

from id3v1kit.models.genre import Genre, GenreClassification


@dataclass(frozen=True)
class ID3v1Fields:
    """
    The human-readable fields of an ID3v1 tag.

    Byte widths are measured after encoding, so a 30 byte title holds 30
    Latin-1 characters but fewer multi-byte UTF-8 ones.

    Attributes:
        title: Song title (30 bytes)
        artist: Artist (30 bytes)
        album: Album (30 bytes)
        year: Release year, stored as text (4 bytes)
        comment: Free text (30 bytes)
        genre: Genre classification (1 byte)
    """

    title: str = ""
    artist: str = ""
    album: str = ""
    year: str = ""
    comment: str = ""
    genre: GenreClassification = field(default=Genre.BLUES)


@dataclass(frozen=True)
class ID3v11Fields:
    """
    The human-readable fields of an ID3v1.1 tag.

    Same layout as ID3v1, except the comment shrinks to 28 bytes when a
    track number is present, making room for a zero separator and the
    track byte.

    Attributes:
        title: Song title (30 bytes)
        artist: Artist (30 bytes)
        album: Album (30 bytes)
        year: Release year, stored as text (4 bytes)
        comment: Free text (28 bytes with a track number, 30 without)
        track_number: Track on the album, 1-255, or None
        genre: Genre classification (1 byte)
    """

    title: str = ""
    artist: str = ""
    album: str = ""
    year: str = ""
    comment: str = ""
    track_number: Optional[int] = None
    genre: GenreClassification = field(default=Genre.BLUES)

    @classmethod
    def from_v1(cls, fields: ID3v1Fields, track_number: Optional[int] = None) -> "ID3v11Fields":
        """Build ID3v1.1 fields from ID3v1 fields plus an optional track number."""
        return cls(
            title=fields.title,
            artist=fields.artist,
            album=fields.album,
            year=fields.year,
            comment=fields.comment,
            track_number=track_number,
            genre=fields.genre,
        )

    def to_v1(self) -> ID3v1Fields:
        """Drop the track number."""
        return ID3v1Fields(
            title=self.title,
            artist=self.artist,
            album=self.album,
            year=self.year,
            comment=self.comment,
            genre=self.genre,
        )
