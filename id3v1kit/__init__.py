"""
id3v1kit - Read and write ID3v1 / ID3v1.1 tags.

This library provides tools to:
- Decode the 128 byte ID3v1 trailer at the end of a media file
- Encode tag fields back into a byte-exact trailer
- Read the ID3v1.1 track number hidden in the comment field
- Look up ID3v1 genre codes and names

Example usage:
    from id3v1kit import ID3v11Reader, ID3v11Writer, ID3v11Fields, Genre

    # Read the tag of an MP3 file
    tag = ID3v11Reader.read("song.mp3")
    print(tag.fields.title, tag.fields.track_number)

    # Write a new tag
    fields = ID3v11Fields(title="Song", artist="Band", track_number=3, genre=Genre.ROCK)
    ID3v11Writer.write(fields, "song.mp3")
"""

__version__ = "0.1.0"
__author__ = "id3v1kit Contributors"

from id3v1kit.codec import decode_any, decode_v1, decode_v11, encode_v1, encode_v11
from id3v1kit.formats.id3v1.reader import ID3v1Reader
from id3v1kit.formats.id3v1.writer import ID3v1Writer
from id3v1kit.formats.id3v11.reader import ID3v11Reader
from id3v1kit.formats.id3v11.writer import ID3v11Writer
from id3v1kit.models.fields import ID3v1Fields, ID3v11Fields
from id3v1kit.models.genre import Genre, UnknownGenre
from id3v1kit.models.tag import ID3v1Tag, ID3v11Tag
from id3v1kit.utils.validation import TagError

__all__ = [
    "ID3v1Reader",
    "ID3v1Writer",
    "ID3v11Reader",
    "ID3v11Writer",
    "ID3v1Fields",
    "ID3v11Fields",
    "ID3v1Tag",
    "ID3v11Tag",
    "Genre",
    "UnknownGenre",
    "TagError",
    "decode_any",
    "decode_v1",
    "decode_v11",
    "encode_v1",
    "encode_v11",
]
