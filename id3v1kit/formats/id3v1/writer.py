"""
ID3v1 tag writer.

Encodes ID3v1Fields into the 128 byte trailer and writes it to files.
"""

from pathlib import Path
from typing import Union

from id3v1kit.formats.file_io import write_trailer
from id3v1kit.formats.layout import (
    DEFAULT_ENCODING,
    HEADER,
    TAG_SIZE,
    TEXT_FIELDS,
    field_width,
)
from id3v1kit.models.fields import ID3v1Fields
from id3v1kit.models.genre import byte_for
from id3v1kit.models.tag import ID3v1Tag
from id3v1kit.utils.text_field import encode_field, resolve_encoding


class ID3v1Writer:
    """
    Writer for ID3v1 trailers.

    Example:
        fields = ID3v1Fields(title="Song", artist="Band", genre=Genre.ROCK)
        ID3v1Writer.write(fields, "song.mp3")
    """

    TAG_SIZE = TAG_SIZE
    HEADER = HEADER
    DEFAULT_ENCODING = DEFAULT_ENCODING

    def __init__(self, encoding: str = DEFAULT_ENCODING):
        resolve_encoding(encoding)
        self.encoding = encoding
        self._buffer: bytearray = bytearray()

    @classmethod
    def encode(cls, fields: ID3v1Fields, encoding: str = DEFAULT_ENCODING) -> ID3v1Tag:
        """
        Encode fields into a tag.

        Args:
            fields: Tag fields
            encoding: Text encoding for the string fields

        Returns:
            Tag holding the fields and their 128 byte serialization

        Raises:
            TagError: If any field cannot be encoded within its width
        """
        writer = cls(encoding)
        return ID3v1Tag(fields=fields, data=writer.to_bytes(fields), encoding=encoding)

    @classmethod
    def write(
        cls, fields: ID3v1Fields, filepath: Union[str, Path], encoding: str = DEFAULT_ENCODING
    ) -> ID3v1Tag:
        """
        Encode fields and write the trailer to a file.

        An existing trailer is replaced; otherwise one is appended.

        Args:
            fields: Tag fields
            filepath: Media file to tag

        Returns:
            The written tag
        """
        tag = cls.encode(fields, encoding)
        write_trailer(filepath, tag.data)
        return tag

    def to_bytes(self, fields: ID3v1Fields) -> bytes:
        """
        Serialize fields to trailer bytes.

        Args:
            fields: Tag fields

        Returns:
            Complete trailer (128 bytes)
        """
        self._buffer = bytearray(self.HEADER)

        self._write_text_fields(fields)
        self._write_comment(fields)
        self._write_genre(fields)

        assert len(self._buffer) == self.TAG_SIZE, len(self._buffer)
        return bytes(self._buffer)

    def _write_text_fields(self, fields) -> None:
        """Write title, artist, album and year."""
        for name in TEXT_FIELDS:
            self._write_text(getattr(fields, name), field_width(name), name)

    def _write_comment(self, fields) -> None:
        """Write the 30 byte comment."""
        self._write_text(fields.comment, field_width("comment"), "comment")

    def _write_genre(self, fields) -> None:
        """Write the genre byte."""
        self._buffer.append(byte_for(fields.genre))

    def _write_text(self, text: str, width: int, name: str) -> None:
        self._buffer += encode_field(text, width, self.encoding, field=name)
