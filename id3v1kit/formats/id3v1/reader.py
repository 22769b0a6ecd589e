"""
ID3v1 tag reader.

Decodes the 128 byte trailer at the end of a buffer or file into an
ID3v1Tag.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from id3v1kit.formats.file_io import read_trailing_bytes
from id3v1kit.formats.layout import (
    DEFAULT_ENCODING,
    FIELD_SLICES,
    GENRE_INDEX,
    HEADER,
    TAG_SIZE,
    locate_trailer,
)
from id3v1kit.models.fields import ID3v1Fields
from id3v1kit.models.genre import classification_for
from id3v1kit.models.tag import ID3v1Tag
from id3v1kit.utils.text_field import decode_field, resolve_encoding
from id3v1kit.utils.validation import TagError

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]


class ID3v1Reader:
    """
    Reader for ID3v1 trailers.

    Example:
        tag = ID3v1Reader.read("song.mp3")
        print(f"{tag.fields.artist} - {tag.fields.title}")
    """

    TAG_SIZE = TAG_SIZE
    HEADER = HEADER
    DEFAULT_ENCODING = DEFAULT_ENCODING

    def __init__(self, encoding: str = DEFAULT_ENCODING):
        resolve_encoding(encoding)
        self.encoding = encoding

    @classmethod
    def decode(cls, data: BytesLike, encoding: str = DEFAULT_ENCODING):
        """
        Decode the tag at the end of a buffer.

        Args:
            data: Buffer whose last 128 bytes are the trailer
            encoding: Text encoding of the string fields

        Returns:
            Decoded tag

        Raises:
            TagError: If the buffer holds no valid tag
        """
        reader = cls(encoding)
        return reader.parse_bytes(data)

    @classmethod
    def try_decode(cls, data: BytesLike, encoding: str = DEFAULT_ENCODING):
        """Like decode(), but return None instead of raising TagError."""
        try:
            return cls.decode(data, encoding)
        except TagError as e:
            logger.debug("%s decode failed: %s", cls.__name__, e)
            return None

    @classmethod
    def read(cls, filepath: Union[str, Path], encoding: str = DEFAULT_ENCODING):
        """
        Read the tag at the end of a file.

        Args:
            filepath: Path to a media file

        Returns:
            Decoded tag
        """
        reader = cls(encoding)
        return reader.parse_file(filepath)

    def parse_file(self, filepath: Union[str, Path]):
        """Decode the trailer of a file."""
        return self.parse_bytes(read_trailing_bytes(filepath, self.TAG_SIZE))

    def parse_bytes(self, data: BytesLike):
        """
        Decode the trailer at the end of ``data``.

        Args:
            data: Raw bytes ending with the trailer

        Returns:
            Decoded tag
        """
        trailer = locate_trailer(data)
        return self._build_tag(trailer)

    def _build_tag(self, trailer: bytes) -> ID3v1Tag:
        fields = ID3v1Fields(
            title=self._decode_text(trailer, "title"),
            artist=self._decode_text(trailer, "artist"),
            album=self._decode_text(trailer, "album"),
            year=self._decode_text(trailer, "year"),
            comment=self._decode_text(trailer, "comment"),
            genre=classification_for(trailer[GENRE_INDEX]),
        )
        return ID3v1Tag(fields=fields, data=trailer, encoding=self.encoding)

    def _decode_text(self, trailer: bytes, name: str) -> str:
        """Decode one of the fixed text fields."""
        start, end = FIELD_SLICES[name]
        return decode_field(trailer[start:end], self.encoding, field=name)

    @classmethod
    def can_read(cls, filepath: Union[str, Path], encoding: str = DEFAULT_ENCODING) -> bool:
        """
        Check if a file ends with a tag this reader can decode.

        Args:
            filepath: Path to check

        Returns:
            True if the file has a decodable tag
        """
        try:
            cls.read(filepath, encoding)
        except (OSError, TagError):
            return False
        return True

    @classmethod
    def get_file_info(cls, filepath: Union[str, Path]) -> dict:
        """
        Get basic information about a file's trailer without decoding fields.

        Args:
            filepath: Path to a media file

        Returns:
            Dictionary with file info
        """
        filepath = Path(filepath)
        data = read_trailing_bytes(filepath, cls.TAG_SIZE)

        info = {
            "valid": False,
            "size": filepath.stat().st_size,
            "trailer_offset": None,
        }

        if len(data) == cls.TAG_SIZE:
            info["header"] = data[:3].decode("ascii", errors="replace")
            info["valid"] = data[:3] == cls.HEADER
            if info["valid"]:
                info["trailer_offset"] = info["size"] - cls.TAG_SIZE

        return info
