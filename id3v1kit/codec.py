"""
Function-style entry points for the ID3v1 codec.

Thin wrappers around the format readers and writers for callers that do
not need the reader/writer objects.
"""

import logging
from typing import Optional, Union

from id3v1kit.formats.id3v1 import ID3v1Reader, ID3v1Writer
from id3v1kit.formats.id3v11 import ID3v11Reader, ID3v11Writer
from id3v1kit.formats.layout import DEFAULT_ENCODING, has_track_number, locate_trailer
from id3v1kit.models.fields import ID3v1Fields, ID3v11Fields
from id3v1kit.models.tag import ID3v1Tag, ID3v11Tag
from id3v1kit.utils.validation import TagError

logger = logging.getLogger(__name__)

AnyTag = Union[ID3v1Tag, ID3v11Tag]


def decode_v1(data: bytes, encoding: str = DEFAULT_ENCODING) -> ID3v1Tag:
    """Decode the ID3v1 tag at the end of ``data``."""
    return ID3v1Reader.decode(data, encoding)


def encode_v1(fields: ID3v1Fields, encoding: str = DEFAULT_ENCODING) -> ID3v1Tag:
    """Encode ID3v1 fields."""
    return ID3v1Writer.encode(fields, encoding)


def decode_v11(data: bytes, encoding: str = DEFAULT_ENCODING) -> ID3v11Tag:
    """Decode the ID3v1.1 tag at the end of ``data``."""
    return ID3v11Reader.decode(data, encoding)


def encode_v11(fields: ID3v11Fields, encoding: str = DEFAULT_ENCODING) -> ID3v11Tag:
    """Encode ID3v1.1 fields."""
    return ID3v11Writer.encode(fields, encoding)


def detect_version(data: bytes) -> Optional[str]:
    """
    Detect which tag variant ``data`` ends with.

    Returns:
        "1.1" if the trailer carries a track number, "1" for any other
        trailer, None if there is no trailer at all
    """
    try:
        trailer = locate_trailer(data)
    except TagError:
        return None
    return "1.1" if has_track_number(trailer) else "1"


def decode_any(data: bytes, encoding: str = DEFAULT_ENCODING) -> AnyTag:
    """
    Decode a trailer as ID3v1.1, falling back to ID3v1.

    The ID3v1.1 reading is kept when the trailer carries a track number;
    otherwise the tag is returned as plain ID3v1.

    Raises:
        TagError: If the buffer holds no decodable tag
    """
    tag = ID3v11Reader.decode(data, encoding)
    if tag.has_track_number:
        return tag

    logger.debug("No track number in trailer, falling back to ID3v1")
    return ID3v1Tag(fields=tag.fields.to_v1(), data=tag.data, encoding=tag.encoding)
