"""
ID3v1 trailer layout.

The trailer is the last 128 bytes of a media file:

    Offset  Size  Field
    0x00    3     "TAG"
    0x03    30    Title
    0x21    30    Artist
    0x3F    30    Album
    0x5D    4     Year
    0x61    30    Comment (ID3v1, or ID3v1.1 without track number)
    0x61    28    Comment (ID3v1.1 with track number)
    0x7D    1     Zero separator (ID3v1.1 with track number)
    0x7E    1     Track number (ID3v1.1 with track number)
    0x7F    1     Genre

Every field is byte-granular, so byte order never matters.
"""

import logging
from typing import Union

from id3v1kit.utils.text_field import DEFAULT_ENCODING  # noqa: F401
from id3v1kit.utils.validation import BadMagicError, TooShortError

logger = logging.getLogger(__name__)

TAG_SIZE = 128
HEADER = b"TAG"

# Field name -> (start, end), end exclusive
FIELD_SLICES = {
    "header": (0, 3),
    "title": (3, 33),
    "artist": (33, 63),
    "album": (63, 93),
    "year": (93, 97),
    "comment": (97, 127),
}

# ID3v1.1 splits the comment when a track number is present
SHORT_COMMENT_SLICE = (97, 125)
SEPARATOR_INDEX = 125
TRACK_NUMBER_INDEX = 126
GENRE_INDEX = 127

TEXT_FIELDS = ("title", "artist", "album", "year")


def field_width(name: str) -> int:
    """Get the byte width of a trailer field."""
    start, end = FIELD_SLICES[name]
    return end - start


def locate_trailer(data: Union[bytes, bytearray, memoryview]) -> bytes:
    """
    Extract and check the trailer at the end of a buffer.

    Only the last 128 bytes are examined; anything before them (audio
    frames, other tags) is ignored.

    Args:
        data: Buffer ending with an ID3v1 trailer

    Returns:
        The 128 trailer bytes

    Raises:
        TooShortError: If ``data`` is shorter than 128 bytes
        BadMagicError: If the trailer does not start with "TAG"
    """
    if len(data) < TAG_SIZE:
        raise TooShortError(len(data), TAG_SIZE)

    trailer = bytes(data[len(data) - TAG_SIZE :])

    if trailer[:3] != HEADER:
        logger.debug("No ID3v1 marker in last %d bytes (found %r)", TAG_SIZE, trailer[:3])
        raise BadMagicError(trailer[:3])

    return trailer


def has_track_number(trailer: bytes) -> bool:
    """
    Check the ID3v1.1 track number marker.

    A trailer carries a track number when the second-last comment byte is
    zero and the last one is not. Older taggers that zero-pad a 29 byte
    comment are indistinguishable from this; that ambiguity is part of the
    format.
    """
    return trailer[SEPARATOR_INDEX] == 0 and trailer[TRACK_NUMBER_INDEX] != 0
