"""
Fixed-width text field codec for ID3v1 trailers.

ID3v1 text fields occupy a fixed number of bytes. Writers pad unused space
with zero bytes or, in older taggers, with spaces:

    "Test" in a 30 byte field:
        54 65 73 74 00 00 00 ... 00   (zero padded)
        54 65 73 74 20 20 20 ... 20   (space padded)

Decoding stops at the first zero byte and then strips ASCII whitespace from
both ends, so both padding styles read back as "Test". Encoding always pads
with zero bytes and never truncates: text that does not fit is an error.
"""

import codecs
import logging
from typing import Optional, Union

from id3v1kit.utils.validation import (
    FieldNotDecodableError,
    FieldNotEncodableError,
    FieldTooLongError,
    UnsupportedEncodingError,
)

logger = logging.getLogger(__name__)

# ISO Latin-1: the de-facto encoding of ID3v1 text fields
DEFAULT_ENCODING = "latin-1"

# Space, tab, LF, VT, FF, CR
ASCII_WHITESPACE = " \t\n\x0b\x0c\r"

BytesLike = Union[bytes, bytearray, memoryview]


def resolve_encoding(encoding: str) -> str:
    """
    Normalize a text encoding name.

    Args:
        encoding: Any codec name Python knows (e.g. "latin-1", "utf-8", "cp1251")

    Returns:
        Canonical codec name

    Raises:
        UnsupportedEncodingError: If Python has no text codec by that name
    """
    try:
        info = codecs.lookup(encoding)
    except LookupError:
        raise UnsupportedEncodingError(encoding) from None

    # bytes-to-bytes codecs (hex, base64, rot13) cannot encode or decode text
    if not getattr(info, "_is_text_encoding", True):
        raise UnsupportedEncodingError(encoding)

    return info.name


def terminator_index(raw: BytesLike) -> int:
    """
    Find where the text of a field ends.

    Returns:
        Index of the first zero byte, or ``len(raw)`` if there is none
    """
    raw = bytes(raw)
    index = raw.find(b"\x00")
    return len(raw) if index < 0 else index


def decode_field(raw: BytesLike, encoding: str, field: Optional[str] = None) -> str:
    """
    Decode a fixed-width field to text.

    Args:
        raw: The field bytes
        encoding: Text encoding of the field
        field: Field name, used in error messages

    Returns:
        Field text with padding and surrounding whitespace removed

    Raises:
        FieldNotDecodableError: If the bytes before the terminator are not
            valid text in ``encoding``

    Example:
        >>> decode_field(b"Test" + bytes(26), "latin-1")
        'Test'
    """
    raw = bytes(raw)
    text_bytes = raw[: terminator_index(raw)]

    try:
        text = text_bytes.decode(encoding)
    except UnicodeError as e:
        logger.debug("Cannot decode %s %r as %s: %s", field or "field", text_bytes, encoding, e)
        raise FieldNotDecodableError(f"not valid {encoding} text ({e})", field) from e

    return text.strip(ASCII_WHITESPACE)


def encode_field(text: str, width: int, encoding: str, field: Optional[str] = None) -> bytes:
    """
    Encode text into a fixed-width, zero padded field.

    Args:
        text: Field text
        width: Field width in bytes
        encoding: Text encoding of the field
        field: Field name, used in error messages

    Returns:
        Exactly ``width`` bytes

    Raises:
        FieldNotEncodableError: If ``text`` has characters ``encoding`` cannot represent
        FieldTooLongError: If the encoded text is longer than ``width``

    Example:
        >>> encode_field("1999", 4, "latin-1")
        b'1999'
    """
    try:
        encoded = text.encode(encoding)
    except UnicodeError as e:
        raise FieldNotEncodableError(f"cannot be encoded as {encoding} ({e})", field) from e

    if len(encoded) > width:
        raise FieldTooLongError(len(encoded), width, field)

    return encoded.ljust(width, b"\x00")

