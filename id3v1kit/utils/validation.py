"""
Errors and validation helpers for ID3v1 trailer data.

Every failure the codec can report is a ``TagError``. Decoding and encoding
are all-or-nothing: the first error aborts the whole operation.
"""

from typing import Optional


class TagError(ValueError):
    """Base class for all trailer decode/encode failures."""

    pass


class TooShortError(TagError):
    """Raised when a buffer holds fewer bytes than a full trailer."""

    def __init__(self, length: int, required: int = 128):
        self.length = length
        self.required = required
        super().__init__(f"Need at least {required} bytes for an ID3v1 tag, got {length}")


class BadMagicError(TagError):
    """Raised when the trailer does not start with the ``TAG`` marker."""

    def __init__(self, found: bytes):
        self.found = bytes(found)
        super().__init__(f"Invalid ID3v1 header: expected b'TAG', got {self.found!r}")


class UnsupportedEncodingError(TagError):
    """Raised when the requested text encoding is not a known codec."""

    def __init__(self, encoding: str):
        self.encoding = encoding
        super().__init__(f"Unknown text encoding: {encoding!r}")


class FieldError(TagError):
    """Base class for errors tied to a single text field."""

    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        if field:
            message = f"{field}: {message}"
        super().__init__(message)


class FieldNotDecodableError(FieldError):
    """Raised when field bytes are not valid text in the selected encoding."""

    pass


class FieldNotEncodableError(FieldError):
    """Raised when field text cannot be represented in the selected encoding."""

    pass


class FieldTooLongError(FieldError):
    """Raised when encoded field text does not fit in its byte width."""

    def __init__(self, length: int, width: int, field: Optional[str] = None):
        self.length = length
        self.width = width
        super().__init__(f"encodes to {length} bytes, maximum is {width}", field)


class CommentTooLongForTrackNumberError(FieldTooLongError):
    """Raised when a comment exceeds 28 bytes while a track number is set."""

    def __init__(self, length: int, width: int = 28):
        super().__init__(length, width, field="comment")


class InvalidTrackNumberError(TagError):
    """Raised when a track number cannot be stored in a single byte."""

    def __init__(self, track_number: int, message: Optional[str] = None):
        self.track_number = track_number
        super().__init__(message or f"Track number must be 1-255, got {track_number}")


class InvalidTrackNumberZeroError(InvalidTrackNumberError):
    """Raised when encoding an ID3v1.1 tag with track number 0."""

    def __init__(self):
        super().__init__(
            0, "Track number 0 cannot be stored: it reads back as 'no track number'"
        )


def validate_track_number(track_number: int) -> int:
    """
    Validate an ID3v1.1 track number.

    Args:
        track_number: Track number to store

    Returns:
        The track number, unchanged

    Raises:
        InvalidTrackNumberZeroError: If the track number is 0
        InvalidTrackNumberError: If the track number is outside 1-255
    """
    if track_number == 0:
        raise InvalidTrackNumberZeroError()
    if not 1 <= track_number <= 255:
        raise InvalidTrackNumberError(track_number)
    return track_number


def validate_tag_header(data: bytes) -> bool:
    """
    Check whether a trailer starts with the ID3v1 marker.

    Args:
        data: Trailer data (at least 3 bytes)

    Returns:
        True if the first three bytes are ``TAG``
    """
    if len(data) < 3:
        return False

    return bytes(data[:3]) == b"TAG"


def is_year(text: str) -> bool:
    """Return True if ``text`` looks like a four digit year."""
    return len(text) == 4 and text.isdigit()
