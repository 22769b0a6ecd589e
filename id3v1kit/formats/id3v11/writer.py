"""
ID3v1.1 tag writer.
"""

from id3v1kit.formats.id3v1.writer import ID3v1Writer
from id3v1kit.formats.layout import DEFAULT_ENCODING, SHORT_COMMENT_SLICE
from id3v1kit.models.fields import ID3v11Fields
from id3v1kit.models.tag import ID3v11Tag
from id3v1kit.utils.text_field import encode_field
from id3v1kit.utils.validation import (
    CommentTooLongForTrackNumberError,
    FieldTooLongError,
    validate_track_number,
)


class ID3v11Writer(ID3v1Writer):
    """
    Writer for ID3v1.1 trailers.

    Without a track number the output is identical to ID3v1Writer's.

    Example:
        fields = ID3v11Fields(title="Song", track_number=3)
        ID3v11Writer.write(fields, "song.mp3")
    """

    SHORT_COMMENT_WIDTH = SHORT_COMMENT_SLICE[1] - SHORT_COMMENT_SLICE[0]

    @classmethod
    def encode(cls, fields: ID3v11Fields, encoding: str = DEFAULT_ENCODING) -> ID3v11Tag:
        """
        Encode fields into a tag.

        Raises:
            InvalidTrackNumberZeroError: If the track number is 0
            CommentTooLongForTrackNumberError: If a track number is set and
                the comment needs more than 28 bytes
            TagError: If any other field cannot be encoded
        """
        writer = cls(encoding)
        return ID3v11Tag(fields=fields, data=writer.to_bytes(fields), encoding=encoding)

    def _write_comment(self, fields: ID3v11Fields) -> None:
        """Write the comment, plus separator and track byte when numbered."""
        if fields.track_number is None:
            super()._write_comment(fields)
            return

        track_number = validate_track_number(fields.track_number)

        try:
            comment = encode_field(
                fields.comment, self.SHORT_COMMENT_WIDTH, self.encoding, field="comment"
            )
        except FieldTooLongError as e:
            raise CommentTooLongForTrackNumberError(e.length, e.width) from e

        self._buffer += comment
        self._buffer.append(0)
        self._buffer.append(track_number)
