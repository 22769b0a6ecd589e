"""
ID3v1.1 tag reader.

ID3v1.1 reuses the ID3v1 layout but may steal the last two comment bytes
for a track number:

    ... | comment (28) | 0x00 | track | genre

The split is detected positionally: byte 125 zero and byte 126 non-zero
means a track number is present.
"""

from id3v1kit.formats.id3v1.reader import ID3v1Reader
from id3v1kit.formats.layout import (
    GENRE_INDEX,
    SHORT_COMMENT_SLICE,
    TRACK_NUMBER_INDEX,
    has_track_number,
)
from id3v1kit.models.fields import ID3v11Fields
from id3v1kit.models.genre import classification_for
from id3v1kit.models.tag import ID3v11Tag
from id3v1kit.utils.text_field import decode_field


class ID3v11Reader(ID3v1Reader):
    """
    Reader for ID3v1.1 trailers.

    Reads plain ID3v1 trailers as well; those simply have no track number.

    Example:
        tag = ID3v11Reader.read("song.mp3")
        if tag.has_track_number:
            print(f"Track {tag.fields.track_number}")
    """

    def _build_tag(self, trailer: bytes) -> ID3v11Tag:
        if has_track_number(trailer):
            start, end = SHORT_COMMENT_SLICE
            comment = decode_field(trailer[start:end], self.encoding, field="comment")
            track_number = trailer[TRACK_NUMBER_INDEX]
        else:
            comment = self._decode_text(trailer, "comment")
            track_number = None

        fields = ID3v11Fields(
            title=self._decode_text(trailer, "title"),
            artist=self._decode_text(trailer, "artist"),
            album=self._decode_text(trailer, "album"),
            year=self._decode_text(trailer, "year"),
            comment=comment,
            track_number=track_number,
            genre=classification_for(trailer[GENRE_INDEX]),
        )
        return ID3v11Tag(fields=fields, data=trailer, encoding=self.encoding)
