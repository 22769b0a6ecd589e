"""Tests for the ID3v1.1 reader and writer."""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from conftest import make_trailer
from id3v1kit.formats.id3v1 import ID3v1Writer
from id3v1kit.formats.id3v11 import ID3v11Reader, ID3v11Writer
from id3v1kit.models.fields import ID3v1Fields, ID3v11Fields
from id3v1kit.models.genre import Genre
from id3v1kit.models.tag import ID3v11Tag
from id3v1kit.utils.validation import (
    BadMagicError,
    CommentTooLongForTrackNumberError,
    FieldTooLongError,
    InvalidTrackNumberError,
    InvalidTrackNumberZeroError,
    TooShortError,
)

FULL_FIELDS = ID3v11Fields(
    title="Title",
    artist="Artist",
    album="Album",
    year="2000",
    comment="Comment",
    track_number=1,
    genre=Genre.HIP_HOP,
)


class TestID3v11Reader:
    """Test cases for ID3v1.1 decoding."""

    def test_empty_tag(self, empty_tag_data):
        """Test decoding a trailer with no field data."""
        tag = ID3v11Reader.decode(empty_tag_data)

        assert isinstance(tag, ID3v11Tag)
        assert tag.fields == ID3v11Fields()
        assert tag.fields.track_number is None
        assert not tag.has_track_number
        assert tag.version == "1.1"

    def test_full_tag(self, full_tag_data):
        """Test decoding a trailer with a track number."""
        tag = ID3v11Reader.decode(full_tag_data)

        assert tag.fields == FULL_FIELDS
        assert tag.has_track_number
        assert tag.data == full_tag_data

    def test_track_number_heuristic(self):
        """Test that byte 125 zero and byte 126 non-zero mean a track number."""
        comment = b"x" * 28 + b"\x00" + bytes([42])
        tag = ID3v11Reader.decode(make_trailer(comment=comment))

        assert tag.fields.comment == "x" * 28
        assert tag.fields.track_number == 42

    def test_track_number_255(self):
        """Test the largest track number."""
        comment = b"\x00" * 29 + b"\xff"
        tag = ID3v11Reader.decode(make_trailer(comment=comment))

        assert tag.fields.track_number == 255
        assert tag.fields.comment == ""

    def test_no_separator_means_no_track(self):
        """Test that a non-zero byte 125 keeps the full 30 byte comment."""
        comment = b"c" * 29 + b"\x05"
        tag = ID3v11Reader.decode(make_trailer(comment=comment))

        assert tag.fields.track_number is None
        assert tag.fields.comment == "c" * 29 + "\x05"

    def test_zero_track_byte_means_no_track(self):
        """Test that byte 126 zero means no track number."""
        comment = b"Comment".ljust(30, b"\x00")
        tag = ID3v11Reader.decode(make_trailer(comment=comment))

        assert tag.fields.track_number is None
        assert tag.fields.comment == "Comment"

    def test_29_byte_comment_reads_as_track(self):
        """Test that a zero padded 29 byte comment is read as comment plus track."""
        comment = b"c" * 28 + b"\x00" + b"d"
        tag = ID3v11Reader.decode(make_trailer(comment=comment))

        assert tag.fields.comment == "c" * 28
        assert tag.fields.track_number == ord("d")

    def test_prefix_ignored(self, full_tag_data):
        """Test that 50 leading zero bytes are ignored."""
        tag = ID3v11Reader.decode(bytes(50) + full_tag_data)

        assert tag.fields == FULL_FIELDS

    def test_bad_magic(self, full_tag_data):
        """Test that a wrong marker is rejected."""
        with pytest.raises(BadMagicError):
            ID3v11Reader.decode(b"BAG" + full_tag_data[3:])

    def test_length_rejection(self, full_tag_data):
        """Test that 127 and 129 byte buffers never decode."""
        with pytest.raises(TooShortError):
            ID3v11Reader.decode(full_tag_data[:127])
        with pytest.raises(BadMagicError):
            ID3v11Reader.decode(full_tag_data + b"\x00")

    def test_reads_plain_id3v1(self):
        """Test that ID3v1 output decodes as ID3v1.1 without a track."""
        v1 = ID3v1Fields(title="Song", comment="c" * 30, genre=Genre.JAZZ)
        tag = ID3v11Reader.decode(ID3v1Writer.encode(v1).data)

        assert tag.fields == ID3v11Fields.from_v1(v1)


class TestID3v11Writer:
    """Test cases for ID3v1.1 encoding."""

    def test_full_tag(self, full_tag_data):
        """Test encoding reproduces the reference trailer."""
        tag = ID3v11Writer.encode(FULL_FIELDS)

        assert tag.data == full_tag_data
        assert tag.fields == FULL_FIELDS

    def test_track_layout(self):
        """Test separator and track bytes."""
        data = ID3v11Writer.encode(ID3v11Fields(comment="hi", track_number=9)).data

        assert data[97:125] == b"hi".ljust(28, b"\x00")
        assert data[125] == 0
        assert data[126] == 9
        assert len(data) == 128

    def test_without_track_matches_id3v1(self):
        """Test that no track number gives the ID3v1 layout."""
        fields = ID3v11Fields(title="Song", comment="c" * 30, genre=Genre.ROCK)

        assert ID3v11Writer.encode(fields).data == ID3v1Writer.encode(fields.to_v1()).data

    def test_track_zero_rejected(self):
        """Test that track number 0 cannot be encoded."""
        with pytest.raises(InvalidTrackNumberZeroError):
            ID3v11Writer.encode(ID3v11Fields(track_number=0))

    def test_track_out_of_range(self):
        """Test that track numbers must fit in one byte."""
        with pytest.raises(InvalidTrackNumberError):
            ID3v11Writer.encode(ID3v11Fields(track_number=256))
        with pytest.raises(InvalidTrackNumberError):
            ID3v11Writer.encode(ID3v11Fields(track_number=-1))

    def test_comment_30_with_track(self):
        """Test that a 30 byte comment and a track number do not fit."""
        with pytest.raises(CommentTooLongForTrackNumberError) as exc_info:
            ID3v11Writer.encode(ID3v11Fields(comment="c" * 30, track_number=1))

        assert exc_info.value.width == 28
        assert exc_info.value.length == 30

    def test_comment_29_with_track(self):
        """Test that a 29 byte comment and a track number do not fit."""
        with pytest.raises(CommentTooLongForTrackNumberError):
            ID3v11Writer.encode(ID3v11Fields(comment="c" * 29, track_number=1))

    def test_comment_28_with_track(self):
        """Test that a 28 byte comment and a track number round-trip."""
        fields = ID3v11Fields(comment="c" * 28, track_number=1)
        tag = ID3v11Writer.encode(fields)
        decoded = ID3v11Reader.decode(tag.data)

        assert decoded.fields.comment == "c" * 28
        assert decoded.fields.track_number == 1

    def test_comment_error_is_field_error(self):
        """Test that the comment budget error is a FieldTooLongError."""
        with pytest.raises(FieldTooLongError):
            ID3v11Writer.encode(ID3v11Fields(comment="c" * 29, track_number=3))

    def test_comment_30_without_track(self):
        """Test that a 30 byte comment fits when there is no track."""
        tag = ID3v11Writer.encode(ID3v11Fields(comment="c" * 30))

        assert tag.data[97:127] == b"c" * 30


class TestID3v11RoundTrip:
    """Test that encode and decode are inverses."""

    @pytest.mark.parametrize(
        "fields,encoding",
        [
            (ID3v11Fields(), "latin-1"),
            (FULL_FIELDS, "latin-1"),
            (ID3v11Fields(title="Song", track_number=255, genre=Genre.PSYBIENT), "latin-1"),
            (ID3v11Fields(comment="ü" * 14, track_number=12), "utf-8"),
            (ID3v11Fields(album="Ä" * 30, comment="x" * 30), "cp1252"),
        ],
    )
    def test_round_trip(self, fields, encoding):
        """Test decode(encode(fields)) == fields."""
        tag = ID3v11Writer.encode(fields, encoding)

        assert ID3v11Reader.decode(tag.data, encoding).fields == fields


class TestFieldConversion:
    """Test cases for converting between field records."""

    def test_from_v1(self):
        """Test adding a track number to ID3v1 fields."""
        v11 = ID3v11Fields.from_v1(ID3v1Fields(title="Song"), track_number=4)

        assert v11.title == "Song"
        assert v11.track_number == 4

    def test_to_v1(self):
        """Test dropping the track number."""
        assert FULL_FIELDS.to_v1() == ID3v1Fields(
            "Title", "Artist", "Album", "2000", "Comment", Genre.HIP_HOP
        )
