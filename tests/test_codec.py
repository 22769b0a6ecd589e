"""Tests for the function-style codec entry points."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from id3v1kit import (
    ID3v1Fields,
    ID3v11Fields,
    ID3v1Tag,
    ID3v11Tag,
    decode_any,
    decode_v1,
    decode_v11,
    encode_v1,
    encode_v11,
)
from id3v1kit.codec import detect_version
from id3v1kit.models.genre import Genre


class TestCodecFunctions:
    """Test cases for encode/decode wrappers."""

    def test_v1(self):
        """Test the ID3v1 function pair."""
        fields = ID3v1Fields(title="Song", genre=Genre.POP)
        tag = encode_v1(fields)

        assert decode_v1(tag.data).fields == fields

    def test_v11(self):
        """Test the ID3v1.1 function pair."""
        fields = ID3v11Fields(title="Song", track_number=7)
        tag = encode_v11(fields, "utf-8")

        assert decode_v11(tag.data, "utf-8").fields == fields
        assert tag.encoding == "utf-8"


class TestDetectVersion:
    """Test cases for variant detection."""

    def test_v11(self, full_tag_data):
        """Test detecting a track numbered trailer."""
        assert detect_version(full_tag_data) == "1.1"

    def test_v1(self, empty_tag_data):
        """Test detecting a plain trailer."""
        assert detect_version(empty_tag_data) == "1"

    def test_none(self, audio_data):
        """Test that untagged data has no version."""
        assert detect_version(audio_data) is None
        assert detect_version(b"TAG") is None


class TestDecodeAny:
    """Test cases for decode_any."""

    def test_track_number_gives_v11(self, full_tag_data):
        """Test that a trailer with a track number decodes as ID3v1.1."""
        tag = decode_any(full_tag_data)

        assert isinstance(tag, ID3v11Tag)
        assert tag.fields.track_number == 1

    def test_no_track_number_gives_v1(self, empty_tag_data):
        """Test that a trailer without a track number decodes as ID3v1."""
        tag = decode_any(empty_tag_data)

        assert isinstance(tag, ID3v1Tag)
        assert tag.fields == ID3v1Fields()
        assert tag.data == empty_tag_data

    def test_encoding_kept(self, empty_tag_data):
        """Test that the fallback keeps the caller's encoding."""
        assert decode_any(empty_tag_data, "cp1252").encoding == "cp1252"
