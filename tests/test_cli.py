"""Tests for the id3v1kit command line interface."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from typer.testing import CliRunner

from cli.app import app
from conftest import make_trailer
from id3v1kit import __version__
from id3v1kit.formats.id3v11 import ID3v11Reader
from id3v1kit.models.genre import Genre

runner = CliRunner()


class TestInfoCommand:
    """Test cases for 'id3v1kit info'."""

    def test_tagged_file(self, tagged_file):
        """Test showing a tag."""
        result = runner.invoke(app, ["info", str(tagged_file)])

        assert result.exit_code == 0
        assert "Title" in result.output
        assert "Hip-Hop" in result.output
        assert "ID3v1.1" in result.output

    def test_force_v1(self, tagged_file):
        """Test reading the same trailer as plain ID3v1."""
        result = runner.invoke(app, ["info", str(tagged_file), "--format", "1"])

        assert result.exit_code == 0
        assert "Track" not in result.output

    def test_untagged_file(self, media_file):
        """Test that a file without a tag is an error."""
        result = runner.invoke(app, ["info", str(media_file)])

        assert result.exit_code == 1
        assert "Error" in result.output

    def test_missing_file(self, tmp_path):
        """Test that a missing file is an error."""
        result = runner.invoke(app, ["info", str(tmp_path / "missing.mp3")])

        assert result.exit_code == 1

    def test_bad_encoding(self, tagged_file):
        """Test that an unknown encoding is an error."""
        result = runner.invoke(app, ["info", str(tagged_file), "--encoding", "no-such-codec"])

        assert result.exit_code == 1

    def test_raw(self, tagged_file):
        """Test appending the hex dump."""
        result = runner.invoke(app, ["info", str(tagged_file), "--raw"])

        assert result.exit_code == 0
        assert "54 41 47" in result.output


class TestWriteCommand:
    """Test cases for 'id3v1kit write'."""

    def test_new_tag(self, media_file, audio_data):
        """Test tagging an untagged file."""
        result = runner.invoke(
            app,
            ["write", str(media_file), "--title", "Song", "--track", "3", "--genre", "rock"],
        )

        assert result.exit_code == 0
        tag = ID3v11Reader.read(media_file)
        assert tag.fields.title == "Song"
        assert tag.fields.track_number == 3
        assert tag.fields.genre is Genre.ROCK
        assert media_file.read_bytes()[: len(audio_data)] == audio_data

    def test_keeps_existing_fields(self, tagged_file):
        """Test that unspecified fields keep their values."""
        result = runner.invoke(app, ["write", str(tagged_file), "--title", "New"])

        assert result.exit_code == 0
        tag = ID3v11Reader.read(tagged_file)
        assert tag.fields.title == "New"
        assert tag.fields.artist == "Artist"
        assert tag.fields.track_number == 1

    def test_clear(self, tagged_file):
        """Test starting from empty fields."""
        result = runner.invoke(app, ["write", str(tagged_file), "--clear", "--title", "Only"])

        assert result.exit_code == 0
        tag = ID3v11Reader.read(tagged_file)
        assert tag.fields.title == "Only"
        assert tag.fields.artist == ""
        assert tag.fields.track_number is None

    def test_no_track(self, tagged_file):
        """Test removing the track number."""
        result = runner.invoke(app, ["write", str(tagged_file), "--no-track"])

        assert result.exit_code == 0
        assert ID3v11Reader.read(tagged_file).fields.track_number is None

    def test_replaces_trailer(self, tagged_file):
        """Test that rewriting does not grow the file."""
        size = tagged_file.stat().st_size
        result = runner.invoke(app, ["write", str(tagged_file), "--year", "2024"])

        assert result.exit_code == 0
        assert tagged_file.stat().st_size == size

    def test_comment_too_long_for_track(self, tagged_file):
        """Test that a 30 byte comment with a track number is rejected."""
        original = tagged_file.read_bytes()
        result = runner.invoke(app, ["write", str(tagged_file), "--comment", "c" * 30])

        assert result.exit_code == 1
        assert tagged_file.read_bytes() == original

    def test_track_zero(self, media_file):
        """Test that track 0 is rejected."""
        result = runner.invoke(app, ["write", str(media_file), "--track", "0"])

        assert result.exit_code == 1

    def test_track_with_v1_format(self, media_file):
        """Test that --track needs the ID3v1.1 format."""
        result = runner.invoke(app, ["write", str(media_file), "--format", "1", "--track", "2"])

        assert result.exit_code == 1

    def test_unknown_genre(self, media_file):
        """Test that unknown genre names are rejected."""
        result = runner.invoke(app, ["write", str(media_file), "--genre", "not a genre"])

        assert result.exit_code == 1
        assert "Unknown genre" in result.output

    def test_undecodable_existing_tag(self, tmp_path, audio_data):
        """Test that an existing tag the encoding cannot read is left intact."""
        path = tmp_path / "latin1.mp3"
        path.write_bytes(audio_data + make_trailer(b"Caf\xe9", b"Artist"))
        original = path.read_bytes()

        result = runner.invoke(app, ["write", str(path), "--year", "2001", "-e", "utf-8"])

        assert result.exit_code == 1
        assert "Cannot read the existing tag" in result.output
        assert path.read_bytes() == original

    def test_undecodable_existing_tag_with_clear(self, tmp_path, audio_data):
        """Test that --clear overwrites a tag the encoding cannot read."""
        path = tmp_path / "latin1.mp3"
        path.write_bytes(audio_data + make_trailer(b"Caf\xe9", b"Artist"))

        result = runner.invoke(
            app, ["write", str(path), "--clear", "--year", "2001", "-e", "utf-8"]
        )

        assert result.exit_code == 0
        tag = ID3v11Reader.read(path, "utf-8")
        assert tag.fields.year == "2001"
        assert tag.fields.artist == ""

    def test_dry_run(self, media_file, audio_data):
        """Test that --dry-run leaves the file alone."""
        result = runner.invoke(app, ["write", str(media_file), "--title", "X", "--dry-run"])

        assert result.exit_code == 0
        assert media_file.read_bytes() == audio_data


class TestOtherCommands:
    """Test cases for strip, validate, dump, genres and version."""

    def test_strip(self, tagged_file, audio_data):
        """Test removing a tag."""
        result = runner.invoke(app, ["strip", str(tagged_file)])

        assert result.exit_code == 0
        assert tagged_file.read_bytes() == audio_data

    def test_strip_untagged(self, media_file):
        """Test stripping a file without a tag."""
        result = runner.invoke(app, ["strip", str(media_file)])

        assert result.exit_code == 0
        assert "No ID3v1 tag" in result.output

    def test_validate_valid(self, tagged_file):
        """Test validating a good tag."""
        result = runner.invoke(app, ["validate", str(tagged_file)])

        assert result.exit_code == 0
        assert "VALID" in result.output

    def test_validate_invalid(self, media_file):
        """Test validating an untagged file."""
        result = runner.invoke(app, ["validate", str(media_file)])

        assert result.exit_code == 1
        assert "INVALID" in result.output

    def test_dump(self, tagged_file):
        """Test the trailer hex dump."""
        result = runner.invoke(app, ["dump", str(tagged_file)])

        assert result.exit_code == 0
        assert "TRACK" in result.output
        assert "GENRE" in result.output

    def test_genres(self):
        """Test listing genres."""
        result = runner.invoke(app, ["genres"])

        assert result.exit_code == 0
        assert "Blues" in result.output
        assert "192 genres" in result.output

    def test_genres_search(self):
        """Test filtering the genre list."""
        result = runner.invoke(app, ["genres", "--search", "hard rock"])

        assert result.exit_code == 0
        assert "Hard Rock" in result.output
        assert "Blues" not in result.output

    def test_version(self):
        """Test the version command."""
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert __version__ in result.output
