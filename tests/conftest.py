"""Test configuration and fixtures."""

import pytest


def make_trailer(
    title=b"",
    artist=b"",
    album=b"",
    year=b"",
    comment=b"",
    genre=0,
):
    """Build a raw 128 byte trailer from already-encoded field bytes."""
    return (
        b"TAG"
        + title.ljust(30, b"\x00")
        + artist.ljust(30, b"\x00")
        + album.ljust(30, b"\x00")
        + year.ljust(4, b"\x00")
        + comment.ljust(30, b"\x00")
        + bytes([genre])
    )


@pytest.fixture
def empty_tag_data():
    """Return an all-empty trailer: TAG followed by 125 zero bytes."""
    return b"TAG" + bytes(125)


@pytest.fixture
def full_tag_data():
    """Return a fully populated ID3v1.1 trailer (track 1, Hip-Hop)."""
    comment = b"Comment".ljust(28, b"\x00") + b"\x00\x01"
    return make_trailer(b"Title", b"Artist", b"Album", b"2000", comment, genre=7)


@pytest.fixture
def audio_data():
    """Return some stand-in audio frames."""
    return bytes(range(256)) * 4


@pytest.fixture
def media_file(tmp_path, audio_data):
    """Return path to an untagged media file."""
    path = tmp_path / "song.mp3"
    path.write_bytes(audio_data)
    return path


@pytest.fixture
def tagged_file(tmp_path, audio_data, full_tag_data):
    """Return path to a media file ending with the full trailer."""
    path = tmp_path / "tagged.mp3"
    path.write_bytes(audio_data + full_tag_data)
    return path
