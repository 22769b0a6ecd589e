"""
File helpers for reading and writing trailers in place.

The codec itself only works on byte buffers; these helpers move the last
128 bytes of a media file in and out without loading the whole file.
"""

import logging
import os
from pathlib import Path
from typing import Union

from id3v1kit.formats.layout import HEADER, TAG_SIZE

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def read_trailing_bytes(filepath: PathLike, size: int = TAG_SIZE) -> bytes:
    """
    Read the last ``size`` bytes of a file.

    Args:
        filepath: File to read
        size: Number of bytes wanted

    Returns:
        Up to ``size`` bytes; fewer if the file is smaller
    """
    filepath = Path(filepath)

    if not filepath.exists():
        raise FileNotFoundError(f"File not found: {filepath}")

    with open(filepath, "rb") as f:
        f.seek(0, os.SEEK_END)
        file_size = f.tell()
        f.seek(max(0, file_size - size))
        return f.read(size)


def has_trailer(filepath: PathLike) -> bool:
    """Check whether a file already ends with an ID3v1 trailer."""
    data = read_trailing_bytes(filepath)
    return len(data) == TAG_SIZE and data[:3] == HEADER


def write_trailer(filepath: PathLike, trailer: bytes) -> bool:
    """
    Write a trailer to the end of a file.

    An existing trailer is overwritten in place; otherwise the trailer is
    appended. A missing file is created holding just the trailer.

    Args:
        filepath: Target file
        trailer: 128 byte serialized tag

    Returns:
        True if an existing trailer was replaced
    """
    if len(trailer) != TAG_SIZE:
        raise ValueError(f"Trailer must be {TAG_SIZE} bytes, got {len(trailer)}")

    filepath = Path(filepath)

    if not filepath.exists():
        filepath.parent.mkdir(parents=True, exist_ok=True)
        with open(filepath, "wb") as f:
            f.write(trailer)
        logger.debug("Created %s with ID3v1 trailer", filepath)
        return False

    replaced = has_trailer(filepath)

    with open(filepath, "r+b") as f:
        if replaced:
            f.seek(-TAG_SIZE, os.SEEK_END)
        else:
            f.seek(0, os.SEEK_END)
        f.write(trailer)

    logger.debug("%s ID3v1 trailer in %s", "Replaced" if replaced else "Appended", filepath)
    return replaced


def strip_trailer(filepath: PathLike) -> bool:
    """
    Remove the ID3v1 trailer from a file.

    Returns:
        True if a trailer was found and removed
    """
    filepath = Path(filepath)

    if not has_trailer(filepath):
        return False

    with open(filepath, "r+b") as f:
        f.seek(0, os.SEEK_END)
        f.truncate(f.tell() - TAG_SIZE)

    logger.debug("Removed ID3v1 trailer from %s", filepath)
    return True
