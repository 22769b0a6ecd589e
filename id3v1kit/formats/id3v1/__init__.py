"""ID3v1 format handlers."""

from id3v1kit.formats.id3v1.reader import ID3v1Reader
from id3v1kit.formats.id3v1.writer import ID3v1Writer

__all__ = ["ID3v1Reader", "ID3v1Writer"]
