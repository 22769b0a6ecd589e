"""ID3v1.1 format handlers."""

from id3v1kit.formats.id3v11.reader import ID3v11Reader
from id3v1kit.formats.id3v11.writer import ID3v11Writer

__all__ = ["ID3v11Reader", "ID3v11Writer"]
