"""Format handlers for ID3v1 and ID3v1.1."""

from id3v1kit.formats.id3v1 import ID3v1Reader, ID3v1Writer
from id3v1kit.formats.id3v11 import ID3v11Reader, ID3v11Writer

__all__ = ["ID3v1Reader", "ID3v1Writer", "ID3v11Reader", "ID3v11Writer"]
