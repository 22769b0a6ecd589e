#!/usr/bin/env python3
"""
Example: Retag a file

Reads the existing tag (if any), changes a few fields and writes the
result back as ID3v1.1. The audio data in front of the trailer is never
touched.
"""

import sys
from dataclasses import replace

sys.path.insert(0, "..")

from id3v1kit import Genre, ID3v11Fields, ID3v11Reader, ID3v11Writer, TagError
from id3v1kit.formats.file_io import has_trailer


def main(path: str):
    # Start from the current fields, or an empty tag
    tag = ID3v11Reader.read(path) if has_trailer(path) else None
    fields = tag.fields if tag else ID3v11Fields()
    print(f"Before: {fields}")

    fields = replace(fields, album="Greatest Hits", track_number=1, genre=Genre.ROCK)

    # The comment shrinks to 28 bytes once a track number is set
    if len(fields.comment.encode("latin-1")) > 28:
        fields = replace(fields, comment=fields.comment[:28])

    try:
        tag = ID3v11Writer.write(fields, path)
    except TagError as e:
        print(f"Cannot write tag: {e}")
        return 1

    print(f"After:  {tag.fields}")
    print(f"Trailer: {tag.data.hex(' ')}")
    return 0


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print("Usage: retag_file.py FILE")
        sys.exit(2)
    sys.exit(main(sys.argv[1]))
