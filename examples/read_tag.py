#!/usr/bin/env python3
"""
Example: Read an ID3v1 tag

Decodes the trailer of a media file and prints the fields plus any
problems the analyzer finds.
"""

import sys

sys.path.insert(0, "..")

from id3v1kit import TagError, decode_any
from id3v1kit.analysis import TrailerAnalyzer
from id3v1kit.formats.file_io import read_trailing_bytes


def main(path: str, encoding: str = "latin-1"):
    data = read_trailing_bytes(path)

    try:
        tag = decode_any(data, encoding)
    except TagError as e:
        print(f"No usable tag: {e}")
        return 1

    # Fields
    fields = tag.fields
    print(f"ID3v{tag.version} ({tag.encoding})")
    print(f"  Title:   {fields.title}")
    print(f"  Artist:  {fields.artist}")
    print(f"  Album:   {fields.album}")
    print(f"  Year:    {fields.year}")
    print(f"  Comment: {fields.comment}")
    if tag.version == "1.1":
        print(f"  Track:   {fields.track_number}")
    print(f"  Genre:   {fields.genre} ({fields.genre.code})")
    print()

    # Findings
    analysis = TrailerAnalyzer(encoding).analyze(data)
    for issue in analysis.errors + analysis.warnings:
        print(f"  [{issue.severity}] {issue.area} @0x{issue.offset:02X}: {issue.message}")

    return 0


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: read_tag.py FILE [ENCODING]")
        sys.exit(2)
    sys.exit(main(*sys.argv[1:3]))
