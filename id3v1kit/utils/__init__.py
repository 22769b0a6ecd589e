"""Utility functions for id3v1kit."""

from id3v1kit.utils.text_field import decode_field, encode_field, resolve_encoding
from id3v1kit.utils.validation import TagError, validate_track_number

__all__ = [
    "decode_field",
    "encode_field",
    "resolve_encoding",
    "TagError",
    "validate_track_number",
]
