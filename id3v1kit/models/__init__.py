"""Data models for ID3v1 tag representation."""

from id3v1kit.models.genre import (
    Genre,
    GenreClassification,
    UnknownGenre,
    byte_for,
    classification_for,
    find_genre,
    label_for,
)
from id3v1kit.models.fields import ID3v1Fields, ID3v11Fields
from id3v1kit.models.tag import ID3v1Tag, ID3v11Tag

__all__ = [
    "Genre",
    "GenreClassification",
    "UnknownGenre",
    "byte_for",
    "classification_for",
    "find_genre",
    "label_for",
    "ID3v1Fields",
    "ID3v11Fields",
    "ID3v1Tag",
    "ID3v11Tag",
]
