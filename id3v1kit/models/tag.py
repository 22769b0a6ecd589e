"""
Decoded/encoded ID3v1 tag records.
"""

from dataclasses import dataclass, field

from id3v1kit.models.fields import ID3v1Fields, ID3v11Fields
from id3v1kit.utils.text_field import DEFAULT_ENCODING


@dataclass(frozen=True)
class ID3v1Tag:
    """
    An ID3v1 tag.

    Built either by decoding trailer bytes or by encoding fields; in both
    cases ``data`` is the exact 128 byte serialized form.

    Attributes:
        fields: Tag fields
        data: Serialized trailer (128 bytes)
        encoding: Text encoding used for the string fields
    """

    fields: ID3v1Fields
    data: bytes = field(repr=False)
    encoding: str = DEFAULT_ENCODING

    version = "1"

    def __len__(self) -> int:
        return len(self.data)


@dataclass(frozen=True)
class ID3v11Tag:
    """
    An ID3v1.1 tag.

    Attributes:
        fields: Tag fields, including the optional track number
        data: Serialized trailer (128 bytes)
        encoding: Text encoding used for the string fields
    """

    fields: ID3v11Fields
    data: bytes = field(repr=False)
    encoding: str = DEFAULT_ENCODING

    version = "1.1"

    @property
    def has_track_number(self) -> bool:
        return self.fields.track_number is not None

    def __len__(self) -> int:
        return len(self.data)
