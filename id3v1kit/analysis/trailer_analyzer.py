"""
ID3v1 trailer analyzer.

Inspects a buffer's trailer without raising: every finding, good or bad,
becomes a TrailerIssue so tools can show a full report even for broken
tags.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from id3v1kit.formats.layout import (
    DEFAULT_ENCODING,
    FIELD_SLICES,
    GENRE_INDEX,
    HEADER,
    SEPARATOR_INDEX,
    SHORT_COMMENT_SLICE,
    TAG_SIZE,
    TRACK_NUMBER_INDEX,
    has_track_number,
)
from id3v1kit.models.genre import classification_for
from id3v1kit.utils.text_field import decode_field, resolve_encoding, terminator_index
from id3v1kit.utils.validation import FieldNotDecodableError, is_year

# Genre byte 255 is the customary "no genre" value
NO_GENRE = 0xFF


@dataclass
class TrailerIssue:
    """A single analysis finding."""

    severity: str  # "error", "warning", "info"
    area: str
    offset: int
    message: str
    expected: str = ""
    actual: str = ""


@dataclass
class TrailerAnalysis:
    """Result of analyzing a trailer."""

    size: int
    valid: bool = False
    version: Optional[str] = None
    trailer: bytes = field(default=b"", repr=False)
    errors: List[TrailerIssue] = field(default_factory=list)
    warnings: List[TrailerIssue] = field(default_factory=list)
    info: List[TrailerIssue] = field(default_factory=list)

    @property
    def total_issues(self) -> int:
        return len(self.errors) + len(self.warnings) + len(self.info)


class TrailerAnalyzer:
    """
    Analyze the ID3v1 trailer at the end of a buffer.

    Example:
        analysis = TrailerAnalyzer(encoding="cp1252").analyze(data)
        for issue in analysis.errors:
            print(issue.area, issue.message)
    """

    def __init__(self, encoding: str = DEFAULT_ENCODING):
        resolve_encoding(encoding)
        self.encoding = encoding
        self.issues: List[TrailerIssue] = []
        self.trailer: bytes = b""

    def analyze(self, data: bytes) -> TrailerAnalysis:
        """Run all checks and return the collected findings."""
        self.issues = []
        self.trailer = b""

        result = TrailerAnalysis(size=len(data))

        if self._check_size(data) and self._check_header(data):
            self.trailer = bytes(data[-TAG_SIZE:])
            self._check_text_fields()
            self._check_comment()
            self._check_year()
            self._check_genre()
            result.trailer = self.trailer
            result.version = "1.1" if has_track_number(self.trailer) else "1"

        result.errors = [i for i in self.issues if i.severity == "error"]
        result.warnings = [i for i in self.issues if i.severity == "warning"]
        result.info = [i for i in self.issues if i.severity == "info"]
        result.valid = not result.errors

        return result

    def _add_issue(
        self,
        severity: str,
        area: str,
        offset: int,
        message: str,
        expected: str = "",
        actual: str = "",
    ) -> None:
        self.issues.append(
            TrailerIssue(
                severity=severity,
                area=area,
                offset=offset,
                message=message,
                expected=expected,
                actual=actual,
            )
        )

    def _check_size(self, data: bytes) -> bool:
        if len(data) < TAG_SIZE:
            self._add_issue(
                "error",
                "Size",
                0,
                "Too short to hold an ID3v1 tag",
                f">= {TAG_SIZE} bytes",
                f"{len(data)} bytes",
            )
            return False
        self._add_issue("info", "Size", 0, f"{len(data)} bytes, trailer in the last {TAG_SIZE}")
        return True

    def _check_header(self, data: bytes) -> bool:
        found = bytes(data[-TAG_SIZE:][:3])
        if found != HEADER:
            self._add_issue(
                "error",
                "Header",
                0,
                "Missing TAG marker",
                HEADER.decode("ascii"),
                found.decode("ascii", errors="replace"),
            )
            return False
        self._add_issue("info", "Header", 0, "TAG marker present")
        return True

    def _check_text_fields(self) -> None:
        for name in ("title", "artist", "album", "year"):
            start, end = FIELD_SLICES[name]
            self._check_field(name.capitalize(), start, end)

    def _check_comment(self) -> None:
        if has_track_number(self.trailer):
            start, end = SHORT_COMMENT_SLICE
            self._check_field("Comment", start, end)
            self._add_issue(
                "info",
                "Track",
                TRACK_NUMBER_INDEX,
                f"ID3v1.1 track number {self.trailer[TRACK_NUMBER_INDEX]}",
            )
            return

        start, end = FIELD_SLICES["comment"]
        self._check_field("Comment", start, end)
        if self.trailer[SEPARATOR_INDEX] != 0 and self.trailer[TRACK_NUMBER_INDEX] == 0:
            self._add_issue(
                "info",
                "Track",
                SEPARATOR_INDEX,
                "Comment uses all 30 bytes, no room for a track number",
            )

    def _check_field(self, area: str, start: int, end: int) -> None:
        raw = self.trailer[start:end]
        try:
            text = decode_field(raw, self.encoding, field=area.lower())
        except FieldNotDecodableError as e:
            self._add_issue("error", area, start, str(e), self.encoding)
            return

        cut = terminator_index(raw)
        if any(raw[cut:]):
            self._add_issue(
                "warning",
                area,
                start + cut,
                "Non-zero bytes after terminator (ignored)",
                "00 padding",
                raw[cut:].rstrip(b"\x00").hex(" ").upper(),
            )
        elif cut and raw[cut - 1 : cut] == b" ":
            self._add_issue("info", area, start, "Space padded")

        if text:
            self._add_issue("info", area, start, repr(text))

    def _check_year(self) -> None:
        start, end = FIELD_SLICES["year"]
        try:
            year = decode_field(self.trailer[start:end], self.encoding)
        except FieldNotDecodableError:
            return

        if year and not is_year(year):
            self._add_issue("warning", "Year", start, "Year is not four digits", "YYYY", year)

    def _check_genre(self) -> None:
        code = self.trailer[GENRE_INDEX]
        genre = classification_for(code)

        if genre.is_recognized:
            self._add_issue("info", "Genre", GENRE_INDEX, f"{code}: {genre.label}")
        elif code == NO_GENRE:
            self._add_issue("info", "Genre", GENRE_INDEX, "No genre (255)")
        else:
            self._add_issue(
                "warning",
                "Genre",
                GENRE_INDEX,
                f"Unassigned genre code {code}",
                "0-191 or 255",
                str(code),
            )
