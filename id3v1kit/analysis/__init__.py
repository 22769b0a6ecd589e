"""Trailer analysis tools."""

from id3v1kit.analysis.trailer_analyzer import TrailerAnalysis, TrailerAnalyzer, TrailerIssue

__all__ = ["TrailerAnalysis", "TrailerAnalyzer", "TrailerIssue"]
