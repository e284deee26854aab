"""Manifest input parsers."""

from .manifest import detect_line_break, split_documents

__all__ = ["detect_line_break", "split_documents"]
