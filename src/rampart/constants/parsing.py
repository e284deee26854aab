"""Constants for splitting and normalizing manifest input."""

from __future__ import annotations

DOCUMENT_SEPARATOR: str = "---"
LF: str = "\n"
CRLF: str = "\r\n"
INPUT_ENCODING: str = "utf-8-sig"

UNKNOWN_KIND: str = "Unknown"
UNDEFINED_NAME: str = "undefined"
DEFAULT_NAMESPACE: str = "default"
