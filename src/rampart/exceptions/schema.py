"""Schema validator exceptions."""

from __future__ import annotations

from rampart.exceptions.base import RampartError


class SchemaError(RampartError):
    """Raised when a document cannot be checked against its schema."""


class SchemaNotFoundError(SchemaError):
    """Raised when no schema exists for a document's kind and apiVersion."""


class SchemaLoadError(SchemaError):
    """Raised when a schema file exists but cannot be read or parsed."""
