"""Shared exception hierarchy for Rampart."""

from __future__ import annotations

from .base import RampartError
from .config import ConfigError
from .input import DocumentConversionError, InvalidInputError
from .rules import CatalogError, RuleNotApplicableError
from .schema import SchemaError, SchemaLoadError, SchemaNotFoundError

__all__ = [
    "CatalogError",
    "ConfigError",
    "DocumentConversionError",
    "InvalidInputError",
    "RampartError",
    "RuleNotApplicableError",
    "SchemaError",
    "SchemaLoadError",
    "SchemaNotFoundError",
]
