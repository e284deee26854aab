"""Frozen result types and the validator protocol."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from rampart.config import RampartConfig
from rampart.types import JsonValue


@dataclass(frozen=True)
class FieldError:
    """One schema violation located at a document field."""

    field: str
    description: str

    def describe(self) -> str:
        return f"{self.field}: {self.description}"


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one resource.

    ``kind`` is empty when the resource declares no kind.
    """

    kind: str
    api_version: str = ""
    errors: tuple[FieldError, ...] = ()

    @property
    def valid(self) -> bool:
        return bool(self.kind) and not self.errors


class SchemaValidator(Protocol):
    """Validates a parsed manifest against Kubernetes API schemas."""

    def validate(self, document: JsonValue, config: RampartConfig) -> list[ValidationResult]:
        """Return one result per resource; raise ``SchemaError`` when validation cannot run."""
        ...
