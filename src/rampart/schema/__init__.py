"""Kubernetes schema validation used before rules are dispatched."""

from .location import resolve_schema_root, schema_file_name, schema_path
from .models import FieldError, SchemaValidator, ValidationResult
from .validator import KubernetesSchemaValidator

__all__ = [
    "FieldError",
    "KubernetesSchemaValidator",
    "SchemaValidator",
    "ValidationResult",
    "resolve_schema_root",
    "schema_file_name",
    "schema_path",
]
