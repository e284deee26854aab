"""Validate manifests against Kubernetes JSON schemas with ``jsonschema``."""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any

import jsonschema
from jsonschema.exceptions import SchemaError as JsonSchemaDefinitionError

from rampart.config import RampartConfig
from rampart.constants.schemas import DEFAULT_SCHEMA_ROOT, LIST_KIND, STRUCTURAL_MANIFEST_SCHEMA
from rampart.exceptions import SchemaLoadError, SchemaNotFoundError
from rampart.schema.location import resolve_schema_root, schema_path
from rampart.schema.models import FieldError, ValidationResult
from rampart.types import JsonValue

logger = logging.getLogger(__name__)

_ROOT_FIELD: str = "(root)"


class KubernetesSchemaValidator:
    """Default schema validator.

    Schemas come from a local bundle; without one, documents are checked
    against a structural manifest schema only. Schemas are never fetched
    over the network.
    """

    def __init__(self, *, default_root: Path = DEFAULT_SCHEMA_ROOT) -> None:
        self._default_root = default_root

    def validate(self, document: JsonValue, config: RampartConfig) -> list[ValidationResult]:
        root = resolve_schema_root(config, default_root=self._default_root)
        if root is None:
            logger.debug("no schema bundle found, using structural manifest checks")
        return [self._validate_resource(resource, root, config) for resource in _resources(document)]

    def _validate_resource(
        self,
        resource: JsonValue,
        root: Path | None,
        config: RampartConfig,
    ) -> ValidationResult:
        if not isinstance(resource, dict):
            return ValidationResult(kind="")
        kind = resource.get("kind")
        if not isinstance(kind, str) or not kind:
            return ValidationResult(kind="")
        api_version = resource.get("apiVersion")
        api_version = api_version if isinstance(api_version, str) else ""

        if root is None:
            validator = _structural_validator()
        else:
            if not api_version:
                return ValidationResult(
                    kind=kind,
                    errors=(FieldError(field=_ROOT_FIELD, description="apiVersion is required"),),
                )
            path = schema_path(root, config, kind, api_version)
            if not path.is_file():
                if config.ignore_missing_schemas:
                    logger.debug("skipping validation of %s %s, schema missing at %s", api_version, kind, path)
                    return ValidationResult(kind=kind, api_version=api_version)
                raise SchemaNotFoundError(f"No schema found for {kind} ({api_version}) at {path}")
            validator = _load_validator(path)

        return ValidationResult(kind=kind, api_version=api_version, errors=_field_errors(validator, resource))


def _resources(document: JsonValue) -> list[JsonValue]:
    """Expand ``kind: List`` documents into their items."""
    if isinstance(document, dict) and document.get("kind") == LIST_KIND:
        items = document.get("items")
        return list(items) if isinstance(items, list) else []
    return [document]


def _field_errors(validator: Any, resource: JsonValue) -> tuple[FieldError, ...]:
    errors = [
        FieldError(field=_field_name(error), description=error.message)
        for error in validator.iter_errors(resource)
    ]
    return tuple(sorted(errors, key=lambda error: (error.field, error.description)))


def _field_name(error: jsonschema.ValidationError) -> str:
    return ".".join(str(part) for part in error.absolute_path) or _ROOT_FIELD


def _build_validator(schema: dict[str, Any]) -> Any:
    validator_class = jsonschema.validators.validator_for(schema, default=jsonschema.Draft4Validator)
    validator_class.check_schema(schema)
    return validator_class(schema)


@lru_cache(maxsize=1)
def _structural_validator() -> Any:
    return _build_validator(STRUCTURAL_MANIFEST_SCHEMA)


@lru_cache(maxsize=256)
def _load_validator(path: Path) -> Any:
    """Read, check and compile the schema at ``path``."""
    try:
        schema = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise SchemaLoadError(f"Failed to load schema {path}: {exc}") from exc
    if not isinstance(schema, dict):
        raise SchemaLoadError(f"Schema {path} must be a JSON object")
    try:
        return _build_validator(schema)
    except JsonSchemaDefinitionError as exc:
        raise SchemaLoadError(f"Schema {path} is not a valid JSON Schema: {exc.message}") from exc
