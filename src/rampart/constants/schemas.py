"""Constants for locating and applying Kubernetes JSON schemas."""

from __future__ import annotations

from pathlib import Path
from typing import Any

DEFAULT_SCHEMA_ROOT: Path = Path("/schemas")
SCHEMA_BUNDLE_DIRNAME: str = "kubernetes-json-schema"
DEFAULT_KUBERNETES_VERSION: str = "master"
STANDALONE_SUFFIX: str = "-standalone"
STRICT_SUFFIX: str = "-strict"
LIST_KIND: str = "List"

# Checked when no schema bundle is available on disk.
STRUCTURAL_MANIFEST_SCHEMA: dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-04/schema#",
    "type": "object",
    "required": ["apiVersion", "kind"],
    "properties": {
        "apiVersion": {"type": "string", "minLength": 1},
        "kind": {"type": "string", "minLength": 1},
        "metadata": {
            "type": "object",
            "properties": {
                "name": {"type": "string"},
                "namespace": {"type": "string"},
                "labels": {"type": "object"},
                "annotations": {"type": "object"},
            },
        },
    },
}
