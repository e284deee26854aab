"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "rampart.yaml"

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset(
    {
        "schema_dir",
        "kubernetes_version",
        "strict",
        "ignore_missing_schemas",
    }
)
BOOLEAN_CONFIG_KEYS: tuple[str, ...] = ("strict", "ignore_missing_schemas")
