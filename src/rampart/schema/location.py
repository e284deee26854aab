"""Resolve where Kubernetes JSON schemas live and how files are named.

The on-disk bundle follows the ``kubernetes-json-schema`` layout::

    <root>/kubernetes-json-schema/<version>/<version>-standalone[-strict]/<kind>[-<group>]-<apiversion>.json
"""

from __future__ import annotations

from pathlib import Path

from rampart.config import RampartConfig
from rampart.constants.schemas import (
    DEFAULT_SCHEMA_ROOT,
    SCHEMA_BUNDLE_DIRNAME,
    STANDALONE_SUFFIX,
    STRICT_SUFFIX,
)


def _version_dir(root: Path, version: str) -> tuple[Path, str]:
    normalized = version if version == "master" else f"v{version}"
    return root / SCHEMA_BUNDLE_DIRNAME / normalized, normalized


def resolve_schema_root(config: RampartConfig, *, default_root: Path = DEFAULT_SCHEMA_ROOT) -> Path | None:
    """Pick the schema root: explicit config, then the default bundle, else None."""
    if config.schema_dir is not None:
        return config.schema_dir
    version_dir, normalized = _version_dir(default_root, config.kubernetes_version)
    if (version_dir / f"{normalized}{STANDALONE_SUFFIX}").is_dir():
        return default_root
    return None


def schema_file_name(kind: str, api_version: str) -> str:
    """Return the schema file name for a kind/apiVersion pair.

    ``apps/v1`` Deployment maps to ``deployment-apps-v1.json``;
    ``rbac.authorization.k8s.io/v1`` ClusterRole to ``clusterrole-rbac-v1.json``.
    """
    group, _, version = api_version.rpartition("/")
    suffix = f"-{version.lower()}"
    if group:
        suffix = f"-{group.split('.')[0].lower()}{suffix}"
    return f"{kind.lower()}{suffix}.json"


def schema_path(root: Path, config: RampartConfig, kind: str, api_version: str) -> Path:
    """Return the absolute path of the schema for ``kind`` under ``root``."""
    version_dir, normalized = _version_dir(root, config.kubernetes_version)
    flavour = f"{normalized}{STANDALONE_SUFFIX}{STRICT_SUFFIX if config.strict else ''}"
    return version_dir / flavour / schema_file_name(kind, api_version)
