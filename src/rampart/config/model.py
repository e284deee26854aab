"""Config data model for Rampart scans."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from rampart.constants.schemas import DEFAULT_KUBERNETES_VERSION


@dataclass(frozen=True)
class RampartConfig:
    """Resolved scanner config, forwarded to the schema validator."""

    schema_dir: Path | None = None
    kubernetes_version: str = DEFAULT_KUBERNETES_VERSION
    strict: bool = True
    ignore_missing_schemas: bool = False
