"""Config loading and normalization for Rampart scans."""

from __future__ import annotations

import difflib
from pathlib import Path
from typing import Any

import yaml

from rampart.config.model import RampartConfig
from rampart.constants.config import ALLOWED_CONFIG_KEYS, BOOLEAN_CONFIG_KEYS, CONFIG_FILENAME
from rampart.constants.schemas import DEFAULT_KUBERNETES_VERSION
from rampart.exceptions import ConfigError


def load_config(root: Path, config_path: Path | None = None) -> RampartConfig:
    """Load and validate scanner config from ``rampart.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return RampartConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    unknown = sorted(str(key) for key in raw if key not in ALLOWED_CONFIG_KEYS)
    if unknown:
        hints = [_suggest_key(key, ALLOWED_CONFIG_KEYS) for key in unknown]
        detail = "; ".join(hint for hint in hints if hint)
        message = f"Unknown config key(s) in {path}: {', '.join(unknown)}"
        raise ConfigError(f"{message} ({detail})" if detail else message)

    for key in BOOLEAN_CONFIG_KEYS:
        if key in raw and not isinstance(raw[key], bool):
            raise ConfigError(f"`{key}` must be a boolean, got {type(raw[key]).__name__}")

    return RampartConfig(
        schema_dir=_resolve_schema_dir(raw.get("schema_dir"), path.parent),
        kubernetes_version=_kubernetes_version(raw.get("kubernetes_version")),
        strict=raw.get("strict", True),
        ignore_missing_schemas=raw.get("ignore_missing_schemas", False),
    )


def _resolve_schema_dir(value: Any, base: Path) -> Path | None:
    """Resolve ``schema_dir`` relative to the config file directory."""
    if value is None:
        return None
    if not isinstance(value, str) or not value.strip():
        raise ConfigError("`schema_dir` must be a non-empty string path")
    schema_dir = Path(value).expanduser()
    if not schema_dir.is_absolute():
        schema_dir = base / schema_dir
    return schema_dir.resolve()


def _kubernetes_version(value: Any) -> str:
    if value is None:
        return DEFAULT_KUBERNETES_VERSION
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise ConfigError("`kubernetes_version` must be a string such as `1.29.0` or `master`")
    version = str(value).strip().removeprefix("v")
    if not version:
        raise ConfigError("`kubernetes_version` must not be empty")
    return version


def _suggest_key(key: str, allowed: frozenset[str]) -> str:
    """Return a did-you-mean hint for an unknown config key."""
    matches = difflib.get_close_matches(key, sorted(allowed), n=1, cutoff=0.6)
    return f"did you mean `{matches[0]}`?" if matches else ""
