"""Configuration-related exceptions."""

from __future__ import annotations

from rampart.exceptions.base import RampartError


class ConfigError(RampartError, ValueError):
    """Raised when scanner configuration is invalid."""
