"""Configuration loading and normalization for Rampart scans."""

from __future__ import annotations

from rampart.config.loader import load_config
from rampart.config.model import RampartConfig

__all__ = ["RampartConfig", "load_config"]
