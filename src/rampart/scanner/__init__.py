"""Rule evaluation engine."""

from __future__ import annotations

from typing import Any

__all__ = ["Ruleset"]


def __getattr__(name: str) -> Any:
    """Lazily expose scanner APIs to avoid import cycles at package import time."""
    if name == "Ruleset":
        from .ruleset import Ruleset

        return Ruleset
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
