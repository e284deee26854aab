"""Reporting package for Rampart outputs."""

from __future__ import annotations

from typing import Any

__all__ = ["StdoutReporter", "render_json", "reports_payload", "write_reports"]


def __getattr__(name: str) -> Any:
    """Lazily expose reporting APIs to avoid import cycles at package import time."""
    if name in {"render_json", "reports_payload", "write_reports"}:
        from . import writer

        return getattr(writer, name)
    if name == "StdoutReporter":
        from .stdout import StdoutReporter

        return StdoutReporter
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
