"""Shared file I/O helpers."""

from .atomic import write_text_atomic
from .files import read_manifest

__all__ = ["read_manifest", "write_text_atomic"]
