"""Root exception for Rampart."""

from __future__ import annotations


class RampartError(Exception):
    """Base class for all errors raised by Rampart."""
