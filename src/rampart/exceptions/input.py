"""Exceptions raised while splitting and converting manifest input."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from rampart.constants.messages import INVALID_INPUT_MESSAGE
from rampart.exceptions.base import RampartError

if TYPE_CHECKING:
    from rampart.model import Report


class InvalidInputError(RampartError, ValueError):
    """Raised when no usable document exists anywhere in the input."""

    def __init__(self, message: str = INVALID_INPUT_MESSAGE) -> None:
        super().__init__(message)


class DocumentConversionError(RampartError, ValueError):
    """Raised when one document cannot be converted to JSON.

    ``reports`` holds the reports already built for earlier documents of the
    same input, so callers can still surface them.
    """

    def __init__(
        self,
        message: str,
        *,
        index: int,
        reports: Sequence[Report] = (),
    ) -> None:
        super().__init__(message)
        self.index = index
        self.reports: tuple[Report, ...] = tuple(reports)
