"""Rule catalog and predicate exceptions."""

from __future__ import annotations

from rampart.exceptions.base import RampartError


class RuleNotApplicableError(RampartError):
    """Signals that a rule's kind filter excludes the current document."""

    def __init__(self, rule_id: str, kind: str) -> None:
        super().__init__(f"rule {rule_id} does not apply to kind {kind!r}")
        self.rule_id = rule_id
        self.kind = kind


class CatalogError(RampartError, ValueError):
    """Raised when a rule catalog is malformed."""
