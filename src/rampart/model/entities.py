"""Rule, finding and report entities."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from rampart.constants.parsing import UNKNOWN_KIND
from rampart.exceptions import RuleNotApplicableError
from rampart.types import JsonValue, Predicate


@dataclass(frozen=True)
class ManifestDocument:
    """One self-contained manifest in normalized JSON form."""

    index: int
    content: str

    def load(self) -> JsonValue:
        """Parse the normalized content into a fresh Python object."""
        return json.loads(self.content)


@dataclass(frozen=True)
class Rule:
    """Immutable catalog entry binding a predicate to its scoring metadata."""

    rule_id: str
    selector: str
    reason: str
    kinds: frozenset[str]
    points: int
    predicate: Predicate = field(compare=False, repr=False)
    advise_weight: int = 0
    link: str = ""

    def applies_to(self, kind: str) -> bool:
        """Return True when documents of ``kind`` are inspected by this rule."""
        return kind in self.kinds

    def evaluate(self, document: JsonValue) -> int:
        """Return the predicate match count for a document.

        Raises ``RuleNotApplicableError`` when the document kind is outside
        ``kinds``.
        """
        kind = document_kind(document)
        if not isinstance(document, dict) or not self.applies_to(kind):
            raise RuleNotApplicableError(self.rule_id, kind)
        return self.predicate(document)

    def to_ref(self, containers: int) -> RuleRef:
        """Build the per-evaluation record for this rule."""
        return RuleRef(
            containers=containers,
            id=self.rule_id,
            points=self.points,
            reason=self.reason,
            selector=self.selector,
            weight=self.advise_weight,
            link=self.link,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize catalog metadata for listing."""
        return {
            "id": self.rule_id,
            "selector": self.selector,
            "reason": self.reason,
            "kinds": sorted(self.kinds),
            "points": self.points,
            "weight": self.advise_weight,
            "link": self.link,
        }


@dataclass(frozen=True)
class RuleRef:
    """Outcome of one rule against one document."""

    containers: int
    id: str
    points: int
    reason: str
    selector: str
    weight: int = 0
    link: str = ""

    @property
    def dedupe_key(self) -> tuple[str, int]:
        return (self.id, self.containers)

    def to_dict(self) -> dict[str, Any]:
        return {
            "containers": self.containers,
            "id": self.id,
            "points": self.points,
            "reason": self.reason,
            "selector": self.selector,
            "weight": self.weight,
            "link": self.link,
        }


@dataclass
class RuleScoring:
    """Rule outcomes split into critical, passed and advise buckets."""

    critical: list[RuleRef] = field(default_factory=list)
    passed: list[RuleRef] = field(default_factory=list)
    advise: list[RuleRef] = field(default_factory=list)

    def to_dict(self) -> dict[str, list[dict[str, Any]]]:
        return {
            "critical": [ref.to_dict() for ref in self.critical],
            "passed": [ref.to_dict() for ref in self.passed],
            "advise": [ref.to_dict() for ref in self.advise],
        }


@dataclass
class Report:
    """Scored evaluation of a single manifest document."""

    object_name: str
    file_name: str
    message: str = ""
    score: int = 0
    valid: bool = False
    rules: list[RuleRef] = field(default_factory=list)
    scoring: RuleScoring = field(default_factory=RuleScoring)

    @property
    def failed(self) -> bool:
        """True when the document is invalid or scored below zero."""
        return not self.valid or self.score < 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "object": self.object_name,
            "fileName": self.file_name,
            "message": self.message,
            "score": self.score,
            "valid": self.valid,
            "rules": [ref.to_dict() for ref in self.rules],
            "scoring": self.scoring.to_dict(),
        }


def document_kind(document: JsonValue) -> str:
    """Return the document kind, or ``Unknown`` when absent or not a mapping."""
    if isinstance(document, dict):
        kind = document.get("kind")
        if isinstance(kind, str) and kind:
            return kind
    return UNKNOWN_KIND
