"""Core data models for Rampart."""

from .entities import ManifestDocument, Report, Rule, RuleRef, RuleScoring, document_kind

__all__ = [
    "ManifestDocument",
    "Report",
    "Rule",
    "RuleRef",
    "RuleScoring",
    "document_kind",
]
