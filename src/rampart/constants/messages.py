"""Report messages produced by the evaluation engine."""

from __future__ import annotations

UNKNOWN_SCHEMA_MESSAGE: str = "This resource is invalid, unknown schema"
KIND_NOT_FOUND_MESSAGE: str = "This resource is invalid, Kubernetes kind not found"
UNSUPPORTED_KIND_MESSAGE: str = "resource kind not supported by rampart"
PASSED_MESSAGE_TEMPLATE: str = "Passed with a score of {score} points"
FAILED_MESSAGE_TEMPLATE: str = "Failed with a score of {score} points"
INVALID_INPUT_MESSAGE: str = "Invalid input"
