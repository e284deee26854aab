"""Shared type aliases for Rampart."""

from .common import Bucket, JsonObject, JsonScalar, JsonValue, Predicate

__all__ = [
    "Bucket",
    "JsonObject",
    "JsonScalar",
    "JsonValue",
    "Predicate",
]
