"""Shared helpers for rule predicates.

Predicates only read the manifest; none of these helpers mutate their input.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator

from rampart.constants.rules import (
    CONTAINER_LIST_KEYS,
    CORE_API_GROUP,
    CRONJOB_KIND,
    POD_KIND,
    WILDCARD,
)
from rampart.types import JsonObject, JsonValue


def get_path(document: JsonValue, *keys: str) -> JsonValue:
    """Return the value at a nested key path, or None when any step is missing."""
    current = document
    for key in keys:
        if not isinstance(current, dict):
            return None
        current = current.get(key)
    return current


def as_mapping(value: JsonValue) -> JsonObject:
    """Return ``value`` when it is a mapping, else an empty one."""
    return value if isinstance(value, dict) else {}


def as_list(value: JsonValue) -> list[JsonValue]:
    """Return ``value`` when it is a list, else an empty one."""
    return value if isinstance(value, list) else []


def as_strings(value: JsonValue) -> frozenset[str]:
    """Return the string members of a list value."""
    return frozenset(item for item in as_list(value) if isinstance(item, str))


def pod_spec(document: JsonObject) -> JsonObject:
    """Locate the pod spec of a workload manifest."""
    kind = document.get("kind")
    if kind == POD_KIND:
        return as_mapping(get_path(document, "spec"))
    if kind == CRONJOB_KIND:
        return as_mapping(get_path(document, "spec", "jobTemplate", "spec", "template", "spec"))
    return as_mapping(get_path(document, "spec", "template", "spec"))


def iter_containers(document: JsonObject) -> Iterator[JsonObject]:
    """Yield every container, init container and ephemeral container."""
    spec = pod_spec(document)
    for key in CONTAINER_LIST_KEYS:
        for container in as_list(spec.get(key)):
            if isinstance(container, dict):
                yield container


def container_security_context(container: JsonObject) -> JsonObject:
    return as_mapping(container.get("securityContext"))


def pod_security_context(document: JsonObject) -> JsonObject:
    return as_mapping(pod_spec(document).get("securityContext"))


def count_containers(document: JsonObject, check: Callable[[JsonObject], bool]) -> int:
    """Count containers for which ``check(container)`` is truthy."""
    return sum(1 for container in iter_containers(document) if check(container))


def iter_policy_rules(document: JsonObject) -> Iterator[JsonObject]:
    """Yield each entry of a Role or ClusterRole ``rules`` list."""
    for rule in as_list(document.get("rules")):
        if isinstance(rule, dict):
            yield rule


def grants(
    rule: JsonObject,
    *,
    api_group: str,
    resources: frozenset[str],
) -> bool:
    """Return True when a policy rule covers any of ``resources`` in ``api_group``.

    A missing ``apiGroups`` list is read as the core group. Wildcard groups and
    resources match everything.
    """
    groups = as_strings(rule.get("apiGroups")) if "apiGroups" in rule else frozenset({CORE_API_GROUP})
    if api_group not in groups and WILDCARD not in groups:
        return False
    granted = as_strings(rule.get("resources"))
    return WILDCARD in granted or bool(granted & resources)


def verbs_of(rule: JsonObject) -> frozenset[str]:
    return as_strings(rule.get("verbs"))
