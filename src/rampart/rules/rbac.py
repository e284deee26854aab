"""Predicates inspecting RBAC roles, bindings and operator placement."""

from __future__ import annotations

from rampart.constants.rules import (
    CLUSTER_ADMIN_ROLE,
    CORE_API_GROUP,
    CRD_WRITE_VERBS,
    ESCALATION_VERBS,
    PROTECTED_NAMESPACES,
    SECRET_READ_VERBS,
    VOLUME_WRITE_VERBS,
    WILDCARD,
)
from rampart.rules.common import as_list, get_path, grants, iter_policy_rules, verbs_of
from rampart.types import JsonObject

_ALL: frozenset[str] = frozenset({WILDCARD})


def _count_rules(
    document: JsonObject,
    *,
    api_group: str,
    resources: frozenset[str],
    verbs: frozenset[str],
    all_verbs: frozenset[str] = frozenset(),
) -> int:
    """Count policy rules granting ``resources`` with a wildcard or any of ``verbs``.

    When ``all_verbs`` is set, a rule also matches if it grants every verb in it.
    """
    matched = 0
    for rule in iter_policy_rules(document):
        if not grants(rule, api_group=api_group, resources=resources):
            continue
        granted = verbs_of(rule)
        if WILDCARD in granted or granted & verbs or (all_verbs and all_verbs <= granted):
            matched += 1
    return matched


def star_all(document: JsonObject) -> int:
    """Count rules granting every verb on every core API resource."""
    return sum(
        1
        for rule in iter_policy_rules(document)
        if grants(rule, api_group=CORE_API_GROUP, resources=_ALL) and WILDCARD in verbs_of(rule)
    )


def exec_pods(document: JsonObject) -> int:
    return _count_rules(
        document,
        api_group=CORE_API_GROUP,
        resources=frozenset({"pods", "pods/exec"}),
        verbs=frozenset(),
        all_verbs=frozenset({"get", "create"}),
    )


def remove_events(document: JsonObject) -> int:
    return _count_rules(
        document,
        api_group=CORE_API_GROUP,
        resources=frozenset({"events"}),
        verbs=frozenset({"delete", "deletecollection"}),
    )


def custom_resource_definitions(document: JsonObject) -> int:
    return _count_rules(
        document,
        api_group="apiextensions.k8s.io",
        resources=frozenset({"customresourcedefinitions"}),
        verbs=CRD_WRITE_VERBS,
    )


def persistent_volumes(document: JsonObject) -> int:
    return _count_rules(
        document,
        api_group=CORE_API_GROUP,
        resources=frozenset({"persistentvolumes", "persistentvolumeclaims"}),
        verbs=VOLUME_WRITE_VERBS,
    )


def secrets(document: JsonObject) -> int:
    return _count_rules(
        document,
        api_group=CORE_API_GROUP,
        resources=frozenset({"secrets"}),
        verbs=SECRET_READ_VERBS,
    )


def escalation_verbs(document: JsonObject) -> int:
    """Count rules granting escalate, bind or impersonate."""
    return sum(1 for rule in iter_policy_rules(document) if verbs_of(rule) & ESCALATION_VERBS)


def cluster_admin(document: JsonObject) -> int:
    return int(get_path(document, "roleRef", "name") == CLUSTER_ADMIN_ROLE)


def default_namespace(document: JsonObject) -> int:
    """Detect operators placed in, or bound to, the default or kube-system namespace."""
    kind = document.get("kind")
    if kind == "Namespace":
        return int(get_path(document, "metadata", "name") in PROTECTED_NAMESPACES)
    if kind == "ClusterRoleBinding":
        return sum(
            1
            for subject in as_list(document.get("subjects"))
            if isinstance(subject, dict) and subject.get("namespace") in PROTECTED_NAMESPACES
        )
    return int(get_path(document, "metadata", "namespace") in PROTECTED_NAMESPACES)
