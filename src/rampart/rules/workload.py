"""Predicates inspecting pod specs of workload manifests."""

from __future__ import annotations

from collections.abc import Callable

from rampart.constants.rules import MIN_UNPRIVILEGED_UID
from rampart.rules.common import (
    as_mapping,
    as_strings,
    container_security_context,
    count_containers,
    get_path,
    pod_security_context,
    pod_spec,
)
from rampart.types import JsonObject, JsonValue


def _is_true(value: JsonValue) -> bool:
    return value is True


def _effective(container: JsonObject, pod_context: JsonObject, key: str) -> JsonValue:
    """Resolve a security setting, letting the container override the pod."""
    context = container_security_context(container)
    if key in context:
        return context[key]
    return pod_context.get(key)


def _capabilities(container: JsonObject, field: str) -> frozenset[str]:
    capabilities = as_mapping(container_security_context(container).get("capabilities"))
    return frozenset(cap.upper() for cap in as_strings(capabilities.get(field)))


def privileged(document: JsonObject) -> int:
    return count_containers(document, lambda c: _is_true(container_security_context(c).get("privileged")))


def cap_sys_admin(document: JsonObject) -> int:
    return count_containers(document, lambda c: "SYS_ADMIN" in _capabilities(c, "add"))


def allow_privilege_escalation(document: JsonObject) -> int:
    return count_containers(
        document,
        lambda c: _is_true(container_security_context(c).get("allowPrivilegeEscalation")),
    )


def host_network(document: JsonObject) -> int:
    return int(_is_true(pod_spec(document).get("hostNetwork")))


def host_pid(document: JsonObject) -> int:
    return int(_is_true(pod_spec(document).get("hostPID")))


def host_ipc(document: JsonObject) -> int:
    return int(_is_true(pod_spec(document).get("hostIPC")))


def run_as_non_root(document: JsonObject) -> int:
    pod_context = pod_security_context(document)
    return count_containers(document, lambda c: _is_true(_effective(c, pod_context, "runAsNonRoot")))


def run_as_user(document: JsonObject) -> int:
    """Count containers running as a uid above the reserved system range."""
    pod_context = pod_security_context(document)

    def _high_uid(container: JsonObject) -> bool:
        uid = _effective(container, pod_context, "runAsUser")
        return isinstance(uid, int) and not isinstance(uid, bool) and uid > MIN_UNPRIVILEGED_UID

    return count_containers(document, _high_uid)


def read_only_root_filesystem(document: JsonObject) -> int:
    return count_containers(
        document,
        lambda c: _is_true(container_security_context(c).get("readOnlyRootFilesystem")),
    )


def cap_drop_all(document: JsonObject) -> int:
    return count_containers(document, lambda c: "ALL" in _capabilities(c, "drop"))


def cap_drop_any(document: JsonObject) -> int:
    return count_containers(document, lambda c: bool(_capabilities(c, "drop")))


def seccomp_any(document: JsonObject) -> int:
    pod_context = pod_security_context(document)
    return count_containers(
        document,
        lambda c: bool(as_mapping(_effective(c, pod_context, "seccompProfile")).get("type")),
    )


def service_account_name(document: JsonObject) -> int:
    name = pod_spec(document).get("serviceAccountName")
    return int(isinstance(name, str) and bool(name) and name != "default")


def automount_service_account_token_disabled(document: JsonObject) -> int:
    return int(pod_spec(document).get("automountServiceAccountToken") is False)


def _has_resource(kind: str, resource: str) -> Callable[[JsonObject], bool]:
    def _check(container: JsonObject) -> bool:
        return get_path(container, "resources", kind, resource) is not None

    return _check


def limits_cpu(document: JsonObject) -> int:
    return count_containers(document, _has_resource("limits", "cpu"))


def limits_memory(document: JsonObject) -> int:
    return count_containers(document, _has_resource("limits", "memory"))


def requests_cpu(document: JsonObject) -> int:
    return count_containers(document, _has_resource("requests", "cpu"))


def requests_memory(document: JsonObject) -> int:
    return count_containers(document, _has_resource("requests", "memory"))
