"""The bundled rule catalog.

Built once at import time; every evaluation shares the same tuple of frozen
rules and none of them mutates it.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeAlias

from rampart.constants.rules import (
    BINDING_KINDS,
    NAMESPACES_LINK,
    POD_SECURITY_LINK,
    RBAC_GOOD_PRACTICES_LINK,
    RESOURCES_LINK,
    SECURITY_CONTEXT_LINK,
    SERVICE_ACCOUNT_LINK,
    WORKLOAD_KINDS,
)
from rampart.exceptions import CatalogError
from rampart.model import Rule
from rampart.rules import rbac, workload

RuleCatalog: TypeAlias = tuple[Rule, ...]

_CLUSTER_ROLE: frozenset[str] = frozenset({"ClusterRole"})
_ROLE: frozenset[str] = frozenset({"Role"})

_CRITICAL_RULES: tuple[Rule, ...] = (
    Rule(
        rule_id="Privileged",
        selector="containers[] .securityContext .privileged == true",
        reason="Privileged containers can allow almost completely unrestricted host access",
        kinds=WORKLOAD_KINDS,
        points=-30,
        predicate=workload.privileged,
        advise_weight=10,
        link=POD_SECURITY_LINK,
    ),
    Rule(
        rule_id="CapSysAdmin",
        selector="containers[] .securityContext .capabilities .add == SYS_ADMIN",
        reason="CAP_SYS_ADMIN is the most privileged capability and should always be avoided",
        kinds=WORKLOAD_KINDS,
        points=-30,
        predicate=workload.cap_sys_admin,
        advise_weight=10,
        link=POD_SECURITY_LINK,
    ),
    Rule(
        rule_id="HostNetwork",
        selector=".spec .hostNetwork == true",
        reason="Sharing the host's network namespace permits processes in the pod to communicate "
        "with processes bound to the host's loopback adapter",
        kinds=WORKLOAD_KINDS,
        points=-9,
        predicate=workload.host_network,
        advise_weight=5,
        link=POD_SECURITY_LINK,
    ),
    Rule(
        rule_id="HostPID",
        selector=".spec .hostPID == true",
        reason="Sharing the host's PID namespace allows visibility of processes on the host, "
        "potentially leaking information such as environment variables and configuration",
        kinds=WORKLOAD_KINDS,
        points=-9,
        predicate=workload.host_pid,
        advise_weight=5,
        link=POD_SECURITY_LINK,
    ),
    Rule(
        rule_id="HostIPC",
        selector=".spec .hostIPC == true",
        reason="Sharing the host's IPC namespace allows container processes to communicate with processes on the host",
        kinds=WORKLOAD_KINDS,
        points=-9,
        predicate=workload.host_ipc,
        advise_weight=5,
        link=POD_SECURITY_LINK,
    ),
    Rule(
        rule_id="AllowPrivilegeEscalation",
        selector="containers[] .securityContext .allowPrivilegeEscalation == true",
        reason="Allowing privilege escalation lets a process gain more privileges than its parent",
        kinds=WORKLOAD_KINDS,
        points=-7,
        predicate=workload.allow_privilege_escalation,
        advise_weight=4,
        link=SECURITY_CONTEXT_LINK,
    ),
    Rule(
        rule_id="DefaultNamespace",
        selector=".metadata .name == kube-system .name == default .namespace == kube-system "
        ".namespace == default .subjects",
        reason="Operators should be deployed into a dedicated namespace",
        kinds=frozenset({"Namespace", "Deployment", "ClusterRoleBinding"}),
        points=-9,
        predicate=rbac.default_namespace,
        advise_weight=3,
        link=NAMESPACES_LINK,
    ),
    Rule(
        rule_id="ClusterAdmin",
        selector=".roleRef .name == cluster-admin",
        reason="Binding to cluster-admin grants full control over every resource in the cluster",
        kinds=BINDING_KINDS,
        points=-30,
        predicate=rbac.cluster_admin,
        advise_weight=10,
        link=RBAC_GOOD_PRACTICES_LINK,
    ),
    Rule(
        rule_id="StarAllCoreAPIClusterRole",
        selector=".rules .apiGroups == \"\" .resources == * .verbs == *",
        reason="The ClusterRole has full permissions on all resources against the Core API Group",
        kinds=_CLUSTER_ROLE,
        points=-30,
        predicate=rbac.star_all,
        advise_weight=9,
        link=RBAC_GOOD_PRACTICES_LINK,
    ),
    Rule(
        rule_id="StarAllRoleRule",
        selector=".rules .apiGroups .resources .verbs",
        reason="The Operator SA role has full permissions on all resources against the Core API Group",
        kinds=_ROLE,
        points=-9,
        predicate=rbac.star_all,
        advise_weight=8,
        link=RBAC_GOOD_PRACTICES_LINK,
    ),
    Rule(
        rule_id="ExecPodsClusterRole",
        selector=".rules .resources == pods/exec .verbs == * | get,create",
        reason="The ClusterRole can exec into Pods",
        kinds=_CLUSTER_ROLE,
        points=-9,
        predicate=rbac.exec_pods,
        advise_weight=7,
        link=RBAC_GOOD_PRACTICES_LINK,
    ),
    Rule(
        rule_id="SecretsClusterRole",
        selector=".rules .resources == secrets .verbs == * | get | list | watch",
        reason="The ClusterRole can read Secrets in every namespace",
        kinds=_CLUSTER_ROLE,
        points=-9,
        predicate=rbac.secrets,
        advise_weight=7,
        link=RBAC_GOOD_PRACTICES_LINK,
    ),
    Rule(
        rule_id="EscalateClusterRole",
        selector=".rules .verbs == escalate | bind | impersonate",
        reason="The ClusterRole can escalate its own privileges or impersonate other identities",
        kinds=_CLUSTER_ROLE,
        points=-9,
        predicate=rbac.escalation_verbs,
        advise_weight=7,
        link=RBAC_GOOD_PRACTICES_LINK,
    ),
    Rule(
        rule_id="CustomResourceClusterRole",
        selector=".rules .apiGroups == apiextensions.k8s.io .resources == customresourcedefinitions "
        ".verbs == * | create | patch | update | delete | deletecollection",
        reason="The ClusterRole has full permissions over custom resource definitions",
        kinds=_CLUSTER_ROLE,
        points=-9,
        predicate=rbac.custom_resource_definitions,
        advise_weight=6,
        link=RBAC_GOOD_PRACTICES_LINK,
    ),
    Rule(
        rule_id="PersistentVolumeClusterRole",
        selector=".rules .resources == persistentvolumes | persistentvolumeclaims "
        ".verbs == * | create | patch | update | delete | deletecollection",
        reason="The ClusterRole can modify or remove persistent volumes",
        kinds=_CLUSTER_ROLE,
        points=-9,
        predicate=rbac.persistent_volumes,
        advise_weight=6,
        link=RBAC_GOOD_PRACTICES_LINK,
    ),
    Rule(
        rule_id="RemoveEventsClusterRole",
        selector=".rules .resources == events .verbs == * | delete | deletecollection",
        reason="The ClusterRole can remove Kubernetes events, hiding evidence of its actions",
        kinds=_CLUSTER_ROLE,
        points=-9,
        predicate=rbac.remove_events,
        advise_weight=5,
        link=RBAC_GOOD_PRACTICES_LINK,
    ),
)

_ADVISORY_RULES: tuple[Rule, ...] = (
    Rule(
        rule_id="ServiceAccountName",
        selector=".spec .serviceAccountName",
        reason="Service accounts restrict Kubernetes API access and should be configured with least privilege",
        kinds=WORKLOAD_KINDS,
        points=3,
        predicate=workload.service_account_name,
        advise_weight=100,
        link=SERVICE_ACCOUNT_LINK,
    ),
    Rule(
        rule_id="RunAsNonRoot",
        selector="containers[] .securityContext .runAsNonRoot == true",
        reason="Force the running image to run as a non-root user to ensure least privilege",
        kinds=WORKLOAD_KINDS,
        points=1,
        predicate=workload.run_as_non_root,
        advise_weight=10,
        link=SECURITY_CONTEXT_LINK,
    ),
    Rule(
        rule_id="CapDropAll",
        selector="containers[] .securityContext .capabilities .drop | index(\"ALL\")",
        reason="Drop all capabilities and add only those required to reduce syscall attack surface",
        kinds=WORKLOAD_KINDS,
        points=1,
        predicate=workload.cap_drop_all,
        advise_weight=9,
        link=SECURITY_CONTEXT_LINK,
    ),
    Rule(
        rule_id="RunAsUser",
        selector="containers[] .securityContext .runAsUser -gt 10000",
        reason="Run as a high-UID user to avoid conflicts with the host's user table",
        kinds=WORKLOAD_KINDS,
        points=1,
        predicate=workload.run_as_user,
        advise_weight=4,
        link=SECURITY_CONTEXT_LINK,
    ),
    Rule(
        rule_id="ReadOnlyRootFilesystem",
        selector="containers[] .securityContext .readOnlyRootFilesystem == true",
        reason="An immutable root filesystem can prevent malicious binaries being added to PATH "
        "and increase attack cost",
        kinds=WORKLOAD_KINDS,
        points=1,
        predicate=workload.read_only_root_filesystem,
        advise_weight=3,
        link=SECURITY_CONTEXT_LINK,
    ),
    Rule(
        rule_id="SeccompAny",
        selector=".spec .securityContext .seccompProfile .type",
        reason="Seccomp profiles set minimum privilege and secure against unknown threats",
        kinds=WORKLOAD_KINDS,
        points=1,
        predicate=workload.seccomp_any,
        advise_weight=2,
        link=POD_SECURITY_LINK,
    ),
    Rule(
        rule_id="CapDropAny",
        selector="containers[] .securityContext .capabilities .drop",
        reason="Reducing kernel capabilities available to a container limits its attack surface",
        kinds=WORKLOAD_KINDS,
        points=1,
        predicate=workload.cap_drop_any,
        advise_weight=1,
        link=SECURITY_CONTEXT_LINK,
    ),
    Rule(
        rule_id="AutomountServiceAccountTokenDisabled",
        selector=".spec .automountServiceAccountToken == false",
        reason="Mounting service account tokens only where needed limits access to the Kubernetes API",
        kinds=WORKLOAD_KINDS,
        points=1,
        predicate=workload.automount_service_account_token_disabled,
        advise_weight=1,
        link=SERVICE_ACCOUNT_LINK,
    ),
    Rule(
        rule_id="LimitsCPU",
        selector="containers[] .resources .limits .cpu",
        reason="Enforcing CPU limits prevents DOS via resource exhaustion",
        kinds=WORKLOAD_KINDS,
        points=1,
        predicate=workload.limits_cpu,
        advise_weight=1,
        link=RESOURCES_LINK,
    ),
    Rule(
        rule_id="LimitsMemory",
        selector="containers[] .resources .limits .memory",
        reason="Enforcing memory limits prevents DOS via resource exhaustion",
        kinds=WORKLOAD_KINDS,
        points=1,
        predicate=workload.limits_memory,
        advise_weight=1,
        link=RESOURCES_LINK,
    ),
    Rule(
        rule_id="RequestsCPU",
        selector="containers[] .resources .requests .cpu",
        reason="Enforcing CPU requests aids a fair balancing of resources across the cluster",
        kinds=WORKLOAD_KINDS,
        points=1,
        predicate=workload.requests_cpu,
        advise_weight=1,
        link=RESOURCES_LINK,
    ),
    Rule(
        rule_id="RequestsMemory",
        selector="containers[] .resources .requests .memory",
        reason="Enforcing memory requests aids a fair balancing of resources across the cluster",
        kinds=WORKLOAD_KINDS,
        points=1,
        predicate=workload.requests_memory,
        advise_weight=1,
        link=RESOURCES_LINK,
    ),
)


def build_catalog(rules: Iterable[Rule]) -> RuleCatalog:
    """Freeze ``rules`` into a catalog, rejecting duplicate rule ids."""
    catalog = tuple(rules)
    seen: set[str] = set()
    duplicates: set[str] = set()
    for rule in catalog:
        if rule.rule_id in seen:
            duplicates.add(rule.rule_id)
        seen.add(rule.rule_id)
    if duplicates:
        raise CatalogError(f"Duplicate rule id(s) in catalog: {', '.join(sorted(duplicates))}")
    return catalog


DEFAULT_CATALOG: RuleCatalog = build_catalog((*_CRITICAL_RULES, *_ADVISORY_RULES))
