"""Constants shared by the bundled hardening rules."""

from __future__ import annotations

POD_KIND: str = "Pod"
CRONJOB_KIND: str = "CronJob"

WORKLOAD_KINDS: frozenset[str] = frozenset(
    {
        "Pod",
        "Deployment",
        "StatefulSet",
        "DaemonSet",
        "ReplicaSet",
        "ReplicationController",
        "Job",
        "CronJob",
    }
)
BINDING_KINDS: frozenset[str] = frozenset({"RoleBinding", "ClusterRoleBinding"})

PROTECTED_NAMESPACES: frozenset[str] = frozenset({"default", "kube-system"})
CORE_API_GROUP: str = ""
WILDCARD: str = "*"

CONTAINER_LIST_KEYS: tuple[str, ...] = ("initContainers", "containers", "ephemeralContainers")
MIN_UNPRIVILEGED_UID: int = 10000

CLUSTER_ADMIN_ROLE: str = "cluster-admin"
ESCALATION_VERBS: frozenset[str] = frozenset({"escalate", "bind", "impersonate"})
CRD_WRITE_VERBS: frozenset[str] = frozenset({"create", "patch", "update", "delete", "deletecollection"})
VOLUME_WRITE_VERBS: frozenset[str] = frozenset({"create", "patch", "update", "delete", "deletecollection"})
SECRET_READ_VERBS: frozenset[str] = frozenset({"get", "list", "watch"})

POD_SECURITY_LINK: str = "https://kubernetes.io/docs/concepts/security/pod-security-standards/"
SECURITY_CONTEXT_LINK: str = "https://kubernetes.io/docs/tasks/configure-pod-container/security-context/"
RESOURCES_LINK: str = "https://kubernetes.io/docs/concepts/configuration/manage-resources-containers/"
SERVICE_ACCOUNT_LINK: str = "https://kubernetes.io/docs/tasks/configure-pod-container/configure-service-account/"
RBAC_GOOD_PRACTICES_LINK: str = "https://kubernetes.io/docs/concepts/security/rbac-good-practices/"
NAMESPACES_LINK: str = "https://kubernetes.io/docs/concepts/overview/working-with-objects/namespaces/"
