"""Tests for workload predicates."""

from __future__ import annotations

from typing import Any

import pytest
import yaml

from rampart.rules import workload


def _load(text: str) -> dict[str, Any]:
    return yaml.safe_load(text)


def test_run_as_user_counts_init_and_app_containers() -> None:
    document = _load(
        """
apiVersion: apps/v1
kind: Deployment
spec:
  template:
    spec:
      initContainers:
        - name: init1
          securityContext:
            runAsUser: 1
        - name: init2
          securityContext:
            runAsUser: 10001
      containers:
        - name: c1
        - name: c2
          securityContext:
            runAsUser: 99999
"""
    )

    assert workload.run_as_user(document) == 2


@pytest.mark.parametrize(("uid", "expected"), [(999, 0), (10000, 0), (99999, 1)])
def test_run_as_user_pod_threshold(uid: int, expected: int) -> None:
    document = {
        "apiVersion": "v1",
        "kind": "Pod",
        "spec": {"containers": [{"name": "c1", "securityContext": {"runAsUser": uid}}]},
    }

    assert workload.run_as_user(document) == expected


def test_run_as_user_inherits_pod_security_context() -> None:
    document = {
        "kind": "Pod",
        "spec": {
            "securityContext": {"runAsUser": 20000},
            "containers": [
                {"name": "inherits"},
                {"name": "overrides", "securityContext": {"runAsUser": 0}},
            ],
        },
    }

    assert workload.run_as_user(document) == 1


def test_privileged_counts_each_privileged_container() -> None:
    document = {
        "kind": "Pod",
        "spec": {
            "containers": [
                {"name": "a", "securityContext": {"privileged": True}},
                {"name": "b", "securityContext": {"privileged": False}},
            ],
            "ephemeralContainers": [{"name": "debug", "securityContext": {"privileged": True}}],
        },
    }

    assert workload.privileged(document) == 2


def test_cronjob_pod_spec_is_nested_under_job_template() -> None:
    document = _load(
        """
apiVersion: batch/v1
kind: CronJob
spec:
  schedule: "*/5 * * * *"
  jobTemplate:
    spec:
      template:
        spec:
          hostNetwork: true
          containers:
            - name: job
              securityContext:
                capabilities:
                  add: ["sys_admin"]
"""
    )

    assert workload.host_network(document) == 1
    assert workload.cap_sys_admin(document) == 1


def test_capability_drop_rules() -> None:
    document = {
        "kind": "Pod",
        "spec": {
            "containers": [
                {"name": "all", "securityContext": {"capabilities": {"drop": ["ALL"]}}},
                {"name": "some", "securityContext": {"capabilities": {"drop": ["NET_RAW"]}}},
                {"name": "none"},
            ]
        },
    }

    assert workload.cap_drop_all(document) == 1
    assert workload.cap_drop_any(document) == 2


def test_seccomp_from_pod_context_applies_to_all_containers() -> None:
    document = {
        "kind": "Pod",
        "spec": {
            "securityContext": {"seccompProfile": {"type": "RuntimeDefault"}},
            "containers": [{"name": "a"}, {"name": "b"}],
        },
    }

    assert workload.seccomp_any(document) == 2


def test_service_account_name_ignores_default_account() -> None:
    named = {"kind": "Pod", "spec": {"serviceAccountName": "api"}}
    default = {"kind": "Pod", "spec": {"serviceAccountName": "default"}}

    assert workload.service_account_name(named) == 1
    assert workload.service_account_name(default) == 0


def test_automount_token_only_counts_explicit_false() -> None:
    assert workload.automount_service_account_token_disabled({"kind": "Pod", "spec": {}}) == 0
    assert (
        workload.automount_service_account_token_disabled(
            {"kind": "Pod", "spec": {"automountServiceAccountToken": False}}
        )
        == 1
    )


def test_resource_predicates_count_per_container() -> None:
    document = {
        "kind": "Deployment",
        "spec": {
            "template": {
                "spec": {
                    "containers": [
                        {"name": "a", "resources": {"limits": {"cpu": "1", "memory": "1Gi"}}},
                        {"name": "b", "resources": {"requests": {"cpu": "100m"}}},
                    ]
                }
            }
        },
    }

    assert workload.limits_cpu(document) == 1
    assert workload.limits_memory(document) == 1
    assert workload.requests_cpu(document) == 1
    assert workload.requests_memory(document) == 0


def test_malformed_containers_are_ignored() -> None:
    document = {"kind": "Pod", "spec": {"containers": ["not-a-mapping", {"securityContext": "nope"}]}}

    assert workload.privileged(document) == 0
    assert workload.run_as_non_root(document) == 0
