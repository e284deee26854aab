"""Tests for the Kubernetes schema validator and bundle layout."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from rampart.config import RampartConfig
from rampart.exceptions import SchemaLoadError, SchemaNotFoundError
from rampart.schema import KubernetesSchemaValidator, resolve_schema_root, schema_file_name, schema_path

POD_SCHEMA: dict[str, Any] = {
    "type": "object",
    "required": ["apiVersion", "kind", "spec"],
    "properties": {
        "apiVersion": {"type": "string"},
        "kind": {"type": "string"},
        "metadata": {"type": "object"},
        "spec": {
            "type": "object",
            "required": ["containers"],
            "properties": {"containers": {"type": "array"}},
        },
    },
    "additionalProperties": False,
}


def _bundle(root: Path, *, version: str = "master", strict: bool = True) -> Path:
    flavour = f"{version}-standalone-strict" if strict else f"{version}-standalone"
    directory = root / "kubernetes-json-schema" / version / flavour
    directory.mkdir(parents=True, exist_ok=True)
    (directory / "pod-v1.json").write_text(json.dumps(POD_SCHEMA), encoding="utf-8")
    return directory


def _pod(**spec: Any) -> dict[str, Any]:
    return {"apiVersion": "v1", "kind": "Pod", "metadata": {"name": "p"}, "spec": spec}


@pytest.mark.parametrize(
    ("kind", "api_version", "expected"),
    [
        ("Pod", "v1", "pod-v1.json"),
        ("Deployment", "apps/v1", "deployment-apps-v1.json"),
        ("ClusterRole", "rbac.authorization.k8s.io/v1", "clusterrole-rbac-v1.json"),
        ("CronJob", "batch/v1beta1", "cronjob-batch-v1beta1.json"),
    ],
)
def test_schema_file_name(kind: str, api_version: str, expected: str) -> None:
    assert schema_file_name(kind, api_version) == expected


def test_schema_path_uses_version_and_strictness(tmp_path: Path) -> None:
    strict = schema_path(tmp_path, RampartConfig(kubernetes_version="1.29.0"), "Pod", "v1")
    loose = schema_path(tmp_path, RampartConfig(kubernetes_version="1.29.0", strict=False), "Pod", "v1")

    assert strict == tmp_path / "kubernetes-json-schema" / "v1.29.0" / "v1.29.0-standalone-strict" / "pod-v1.json"
    assert loose.parent.name == "v1.29.0-standalone"


def test_resolve_schema_root_prefers_config(tmp_path: Path) -> None:
    assert resolve_schema_root(RampartConfig(schema_dir=tmp_path), default_root=tmp_path / "x") == tmp_path


def test_resolve_schema_root_uses_default_bundle_when_present(tmp_path: Path) -> None:
    (tmp_path / "kubernetes-json-schema" / "master" / "master-standalone").mkdir(parents=True)

    assert resolve_schema_root(RampartConfig(), default_root=tmp_path) == tmp_path


def test_resolve_schema_root_none_without_bundle(tmp_path: Path) -> None:
    assert resolve_schema_root(RampartConfig(), default_root=tmp_path) is None


def test_valid_document_against_bundle(tmp_path: Path) -> None:
    _bundle(tmp_path)
    validator = KubernetesSchemaValidator(default_root=tmp_path / "unused")

    (result,) = validator.validate(_pod(containers=[]), RampartConfig(schema_dir=tmp_path))

    assert result.valid
    assert result.kind == "Pod"
    assert result.api_version == "v1"


def test_field_errors_are_reported(tmp_path: Path) -> None:
    _bundle(tmp_path)
    validator = KubernetesSchemaValidator(default_root=tmp_path / "unused")
    document = _pod(containers="nope")
    document["extra"] = True

    (result,) = validator.validate(document, RampartConfig(schema_dir=tmp_path))

    fields = [error.field for error in result.errors]
    assert not result.valid
    assert "spec.containers" in fields
    assert "(root)" in fields


def test_missing_schema_raises(tmp_path: Path) -> None:
    _bundle(tmp_path)
    validator = KubernetesSchemaValidator(default_root=tmp_path / "unused")
    service = {"apiVersion": "v1", "kind": "Service", "metadata": {"name": "s"}}

    with pytest.raises(SchemaNotFoundError):
        validator.validate(service, RampartConfig(schema_dir=tmp_path))


def test_missing_schema_ignored_when_configured(tmp_path: Path) -> None:
    _bundle(tmp_path)
    validator = KubernetesSchemaValidator(default_root=tmp_path / "unused")
    service = {"apiVersion": "v1", "kind": "Service", "metadata": {"name": "s"}}

    (result,) = validator.validate(service, RampartConfig(schema_dir=tmp_path, ignore_missing_schemas=True))

    assert result.valid


def test_non_strict_bundle_is_used_when_strict_disabled(tmp_path: Path) -> None:
    _bundle(tmp_path, strict=False)
    validator = KubernetesSchemaValidator(default_root=tmp_path / "unused")

    (result,) = validator.validate(_pod(containers=[]), RampartConfig(schema_dir=tmp_path, strict=False))

    assert result.valid


def test_list_items_are_validated_individually(tmp_path: Path) -> None:
    _bundle(tmp_path)
    validator = KubernetesSchemaValidator(default_root=tmp_path / "unused")
    document = {"apiVersion": "v1", "kind": "List", "items": [_pod(containers=[]), _pod()]}

    results = validator.validate(document, RampartConfig(schema_dir=tmp_path))

    assert [result.valid for result in results] == [True, False]


def test_unreadable_schema_raises_load_error(tmp_path: Path) -> None:
    directory = _bundle(tmp_path)
    (directory / "pod-v1.json").write_text("{not json", encoding="utf-8")
    validator = KubernetesSchemaValidator(default_root=tmp_path / "unused")

    with pytest.raises(SchemaLoadError):
        validator.validate(_pod(containers=[]), RampartConfig(schema_dir=tmp_path))


def test_structural_checks_without_bundle(tmp_path: Path) -> None:
    validator = KubernetesSchemaValidator(default_root=tmp_path)

    (valid,) = validator.validate(_pod(), RampartConfig())
    (invalid,) = validator.validate({"kind": "Pod", "metadata": []}, RampartConfig())
    (no_kind,) = validator.validate({"apiVersion": "v1"}, RampartConfig())

    assert valid.valid
    assert {error.field for error in invalid.errors} == {"(root)", "metadata"}
    assert no_kind.kind == ""
