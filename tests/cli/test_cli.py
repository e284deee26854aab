"""Tests for CLI parser and main behavior."""

from __future__ import annotations

import json
from collections.abc import Iterator
from pathlib import Path
from unittest.mock import patch

import pytest

from rampart.cli.main import build_parser, main
from rampart.rules import DEFAULT_CATALOG
from rampart.scanner import Ruleset
from rampart.schema import KubernetesSchemaValidator


@pytest.fixture(autouse=True)
def _isolated(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Run every CLI test from an empty workspace without a host schema bundle."""
    monkeypatch.chdir(tmp_path)
    validator = KubernetesSchemaValidator(default_root=tmp_path / "no-schemas")
    with patch("rampart.cli.main.Ruleset", side_effect=lambda: Ruleset(validator=validator)):
        yield


def test_build_parser_accepts_scan_flags(tmp_path: Path) -> None:
    parser = build_parser()

    args = parser.parse_args(
        [
            "scan",
            "a.yaml",
            "-",
            "--schema-dir",
            str(tmp_path),
            "--kubernetes-version",
            "1.29.0",
            "--no-strict",
            "--ignore-missing-schemas",
            "--format",
            "text",
            "--exit-code",
            "3",
        ]
    )

    assert args.command == "scan"
    assert args.files == ["a.yaml", "-"]
    assert args.schema_dir == tmp_path
    assert args.kubernetes_version == "1.29.0"
    assert args.no_strict is True
    assert args.ignore_missing_schemas is True
    assert args.format == "text"
    assert args.exit_code == 3


def test_build_parser_defaults() -> None:
    args = build_parser().parse_args(["scan", "pod.yaml"])

    assert args.format == "json"
    assert args.exit_code == 2
    assert args.output is None
    assert args.config is None


def test_build_parser_requires_files() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args(["scan"])


def test_build_parser_rejects_unknown_format() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args(["scan", "pod.yaml", "--format", "sarif"])


def test_rules_command_prints_catalog(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["rules"]) == 0

    catalog = json.loads(capsys.readouterr().out)
    assert [entry["id"] for entry in catalog] == [rule.rule_id for rule in DEFAULT_CATALOG]


def test_scan_failing_manifest_returns_exit_code(manifests_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["scan", str(manifests_root / "privileged-pod.yaml")])

    assert code == 2
    (report,) = json.loads(capsys.readouterr().out)
    assert report["object"] == "Pod/privileged.apps"
    assert report["fileName"] == "privileged-pod.yaml"


def test_scan_custom_exit_code(manifests_root: Path) -> None:
    assert main(["scan", str(manifests_root / "privileged-pod.yaml"), "--exit-code", "7"]) == 7


def test_scan_passing_manifest_returns_zero(manifests_root: Path) -> None:
    assert main(["scan", str(manifests_root / "hardened-deployment.yaml")]) == 0


def test_scan_multiple_files_keeps_order(manifests_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main(["scan", str(manifests_root / "hardened-deployment.yaml"), str(manifests_root / "multi.yaml")])

    reports = json.loads(capsys.readouterr().out)
    assert [report["fileName"] for report in reports] == [
        "hardened-deployment.yaml",
        "multi.yaml",
        "multi.yaml",
        "multi.yaml",
    ]


def test_scan_conversion_error_keeps_partial_reports(
    manifests_root: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    code = main(["scan", str(manifests_root / "broken-second.yaml")])

    captured = capsys.readouterr()
    assert code == 1
    assert [report["object"] for report in json.loads(captured.out)] == ["Pod/first.default"]
    assert "Scanner error" in captured.err


def test_scan_missing_file_returns_one(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["scan", str(tmp_path / "missing.yaml")]) == 1
    assert "Scanner error" in capsys.readouterr().err


def test_scan_empty_input_returns_one(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    manifest = tmp_path / "empty.yaml"
    manifest.write_text("---\n", encoding="utf-8")

    assert main(["scan", str(manifest)]) == 1
    assert "Invalid input" in capsys.readouterr().err


def test_scan_config_error_returns_two(
    tmp_path: Path, manifests_root: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    (tmp_path / "rampart.yaml").write_text("unknown_key: 1\n", encoding="utf-8")

    assert main(["scan", str(manifests_root / "hardened-deployment.yaml")]) == 2
    assert "Configuration error" in capsys.readouterr().err


def test_scan_writes_output_file(tmp_path: Path, manifests_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    out_path = tmp_path / "out" / "reports.json"

    main(["scan", str(manifests_root / "multi.yaml"), "-o", str(out_path)])

    assert capsys.readouterr().out == ""
    assert len(json.loads(out_path.read_text(encoding="utf-8"))) == 3


def test_scan_text_format(manifests_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main(["scan", str(manifests_root / "privileged-pod.yaml"), "--format", "text", "--no-color"])

    out = capsys.readouterr().out
    assert "Pod/privileged.apps  (privileged-pod.yaml)" in out
    assert "critical (1)" in out


def test_scan_reads_stdin(capsys: pytest.CaptureFixture[str]) -> None:
    with patch("rampart.cli.main.read_manifest", return_value=("STDIN", b"apiVersion: v1\nkind: Service\n")):
        code = main(["scan", "-"])

    (report,) = json.loads(capsys.readouterr().out)
    assert code == 0
    assert report["fileName"] == "STDIN"
    assert report["message"] == "resource kind not supported by rampart"


def test_cli_overrides_reach_validator(
    tmp_path: Path, manifests_root: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    bundle = tmp_path / "bundle"
    (bundle / "kubernetes-json-schema" / "v1.29.0" / "v1.29.0-standalone").mkdir(parents=True)

    code = main(
        [
            "scan",
            str(manifests_root / "privileged-pod.yaml"),
            "--schema-dir",
            str(bundle),
            "--kubernetes-version",
            "v1.29.0",
            "--no-strict",
            "--ignore-missing-schemas",
        ]
    )

    (report,) = json.loads(capsys.readouterr().out)
    assert report["valid"] is True
    assert report["score"] <= -30
    assert code == 2
