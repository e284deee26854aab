"""CLI entrypoint for Rampart scanner."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path

from rampart import __version__
from rampart.config import RampartConfig, load_config
from rampart.constants.branding import CLI_DESCRIPTION
from rampart.constants.reporting import (
    DEFAULT_FAILURE_EXIT_CODE,
    DEFAULT_OUTPUT_FORMAT,
    VALID_OUTPUT_FORMATS,
)
from rampart.exceptions import ConfigError, DocumentConversionError, RampartError
from rampart.io import read_manifest
from rampart.model import Report
from rampart.reporting import StdoutReporter, render_json, write_reports
from rampart.rules import DEFAULT_CATALOG
from rampart.scanner import Ruleset


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="rampart",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    scan = subparsers.add_parser("scan", help="Score Kubernetes manifests against the rule catalog")
    scan.add_argument("files", nargs="+", help="Manifest files to scan (`-` reads standard input)")
    scan.add_argument("-c", "--config", type=Path, help="Explicit config file")
    scan.add_argument("--schema-dir", type=Path, default=None, help="Local schema bundle root")
    scan.add_argument("--kubernetes-version", default=None, help="Kubernetes version to validate against")
    scan.add_argument("--no-strict", action="store_true", help="Allow properties not in the schema")
    scan.add_argument(
        "--ignore-missing-schemas",
        action="store_true",
        help="Skip validation for resources without a schema",
    )
    scan.add_argument(
        "--format",
        choices=sorted(VALID_OUTPUT_FORMATS),
        default=DEFAULT_OUTPUT_FORMAT,
        help="Output format (default: json)",
    )
    scan.add_argument("-o", "--output", type=Path, default=None, help="Write the JSON report to this path")
    scan.add_argument(
        "--exit-code",
        type=int,
        default=DEFAULT_FAILURE_EXIT_CODE,
        help="Exit status when any document is invalid or scores below zero",
    )
    scan.add_argument("--no-color", action="store_true", help="Disable colored output")
    scan.add_argument("-v", "--verbose", action="store_true", help="Show selectors and match counts")
    scan.add_argument("--debug", action="store_true", help="Enable debug logging")

    subparsers.add_parser("rules", help="Print the bundled rule catalog as JSON")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if getattr(args, "debug", False) else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(message)s")

    if args.command == "rules":
        print(json.dumps([rule.to_dict() for rule in DEFAULT_CATALOG], indent=2))
        return 0

    if args.command != "scan":
        parser.error(f"Unsupported command: {args.command}")

    try:
        config = _resolve_config(args)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    reports: list[Report] = []
    status = 0
    with Ruleset() as ruleset:
        for path in args.files:
            try:
                file_name, content = read_manifest(path)
                reports.extend(ruleset.run(file_name, content, config))
            except DocumentConversionError as exc:
                reports.extend(exc.reports)
                print(f"Scanner error: {path}: {exc}", file=sys.stderr)
                status = 1
                break
            except (OSError, RampartError) as exc:
                print(f"Scanner error: {path}: {exc}", file=sys.stderr)
                status = 1
                break

    _emit(args, reports)

    if status:
        return status
    if any(report.failed for report in reports):
        return args.exit_code
    return 0


def _resolve_config(args: argparse.Namespace) -> RampartConfig:
    """Load the config file and apply CLI overrides on top of it."""
    config = load_config(Path.cwd(), args.config)
    overrides: dict[str, object] = {}
    if args.schema_dir is not None:
        overrides["schema_dir"] = args.schema_dir.resolve()
    if args.kubernetes_version is not None:
        version = args.kubernetes_version.strip().removeprefix("v")
        if not version:
            raise ConfigError("--kubernetes-version must not be empty")
        overrides["kubernetes_version"] = version
    if args.no_strict:
        overrides["strict"] = False
    if args.ignore_missing_schemas:
        overrides["ignore_missing_schemas"] = True
    return replace(config, **overrides) if overrides else config


def _emit(args: argparse.Namespace, reports: list[Report]) -> None:
    if args.output is not None:
        write_reports(args.output, reports)
    if args.format == "text":
        use_color = not args.no_color and sys.stdout.isatty()
        print(StdoutReporter(reports, color=use_color, verbose=args.verbose).render())
    elif args.output is None:
        print(render_json(reports))


if __name__ == "__main__":
    raise SystemExit(main())
