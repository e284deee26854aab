"""Per-document evaluation: identity, schema validation, then rule dispatch."""

from __future__ import annotations

import json
import logging
from concurrent.futures import Executor

from rampart.config import RampartConfig
from rampart.constants.messages import KIND_NOT_FOUND_MESSAGE, UNKNOWN_SCHEMA_MESSAGE
from rampart.constants.parsing import DEFAULT_NAMESPACE, UNDEFINED_NAME, UNKNOWN_KIND
from rampart.exceptions import SchemaError, SchemaNotFoundError
from rampart.model import Report
from rampart.rules import RuleCatalog
from rampart.rules.common import get_path
from rampart.scanner.dispatch import dispatch_rules
from rampart.scanner.score import apply_results
from rampart.schema import SchemaValidator
from rampart.types import JsonValue


def _display(value: JsonValue) -> str:
    return value if isinstance(value, str) else json.dumps(value)


def object_name(document: JsonValue) -> str:
    """Return ``<kind>/<name>.<namespace>`` for a parsed document."""
    if not isinstance(document, dict):
        return UNKNOWN_KIND
    kind = document.get("kind")
    if kind is None:
        return UNKNOWN_KIND

    name = get_path(document, "metadata", "name")
    namespace = get_path(document, "metadata", "namespace")
    return "{kind}/{name}.{namespace}".format(
        kind=_display(kind),
        name=UNDEFINED_NAME if name is None else _display(name),
        namespace=DEFAULT_NAMESPACE if namespace is None else _display(namespace),
    )


def validation_message(
    validator: SchemaValidator,
    document: JsonValue,
    config: RampartConfig,
    *,
    logger: logging.Logger,
) -> str:
    """Return an empty string when the document is valid, else why it is not."""
    try:
        results = validator.validate(document, config)
    except SchemaNotFoundError as exc:
        logger.debug("schema lookup failed: %s", exc)
        return UNKNOWN_SCHEMA_MESSAGE
    except SchemaError as exc:
        return str(exc)

    problems: list[str] = []
    for result in results:
        if result.errors:
            problems.extend(error.describe() for error in result.errors)
        elif not result.kind:
            problems.append(KIND_NOT_FOUND_MESSAGE)
    return " ".join(problems)


def evaluate_document(
    *,
    file_name: str,
    document: JsonValue,
    catalog: RuleCatalog,
    validator: SchemaValidator,
    config: RampartConfig,
    logger: logging.Logger,
    executor: Executor | None = None,
) -> Report:
    """Build the report for one parsed document."""
    report = Report(object_name=object_name(document), file_name=file_name)

    message = validation_message(validator, document, config, logger=logger)
    if message:
        report.message = message
        return report
    report.valid = True

    results = dispatch_rules(catalog, document, logger=logger, executor=executor)
    return apply_results(report, results, logger=logger)
