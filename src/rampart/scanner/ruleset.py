"""Entry point driving the splitter and per-document evaluation."""

from __future__ import annotations

import logging
from types import TracebackType

from rampart.config import RampartConfig
from rampart.exceptions import DocumentConversionError
from rampart.model import ManifestDocument, Report
from rampart.parsers import split_documents
from rampart.rules import DEFAULT_CATALOG, RuleCatalog
from rampart.scanner.dispatch import rule_executor
from rampart.scanner.evaluator import evaluate_document
from rampart.schema import KubernetesSchemaValidator, SchemaValidator


class Ruleset:
    """Evaluates manifests against an immutable rule catalog.

    The catalog, validator and rule worker pool are shared across calls;
    every ``run`` builds fresh reports that the caller owns. Use the ruleset
    as a context manager, or call ``close``, to release the pool.
    """

    def __init__(
        self,
        catalog: RuleCatalog = DEFAULT_CATALOG,
        *,
        validator: SchemaValidator | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._catalog = catalog
        self._validator = validator if validator is not None else KubernetesSchemaValidator()
        self._logger = logger if logger is not None else logging.getLogger(__name__)
        self._executor = rule_executor(len(catalog))

    def __enter__(self) -> Ruleset:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()

    @property
    def catalog(self) -> RuleCatalog:
        return self._catalog

    def close(self) -> None:
        """Shut down the rule worker pool once in-flight evaluations finish."""
        self._executor.shutdown(wait=True)

    def run(
        self,
        file_name: str,
        content: bytes | str,
        config: RampartConfig | None = None,
    ) -> list[Report]:
        """Evaluate every document of ``content`` in source order.

        Raises ``InvalidInputError`` when the input holds no document. A
        ``DocumentConversionError`` stops the batch and carries the reports
        already built on its ``reports`` attribute.
        """
        resolved_config = config if config is not None else RampartConfig()
        reports: list[Report] = []
        documents = split_documents(content)
        while True:
            try:
                document = next(documents)
            except StopIteration:
                break
            except DocumentConversionError as exc:
                self._logger.debug("aborting %s after %d document(s): %s", file_name, len(reports), exc)
                raise DocumentConversionError(str(exc), index=exc.index, reports=reports) from exc
            reports.append(self.generate_report(file_name, document, resolved_config))
        return reports

    def generate_report(
        self,
        file_name: str,
        document: ManifestDocument,
        config: RampartConfig | None = None,
    ) -> Report:
        """Validate one document and score it against the catalog."""
        return evaluate_document(
            file_name=file_name,
            document=document.load(),
            catalog=self._catalog,
            validator=self._validator,
            config=config if config is not None else RampartConfig(),
            logger=self._logger,
            executor=self._executor,
        )
