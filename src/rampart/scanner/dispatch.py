"""Concurrent fan-out of catalog rules against one document.

Every rule runs as its own task against the same parsed document. Results
travel through a bounded queue sized to the catalog, so producers never
block; the caller waits for all tasks before draining the queue.
"""

from __future__ import annotations

import logging
import queue
from concurrent.futures import Executor, ThreadPoolExecutor, wait

from rampart.exceptions import RuleNotApplicableError
from rampart.model import Rule, RuleRef
from rampart.rules import RuleCatalog
from rampart.types import JsonValue


def _evaluate(rule: Rule, document: JsonValue, results: queue.Queue[RuleRef]) -> None:
    try:
        containers = rule.evaluate(document)
    except RuleNotApplicableError:
        return
    results.put_nowait(rule.to_ref(containers))


def rule_executor(workers: int) -> ThreadPoolExecutor:
    """Return a pool wide enough to run ``workers`` rules at once."""
    return ThreadPoolExecutor(max_workers=max(1, workers), thread_name_prefix="rampart-rule")


def dispatch_rules(
    catalog: RuleCatalog,
    document: JsonValue,
    *,
    logger: logging.Logger,
    executor: Executor | None = None,
) -> list[RuleRef]:
    """Run every rule of ``catalog`` concurrently and return applicable results.

    Not-applicable outcomes are dropped silently. Any other predicate failure
    is logged and dropped. Results are returned in catalog order. Without a
    shared ``executor`` a pool is created for this call and shut down after it.
    """
    if not catalog:
        return []

    results: queue.Queue[RuleRef] = queue.Queue(maxsize=len(catalog))
    pool = executor if executor is not None else rule_executor(len(catalog))
    try:
        futures = {pool.submit(_evaluate, rule, document, results): rule for rule in catalog}
        wait(futures)
    finally:
        if executor is None:
            pool.shutdown(wait=True)

    for future, rule in futures.items():
        error = future.exception()
        if error is not None:
            logger.warning("Rule %s failed and was skipped: %s", rule.rule_id, error)

    collected: list[RuleRef] = []
    while True:
        try:
            collected.append(results.get_nowait())
        except queue.Empty:
            break

    position = {rule.rule_id: index for index, rule in enumerate(catalog)}
    collected.sort(key=lambda ref: position[ref.id])
    return collected
