"""Aggregate rule outcomes into a score, a message and ordered buckets."""

from __future__ import annotations

import logging

from rampart.constants.messages import (
    FAILED_MESSAGE_TEMPLATE,
    PASSED_MESSAGE_TEMPLATE,
    UNSUPPORTED_KIND_MESSAGE,
)
from rampart.model import Report, RuleRef
from rampart.types import Bucket


def classify(ref: RuleRef) -> Bucket | None:
    """Return the bucket for one outcome.

    A negative-points rule that matched nothing lands in no bucket at all;
    only what matched is surfaced for those rules.
    """
    if ref.containers > 0:
        return "passed" if ref.points >= 0 else "critical"
    if ref.points >= 0:
        return "advise"
    return None


def rule_order_key(ref: RuleRef) -> tuple[int, str]:
    """Sort key: weight descending, then rule id ascending."""
    return (-ref.weight, ref.id)


def summary_message(applied_rules: int, score: int) -> str:
    if applied_rules < 1:
        return UNSUPPORTED_KIND_MESSAGE
    if score >= 0:
        return PASSED_MESSAGE_TEMPLATE.format(score=score)
    return FAILED_MESSAGE_TEMPLATE.format(score=score)


def apply_results(report: Report, results: list[RuleRef], *, logger: logging.Logger) -> Report:
    """Fold rule outcomes into ``report`` and order its buckets deterministically.

    Every result counts as an applied rule, but only bucketed outcomes are
    recorded in ``report.rules``.
    """
    seen: set[tuple[str, int]] = set()
    applied_rules = 0

    for ref in results:
        applied_rules += 1
        bucket = classify(ref)
        if bucket is None:
            continue

        if ref.dedupe_key not in seen:
            seen.add(ref.dedupe_key)
            report.rules.append(ref)

        if bucket == "passed":
            logger.debug("positive score rule matched %s (%d points)", ref.selector, ref.points)
            report.score += ref.points
            report.scoring.passed.append(ref)
        elif bucket == "critical":
            logger.debug("negative score rule matched %s (%d points)", ref.selector, ref.points)
            report.score += ref.points
            report.scoring.critical.append(ref)
        else:
            logger.debug("positive score rule failed %s (%d points)", ref.selector, ref.points)
            report.scoring.advise.append(ref)

    report.message = summary_message(applied_rules, report.score)
    report.scoring.critical.sort(key=rule_order_key)
    report.scoring.passed.sort(key=rule_order_key)
    report.scoring.advise.sort(key=rule_order_key)
    return report
