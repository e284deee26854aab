"""JSON serialization of scan reports."""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from rampart.constants.reporting import REPORT_TEMP_PREFIX, REPORT_TEMP_SUFFIX
from rampart.io import write_text_atomic
from rampart.model import Report


def reports_payload(reports: Sequence[Report]) -> list[dict[str, Any]]:
    """Return the JSON-ready list for ``reports``, preserving order."""
    return [report.to_dict() for report in reports]


def render_json(reports: Sequence[Report]) -> str:
    return json.dumps(reports_payload(reports), indent=2)


def write_reports(path: Path, reports: Sequence[Report]) -> None:
    """Write the same JSON that ``render_json`` prints to ``path`` atomically."""
    write_text_atomic(
        path,
        render_json(reports),
        temp_prefix=REPORT_TEMP_PREFIX,
        temp_suffix=REPORT_TEMP_SUFFIX,
    )
