"""Human-readable stdout reporter for scan reports."""

from __future__ import annotations

from collections.abc import Sequence

from rampart.constants.branding import ASCII_LOGO_LINES, SCAN_SUMMARY_TITLE
from rampart.constants.reporting import (
    ANSI_BOLD,
    ANSI_DIM,
    ANSI_GREEN,
    ANSI_RED,
    ANSI_RESET,
    BUCKET_COLORS,
)
from rampart.model import Report, RuleRef
from rampart.types import Bucket

_BUCKET_ORDER: tuple[Bucket, ...] = ("critical", "passed", "advise")


def _colorize(text: str, color: str) -> str:
    return f"{color}{text}{ANSI_RESET}"


class StdoutReporter:
    """Formats reports as a compact terminal summary."""

    def __init__(
        self,
        reports: Sequence[Report],
        *,
        color: bool = True,
        verbose: bool = False,
    ) -> None:
        """Initialise the reporter."""
        self._reports = tuple(reports)
        self._color = color
        self._verbose = verbose

    def render(self) -> str:
        """Render the full stdout report as a single string."""
        sections = [self._render_header()]
        sections.extend(self._render_report(report) for report in self._reports)
        return "\n".join(section for section in sections if section)

    def _render_header(self) -> str:
        sep = "  " + "─" * 38
        failed = sum(1 for report in self._reports if report.failed)
        invalid = sum(1 for report in self._reports if not report.valid)
        return "\n".join(
            [
                "",
                f"  {ASCII_LOGO_LINES[0]}",
                f"  {ASCII_LOGO_LINES[1]}",
                f"  {SCAN_SUMMARY_TITLE}",
                sep,
                "",
                f"  Documents   {len(self._reports)} scanned / {failed} failing / {invalid} invalid",
                "",
            ]
        )

    def _render_report(self, report: Report) -> str:
        title = _colorize(report.object_name, ANSI_BOLD) if self._color else report.object_name
        lines = [f"  {title}  ({report.file_name})"]
        lines.append(f"    Score     {self._score(report)}")
        lines.append(f"    Message   {report.message}")
        if not report.valid:
            lines.append("")
            return "\n".join(lines)

        for bucket in _BUCKET_ORDER:
            refs: list[RuleRef] = getattr(report.scoring, bucket)
            if not refs:
                continue
            label = _colorize(bucket, BUCKET_COLORS[bucket]) if self._color else bucket
            lines.append(f"    {label} ({len(refs)})")
            for ref in refs:
                lines.append(f"      {ref.id:<38} {ref.points:>4}  {ref.reason}")
                if self._verbose:
                    detail = f"selector: {ref.selector}  containers: {ref.containers}"
                    lines.append(f"        {_colorize(detail, ANSI_DIM) if self._color else detail}")
        lines.append("")
        return "\n".join(lines)

    def _score(self, report: Report) -> str:
        text = str(report.score)
        if not self._color:
            return text
        return _colorize(text, ANSI_RED if report.failed else ANSI_GREEN)
