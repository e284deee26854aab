"""Constants for report output, atomic writing, and stdout formatting."""

from __future__ import annotations

REPORT_TEMP_PREFIX: str = ".tmp-"
REPORT_TEMP_SUFFIX: str = ".json"

VALID_OUTPUT_FORMATS: frozenset[str] = frozenset({"json", "text"})
DEFAULT_OUTPUT_FORMAT: str = "json"
DEFAULT_FAILURE_EXIT_CODE: int = 2
STDIN_PATH: str = "-"
STDIN_FILE_NAME: str = "STDIN"

# ANSI escape codes for terminal colouring.
ANSI_RESET: str = "\033[0m"
ANSI_BOLD: str = "\033[1m"
ANSI_RED: str = "\033[31;1m"
ANSI_YELLOW: str = "\033[33;1m"
ANSI_GREEN: str = "\033[32;1m"
ANSI_DIM: str = "\033[2m"

BUCKET_COLORS: dict[str, str] = {
    "critical": ANSI_RED,
    "advise": ANSI_YELLOW,
    "passed": ANSI_GREEN,
}
