"""Read manifest input from files or standard input."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import BinaryIO

from rampart.constants.reporting import STDIN_FILE_NAME, STDIN_PATH


def read_manifest(path: str, *, stdin: BinaryIO | None = None) -> tuple[str, bytes]:
    """Return ``(file_name, content)`` for a path, ``-`` meaning standard input."""
    if path == STDIN_PATH:
        stream = stdin if stdin is not None else sys.stdin.buffer
        return STDIN_FILE_NAME, stream.read()
    file_path = Path(path)
    return file_path.name, file_path.read_bytes()
