"""Atomic text persistence."""

from __future__ import annotations

import os
import tempfile
from contextlib import suppress
from pathlib import Path


def write_text_atomic(path: Path, text: str, *, temp_prefix: str, temp_suffix: str) -> None:
    """Write ``text`` beside ``path`` and rename it into place.

    Readers see either the previous file or the complete new one. The temp
    file is removed when writing fails.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    descriptor, temp_name = tempfile.mkstemp(dir=path.parent, prefix=temp_prefix, suffix=temp_suffix)
    try:
        with os.fdopen(descriptor, "w", encoding="utf-8") as handle:
            handle.write(text)
            if not text.endswith("\n"):
                handle.write("\n")
        os.replace(temp_name, path)
    except Exception:
        with suppress(FileNotFoundError):
            Path(temp_name).unlink()
        raise
