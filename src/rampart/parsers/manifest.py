"""Split raw manifest input into normalized single-document JSON buffers.

Input is either one JSON value or YAML that may hold several documents
separated by ``---`` lines. Documents are produced lazily so a conversion
failure surfaces only after every earlier document has been handed out.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator

import yaml

from rampart.constants.parsing import CRLF, DOCUMENT_SEPARATOR, INPUT_ENCODING, LF
from rampart.exceptions import DocumentConversionError, InvalidInputError
from rampart.model import ManifestDocument

logger = logging.getLogger(__name__)


def detect_line_break(text: str) -> str:
    """Return the line break used by ``text``.

    CRLF is chosen whenever the content contains it, independent of the
    host platform.
    """
    return CRLF if CRLF in text else LF


def split_documents(content: bytes | str) -> Iterator[ManifestDocument]:
    """Yield each manifest document of ``content`` in source order.

    Raises ``InvalidInputError`` when the input holds no document at all and
    ``DocumentConversionError`` when a fragment is not valid YAML.
    """
    text = _decode(content)

    single = _parse_json(text)
    if single is not None:
        yield ManifestDocument(index=0, content=single)
        return

    line_break = detect_line_break(text)
    fragments = text.split(f"{line_break}{DOCUMENT_SEPARATOR}{line_break}")
    produced = 0
    for position, fragment in enumerate(fragments):
        doc = fragment.strip()
        if not doc or doc == DOCUMENT_SEPARATOR:
            if position == len(fragments) - 1 and produced == 0:
                logger.debug("empty and no documents produced, rejecting input")
                raise InvalidInputError()
            logger.debug("empty fragment %d but more remain, continuing", position)
            continue

        yield ManifestDocument(index=produced, content=_yaml_to_json(doc, produced))
        produced += 1


def _decode(content: bytes | str) -> str:
    if isinstance(content, str):
        return content
    try:
        return content.decode(INPUT_ENCODING)
    except UnicodeDecodeError as exc:
        raise DocumentConversionError(f"input is not valid UTF-8: {exc}", index=0) from exc


def _parse_json(text: str) -> str | None:
    """Return normalized JSON when the whole input is one JSON value."""
    try:
        value = json.loads(text)
    except (ValueError, RecursionError):
        return None
    return json.dumps(value)


def _yaml_to_json(fragment: str, index: int) -> str:
    """Convert the first YAML document of ``fragment``; a trailing ``---`` is ignored."""
    try:
        data = next(yaml.safe_load_all(fragment), None)
        return json.dumps(data, default=str)
    except (yaml.YAMLError, TypeError, ValueError, RecursionError) as exc:
        raise DocumentConversionError(f"error converting YAML to JSON: {exc}", index=index) from exc
