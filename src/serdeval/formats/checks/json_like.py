# topmark:header:start
#
#   project      : SerdeVal
#   file         : json_like.py
#   file_relpath : src/serdeval/formats/checks/json_like.py
#   license      : MIT
#   copyright    : (c) 2025 SerdeVal contributors
#
# topmark:header:end

"""Parse-checks for JSON, JSON Lines and Jupyter notebooks.

All three use the standard library decoder. ``NaN`` and ``Infinity`` are
rejected: Python's decoder accepts them, but they are not JSON.
"""

from __future__ import annotations

import json
from typing import Any, Final

from serdeval.formats.checks.base import decode_text, iter_numbered_lines

NOTEBOOK_REQUIRED_FIELDS: Final[tuple[str, ...]] = ("cells", "metadata", "nbformat")


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON constant: {name}")


def _loads(text: str) -> Any:
    return json.loads(text, parse_constant=_reject_constant)


def check_json(data: bytes) -> str | None:
    """Check that ``data`` is a single JSON document."""
    text: str = decode_text(data)
    try:
        _loads(text)
    except ValueError as exc:
        return str(exc)
    return None


def check_jsonl(data: bytes) -> str | None:
    """Check that every non-blank line of ``data`` is a JSON document.

    Lines are split on ``"\\n"`` and stripped; blank lines are skipped. The
    first failure reports its 1-based line number. An empty buffer is valid.
    """
    for lineno, line in iter_numbered_lines(decode_text(data)):
        if not line:
            continue
        try:
            _loads(line)
        except ValueError as exc:
            return f"invalid JSON on line {lineno}: {exc}"
    return None


def check_jupyter(data: bytes) -> str | None:
    """Check that ``data`` is a JSON object carrying the notebook top-level fields.

    Only the presence of ``cells``, ``metadata`` and ``nbformat`` is verified;
    their contents are not.
    """
    text: str = decode_text(data)
    try:
        notebook: Any = _loads(text)
    except ValueError as exc:
        return f"invalid JSON: {exc}"

    if not isinstance(notebook, dict):
        return "invalid JSON: notebook must be a JSON object"

    for field in NOTEBOOK_REQUIRED_FIELDS:
        if field not in notebook:
            return f"missing required field: {field}"
    return None
