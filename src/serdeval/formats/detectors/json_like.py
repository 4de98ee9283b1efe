# topmark:header:start
#
#   project      : SerdeVal
#   file         : json_like.py
#   file_relpath : src/serdeval/formats/detectors/json_like.py
#   license      : MIT
#   copyright    : (c) 2025 SerdeVal contributors
#
# topmark:header:end

"""Predicates for the JSON family: Jupyter notebooks, JSON Lines and plain JSON.

These are the most structurally constrained formats, and they overlap: a
notebook is a JSON object, and a single JSON Lines record is a JSON document.
The cascade therefore tries them from most to least specific.
"""

from __future__ import annotations

from typing import Final

from serdeval.formats.detectors.text import DetectionInput, is_wrapped

_NOTEBOOK_KEYS: Final[tuple[str, ...]] = ('"cells"', '"metadata"', '"nbformat"')


def _looks_like_json_value(line: str) -> bool:
    return is_wrapped(line, "{", "}") or is_wrapped(line, "[", "]")


def looks_like_jupyter(inp: DetectionInput) -> bool:
    """True for an object that mentions the three top-level notebook keys.

    Example:
        ``{"cells": [], "metadata": {}, "nbformat": 4}``
    """
    return inp.text.startswith("{") and all(key in inp.text for key in _NOTEBOOK_KEYS)


def looks_like_jsonl(inp: DetectionInput) -> bool:
    """True when every non-blank line is a complete JSON object or array.

    Scoring is all-or-nothing: a single non-blank line that is not shaped like
    a JSON value resets the count and rejects the whole buffer, even if earlier
    lines qualified. At least two qualifying lines are required; a lone record
    is plain JSON.
    """
    if len(inp.lines) <= 1:
        return False

    qualifying = 0
    for raw in inp.lines:
        line: str = raw.strip()
        if not line:
            continue
        if not _looks_like_json_value(line):
            qualifying = 0
            break
        qualifying += 1
    return qualifying > 1


def looks_like_json(inp: DetectionInput) -> bool:
    """True when the whole text is wrapped in ``{...}`` or ``[...]``."""
    return _looks_like_json_value(inp.text)
