# topmark:header:start
#
#   project      : SerdeVal
#   file         : documents.py
#   file_relpath : src/serdeval/formats/detectors/documents.py
#   license      : MIT
#   copyright    : (c) 2025 SerdeVal contributors
#
# topmark:header:end

"""Predicates for data and document formats: CSV, Markdown and requirements lists."""

from __future__ import annotations

import re
from typing import Final

from serdeval.formats.detectors.text import DetectionInput

# Number of leading lines whose comma count must agree for CSV.
CSV_SAMPLE_LINES: Final[int] = 5

MARKDOWN_MARKERS: Final[tuple[str, ...]] = ("```", "**", "~~")

REQUIREMENT_OPERATORS: Final[tuple[str, ...]] = ("==", ">=", "<=", "~=")

_LOWERCASE_RE: Final[re.Pattern[str]] = re.compile(r"[a-z]")


def looks_like_csv(inp: DetectionInput) -> bool:
    """True when the first lines share the same, non-zero number of commas.

    Only the first ``CSV_SAMPLE_LINES`` lines are sampled; blank lines among
    them are ignored.
    """
    if "," not in inp.text or len(inp.lines) <= 1:
        return False

    expected: int = inp.first_line.count(",")
    if expected < 1:
        return False

    for line in inp.lines[1:CSV_SAMPLE_LINES]:
        if not line.strip():
            continue
        if line.count(",") != expected:
            return False
    return True


def looks_like_markdown(inp: DetectionInput) -> bool:
    """True for a leading heading, fenced code, emphasis, strikethrough or a link."""
    text: str = inp.text
    if inp.first_line.startswith("#"):
        return True
    if any(marker in text for marker in MARKDOWN_MARKERS):
        return True
    return "[" in text and "](" in text


def looks_like_requirements(inp: DetectionInput) -> bool:
    """True for version specifiers next to at least one lower-case package line."""
    if not any(op in inp.text for op in REQUIREMENT_OPERATORS):
        return False
    for line in inp.non_blank_lines():
        if line.startswith("#"):
            continue
        if _LOWERCASE_RE.search(line):
            return True
    return False
