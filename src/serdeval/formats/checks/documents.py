# topmark:header:start
#
#   project      : SerdeVal
#   file         : documents.py
#   file_relpath : src/serdeval/formats/checks/documents.py
#   license      : MIT
#   copyright    : (c) 2025 SerdeVal contributors
#
# topmark:header:end

"""Parse-checks for CSV, Markdown and requirements lists."""

from __future__ import annotations

import csv
import io
import re
from typing import Final

from markdown_it import MarkdownIt

from serdeval.formats.checks.base import decode_text, iter_numbered_lines

_REQUIREMENT_NAME_RE: Final[re.Pattern[str]] = re.compile(r"[A-Za-z0-9_-]")


def check_csv(data: bytes) -> str | None:
    """Check that ``data`` is rectangular CSV.

    Quoting is parsed strictly. Blank lines are skipped, and every record must
    have as many fields as the first one. An empty buffer is valid.
    """
    text: str = decode_text(data)
    reader = csv.reader(io.StringIO(text, newline=""), strict=True)
    expected: int | None = None
    try:
        for record in reader:
            if not record:
                continue
            if expected is None:
                expected = len(record)
            elif len(record) != expected:
                return f"record on line {reader.line_num}: wrong number of fields"
    except csv.Error as exc:
        return f"line {reader.line_num}: {exc}"
    return None


def check_markdown(data: bytes) -> str | None:
    """Check that ``data`` renders as CommonMark.

    CommonMark defines a rendering for every input, so this only fails on text
    that is not valid UTF-8.
    """
    MarkdownIt("commonmark").render(decode_text(data))
    return None


def check_requirements(data: bytes) -> str | None:
    """Check that every requirement line names something.

    Blank lines and ``#`` comments are skipped. Any other line must contain at
    least one character of ``[A-Za-z0-9_-]``; specifiers are not validated.
    """
    for lineno, line in iter_numbered_lines(decode_text(data)):
        if not line or line.startswith("#"):
            continue
        if not _REQUIREMENT_NAME_RE.search(line):
            return f"invalid requirement on line {lineno}: {line}"
    return None
