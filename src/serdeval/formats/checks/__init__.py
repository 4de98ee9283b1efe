# topmark:header:start
#
#   project      : SerdeVal
#   file         : __init__.py
#   file_relpath : src/serdeval/formats/checks/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 SerdeVal contributors
#
# topmark:header:end

"""Parse-checks for SerdeVal formats.

This package provides one **parse-check** per concrete `FormatTag`. A
parse-check hands the buffer to an established parser and reports the parser's
own error message, or ``None`` when the content is well-formed.

Unlike *content predicates* (see `serdeval.formats.detectors`), which guess a
format without parsing, parse-checks decide validity. Most are a single call
into a third-party library; Jupyter notebooks, JSON Lines, requirements lists
and Dockerfiles add structural checks of their own.

Relationship:
    * `serdeval.formats.checks.base` defines the ``ParseCheck`` protocol.
    * `serdeval.formats.registry` binds each check to its format and wraps the
      result into a `ValidationOutcome`.
"""

from __future__ import annotations
