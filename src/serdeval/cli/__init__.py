# topmark:header:start
#
#   project      : SerdeVal
#   file         : __init__.py
#   file_relpath : src/serdeval/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 SerdeVal contributors
#
# topmark:header:end

"""Command-line interface for SerdeVal.

A thin Click front end over `serdeval.formats`: it reads files (or standard
input), hands the bytes to the library, and renders the outcomes. It does not
walk directories.
"""

from __future__ import annotations
