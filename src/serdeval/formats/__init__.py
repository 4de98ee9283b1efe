# topmark:header:start
#
#   project      : SerdeVal
#   file         : __init__.py
#   file_relpath : src/serdeval/formats/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 SerdeVal contributors
#
# topmark:header:end

"""Format detection and validation for SerdeVal.

This package holds the two cooperating halves of SerdeVal:

* the **detector**, which classifies a buffer (`serdeval.formats.cascade`) or a
  filename (`serdeval.formats.extensions`) into a `FormatTag`, and
* the **dispatcher** (`serdeval.formats.registry`), which maps a tag to a
  parse-check (`serdeval.formats.checks`) and returns a `ValidationOutcome`.
"""
