# topmark:header:start
#
#   project      : SerdeVal
#   file         : __init__.py
#   file_relpath : src/serdeval/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 SerdeVal contributors
#
# topmark:header:end

"""SerdeVal package.

SerdeVal is an offline validator for structured text formats. It guesses the
format of a buffer (from its content or from a filename) and checks that the
content is syntactically valid in that format.

Examples:
    ```python
    from serdeval import FormatTag, new_validator, validate_auto

    validate_auto(b'{"a": 1}').valid  # True
    new_validator(FormatTag.YAML).validate_string("a: [1, 2").valid  # False
    ```
"""

from __future__ import annotations

from serdeval.formats.cascade import detect_format
from serdeval.formats.errors import UnsupportedFormatError
from serdeval.formats.extensions import EXTENSION_TABLE, detect_format_from_filename
from serdeval.formats.registry import (
    Validator,
    new_validator,
    supported_formats,
    validate_auto,
    validate_data,
)
from serdeval.formats.types import FormatTag, ValidationOutcome

__all__ = [
    "EXTENSION_TABLE",
    "FormatTag",
    "UnsupportedFormatError",
    "ValidationOutcome",
    "Validator",
    "detect_format",
    "detect_format_from_filename",
    "new_validator",
    "supported_formats",
    "validate_auto",
    "validate_data",
]
