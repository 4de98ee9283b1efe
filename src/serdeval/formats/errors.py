# topmark:header:start
#
#   project      : SerdeVal
#   file         : errors.py
#   file_relpath : src/serdeval/formats/errors.py
#   license      : MIT
#   copyright    : (c) 2025 SerdeVal contributors
#
# topmark:header:end

"""Exceptions raised by the format layer.

Only requests that can never succeed raise: asking for a validator of a
sentinel or unregistered format. Detection and validation failures are
returned as data (`FormatTag.UNKNOWN`, `ValidationOutcome`).
"""

from __future__ import annotations

from serdeval.constants import MSG_UNSUPPORTED_FORMAT


class UnsupportedFormatError(ValueError):
    """Raised when a validator is requested for ``auto``, ``unknown`` or an unregistered format.

    Attributes:
        requested (str): The format name as requested by the caller.
    """

    def __init__(self, requested: object) -> None:
        self.requested: str = str(getattr(requested, "value", requested))
        super().__init__(f"{MSG_UNSUPPORTED_FORMAT}: {self.requested}")
