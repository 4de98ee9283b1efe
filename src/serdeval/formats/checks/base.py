# topmark:header:start
#
#   project      : SerdeVal
#   file         : base.py
#   file_relpath : src/serdeval/formats/checks/base.py
#   license      : MIT
#   copyright    : (c) 2025 SerdeVal contributors
#
# topmark:header:end

"""Protocol and helpers shared by all parse-checks."""

from __future__ import annotations

from typing import Iterator, Protocol, runtime_checkable


@runtime_checkable
class ParseCheck(Protocol):
    """Protocol for format parse-checks.

    A parse-check receives the raw buffer and returns ``None`` when the content
    is well-formed, or the error message to report otherwise. Expected parser
    failures are turned into messages; encoding errors propagate as
    ``UnicodeDecodeError`` and are reported by the caller.
    """

    def __call__(self, data: bytes) -> str | None:
        """Check ``data`` for syntactic validity.

        Args:
            data (bytes): The raw buffer.

        Returns:
            str | None: The error message, or None if the content is valid.
        """
        ...


def decode_text(data: bytes) -> str:
    """Decode ``data`` as UTF-8 (a leading BOM is dropped).

    Raises:
        UnicodeDecodeError: If ``data`` is not valid UTF-8.
    """
    return data.decode("utf-8-sig")


def iter_numbered_lines(text: str) -> Iterator[tuple[int, str]]:
    """Yield ``(line_number, stripped_line)`` pairs, 1-based, splitting on ``"\\n"``."""
    for index, line in enumerate(text.split("\n"), start=1):
        yield index, line.strip()
