# topmark:header:start
#
#   project      : SerdeVal
#   file         : text.py
#   file_relpath : src/serdeval/formats/detectors/text.py
#   license      : MIT
#   copyright    : (c) 2025 SerdeVal contributors
#
# topmark:header:end

"""Preprocessing shared by all content predicates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class DetectionInput:
    """Trimmed view of a buffer under detection.

    Attributes:
        text (str): The decoded buffer with leading/trailing whitespace removed.
        lines (tuple[str, ...]): ``text`` split on ``"\\n"``. Line terminators are
            not kept; a CR of a CRLF pair stays at the end of its line.
    """

    text: str
    lines: tuple[str, ...]

    @classmethod
    def from_data(cls, data: bytes | bytearray | str) -> DetectionInput:
        """Build a detection input from raw bytes or an already decoded string.

        Bytes are decoded as UTF-8; undecodable sequences become U+FFFD so that
        detection never fails on encoding errors.
        """
        if isinstance(data, (bytes, bytearray)):
            decoded: str = bytes(data).decode("utf-8", errors="replace")
        else:
            decoded = data
        text: str = decoded.strip()
        return cls(text=text, lines=tuple(text.split("\n")))

    @property
    def is_empty(self) -> bool:
        """True when the trimmed text is empty."""
        return not self.text

    @property
    def first_line(self) -> str:
        """The first line of the trimmed text."""
        return self.lines[0]

    def non_blank_lines(self) -> list[str]:
        """Return the stripped lines that are not blank."""
        return [stripped for stripped in (line.strip() for line in self.lines) if stripped]


@runtime_checkable
class ContentPredicate(Protocol):
    """Protocol for content predicates.

    A predicate inspects a `DetectionInput` and returns True if the content
    looks like its format. It must be fast and side-effect free.
    """

    def __call__(self, inp: DetectionInput) -> bool:
        """Check whether ``inp`` looks like the predicate's format.

        Args:
            inp (DetectionInput): The trimmed buffer and its lines.

        Returns:
            bool: True if the content matches, False otherwise.
        """
        ...


def count_keyword_hits(text: str, keywords: tuple[str, ...]) -> int:
    """Count how many ``keywords`` occur in ``text`` followed by a space."""
    return sum(1 for kw in keywords if kw + " " in text)


def is_wrapped(text: str, opening: str, closing: str) -> bool:
    """True if ``text`` starts with ``opening`` and ends with ``closing``."""
    return text.startswith(opening) and text.endswith(closing)
