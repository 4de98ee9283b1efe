# topmark:header:start
#
#   project      : SerdeVal
#   file         : io.py
#   file_relpath : src/serdeval/cli/io.py
#   license      : MIT
#   copyright    : (c) 2025 SerdeVal contributors
#
# topmark:header:end

"""Input helpers for the CLI: reading files and standard input as bytes."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Sequence

from serdeval.config.logging import SerdevalLogger, get_logger
from serdeval.constants import MSG_NO_STDIN, STDIN_SOURCE_NAME

logger: SerdevalLogger = get_logger(__name__)


@dataclass(frozen=True)
class InputSource:
    """One input to process.

    Attributes:
        name (str): Display name (the path as given, or ``stdin``).
        data (bytes | None): The raw content; None when it could not be read.
        error (str | None): Why the content could not be read.
        is_stdin (bool): True for standard input (no filename hint).
    """

    name: str
    data: bytes | None = None
    error: str | None = None
    is_stdin: bool = False


def read_source(path: str) -> InputSource:
    """Read ``path`` as bytes; read errors (including directories) are captured."""
    try:
        data: bytes = Path(path).read_bytes()
    except OSError as exc:
        logger.debug("Cannot read %s: %s", path, exc)
        return InputSource(name=path, error=f"Cannot read file: {exc}")
    return InputSource(name=path, data=data)


def read_stdin() -> InputSource:
    """Read all of standard input as bytes.

    An interactive terminal (or a missing stdin) is reported as an error
    instead of blocking on keyboard input.
    """
    if not sys.stdin or sys.stdin.isatty():
        return InputSource(name=STDIN_SOURCE_NAME, error=MSG_NO_STDIN, is_stdin=True)
    try:
        data: bytes = sys.stdin.buffer.read()
    except OSError as exc:
        return InputSource(
            name=STDIN_SOURCE_NAME, error=f"Cannot read stdin: {exc}", is_stdin=True
        )
    return InputSource(name=STDIN_SOURCE_NAME, data=data, is_stdin=True)


def iter_sources(paths: Sequence[str]) -> Iterator[InputSource]:
    """Yield the inputs named by ``paths``, or standard input when there are none."""
    if not paths:
        yield read_stdin()
        return
    for path in paths:
        yield read_source(path)
