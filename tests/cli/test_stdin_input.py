# topmark:header:start
#
#   project      : SerdeVal
#   file         : test_stdin_input.py
#   file_relpath : tests/cli/test_stdin_input.py
#   license      : MIT
#   copyright    : (c) 2025 SerdeVal contributors
#
# topmark:header:end

"""Tests for reading standard input in `serdeval.cli.io`."""

from __future__ import annotations

import io
import sys

import pytest

from serdeval.cli.io import InputSource, iter_sources, read_stdin
from serdeval.constants import MSG_NO_STDIN, STDIN_SOURCE_NAME


class _FakeStdin(io.TextIOWrapper):
    """Text stream over bytes that can pretend to be a terminal."""

    def __init__(self, data: bytes, *, tty: bool) -> None:
        super().__init__(io.BytesIO(data), encoding="utf-8")
        self._tty: bool = tty

    def isatty(self) -> bool:
        return self._tty


def test_read_stdin_returns_piped_bytes(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(sys, "stdin", _FakeStdin(b"\xef\xbb\xbfa: 1\n", tty=False))
    source: InputSource = read_stdin()
    assert source == InputSource(name=STDIN_SOURCE_NAME, data=b"\xef\xbb\xbfa: 1\n", is_stdin=True)


def test_read_stdin_refuses_a_terminal(monkeypatch: pytest.MonkeyPatch) -> None:
    """An interactive terminal is reported instead of waiting for input."""
    monkeypatch.setattr(sys, "stdin", _FakeStdin(b"ignored", tty=True))
    source: InputSource = read_stdin()
    assert source.data is None
    assert source.error == MSG_NO_STDIN
    assert source.is_stdin


def test_read_stdin_without_a_stream(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(sys, "stdin", None)
    assert read_stdin().error == MSG_NO_STDIN


def test_iter_sources_falls_back_to_stdin(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(sys, "stdin", _FakeStdin(b"{}", tty=False))
    sources: list[InputSource] = list(iter_sources([]))
    assert [source.data for source in sources] == [b"{}"]
