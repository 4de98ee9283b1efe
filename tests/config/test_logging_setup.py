# topmark:header:start
#
#   project      : SerdeVal
#   file         : test_logging_setup.py
#   file_relpath : tests/config/test_logging_setup.py
#   license      : MIT
#   copyright    : (c) 2025 SerdeVal contributors
#
# topmark:header:end

"""Tests for the logging configuration helpers."""

from __future__ import annotations

import logging

import pytest

from serdeval.config.logging import (
    TRACE_LEVEL,
    ChalkFormatter,
    SerdevalLogger,
    get_logger,
    resolve_env_log_level,
    setup_logging,
)
from tests.conftest import parametrize


@parametrize(
    "value, expected",
    [
        ("trace", TRACE_LEVEL),
        ("DEBUG", logging.DEBUG),
        (" warn ", logging.WARNING),
        ("15", 15),
        ("bogus", None),
        ("", None),
    ],
)
def test_resolve_env_log_level(
    monkeypatch: pytest.MonkeyPatch, value: str, expected: int | None
) -> None:
    monkeypatch.setenv("SERDEVAL_LOG_LEVEL", value)
    assert resolve_env_log_level() == expected


def test_resolve_env_log_level_unset() -> None:
    """The autouse fixture removes the variable."""
    assert resolve_env_log_level() is None


def test_get_logger_returns_trace_capable_logger() -> None:
    logger = get_logger("serdeval.tests")
    assert isinstance(logger, SerdevalLogger)
    assert logging.getLevelName(TRACE_LEVEL) == "TRACE"


def test_trace_records_are_emitted(caplog: pytest.LogCaptureFixture) -> None:
    logger: SerdevalLogger = get_logger("serdeval.tests.trace")
    with caplog.at_level(TRACE_LEVEL):
        logger.trace("probe %d", 42)
    assert any(r.levelno == TRACE_LEVEL and r.getMessage() == "probe 42" for r in caplog.records)


def test_setup_logging_installs_a_single_chalk_handler() -> None:
    try:
        setup_logging(level=logging.INFO)
        setup_logging(level=logging.INFO)
        root: logging.Logger = logging.getLogger()
        assert root.level == logging.INFO
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, ChalkFormatter)
    finally:
        setup_logging(level=TRACE_LEVEL)


def test_setup_logging_defaults_to_critical() -> None:
    try:
        setup_logging()
        assert logging.getLogger().level == logging.CRITICAL
    finally:
        setup_logging(level=TRACE_LEVEL)
