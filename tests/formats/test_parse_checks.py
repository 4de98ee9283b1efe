# topmark:header:start
#
#   project      : SerdeVal
#   file         : test_parse_checks.py
#   file_relpath : tests/formats/test_parse_checks.py
#   license      : MIT
#   copyright    : (c) 2025 SerdeVal contributors
#
# topmark:header:end

"""Unit tests for the per-format parse-checks, driven through `new_validator`."""

from __future__ import annotations

from serdeval.formats.registry import new_validator
from serdeval.formats.types import FormatTag, ValidationOutcome
from tests.conftest import parametrize


def _validate(fmt: FormatTag, data: str | bytes) -> ValidationOutcome:
    raw: bytes = data.encode("utf-8") if isinstance(data, str) else data
    return new_validator(fmt).validate(raw)


@parametrize(
    "fmt, data",
    [
        (FormatTag.JSON, '{"a": [1, 2.5, null, true]}'),
        (FormatTag.JSON, '\ufeff{"bom": true}'),
        (FormatTag.JSONL, '{"a":1}\n\n{"b":2}\n'),
        (FormatTag.JSONL, ""),
        (FormatTag.JUPYTER, '{"cells": [], "metadata": {}, "nbformat": 4}'),
        (FormatTag.YAML, "a: 1\nb: [x, y]\n"),
        (FormatTag.YAML, "---\na: 1\n---\nb: 2\n"),
        (FormatTag.XML, '<?xml version="1.0"?><root><a x="1"/></root>'),
        (FormatTag.TOML, 'a = 1\n[t]\nb = "x"\n'),
        (FormatTag.INI, "[s]\nk = v\n"),
        (FormatTag.INI, "k = v\n[s]\nother: 1\n"),
        (FormatTag.CSV, "a,b\n1,2\n\n3,4\n"),
        (FormatTag.CSV, 'a,b\n"x, y",2\n'),
        (FormatTag.CSV, ""),
        (FormatTag.MARKDOWN, "# Title\n\n*emph* and `code`\n"),
        (FormatTag.REQUIREMENTS, "requests==2.0\n# comment\n\nflask\n-e .\n"),
        (FormatTag.DOCKERFILE, 'FROM python:3.12\nRUN pip install \\\n    flask\nCMD ["python"]\n'),
        (FormatTag.DOCKERFILE, "# syntax\nfrom alpine\nrun echo hi\n"),
        (FormatTag.DOCKERFILE, "FROM x\r\nRUN a \\\r\n  b\r\n"),
        (FormatTag.HCL, 'resource "a" "b" {\n  x = 1\n}\n'),
        (FormatTag.GRAPHQL, "{ user { id } }"),
        (FormatTag.GRAPHQL, "type Query { user: String }"),
        (FormatTag.PROTOBUF, 'type_url: "type.googleapis.com/x"\nvalue: "abc"\n'),
        (FormatTag.PROTOBUF, ""),
    ],
)
def test_valid_content(fmt: FormatTag, data: str) -> None:
    """Well-formed samples are accepted."""
    outcome: ValidationOutcome = _validate(fmt, data)
    assert outcome.valid, outcome.error
    assert outcome.format is fmt
    assert outcome.error is None


@parametrize(
    "fmt, data",
    [
        (FormatTag.JSON, '{"a": 1,}'),
        (FormatTag.JSON, '{"a": NaN}'),
        (FormatTag.JSON, ""),
        (FormatTag.YAML, "a: [1, 2"),
        (FormatTag.YAML, "!!python/object/apply:os.system ['true']"),
        (FormatTag.XML, "<a><b></a>"),
        (FormatTag.XML, ""),
        (FormatTag.TOML, "a = "),
        (FormatTag.TOML, "a = 1\na = 2\n"),
        (FormatTag.INI, "[s]\nnot a pair\n"),
        (FormatTag.HCL, 'resource "a" {'),
        (FormatTag.GRAPHQL, "query {"),
        (FormatTag.PROTOBUF, "foo: 1"),
    ],
)
def test_invalid_content_passes_parser_message(fmt: FormatTag, data: str) -> None:
    """Malformed samples are rejected with a non-empty parser message."""
    outcome: ValidationOutcome = _validate(fmt, data)
    assert not outcome.valid
    assert outcome.format is fmt
    assert outcome.error


def test_jsonl_reports_line_number() -> None:
    """The first bad JSON Lines record is reported with its 1-based line."""
    outcome = _validate(FormatTag.JSONL, '{"a":1}\n\n{bad}\n')
    assert outcome.error is not None
    assert outcome.error.startswith("invalid JSON on line 3: ")


def test_jupyter_requires_an_object() -> None:
    outcome = _validate(FormatTag.JUPYTER, "[]")
    assert outcome.error == "invalid JSON: notebook must be a JSON object"


def test_jupyter_reports_invalid_json() -> None:
    outcome = _validate(FormatTag.JUPYTER, "{")
    assert outcome.error is not None
    assert outcome.error.startswith("invalid JSON: ")


@parametrize(
    "data, missing",
    [
        ('{"metadata": {}, "nbformat": 4}', "cells"),
        ('{"cells": [], "nbformat": 4}', "metadata"),
        ('{"cells": [], "metadata": {}}', "nbformat"),
        ("{}", "cells"),
    ],
)
def test_jupyter_reports_first_missing_field(data: str, missing: str) -> None:
    """Required fields are checked in order: cells, metadata, nbformat."""
    outcome = _validate(FormatTag.JUPYTER, data)
    assert outcome.error == f"missing required field: {missing}"


def test_csv_reports_ragged_record() -> None:
    outcome = _validate(FormatTag.CSV, "a,b\n1,2,3\n")
    assert outcome.error == "record on line 2: wrong number of fields"


def test_csv_reports_unterminated_quote() -> None:
    outcome = _validate(FormatTag.CSV, 'a,b\n"x,2\n')
    assert not outcome.valid
    assert outcome.error is not None
    assert outcome.error.startswith("line ")


def test_requirements_reports_line_without_name() -> None:
    outcome = _validate(FormatTag.REQUIREMENTS, "requests\n===\n")
    assert outcome.error == "invalid requirement on line 2: ==="


def test_dockerfile_requires_from() -> None:
    outcome = _validate(FormatTag.DOCKERFILE, "RUN echo hi\n")
    assert outcome.error == "missing required FROM instruction"


def test_dockerfile_reports_unknown_instruction() -> None:
    outcome = _validate(FormatTag.DOCKERFILE, "FROM x\n\nBOGUS y\n")
    assert outcome.error == "invalid instruction on line 3: BOGUS y"


def test_dockerfile_instruction_must_be_a_whole_word() -> None:
    """``RUNNER`` is not ``RUN``."""
    outcome = _validate(FormatTag.DOCKERFILE, "FROM x\nRUNNER y\n")
    assert outcome.error == "invalid instruction on line 2: RUNNER y"


def test_graphql_rejects_empty_content() -> None:
    outcome = _validate(FormatTag.GRAPHQL, b"")
    assert outcome.error == "empty GraphQL content"


def test_markdown_accepts_any_text() -> None:
    """CommonMark renders every input."""
    assert _validate(FormatTag.MARKDOWN, "]]][[[ **unbalanced").valid


@parametrize("fmt", [FormatTag.JSON, FormatTag.YAML, FormatTag.MARKDOWN, FormatTag.CSV])
def test_invalid_utf8_is_reported(fmt: FormatTag) -> None:
    """Undecodable input is reported as an outcome, not raised."""
    outcome = _validate(fmt, b"a\xff\xfeb")
    assert not outcome.valid
    assert outcome.error is not None
    assert outcome.error.startswith("invalid UTF-8: ")


def test_ini_without_section_reports_lines_as_given() -> None:
    """Keys before any section do not shift the reported line numbers."""
    outcome = _validate(FormatTag.INI, b"k = v\nnot a pair\n")
    assert outcome.error is not None
    assert "[line  2]: 'not a pair\\n'" in outcome.error
    assert "[line  3]" not in outcome.error


def test_ini_with_section_reports_parser_line() -> None:
    outcome = _validate(FormatTag.INI, b"[s]\nk = v\nbroken\n")
    assert outcome.error is not None
    assert "[line  3]: 'broken\\n'" in outcome.error
