# topmark:header:start
#
#   project      : SerdeVal
#   file         : test_detect_filename.py
#   file_relpath : tests/formats/test_detect_filename.py
#   license      : MIT
#   copyright    : (c) 2025 SerdeVal contributors
#
# topmark:header:end

"""Unit tests for filename-based format detection and the extension table."""

from __future__ import annotations

import pytest

from serdeval.formats.extensions import (
    EXTENSION_TABLE,
    detect_format_from_filename,
    extensions_for,
)
from serdeval.formats.registry import supported_formats
from serdeval.formats.types import FormatTag
from tests.conftest import parametrize


@parametrize(
    "name, expected",
    [
        ("Dockerfile", FormatTag.DOCKERFILE),
        ("Dockerfile.prod", FormatTag.DOCKERFILE),
        ("build/docker/Dockerfile", FormatTag.DOCKERFILE),
        ("C:\\src\\Dockerfile.dev", FormatTag.DOCKERFILE),
        ("app.containerfile", FormatTag.DOCKERFILE),
        ("requirements-dev.txt", FormatTag.REQUIREMENTS),
        ("requirements/base.txt", FormatTag.REQUIREMENTS),
        ("REQUIREMENTS.TXT", FormatTag.REQUIREMENTS),
        ("notes.txt", FormatTag.UNKNOWN),
        ("x.unknownext", FormatTag.UNKNOWN),
        ("README", FormatTag.UNKNOWN),
        ("config.json", FormatTag.JSON),
        ("CONFIG.YAML", FormatTag.YAML),
        ("ci.yml", FormatTag.YAML),
        ("pom.xml", FormatTag.XML),
        ("pyproject.toml", FormatTag.TOML),
        ("data.csv", FormatTag.CSV),
        ("schema.gql", FormatTag.GRAPHQL),
        ("setup.cfg", FormatTag.INI),
        ("main.tf", FormatTag.HCL),
        ("prod.tfvars", FormatTag.HCL),
        ("msg.textproto", FormatTag.PROTOBUF),
        ("README.md", FormatTag.MARKDOWN),
        ("events.ndjson", FormatTag.JSONL),
        ("analysis.ipynb", FormatTag.JUPYTER),
    ],
)
def test_detect_format_from_filename(name: str, expected: FormatTag) -> None:
    """File names map to formats by basename rules and extension."""
    assert detect_format_from_filename(name) is expected


def test_extension_is_taken_from_the_basename() -> None:
    """A dot in a directory name is not an extension."""
    assert detect_format_from_filename("conf.d/README") is FormatTag.UNKNOWN


def test_extension_table_is_read_only() -> None:
    """The shared table cannot be modified."""
    with pytest.raises(TypeError):
        EXTENSION_TABLE["foo"] = FormatTag.JSON  # type: ignore[index]


def test_extension_table_keys_are_lowercase_without_dot() -> None:
    """Keys are normalized extensions."""
    for ext in EXTENSION_TABLE:
        assert ext == ext.lower()
        assert not ext.startswith(".")


def test_every_supported_format_has_extensions() -> None:
    """Each validatable format is reachable from at least one extension."""
    for fmt in supported_formats():
        assert extensions_for(fmt), fmt


def test_extensions_for_requirements_and_sentinels() -> None:
    """Requirements lists report ``txt``; sentinels report nothing."""
    assert extensions_for(FormatTag.REQUIREMENTS) == ("txt",)
    assert extensions_for(FormatTag.AUTO) == ()
    assert extensions_for(FormatTag.UNKNOWN) == ()
