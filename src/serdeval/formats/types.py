# topmark:header:start
#
#   project      : SerdeVal
#   file         : types.py
#   file_relpath : src/serdeval/formats/types.py
#   license      : MIT
#   copyright    : (c) 2025 SerdeVal contributors
#
# topmark:header:end

"""Core value types: format tags and validation outcomes."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any

from serdeval.formats.errors import UnsupportedFormatError


class FormatTag(str, Enum):
    """Identifier of a supported structured text format.

    ``AUTO`` and ``UNKNOWN`` are sentinels: ``AUTO`` asks for detection and
    ``UNKNOWN`` reports that detection failed. Neither has a validator.

    Attributes:
        JSON: JSON document.
        YAML: YAML document (one or more documents).
        XML: XML document.
        TOML: TOML document.
        CSV: Comma separated values.
        GRAPHQL: GraphQL query or schema document.
        INI: INI configuration.
        HCL: HashiCorp Configuration Language (HCL2 / Terraform).
        PROTOBUF: Protocol Buffers text format.
        MARKDOWN: CommonMark Markdown.
        JSONL: JSON Lines (newline-delimited JSON).
        JUPYTER: Jupyter notebook.
        REQUIREMENTS: pip requirements list.
        DOCKERFILE: Dockerfile / Containerfile.
        AUTO: Request automatic detection.
        UNKNOWN: Detection failed.
    """

    JSON = "json"
    YAML = "yaml"
    XML = "xml"
    TOML = "toml"
    CSV = "csv"
    GRAPHQL = "graphql"
    INI = "ini"
    HCL = "hcl"
    PROTOBUF = "protobuf"
    MARKDOWN = "markdown"
    JSONL = "jsonl"
    JUPYTER = "jupyter"
    REQUIREMENTS = "requirements"
    DOCKERFILE = "dockerfile"
    AUTO = "auto"
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value

    @property
    def is_concrete(self) -> bool:
        """True for real formats, False for the ``auto``/``unknown`` sentinels."""
        return self not in (FormatTag.AUTO, FormatTag.UNKNOWN)

    @classmethod
    def parse(cls, value: str | FormatTag) -> FormatTag:
        """Return the tag named by ``value`` (case-insensitive).

        Args:
            value (str | FormatTag): A tag or its string name (e.g. ``"YAML"``).

        Returns:
            FormatTag: The matching tag (sentinels included).

        Raises:
            UnsupportedFormatError: If ``value`` names no tag.
        """
        if isinstance(value, FormatTag):
            return value
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise UnsupportedFormatError(value) from None


@dataclass(frozen=True)
class ValidationOutcome:
    """Uniform result of a validation call.

    Attributes:
        valid (bool): Whether the data is well-formed in ``format``.
        format (FormatTag): The format that was validated (or ``UNKNOWN``).
        error (str | None): Diagnostic message; set only when ``valid`` is False.
        source_name (str | None): Optional name of the validated input (file name, ``stdin``).
    """

    valid: bool
    format: FormatTag
    error: str | None = None
    source_name: str | None = None

    @classmethod
    def ok(cls, fmt: FormatTag) -> ValidationOutcome:
        """Return a successful outcome for ``fmt``."""
        return cls(valid=True, format=fmt)

    @classmethod
    def failed(cls, fmt: FormatTag, error: str) -> ValidationOutcome:
        """Return a failed outcome for ``fmt`` carrying ``error``."""
        return cls(valid=False, format=fmt, error=error)

    def with_source(self, source_name: str | None) -> ValidationOutcome:
        """Return a copy of this outcome attributed to ``source_name``."""
        return replace(self, source_name=source_name)

    def to_dict(self) -> dict[str, Any]:
        """Render a JSON-friendly mapping; empty optional fields are omitted."""
        payload: dict[str, Any] = {"valid": self.valid, "format": self.format.value}
        if self.error:
            payload["error"] = self.error
        if self.source_name:
            payload["filename"] = self.source_name
        return payload
