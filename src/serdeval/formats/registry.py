# topmark:header:start
#
#   project      : SerdeVal
#   file         : registry.py
#   file_relpath : src/serdeval/formats/registry.py
#   license      : MIT
#   copyright    : (c) 2025 SerdeVal contributors
#
# topmark:header:end

"""Registry of parse-checks and the validator facade.

Each concrete `FormatTag` is bound to exactly one parse-check (see
`serdeval.formats.checks`). The registry is a read-only mapping built at import
time; `new_validator` looks a format up and returns a `Validator` that turns the
check's result into a `ValidationOutcome`.

There is no fallback between formats and nothing is retried: a validator only
ever runs its own check. Failures are returned as outcomes; the only exception
raised here is `UnsupportedFormatError`, when a validator is requested for a
sentinel or unregistered format.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Final, Mapping

from serdeval.config.logging import SerdevalLogger, get_logger
from serdeval.constants import MSG_UNABLE_TO_DETECT
from serdeval.formats.cascade import detect_format
from serdeval.formats.checks.base import ParseCheck
from serdeval.formats.checks.devops import (
    check_dockerfile,
    check_graphql,
    check_hcl,
    check_protobuf,
)
from serdeval.formats.checks.documents import check_csv, check_markdown, check_requirements
from serdeval.formats.checks.json_like import check_json, check_jsonl, check_jupyter
from serdeval.formats.checks.markup import check_ini, check_toml, check_xml, check_yaml
from serdeval.formats.errors import UnsupportedFormatError
from serdeval.formats.extensions import detect_format_from_filename
from serdeval.formats.types import FormatTag, ValidationOutcome

logger: SerdevalLogger = get_logger(__name__)


PARSE_CHECKS: Final[Mapping[FormatTag, ParseCheck]] = MappingProxyType(
    {
        FormatTag.JSON: check_json,
        FormatTag.YAML: check_yaml,
        FormatTag.XML: check_xml,
        FormatTag.TOML: check_toml,
        FormatTag.CSV: check_csv,
        FormatTag.GRAPHQL: check_graphql,
        FormatTag.INI: check_ini,
        FormatTag.HCL: check_hcl,
        FormatTag.PROTOBUF: check_protobuf,
        FormatTag.MARKDOWN: check_markdown,
        FormatTag.JSONL: check_jsonl,
        FormatTag.JUPYTER: check_jupyter,
        FormatTag.REQUIREMENTS: check_requirements,
        FormatTag.DOCKERFILE: check_dockerfile,
    }
)


@dataclass(frozen=True)
class Validator:
    """Validator bound to a single format.

    Validators hold no mutable state and can be shared between threads.

    Attributes:
        format (FormatTag): The format this validator checks.
        check (ParseCheck): The parse-check bound to ``format``.
    """

    format: FormatTag
    check: ParseCheck = field(repr=False, compare=False)

    def validate(self, data: bytes | bytearray) -> ValidationOutcome:
        """Check ``data`` for syntactic validity in this validator's format.

        Args:
            data (bytes | bytearray): The raw buffer, expected to be UTF-8.

        Returns:
            ValidationOutcome: ``valid=True`` on success; otherwise the parser's
                message (or a synthesized one for structural checks).
        """
        try:
            error: str | None = self.check(bytes(data))
        except UnicodeDecodeError as exc:
            error = f"invalid UTF-8: {exc}"
        except Exception as exc:
            # Third-party parsers occasionally raise outside their documented errors.
            logger.exception("Unexpected error while validating %s", self.format)
            error = str(exc) or type(exc).__name__

        if error is None:
            logger.debug("Valid %s (%d bytes)", self.format, len(data))
            return ValidationOutcome.ok(self.format)
        if not error:
            error = f"invalid {self.format}"
        logger.debug("Invalid %s: %s", self.format, error)
        return ValidationOutcome.failed(self.format, error)

    def validate_string(self, text: str) -> ValidationOutcome:
        """Encode ``text`` as UTF-8 and validate it."""
        return self.validate(text.encode("utf-8"))


def new_validator(fmt: FormatTag | str) -> Validator:
    """Return the validator for ``fmt``.

    Args:
        fmt (FormatTag | str): A format tag or its name (case-insensitive).

    Returns:
        Validator: A validator bound to the format's parse-check.

    Raises:
        UnsupportedFormatError: For ``auto``, ``unknown``, unregistered tags and
            unknown names.
    """
    tag: FormatTag = FormatTag.parse(fmt)
    check: ParseCheck | None = PARSE_CHECKS.get(tag)
    if check is None:
        raise UnsupportedFormatError(tag)
    return Validator(format=tag, check=check)


def supported_formats() -> tuple[FormatTag, ...]:
    """Return the formats that have a validator, in registry order."""
    return tuple(PARSE_CHECKS)


def validate_auto(data: bytes | bytearray) -> ValidationOutcome:
    """Detect the format of ``data`` from its content and validate it.

    Content that cannot be classified is never handed to a parser.

    Args:
        data (bytes | bytearray): The raw buffer.

    Returns:
        ValidationOutcome: The validation result for the detected format, or
            ``valid=False, format=unknown, error="unable to detect format"``.
    """
    fmt: FormatTag = detect_format(data)
    if fmt is FormatTag.UNKNOWN:
        return ValidationOutcome.failed(FormatTag.UNKNOWN, MSG_UNABLE_TO_DETECT)
    return new_validator(fmt).validate(data)


def validate_data(
    data: bytes | bytearray,
    *,
    filename: str | None = None,
    fmt: FormatTag | str = FormatTag.AUTO,
) -> ValidationOutcome:
    """Validate ``data`` using an explicit format or a filename hint.

    With ``FormatTag.AUTO`` the filename is consulted first; when it implies no
    format (or no filename is given) detection falls back to the content.

    Args:
        data (bytes | bytearray): The raw buffer.
        filename (str | None): Optional name of the input; used as a detection
            hint and recorded as the outcome's ``source_name``.
        fmt (FormatTag | str): The format (or its name) to validate against, or ``AUTO``.

    Returns:
        ValidationOutcome: The validation result, attributed to ``filename``.
            Requesting ``UNKNOWN`` or an unknown name yields a failed outcome
            rather than an error.
    """
    try:
        fmt = FormatTag.parse(fmt)
    except UnsupportedFormatError as exc:
        return ValidationOutcome.failed(FormatTag.UNKNOWN, str(exc)).with_source(filename)

    if fmt is FormatTag.AUTO:
        hinted: FormatTag = (
            detect_format_from_filename(filename) if filename else FormatTag.UNKNOWN
        )
        if hinted is FormatTag.UNKNOWN:
            outcome: ValidationOutcome = validate_auto(data)
        else:
            logger.debug("Using format %s from filename %r", hinted, filename)
            outcome = new_validator(hinted).validate(data)
        return outcome.with_source(filename)

    try:
        validator: Validator = new_validator(fmt)
    except UnsupportedFormatError as exc:
        return ValidationOutcome.failed(fmt, str(exc)).with_source(filename)
    return validator.validate(data).with_source(filename)
