# topmark:header:start
#
#   project      : SerdeVal
#   file         : devops.py
#   file_relpath : src/serdeval/formats/checks/devops.py
#   license      : MIT
#   copyright    : (c) 2025 SerdeVal contributors
#
# topmark:header:end

"""Parse-checks for Dockerfiles, HCL, GraphQL and Protobuf text format."""

from __future__ import annotations

from typing import Final

import hcl2
from google.protobuf import any_pb2, text_format
from graphql import GraphQLError, parse
from lark.exceptions import LarkError

from serdeval.formats.checks.base import decode_text

DOCKERFILE_INSTRUCTIONS: Final[tuple[str, ...]] = (
    "FROM",
    "RUN",
    "CMD",
    "LABEL",
    "EXPOSE",
    "ENV",
    "ADD",
    "COPY",
    "ENTRYPOINT",
    "VOLUME",
    "USER",
    "WORKDIR",
    "ARG",
    "ONBUILD",
    "STOPSIGNAL",
    "HEALTHCHECK",
    "SHELL",
)


def _starts_with_instruction(upper_line: str) -> bool:
    return any(
        upper_line == instruction or upper_line.startswith(instruction + " ")
        for instruction in DOCKERFILE_INSTRUCTIONS
    )


def check_dockerfile(data: bytes) -> str | None:
    """Check the instruction structure of a Dockerfile.

    Every non-blank, non-comment line must start with a known instruction
    (case-insensitive) unless the previous physical line ends with a ``\\``
    continuation. At least one ``FROM`` instruction is required. Instruction
    arguments are not validated.
    """
    physical: list[str] = decode_text(data).split("\n")
    has_from = False

    for index, raw in enumerate(physical):
        line: str = raw.strip()
        if not line or line.startswith("#"):
            continue

        upper: str = line.upper()
        if upper.startswith("FROM "):
            has_from = True

        if index > 0 and physical[index - 1].rstrip("\r").endswith("\\"):
            continue

        if not _starts_with_instruction(upper):
            return f"invalid instruction on line {index + 1}: {line}"

    if not has_from:
        return "missing required FROM instruction"
    return None


def check_hcl(data: bytes) -> str | None:
    """Check that ``data`` is valid HCL2 native syntax (Terraform style)."""
    text: str = decode_text(data)
    try:
        hcl2.loads(text)
    except (LarkError, ValueError) as exc:
        return str(exc)
    return None


def check_graphql(data: bytes) -> str | None:
    """Check that ``data`` is a GraphQL executable or type-system document."""
    if not data:
        return "empty GraphQL content"
    try:
        parse(decode_text(data))
    except GraphQLError as exc:
        return str(exc)
    return None


def check_protobuf(data: bytes) -> str | None:
    """Check that ``data`` is Protobuf text format for a ``google.protobuf.Any`` message.

    Without a schema the only message type available is the ``Any`` envelope,
    so only its ``type_url`` and ``value`` fields are accepted.
    """
    text: str = decode_text(data)
    try:
        text_format.Parse(text, any_pb2.Any())
    except text_format.ParseError as exc:
        return str(exc)
    return None
