# topmark:header:start
#
#   project      : SerdeVal
#   file         : devops.py
#   file_relpath : src/serdeval/formats/detectors/devops.py
#   license      : MIT
#   copyright    : (c) 2025 SerdeVal contributors
#
# topmark:header:end

"""Predicates for developer and infrastructure formats.

Dockerfiles, HCL, GraphQL and Protobuf text format are recognized by their
keywords. They run after the JSON family and before the looser data and markup
predicates, which would otherwise claim their content (a Dockerfile is valid
YAML-ish text; an HCL block has ``=`` like TOML).
"""

from __future__ import annotations

from typing import Final

from serdeval.formats.detectors.text import DetectionInput, count_keyword_hits

DOCKERFILE_KEYWORDS: Final[tuple[str, ...]] = (
    "FROM",
    "RUN",
    "CMD",
    "EXPOSE",
    "ENV",
    "ADD",
    "COPY",
    "ENTRYPOINT",
    "VOLUME",
    "USER",
    "WORKDIR",
    "ARG",
)
# Minimum number of distinct instructions when no FROM is present.
DOCKERFILE_MIN_HITS: Final[int] = 3

HCL_KEYWORDS: Final[tuple[str, ...]] = (
    "resource",
    "variable",
    "provider",
    "module",
    "output",
    "locals",
    "terraform",
    "data",
)

GRAPHQL_KEYWORDS: Final[tuple[str, ...]] = (
    "query",
    "mutation",
    "subscription",
    "fragment",
    "type",
    "interface",
    "enum",
    "input",
    "scalar",
    "schema",
)

PROTOBUF_FIELDS: Final[tuple[str, ...]] = ("type_url:", "value:")


def looks_like_dockerfile(inp: DetectionInput) -> bool:
    """True if the text has a FROM instruction or several other instructions.

    Matching is case-insensitive and substring based, so ``FROM `` anywhere in
    the text is enough.
    """
    upper: str = inp.text.upper()
    if "FROM " in upper:
        return True
    return count_keyword_hits(upper, DOCKERFILE_KEYWORDS) >= DOCKERFILE_MIN_HITS


def looks_like_hcl(inp: DetectionInput) -> bool:
    """True for a block keyword together with ``=``, a double quote and ``{``."""
    text: str = inp.text
    if count_keyword_hits(text, HCL_KEYWORDS) == 0:
        return False
    return "=" in text and '"' in text and "{" in text


def looks_like_graphql(inp: DetectionInput) -> bool:
    """True for GraphQL operations or type definitions.

    A single keyword plus braces is not enough on its own: a JSON-ish object
    that mentions ``type`` must not qualify. The braces have to open a block
    (``{`` followed by a newline or space), or a second keyword has to appear.
    """
    text: str = inp.text
    hits: int = count_keyword_hits(text, GRAPHQL_KEYWORDS)
    if hits == 0:
        return False
    if "{" not in text or "}" not in text:
        return False
    return "{\n" in text or "{ " in text or hits >= 2


def looks_like_protobuf(inp: DetectionInput) -> bool:
    """True for an ``Any``-style text message (``type_url:``/``value:`` with a string)."""
    text: str = inp.text
    return any(field in text for field in PROTOBUF_FIELDS) and '"' in text


def has_protobuf_field_line(inp: DetectionInput) -> bool:
    """True if a stripped line starts with a Protobuf ``type_url:``/``value:`` field."""
    return any(line.strip().startswith(PROTOBUF_FIELDS) for line in inp.lines)
