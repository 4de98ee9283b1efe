# topmark:header:start
#
#   project      : SerdeVal
#   file         : cascade.py
#   file_relpath : src/serdeval/formats/cascade.py
#   license      : MIT
#   copyright    : (c) 2025 SerdeVal contributors
#
# topmark:header:end

"""Content-based format detection.

No format is self-describing without a schema, so detection runs an ordered
cascade of heuristic predicates over the trimmed text and stops at the first
match. Families are tried from the most structurally constrained to the most
permissive:

1. JSON family: Jupyter, JSON Lines, JSON.
2. Developer/config formats: Dockerfile, HCL, GraphQL, Protobuf text.
3. Data/document formats: CSV, Markdown, requirements lists.
4. Config/markup formats: XML, INI, YAML, TOML.

A buffer that satisfies several predicates is classified by whichever comes
first. The order is the contract: some inputs are knowingly misclassified
(a CSV whose cells contain ``==`` may be read as a requirements list) and must
stay that way.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from serdeval.config.logging import SerdevalLogger, get_logger
from serdeval.formats.detectors.devops import (
    looks_like_dockerfile,
    looks_like_graphql,
    looks_like_hcl,
    looks_like_protobuf,
)
from serdeval.formats.detectors.documents import (
    looks_like_csv,
    looks_like_markdown,
    looks_like_requirements,
)
from serdeval.formats.detectors.json_like import (
    looks_like_json,
    looks_like_jsonl,
    looks_like_jupyter,
)
from serdeval.formats.detectors.markup import (
    looks_like_ini,
    looks_like_toml,
    looks_like_xml,
    looks_like_yaml,
)
from serdeval.formats.detectors.text import ContentPredicate, DetectionInput
from serdeval.formats.types import FormatTag

logger: SerdevalLogger = get_logger(__name__)


@dataclass(frozen=True)
class DetectionRule:
    """A single step of the cascade.

    Attributes:
        format (FormatTag): The format reported when ``predicate`` matches.
        predicate (ContentPredicate): The content heuristic.
    """

    format: FormatTag
    predicate: ContentPredicate


@dataclass(frozen=True)
class DetectionFamily:
    """An ordered group of rules.

    Attributes:
        name (str): Human-readable family name (used in logs).
        rules (tuple[DetectionRule, ...]): Rules in precedence order.
    """

    name: str
    rules: tuple[DetectionRule, ...]


DETECTION_CASCADE: Final[tuple[DetectionFamily, ...]] = (
    DetectionFamily(
        name="json",
        rules=(
            # A notebook is a JSON object and must win over plain JSON.
            DetectionRule(FormatTag.JUPYTER, looks_like_jupyter),
            DetectionRule(FormatTag.JSONL, looks_like_jsonl),
            DetectionRule(FormatTag.JSON, looks_like_json),
        ),
    ),
    DetectionFamily(
        name="devops",
        rules=(
            DetectionRule(FormatTag.DOCKERFILE, looks_like_dockerfile),
            DetectionRule(FormatTag.HCL, looks_like_hcl),
            DetectionRule(FormatTag.GRAPHQL, looks_like_graphql),
            DetectionRule(FormatTag.PROTOBUF, looks_like_protobuf),
        ),
    ),
    DetectionFamily(
        name="documents",
        rules=(
            DetectionRule(FormatTag.CSV, looks_like_csv),
            DetectionRule(FormatTag.MARKDOWN, looks_like_markdown),
            DetectionRule(FormatTag.REQUIREMENTS, looks_like_requirements),
        ),
    ),
    DetectionFamily(
        name="markup",
        rules=(
            DetectionRule(FormatTag.XML, looks_like_xml),
            DetectionRule(FormatTag.INI, looks_like_ini),
            DetectionRule(FormatTag.YAML, looks_like_yaml),
            DetectionRule(FormatTag.TOML, looks_like_toml),
        ),
    ),
)


def classify(inp: DetectionInput) -> FormatTag:
    """Run the cascade over a prepared input.

    Args:
        inp (DetectionInput): The trimmed buffer.

    Returns:
        FormatTag: The first matching format, or ``FormatTag.UNKNOWN``.
    """
    if inp.is_empty:
        return FormatTag.UNKNOWN

    for family in DETECTION_CASCADE:
        for rule in family.rules:
            if rule.predicate(inp):
                logger.trace("Detected %s (family: %s)", rule.format, family.name)
                return rule.format
    logger.trace("No detection rule matched")
    return FormatTag.UNKNOWN


def detect_format(data: bytes | bytearray | str) -> FormatTag:
    """Guess the format of ``data`` from its content.

    Detection is a pure function of its input and never raises: an unexpected
    error inside a predicate is logged and reported as ``FormatTag.UNKNOWN``.

    Args:
        data (bytes | bytearray | str): The raw buffer (decoded as UTF-8) or text.

    Returns:
        FormatTag: The detected format, or ``FormatTag.UNKNOWN`` for empty,
            whitespace-only or unrecognized content.
    """
    try:
        return classify(DetectionInput.from_data(data))
    except Exception:
        logger.exception("Format detection failed; reporting unknown")
        return FormatTag.UNKNOWN
