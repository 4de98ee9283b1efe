# topmark:header:start
#
#   project      : SerdeVal
#   file         : extensions.py
#   file_relpath : src/serdeval/formats/extensions.py
#   license      : MIT
#   copyright    : (c) 2025 SerdeVal contributors
#
# topmark:header:end

"""Filename-based format detection.

The extension table maps a lower-cased extension (without the dot) to a
`FormatTag`. It is built once at import time and exposed through a read-only
mapping proxy, so concurrent readers need no locking.

Two rules are not expressible as a plain extension lookup and are handled in
`detect_format_from_filename`:

* Dockerfiles usually have no extension (``Dockerfile``) or use the variant
  name as a suffix (``Dockerfile.prod``).
* ``*.txt`` is a requirements list only when the name mentions
  ``requirements`` (``requirements-dev.txt``).
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Final, Mapping

from serdeval.config.logging import SerdevalLogger, get_logger
from serdeval.formats.types import FormatTag

logger: SerdevalLogger = get_logger(__name__)

_EXTENSIONS_BY_FORMAT: Final[dict[FormatTag, tuple[str, ...]]] = {
    FormatTag.JSON: ("json",),
    FormatTag.YAML: ("yaml", "yml"),
    FormatTag.XML: ("xml",),
    FormatTag.TOML: ("toml",),
    FormatTag.CSV: ("csv",),
    FormatTag.GRAPHQL: ("graphql", "gql"),
    FormatTag.INI: ("ini", "cfg", "conf"),
    FormatTag.HCL: ("hcl", "tf", "tfvars"),
    FormatTag.PROTOBUF: ("pb", "proto", "textproto", "pbtxt"),
    FormatTag.MARKDOWN: ("md", "markdown", "mkd", "mdwn", "mdown", "mdtxt", "mdtext"),
    FormatTag.JSONL: ("jsonl", "ndjson", "jsonlines"),
    FormatTag.JUPYTER: ("ipynb",),
    FormatTag.DOCKERFILE: ("dockerfile", "containerfile"),
}


def _generate_table(groups: Mapping[FormatTag, tuple[str, ...]]) -> dict[str, FormatTag]:
    """Flatten the per-format extension groups into an extension lookup table."""
    table: dict[str, FormatTag] = {}
    for fmt, extensions in groups.items():
        for ext in extensions:
            if ext in table:
                raise ValueError(f"Duplicate extension: {ext}")
            table[ext] = fmt
    return table


EXTENSION_TABLE: Final[Mapping[str, FormatTag]] = MappingProxyType(
    _generate_table(_EXTENSIONS_BY_FORMAT)
)

_DOCKERFILE_BASENAME: Final[str] = "dockerfile"
_REQUIREMENTS_EXTENSION: Final[str] = "txt"
_REQUIREMENTS_MARKER: Final[str] = "requirements"


def extensions_for(fmt: FormatTag) -> tuple[str, ...]:
    """Return the extensions (without dots) that map to ``fmt``.

    ``REQUIREMENTS`` reports ``txt``, which only applies to names mentioning
    ``requirements``.
    """
    if fmt is FormatTag.REQUIREMENTS:
        return (_REQUIREMENTS_EXTENSION,)
    return _EXTENSIONS_BY_FORMAT.get(fmt, ())


def detect_format_from_filename(name: str) -> FormatTag:
    """Guess the format of a file from its name alone.

    Pure string inspection; the file system is never touched.

    Args:
        name (str): A file name or path (``/`` and ``\\`` separators are accepted).

    Returns:
        FormatTag: The format implied by the name, or ``FormatTag.UNKNOWN``.
    """
    lowered: str = name.lower()
    basename: str = lowered.replace("\\", "/").rsplit("/", 1)[-1]

    if basename == _DOCKERFILE_BASENAME or basename.startswith(_DOCKERFILE_BASENAME + "."):
        return FormatTag.DOCKERFILE

    _stem, dot, ext = basename.rpartition(".")
    if not dot:
        return FormatTag.UNKNOWN

    if ext == _REQUIREMENTS_EXTENSION and _REQUIREMENTS_MARKER in lowered:
        return FormatTag.REQUIREMENTS

    fmt: FormatTag = EXTENSION_TABLE.get(ext, FormatTag.UNKNOWN)
    logger.trace("Filename %r maps to %s", name, fmt)
    return fmt
