# topmark:header:start
#
#   project      : SerdeVal
#   file         : markup.py
#   file_relpath : src/serdeval/formats/detectors/markup.py
#   license      : MIT
#   copyright    : (c) 2025 SerdeVal contributors
#
# topmark:header:end

"""Predicates for configuration and markup formats: XML, INI, YAML and TOML.

These are the most permissive predicates (almost any prose contains a colon),
so the cascade consults them last.
"""

from __future__ import annotations

from serdeval.formats.detectors.devops import has_protobuf_field_line
from serdeval.formats.detectors.text import DetectionInput, is_wrapped


def looks_like_xml(inp: DetectionInput) -> bool:
    """True for an XML declaration, or text opening with a tag."""
    text: str = inp.text
    return text.startswith("<?xml") or (text.startswith("<") and ">" in text)


def looks_like_ini(inp: DetectionInput) -> bool:
    """True when at least one line is a ``[section]`` header."""
    text: str = inp.text
    if "[" not in text or "]" not in text:
        return False
    return any(is_wrapped(line.strip(), "[", "]") for line in inp.lines)


def looks_like_yaml(inp: DetectionInput) -> bool:
    """True for a document marker or ``key: value`` pairs.

    URLs (``://``) and Protobuf ``type_url:``/``value:`` lines do not count as
    mappings.
    """
    text: str = inp.text
    if "---" in text:
        return True
    if ":" not in text or "://" in text:
        return False
    if has_protobuf_field_line(inp):
        return False
    return ": " in text or text.endswith(":")


def looks_like_toml(inp: DetectionInput) -> bool:
    """True for ``key = value`` text without colons that does not open like JSON or XML."""
    text: str = inp.text
    if "=" not in text or ":" in text:
        return False
    return not text.startswith(("{", "[", "<"))
