# topmark:header:start
#
#   project      : SerdeVal
#   file         : markup.py
#   file_relpath : src/serdeval/formats/checks/markup.py
#   license      : MIT
#   copyright    : (c) 2025 SerdeVal contributors
#
# topmark:header:end

"""Parse-checks for configuration and markup formats: XML, YAML, TOML and INI."""

from __future__ import annotations

import configparser
import xml.etree.ElementTree as ET

import tomlkit
import yaml
from tomlkit.exceptions import TOMLKitError

from serdeval.formats.checks.base import decode_text


def check_xml(data: bytes) -> str | None:
    """Check that ``data`` is a well-formed XML document.

    The raw bytes go to the parser so that an encoding declaration is honoured.
    """
    try:
        ET.fromstring(data)
    except ET.ParseError as exc:
        return str(exc)
    return None


def check_yaml(data: bytes) -> str | None:
    """Check that every document in ``data`` is well-formed YAML.

    Multi-document streams (``---`` separated) are accepted. Only the safe
    loader is used; tagged Python objects are rejected.
    """
    text: str = decode_text(data)
    try:
        for _document in yaml.safe_load_all(text):
            pass
    except yaml.YAMLError as exc:
        return str(exc)
    return None


def check_toml(data: bytes) -> str | None:
    """Check that ``data`` is a valid TOML document."""
    text: str = decode_text(data)
    try:
        tomlkit.parse(text)
    except TOMLKitError as exc:
        return str(exc)
    return None


def _new_ini_parser() -> configparser.ConfigParser:
    # Values are taken literally; repeated sections and keys merge (last wins).
    return configparser.ConfigParser(interpolation=None, strict=False)


def _parsing_error_without_header(exc: configparser.ParsingError) -> str:
    """Render ``exc`` with line numbers of the text as given (before the injected header)."""
    message: str = f"Source contains parsing errors: {exc.source!r}"
    for lineno, line in exc.errors:
        message += f"\n\t[line {lineno - 1:2d}]: {line}"
    return message


def check_ini(data: bytes) -> str | None:
    """Check that ``data`` is a loadable INI file.

    Keys that appear before the first section header belong to the default
    section, as most INI loaders allow. Every other line must be a section
    header, a ``key = value``/``key: value`` pair, a continuation or a comment.
    """
    text: str = decode_text(data)
    parser: configparser.ConfigParser = _new_ini_parser()
    try:
        parser.read_string(text, source="ini")
    except configparser.MissingSectionHeaderError:
        parser = _new_ini_parser()
        try:
            parser.read_string(f"[{parser.default_section}]\n{text}", source="ini")
        except configparser.ParsingError as exc:
            return _parsing_error_without_header(exc)
        except configparser.Error as exc:
            return str(exc)
    except configparser.Error as exc:
        return str(exc)
    return None
