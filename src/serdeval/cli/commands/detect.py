# topmark:header:start
#
#   project      : SerdeVal
#   file         : detect.py
#   file_relpath : src/serdeval/cli/commands/detect.py
#   license      : MIT
#   copyright    : (c) 2025 SerdeVal contributors
#
# topmark:header:end

"""SerdeVal `detect` command.

Prints the format SerdeVal would validate each input as, without validating
it. The file name is consulted first, then the content.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

from serdeval.cli.exit_codes import ExitCode
from serdeval.cli.io import InputSource, iter_sources
from serdeval.cli.options import json_output_option
from serdeval.formats.cascade import detect_format
from serdeval.formats.extensions import detect_format_from_filename
from serdeval.formats.types import FormatTag

if TYPE_CHECKING:
    from serdeval.cli.console import ClickConsole


def _detect(source: InputSource) -> tuple[FormatTag, str]:
    """Return the detected format and how it was found (``filename`` or ``content``)."""
    if not source.is_stdin:
        by_name: FormatTag = detect_format_from_filename(source.name)
        if by_name is not FormatTag.UNKNOWN:
            return by_name, "filename"
    return detect_format(source.data or b""), "content"


@click.command(
    name="detect",
    help="Show the detected format of files (or standard input) without validating them.",
)
@click.argument("files", nargs=-1, type=str)
@json_output_option
def detect_command(*, files: tuple[str, ...], json_output: bool = False) -> None:
    """Detect data formats.

    Args:
        files (tuple[str, ...]): Paths to inspect; standard input when empty.
        json_output (bool): Print a JSON array instead of text.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    records: list[dict[str, Any]] = []
    failed = False
    for source in iter_sources(files):
        if source.data is None:
            failed = True
            if not json_output:
                console.error(f"{source.name}: {source.error}")
            records.append({"filename": source.name, "error": source.error})
            continue
        fmt, method = _detect(source)
        records.append({"filename": source.name, "format": fmt.value, "method": method})
        if not json_output:
            console.print(f"{source.name}: {console.styled(fmt.value, bold=True)} ({method})")

    if json_output:
        console.print(json.dumps(records, indent=2))

    ctx.exit(ExitCode.FAILURE if failed else ExitCode.SUCCESS)
