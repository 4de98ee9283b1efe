# topmark:header:start
#
#   project      : SerdeVal
#   file         : formats.py
#   file_relpath : src/serdeval/cli/commands/formats.py
#   license      : MIT
#   copyright    : (c) 2025 SerdeVal contributors
#
# topmark:header:end

"""SerdeVal `formats` command.

Lists the formats SerdeVal can validate along with the file extensions that
select them.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

from serdeval.cli.options import json_output_option
from serdeval.formats.extensions import extensions_for
from serdeval.formats.registry import supported_formats

if TYPE_CHECKING:
    from serdeval.cli.console import ClickConsole


@click.command(
    name="formats",
    help="List all supported formats.",
    epilog="""
Use one of the listed names with 'serdeval validate --format NAME' to skip detection.
""",
)
@json_output_option
def formats_command(*, json_output: bool = False) -> None:
    """List supported formats.

    Args:
        json_output (bool): Print a JSON array instead of text.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    rows: list[dict[str, Any]] = [
        {"format": fmt.value, "extensions": list(extensions_for(fmt))}
        for fmt in supported_formats()
    ]

    if json_output:
        console.print(json.dumps(rows, indent=2))
        return

    width: int = max(len(row["format"]) for row in rows)
    console.print(console.styled("Supported formats:\n", bold=True, underline=True))
    for row in rows:
        exts: str = ", ".join(f".{ext}" for ext in row["extensions"])
        console.print(f"  {console.styled(row['format'].ljust(width), bold=True)}  {exts}")
