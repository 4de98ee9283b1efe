# topmark:header:start
#
#   project      : SerdeVal
#   file         : version.py
#   file_relpath : src/serdeval/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 SerdeVal contributors
#
# topmark:header:end

"""SerdeVal `version` command.

Prints the current SerdeVal version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from serdeval.cli.options import json_output_option
from serdeval.constants import SERDEVAL_VERSION

if TYPE_CHECKING:
    from serdeval.cli.console import ClickConsole


@click.command(
    name="version",
    help="Show the current version of SerdeVal.",
)
@json_output_option
def version_command(*, json_output: bool = False) -> None:
    """Show the current version of SerdeVal.

    Args:
        json_output (bool): Print ``{"version": ...}`` instead of plain text.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    if json_output:
        console.print(json.dumps({"version": SERDEVAL_VERSION}))
    else:
        console.print(console.styled(SERDEVAL_VERSION, bold=True))
