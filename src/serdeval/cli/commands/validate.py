# topmark:header:start
#
#   project      : SerdeVal
#   file         : validate.py
#   file_relpath : src/serdeval/cli/commands/validate.py
#   license      : MIT
#   copyright    : (c) 2025 SerdeVal contributors
#
# topmark:header:end

"""SerdeVal `validate` command.

Validates each FILE (or standard input when no FILE is given) and prints one
line per input. With ``--format auto`` (the default) the file name is used as a
hint first and the content is sniffed otherwise.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from serdeval.cli.exit_codes import ExitCode
from serdeval.cli.io import InputSource, iter_sources
from serdeval.cli.options import FormatTagParam, json_output_option
from serdeval.formats.registry import validate_data
from serdeval.formats.types import FormatTag, ValidationOutcome

if TYPE_CHECKING:
    from serdeval.cli.console import ClickConsole


def _outcome_for(source: InputSource, fmt: FormatTag) -> ValidationOutcome:
    if source.data is None:
        return ValidationOutcome.failed(
            FormatTag.UNKNOWN, source.error or "no data"
        ).with_source(source.name)
    filename: str | None = None if source.is_stdin else source.name
    return validate_data(source.data, filename=filename, fmt=fmt).with_source(source.name)


def _render(console: ClickConsole, outcome: ValidationOutcome, *, quiet: bool) -> None:
    if outcome.valid:
        if not quiet:
            console.print(
                console.styled(f"✓ {outcome.source_name}: Valid {outcome.format}", fg="green")
            )
        return
    line: str = console.styled(f"✗ {outcome.source_name}: Invalid {outcome.format}", fg="red")
    if outcome.error:
        line += f" - {outcome.error}"
    console.print(line)


@click.command(
    name="validate",
    help="Validate data files (or standard input) for syntactic correctness.",
)
@click.argument("files", nargs=-1, type=str)
@click.option(
    "-f",
    "--format",
    "data_format",
    type=FormatTagParam(),
    default=FormatTag.AUTO.value,
    show_default=True,
    help="Format to validate against; 'auto' detects it from the file name or content.",
)
@click.option(
    "-q",
    "--quiet",
    is_flag=True,
    default=False,
    help="Only show invalid inputs.",
)
@json_output_option
def validate_command(
    *,
    files: tuple[str, ...],
    data_format: FormatTag,
    quiet: bool = False,
    json_output: bool = False,
) -> None:
    """Validate data files.

    Args:
        files (tuple[str, ...]): Paths to validate; standard input when empty.
        data_format (FormatTag): Explicit format, or ``FormatTag.AUTO``.
        quiet (bool): Suppress lines for valid inputs.
        json_output (bool): Print a JSON array of outcomes instead of text.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    outcomes: list[ValidationOutcome] = [
        _outcome_for(source, data_format) for source in iter_sources(files)
    ]

    if json_output:
        console.print(json.dumps([o.to_dict() for o in outcomes], indent=2))
    else:
        for outcome in outcomes:
            _render(console, outcome, quiet=quiet)

    all_valid: bool = all(o.valid for o in outcomes)
    ctx.exit(ExitCode.SUCCESS if all_valid else ExitCode.FAILURE)
