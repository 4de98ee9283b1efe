# topmark:header:start
#
#   project      : SerdeVal
#   file         : main.py
#   file_relpath : src/serdeval/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 SerdeVal contributors
#
# topmark:header:end

"""SerdeVal Click CLI.

Group-level options (color) are initialized once and placed into ``ctx.obj``
together with the console; subcommands read them from there.
"""

from __future__ import annotations

import click

from serdeval.cli.commands.detect import detect_command
from serdeval.cli.commands.formats import formats_command
from serdeval.cli.commands.validate import validate_command
from serdeval.cli.commands.version import version_command
from serdeval.cli.console import ClickConsole
from serdeval.cli.options import ColorMode, common_color_options, resolve_color_mode
from serdeval.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (logging & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(cli_mode=effective_color_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="SerdeVal: offline validator for JSON, YAML, XML, TOML, CSV and more.",
)
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the SerdeVal CLI."""
    init_common_state(
        ctx,
        color_mode=ColorMode(color_mode) if color_mode else None,
        no_color=no_color,
    )
    console: ClickConsole = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'serdeval validate [FILES...]' to validate data files.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(validate_command)

cli.add_command(detect_command)

cli.add_command(formats_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
