# topmark:header:start
#
#   project      : SerdeVal
#   file         : options.py
#   file_relpath : src/serdeval/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 SerdeVal contributors
#
# topmark:header:end

"""Shared Click options and parameter types for the SerdeVal CLI."""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import Callable, NoReturn, TypeVar

import click
from click.shell_completion import CompletionItem

from serdeval.formats.errors import UnsupportedFormatError
from serdeval.formats.registry import supported_formats
from serdeval.formats.types import FormatTag

F = TypeVar("F", bound=Callable[..., object])


class FormatTagParam(click.ParamType):
    """A Click parameter type converting a format name into a `FormatTag`.

    Accepts ``auto`` and every format with a validator (case-insensitive).
    """

    name = "format"

    def __init__(self) -> None:
        self.choices: list[str] = [FormatTag.AUTO.value] + [
            fmt.value for fmt in supported_formats()
        ]

    def _fail_noreturn(
        self,
        message: str,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> NoReturn:
        raise click.BadParameter(message, param=param, ctx=ctx)

    def convert(
        self,
        value: str | FormatTag,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> FormatTag:
        """Convert a string to a member of `FormatTag`."""
        try:
            tag: FormatTag = FormatTag.parse(value)
        except UnsupportedFormatError:
            tag = FormatTag.UNKNOWN
        if tag.value not in self.choices:
            self._fail_noreturn(
                f"Invalid value '{value}'. Must be one of: {', '.join(self.choices)}",
                param,
                ctx,
            )
        return tag

    def shell_complete(
        self,
        ctx: click.Context,
        param: click.Parameter,
        incomplete: str,
    ) -> list[CompletionItem]:
        """Tab completion for Click."""
        return [CompletionItem(c) for c in self.choices if c.startswith(incomplete.lower())]


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Args:
        cli_mode: Explicit color mode from CLI options (auto, always, never).
        stdout_isatty: Whether stdout is a TTY; if None, auto-detected.

    Returns:
        True if color output should be enabled, False otherwise.

    Behavior:
        Honors --color and --no-color CLI flags.
        Honors FORCE_COLOR and NO_COLOR environment variables.
        Defaults to enabling color if stdout is a TTY.
    """
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        stdout_isatty = sys.stdout.isatty()
    return bool(stdout_isatty)


def common_color_options(f: F) -> F:
    """Add --color and --no-color options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with color options added.
    """
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def json_output_option(f: F) -> F:
    """Add the -j/--json flag selecting machine-readable output."""
    return click.option(
        "-j",
        "--json",
        "json_output",
        is_flag=True,
        default=False,
        help="Output results as JSON.",
    )(f)
