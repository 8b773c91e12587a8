# topmark:header:start
#
#   project      : WhiteMark
#   file         : options.py
#   file_relpath : src/whitemark/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reusable Click options for WhiteMark commands.

Options are grouped into decorators (verbosity, color, configuration,
formatting, file selection) so commands stay thin and consistent.
Formatting options can also be bound through ``WHITEMARK_*`` environment
variables.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import Any, Callable, NoReturn, ParamSpec, TypeVar

import click

from whitemark.cli.errors import WhitemarkUsageError
from whitemark.constants import ENV_PREFIX

P = ParamSpec("P")
R = TypeVar("R")

CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
}


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve program-output verbosity from ``-v`` and ``-q`` counts.

    Args:
        verbose_count (int): Number of ``-v`` flags.
        quiet_count (int): Number of ``-q`` flags.

    Returns:
        int: Positive for verbose, negative for quiet, 0 by default.

    Raises:
        WhitemarkUsageError: If both flags are used together.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise WhitemarkUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    return verbose_count - quiet_count


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-v/--verbose`` and ``-q/--quiet`` counting options."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity (list every file with its outcome).",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress per-line diagnostics (errors are still shown).",
    )(f)
    return f


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

    Precedence: ``--color`` override, then ``FORCE_COLOR`` / ``NO_COLOR``, then
    whether stdout is a TTY.

    Args:
        cli_mode (ColorMode | None): Explicit color mode from the CLI.
        stdout_isatty (bool | None): Whether stdout is a TTY; auto-detected if None.

    Returns:
        bool: True if ANSI styles should be emitted.
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
        try:
            stdout_isatty = sys.stdout.isatty()
        except (AttributeError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` and ``--no-color`` options."""
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


class PositiveIntParam(click.ParamType):
    """A Click parameter type accepting positive integers only.

    Invalid values (from the command line or a ``WHITEMARK_*`` variable) raise
    `WhitemarkUsageError`, so they exit with ``USAGE_ERROR`` instead of Click's
    exit status 2, which WhiteMark reserves for ``WOULD_CHANGE``.
    """

    name = "integer"

    def _fail_noreturn(self, value: Any, param: click.Parameter | None) -> NoReturn:
        """Raise a usage error naming the offending option."""
        label: str = param.opts[0] if param is not None and param.opts else "value"
        raise WhitemarkUsageError(f"{label} must be a positive integer, got {value!r}.")

    def convert(
        self,
        value: Any,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> int:
        """Convert ``value`` to a positive ``int``."""
        if isinstance(value, bool):
            self._fail_noreturn(value, param)
        if isinstance(value, int):
            number: int = value
        else:
            try:
                number = int(str(value).strip(), 10)
            except ValueError:
                self._fail_noreturn(value, param)
        if number < 1:
            self._fail_noreturn(value, param)
        return number


POSITIVE_INT = PositiveIntParam()


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--config`` and ``--no-config`` options."""
    f = click.option(
        "--config",
        "config_paths",
        multiple=True,
        metavar="FILE",
        help="Additional whitemark.toml/pyproject.toml to merge (repeatable).",
    )(f)
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Do not discover project configuration files.",
    )(f)
    return f


def common_formatting_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the formatting options; each one can also come from the environment."""
    f = click.option(
        "--expand-tabs/--no-expand-tabs",
        "expand_tabs",
        default=None,
        envvar=f"{ENV_PREFIX}_EXPAND_TABS",
        help="Expand tabs to spaces (default: keep leading tabs).",
    )(f)
    f = click.option(
        "--tab-size",
        "tab_size",
        type=POSITIVE_INT,
        default=None,
        envvar=f"{ENV_PREFIX}_TAB_SIZE",
        help="Columns per tab (default: 4).",
    )(f)
    f = click.option(
        "--line-length",
        "line_length",
        type=POSITIVE_INT,
        default=None,
        envvar=f"{ENV_PREFIX}_LINE_LENGTH",
        help="Maximum visible line width (default: 80).",
    )(f)
    return f


def common_file_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add file selection and scheduling options."""
    f = click.option(
        "--include",
        "-i",
        "include_patterns",
        multiple=True,
        help="Filter: keep only files matching these gitignore-style patterns.",
    )(f)
    f = click.option(
        "--exclude",
        "-e",
        "exclude_patterns",
        multiple=True,
        help="Filter: remove files matching these gitignore-style patterns.",
    )(f)
    f = click.option(
        "--jobs",
        "-j",
        "jobs",
        type=POSITIVE_INT,
        default=1,
        show_default=True,
        help="Number of files processed in parallel.",
    )(f)
    f = click.option(
        "--summary",
        "summary_mode",
        is_flag=True,
        help="Show outcome counts after the diagnostics.",
    )(f)
    return f
