# topmark:header:start
#
#   project      : WhiteMark
#   file         : main.py
#   file_relpath : src/whitemark/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""WhiteMark CLI entry point.

Group-level options (verbosity, color) are resolved once and stored in
``ctx.obj``; subcommands read the console and verbosity from there.
"""

from __future__ import annotations

import click

from whitemark.cli.commands.check import check_command
from whitemark.cli.commands.config import config_command
from whitemark.cli.commands.fix import fix_command
from whitemark.cli.commands.version import version_command
from whitemark.cli.console import ClickConsole
from whitemark.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from whitemark.config.logging import (
    WhitemarkLogger,
    get_logger,
    resolve_env_log_level,
    setup_logging,
)

logger: WhitemarkLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Initialize verbosity, logging and the console on the Click context.

    Args:
        ctx (click.Context): Current Click context; ``obj`` and ``color`` are set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (str | None): Value of ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.ensure_object(dict)

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    mode: ColorMode = ColorMode.NEVER if no_color else ColorMode(color_mode or ColorMode.AUTO)
    enable_color: bool = resolve_color_mode(cli_mode=mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)
    logger.debug(
        "CLI state: verbosity=%d, log_level=%s, color=%s",
        ctx.obj["verbosity_level"],
        level_env,
        enable_color,
    )


@click.group(
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="WhiteMark: check and fix tabs, line endings, trailing whitespace and line length.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the WhiteMark CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    if ctx.invoked_subcommand is None:
        console: ClickConsole = ctx.obj["console"]
        console.print("Hint: use 'whitemark check [PATHS...]' to report violations.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(check_command)
cli.add_command(fix_command)
cli.add_command(config_command)
cli.add_command(version_command)

if __name__ == "__main__":
    cli()
