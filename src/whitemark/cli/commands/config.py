# topmark:header:start
#
#   project      : WhiteMark
#   file         : config.py
#   file_relpath : src/whitemark/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""``whitemark config``: show the configuration in effect.

Without PATH, prints the base configuration (defaults, config files, options)
as TOML. With PATH, prints the effective configuration for that file, i.e.
with its modeline applied.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from whitemark.cli.cmd_common import build_base_config
from whitemark.cli.errors import WhitemarkIOError
from whitemark.cli.options import (
    CONTEXT_SETTINGS,
    common_config_options,
    common_formatting_options,
)
from whitemark.pipeline.engine import resolve_file_config
from whitemark.pipeline.errors import FileProcessingError

if TYPE_CHECKING:
    from whitemark.cli.console import ConsoleLike
    from whitemark.config.model import Config


@click.command(
    name="config",
    help="Show the base configuration, or the effective one for PATH.",
    context_settings=CONTEXT_SETTINGS,
)
@common_config_options
@common_formatting_options
@click.argument("path", required=False)
def config_command(
    *,
    path: str | None,
    no_config: bool,
    config_paths: tuple[str, ...],
    expand_tabs: bool | None,
    tab_size: int | None,
    line_length: int | None,
) -> None:
    """Print a configuration as TOML.

    Raises:
        WhitemarkIOError: If PATH cannot be read.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = ctx.obj["console"]

    config: Config = build_base_config(
        no_config=no_config,
        config_paths=config_paths,
        expand_tabs=expand_tabs,
        tab_size=tab_size,
        line_length=line_length,
    )
    if path is not None:
        try:
            config = resolve_file_config(Path(path), config)
        except FileProcessingError as exc:
            raise WhitemarkIOError(str(exc)) from exc

    console.print(config.to_toml(), nl=False)
