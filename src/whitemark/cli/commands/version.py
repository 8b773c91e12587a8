# topmark:header:start
#
#   project      : WhiteMark
#   file         : version.py
#   file_relpath : src/whitemark/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""``whitemark version``: print the installed version."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from whitemark.cli.options import CONTEXT_SETTINGS
from whitemark.constants import WHITEMARK_VERSION

if TYPE_CHECKING:
    from whitemark.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the version of WhiteMark.",
    context_settings=CONTEXT_SETTINGS,
)
def version_command() -> None:
    """Print the WhiteMark version."""
    console: ConsoleLike = click.get_current_context().obj["console"]
    console.print(f"whitemark {WHITEMARK_VERSION}")
