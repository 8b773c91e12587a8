# topmark:header:start
#
#   project      : WhiteMark
#   file         : fix.py
#   file_relpath : src/whitemark/cli/commands/fix.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""``whitemark fix``: rewrite fixable violations in place.

Files without violations are never touched. Files with fixable violations
are rewritten through a temporary file in the same directory that receives
the original permission bits and is atomically renamed over the original.
Files with only unfixable violations are reported and left alone.

Examples:
  Fix a tree, expanding tabs to 2 spaces:

    $ whitemark fix --expand-tabs --tab-size 2 src
"""

from __future__ import annotations

import click

from whitemark.cli.cmd_common import run_for_paths
from whitemark.cli.errors import WhitemarkUsageError
from whitemark.cli.options import (
    CONTEXT_SETTINGS,
    common_config_options,
    common_file_options,
    common_formatting_options,
)


@click.command(
    name="fix",
    help="Fix whitespace violations in place and report every correction.",
    context_settings=CONTEXT_SETTINGS,
)
@common_config_options
@common_formatting_options
@common_file_options
@click.argument("paths", nargs=-1)
def fix_command(
    *,
    paths: tuple[str, ...],
    include_patterns: tuple[str, ...],
    exclude_patterns: tuple[str, ...],
    jobs: int,
    summary_mode: bool,
    no_config: bool,
    config_paths: tuple[str, ...],
    expand_tabs: bool | None,
    tab_size: int | None,
    line_length: int | None,
) -> None:
    """Fix files in place.

    Exit Status:
        SUCCESS (0): Every file was already compliant.
        FIXED (3): At least one file was rewritten; nothing unfixable remains.
        UNFIXABLE (4): Unfixable violations remain.
        USAGE_ERROR (64): Invalid invocation.
        IO_ERROR (74): At least one file could not be processed.
        CONFIG_ERROR (78): A ``--config`` file is missing.
    """
    if not paths:
        raise WhitemarkUsageError("fix: no PATHS given.")
    run_for_paths(
        paths=paths,
        include_patterns=include_patterns,
        exclude_patterns=exclude_patterns,
        no_config=no_config,
        config_paths=config_paths,
        expand_tabs=expand_tabs,
        tab_size=tab_size,
        line_length=line_length,
        jobs=jobs,
        summary_mode=summary_mode,
        apply_changes=True,
    )
