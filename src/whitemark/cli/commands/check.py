# topmark:header:start
#
#   project      : WhiteMark
#   file         : check.py
#   file_relpath : src/whitemark/cli/commands/check.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""``whitemark check``: report violations without writing (dry run).

Runs the same pipeline as ``fix`` and prints the same diagnostics, but every
rewrite goes to a discard sink, so no file is ever modified.
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
    name="check",
    help="Report whitespace violations (dry-run). Use 'whitemark fix' to correct them.",
    context_settings=CONTEXT_SETTINGS,
)
@common_config_options
@common_formatting_options
@common_file_options
@click.argument("paths", nargs=-1)
def check_command(
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
    """Check files without modifying them.

    Exit Status:
        SUCCESS (0): Every file is compliant.
        WOULD_CHANGE (2): Fixable violations found.
        UNFIXABLE (4): Unfixable violations found.
        USAGE_ERROR (64): Invalid invocation.
        IO_ERROR (74): At least one file could not be processed.
        CONFIG_ERROR (78): A ``--config`` file is missing.
    """
    if not paths:
        raise WhitemarkUsageError("check: no PATHS given.")
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
        apply_changes=False,
    )
