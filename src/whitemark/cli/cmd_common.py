# topmark:header:start
#
#   project      : WhiteMark
#   file         : cmd_common.py
#   file_relpath : src/whitemark/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared helpers for the ``check`` and ``fix`` commands.

Both commands run the same pipeline; they differ only in whether fixable
files may be rewritten. This module builds the base configuration, resolves
the file list, streams output through a thread-safe reporter and maps the
results to an exit code.
"""

from __future__ import annotations

import threading
from collections import Counter
from pathlib import Path
from typing import TYPE_CHECKING

import click

from whitemark.cli.errors import WhitemarkConfigError
from whitemark.cli.exit_codes import ExitCode
from whitemark.config.logging import get_logger
from whitemark.config.model import Config, MutableConfig
from whitemark.file_resolver import resolve_file_list
from whitemark.pipeline.engine import FileResult, process_files
from whitemark.pipeline.status import FileOutcome

if TYPE_CHECKING:
    from collections.abc import Sequence

    from whitemark.cli.console import ConsoleLike
    from whitemark.config.logging import WhitemarkLogger
    from whitemark.pipeline.diagnostics import LineDiagnostic

logger: WhitemarkLogger = get_logger(__name__)


def build_base_config(
    *,
    no_config: bool,
    config_paths: Sequence[str],
    expand_tabs: bool | None,
    tab_size: int | None,
    line_length: int | None,
) -> Config:
    """Merge defaults, config files and CLI options into the base `Config`.

    Raises:
        WhitemarkConfigError: If an explicit ``--config`` file does not exist.
    """
    extra: list[Path] = []
    for raw in config_paths:
        p = Path(raw)
        if not p.is_file():
            raise WhitemarkConfigError(f"Config file not found: {raw}")
        extra.append(p)

    draft: MutableConfig = MutableConfig.load_merged(extra_config_files=extra, no_config=no_config)
    draft.apply_cli_args(
        {"expand_tabs": expand_tabs, "tab_size": tab_size, "line_length": line_length}
    )
    config: Config = draft.freeze()
    logger.debug("Base config: %s (sources: %s)", config, draft.config_files)
    return config


class ConsoleReporter:
    """Print diagnostics and per-file errors as the pipeline produces them.

    A lock keeps lines whole when files are processed on several threads.
    """

    def __init__(self, console: ConsoleLike, *, verbosity: int = 0) -> None:
        self.console = console
        self.verbosity = verbosity
        self._lock = threading.Lock()

    def line(self, diagnostic: LineDiagnostic) -> None:
        """Print ``<path>:<line>: <tags>`` unless running quiet."""
        if self.verbosity < 0:
            return
        location: str = self.console.styled(
            f"{diagnostic.path}:{diagnostic.line_number}:", bold=True
        )
        with self._lock:
            self.console.print(f"{location} {diagnostic.message}")

    def file_done(self, result: FileResult) -> None:
        """Print the error of a failed file; in verbose mode, print every outcome."""
        with self._lock:
            if result.error is not None:
                self.console.error(result.error)
            elif self.verbosity > 0:
                self.console.print(f"{result.path}: {result.outcome.color(result.outcome.value)}")


def resolve_exit_code(results: Sequence[FileResult]) -> ExitCode:
    """Map per-file results to the exit code of the run.

    Precedence: ``IO_ERROR`` > ``UNFIXABLE`` > ``FIXED`` / ``WOULD_CHANGE`` > ``SUCCESS``.
    """
    if any(r.outcome is FileOutcome.ERROR for r in results):
        return ExitCode.IO_ERROR
    if any(r.totals.unfixable > 0 for r in results):
        return ExitCode.UNFIXABLE
    if any(r.outcome is FileOutcome.FIXED for r in results):
        return ExitCode.FIXED
    if any(r.outcome is FileOutcome.WOULD_FIX for r in results):
        return ExitCode.WOULD_CHANGE
    return ExitCode.SUCCESS


def render_summary(console: ConsoleLike, results: Sequence[FileResult]) -> None:
    """Print one ``<outcome>: <count>`` line per outcome that occurred."""
    counts: Counter[FileOutcome] = Counter(r.outcome for r in results)
    console.print()
    console.print(f"Processed {len(results)} file(s):")
    for outcome in FileOutcome:
        if counts[outcome]:
            console.print(f"  {outcome.color(outcome.value)}: {counts[outcome]}")


def run_for_paths(
    *,
    paths: Sequence[str],
    include_patterns: Sequence[str],
    exclude_patterns: Sequence[str],
    no_config: bool,
    config_paths: Sequence[str],
    expand_tabs: bool | None,
    tab_size: int | None,
    line_length: int | None,
    jobs: int,
    summary_mode: bool,
    apply_changes: bool,
) -> None:
    """Run the pipeline over the selected files and exit with the resulting code."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    verbosity: int = ctx.obj.get("verbosity_level", 0)

    base: Config = build_base_config(
        no_config=no_config,
        config_paths=config_paths,
        expand_tabs=expand_tabs,
        tab_size=tab_size,
        line_length=line_length,
    )

    files: list[Path] = resolve_file_list(
        paths, include_patterns=include_patterns, exclude_patterns=exclude_patterns
    )
    if not files:
        console.warn("No files to process.")
        return

    reporter = ConsoleReporter(console, verbosity=verbosity)
    results: list[FileResult] = process_files(
        files, base, apply_changes=apply_changes, jobs=jobs, reporter=reporter
    )

    if summary_mode:
        render_summary(console, results)

    code: ExitCode = resolve_exit_code(results)
    logger.debug("Exit code: %s", code.name)
    ctx.exit(int(code))
