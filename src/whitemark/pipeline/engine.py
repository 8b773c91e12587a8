# topmark:header:start
#
#   project      : WhiteMark
#   file         : engine.py
#   file_relpath : src/whitemark/pipeline/engine.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Per-file orchestration.

For each file, in order:

1. open the file (UTF-8, terminators preserved);
2. scan the whole file for a modeline and resolve the effective `Config`;
3. rewind and classify every line; a clean total ends processing and the
   file is never touched (no temporary file, no metadata change);
4. rewind and run the rewrite pass:
   - fixable violations and ``apply_changes``: into an `AtomicFileSink`
     that replaces the file;
   - otherwise: into a `NullSink`, purely to emit diagnostics.

Every failure is caught at the per-file boundary and turned into a
`FileResult` with `FileOutcome.ERROR`; the remaining files are processed
independently. Files share nothing but the read-only base `Config`, so
`process_files` may run them on a thread pool.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol, TextIO

from whitemark.config.logging import get_logger
from whitemark.config.modeline import config_from_modeline, find_modeline
from whitemark.pipeline.classifier import CheckResult
from whitemark.pipeline.errors import FileProcessingError, describe, stage
from whitemark.pipeline.rewriter import rewrite_file
from whitemark.pipeline.scanner import scan_file
from whitemark.pipeline.status import FileOutcome
from whitemark.pipeline.writer import AtomicFileSink, NullSink

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from whitemark.config.logging import WhitemarkLogger
    from whitemark.config.model import Config
    from whitemark.pipeline.diagnostics import LineDiagnostic

logger: WhitemarkLogger = get_logger(__name__)


class Reporter(Protocol):
    """Receives pipeline output as it is produced."""

    def line(self, diagnostic: LineDiagnostic) -> None:
        """Handle one per-line diagnostic."""
        ...

    def file_done(self, result: FileResult) -> None:
        """Handle the final result of one file."""
        ...


@dataclass(frozen=True)
class FileResult:
    """Result of processing one file.

    Attributes:
        path (Path): The processed file.
        outcome (FileOutcome): What happened to the file.
        config (Config | None): Effective configuration (``None`` if it could not be resolved).
        totals (CheckResult): Violation totals from the classification pass.
        diagnostics (tuple[LineDiagnostic, ...]): Diagnostics from the rewrite pass.
        error (str | None): Error message when ``outcome`` is ``ERROR``.
    """

    path: Path
    outcome: FileOutcome
    config: Config | None = None
    totals: CheckResult = field(default_factory=CheckResult)
    diagnostics: tuple[LineDiagnostic, ...] = ()
    error: str | None = None


def _open_text(path: Path) -> TextIO:
    """Open ``path`` for reading with terminators preserved."""
    try:
        return open(path, encoding="utf-8", newline="")
    except OSError as exc:
        raise FileProcessingError("opening", str(path), describe(exc)) from exc


def _effective_config(handle: TextIO, base: Config) -> Config:
    modeline: str | None = find_modeline(handle)
    return config_from_modeline(base, modeline) if modeline is not None else base


def resolve_file_config(path: Path, base: Config) -> Config:
    """Return the effective configuration for ``path`` (its modeline applied to ``base``).

    Raises:
        FileProcessingError: If the file cannot be opened or read.
    """
    with _open_text(path) as handle, stage("reading", path):
        return _effective_config(handle, base)


def _run_pipeline(
    path: Path,
    base: Config,
    *,
    apply_changes: bool,
    reporter: Reporter | None,
) -> FileResult:
    label = str(path)
    report = reporter.line if reporter is not None else None

    with _open_text(path) as handle:
        with stage("reading", label):
            config: Config = _effective_config(handle, base)
            handle.seek(0)
            totals: CheckResult = scan_file(config, handle)

        if totals.is_clean:
            logger.debug("%s: compliant, not touched", label)
            return FileResult(path=path, outcome=FileOutcome.COMPLIANT, config=config)

        with stage("reading", label):
            handle.seek(0)

        if totals.fixable > 0 and apply_changes:
            with AtomicFileSink(path) as sink:
                with stage("fixing", label):
                    diagnostics = rewrite_file(config, label, handle, sink, report=report)
                sink.commit()
            outcome = FileOutcome.FIXED
        else:
            with stage("fixing", label):
                diagnostics = rewrite_file(config, label, handle, NullSink(), report=report)
            outcome = FileOutcome.WOULD_FIX if totals.fixable > 0 else FileOutcome.UNFIXABLE

    logger.debug("%s: %s (%s)", label, outcome.value, totals)
    return FileResult(
        path=path,
        outcome=outcome,
        config=config,
        totals=totals,
        diagnostics=tuple(diagnostics),
    )


def process_file(
    path: Path,
    base: Config,
    *,
    apply_changes: bool = True,
    reporter: Reporter | None = None,
) -> FileResult:
    """Check one file and, if allowed, fix it in place.

    Args:
        path (Path): File to process.
        base (Config): Configuration before any modeline override.
        apply_changes (bool): Rewrite files with fixable violations; when False
            every rewrite goes to a discard sink (dry run).
        reporter (Reporter | None): Receives diagnostics and the final result.

    Returns:
        FileResult: The outcome; failures are reported here instead of raised.
    """
    try:
        result: FileResult = _run_pipeline(
            path, base, apply_changes=apply_changes, reporter=reporter
        )
    except FileProcessingError as exc:
        logger.error("%s", exc)
        result = FileResult(path=path, outcome=FileOutcome.ERROR, error=str(exc))
    except (OSError, UnicodeError) as exc:
        error = FileProcessingError("processing", str(path), describe(exc))
        logger.error("%s", error)
        result = FileResult(path=path, outcome=FileOutcome.ERROR, error=str(error))
    if reporter is not None:
        reporter.file_done(result)
    return result


def process_files(
    paths: Sequence[Path],
    base: Config,
    *,
    apply_changes: bool = True,
    jobs: int = 1,
    reporter: Reporter | None = None,
) -> list[FileResult]:
    """Process ``paths`` independently and return their results in input order.

    Args:
        paths (Sequence[Path]): Files to process.
        base (Config): Shared, read-only base configuration.
        apply_changes (bool): See `process_file`.
        jobs (int): Number of worker threads; ``1`` processes files sequentially.
        reporter (Reporter | None): Receives output; must be thread-safe when ``jobs > 1``.

    Returns:
        list[FileResult]: One result per path.
    """
    logger.debug("Processing %d file(s) with %d job(s)", len(paths), jobs)
    if jobs <= 1 or len(paths) <= 1:
        return [
            process_file(p, base, apply_changes=apply_changes, reporter=reporter) for p in paths
        ]
    with ThreadPoolExecutor(max_workers=jobs) as pool:
        return list(
            pool.map(
                lambda p: process_file(p, base, apply_changes=apply_changes, reporter=reporter),
                paths,
            )
        )
