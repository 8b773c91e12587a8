# topmark:header:start
#
#   project      : WhiteMark
#   file         : rewriter.py
#   file_relpath : src/whitemark/pipeline/rewriter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Whole-file rewrite pass.

Applies `fix_line` to every line, writes each result to a sink and emits one
`LineDiagnostic` per line that produced tags. This single pass is both the
correction pass and the reporting pass; when nothing may be written the
caller passes a `whitemark.pipeline.writer.NullSink`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from whitemark.config.logging import get_logger
from whitemark.pipeline.diagnostics import LineDiagnostic
from whitemark.pipeline.fixer import LineFix, fix_line

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from whitemark.config.logging import WhitemarkLogger
    from whitemark.config.model import Config

logger: WhitemarkLogger = get_logger(__name__)


class TextSink(Protocol):
    """Anything with a text ``write`` method (files, `io.StringIO`, sinks)."""

    def write(self, text: str, /) -> int:
        """Write ``text`` and return the number of characters written."""
        ...


def rewrite_file(
    config: Config,
    path: str,
    lines: Iterable[str],
    sink: TextSink,
    *,
    report: Callable[[LineDiagnostic], None] | None = None,
) -> list[LineDiagnostic]:
    """Fix every line of a file into ``sink``.

    Args:
        config (Config): Effective configuration for the file.
        path (str): Path label used in diagnostics.
        lines (Iterable[str]): The file's lines with terminators.
        sink (TextSink): Destination of the corrected text.
        report (Callable[[LineDiagnostic], None] | None): Called with each
            diagnostic as soon as its line is processed.

    Returns:
        list[LineDiagnostic]: All diagnostics, in line order.
    """
    diagnostics: list[LineDiagnostic] = []
    changed = 0
    for line_number, line in enumerate(lines, start=1):
        fix: LineFix = fix_line(config, line)
        sink.write(fix.text)
        if fix.changed:
            changed += 1
        if fix.has_tags:
            diagnostic = LineDiagnostic(path=path, line_number=line_number, tags=fix.tags)
            diagnostics.append(diagnostic)
            if report is not None:
                report(diagnostic)
    logger.debug("%s: %d line(s) changed, %d diagnostic(s)", path, changed, len(diagnostics))
    return diagnostics
