# topmark:header:start
#
#   project      : WhiteMark
#   file         : scanner.py
#   file_relpath : src/whitemark/pipeline/scanner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Whole-file classification pass.

Runs `classify_line` over every line and folds the per-line results into one
`CheckResult`. A clean total means the file is already compliant and must
not be touched at all.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from whitemark.config.logging import get_logger
from whitemark.pipeline.classifier import CheckResult, classify_line

if TYPE_CHECKING:
    from collections.abc import Iterable

    from whitemark.config.logging import WhitemarkLogger
    from whitemark.config.model import Config

logger: WhitemarkLogger = get_logger(__name__)


def scan_file(config: Config, lines: Iterable[str]) -> CheckResult:
    """Return the violation totals for all ``lines``.

    Args:
        config (Config): Effective configuration for the file.
        lines (Iterable[str]): The file's lines with terminators, e.g. a text
            stream opened with ``newline=""`` and positioned at its start.

    Returns:
        CheckResult: Sum of the per-line results.
    """
    totals = CheckResult()
    for line in lines:
        totals = totals + classify_line(config, line)
    logger.debug("scan totals: fixable=%d unfixable=%d", totals.fixable, totals.unfixable)
    return totals
