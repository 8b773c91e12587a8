# topmark:header:start
#
#   project      : WhiteMark
#   file         : test_exit_code_resolution.py
#   file_relpath : tests/cli/test_exit_code_resolution.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for mapping per-file results to the process exit code."""

from __future__ import annotations

from pathlib import Path

import pytest

from whitemark.cli.cmd_common import resolve_exit_code
from whitemark.cli.exit_codes import ExitCode
from whitemark.pipeline.classifier import CheckResult
from whitemark.pipeline.engine import FileResult
from whitemark.pipeline.status import FileOutcome


def _result(outcome: FileOutcome, *, fixable: int = 0, unfixable: int = 0) -> FileResult:
    return FileResult(
        path=Path("x"),
        outcome=outcome,
        totals=CheckResult(fixable=fixable, unfixable=unfixable),
    )


@pytest.mark.parametrize(
    ("results", "expected"),
    [
        ([], ExitCode.SUCCESS),
        ([_result(FileOutcome.COMPLIANT)], ExitCode.SUCCESS),
        ([_result(FileOutcome.WOULD_FIX, fixable=1)], ExitCode.WOULD_CHANGE),
        ([_result(FileOutcome.FIXED, fixable=1)], ExitCode.FIXED),
        (
            [_result(FileOutcome.FIXED, fixable=1), _result(FileOutcome.UNFIXABLE, unfixable=1)],
            ExitCode.UNFIXABLE,
        ),
        ([_result(FileOutcome.FIXED, fixable=1, unfixable=1)], ExitCode.UNFIXABLE),
        (
            [_result(FileOutcome.UNFIXABLE, unfixable=1), _result(FileOutcome.ERROR)],
            ExitCode.IO_ERROR,
        ),
    ],
)
def test_resolve_exit_code_precedence(results: list[FileResult], expected: ExitCode) -> None:
    """IO error > unfixable > fixed / would change > success."""
    assert resolve_exit_code(results) is expected
