# topmark:header:start
#
#   project      : WhiteMark
#   file         : classifier.py
#   file_relpath : src/whitemark/pipeline/classifier.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Per-line classification into fixable and unfixable violations.

`classify_line` is pure: it never modifies the line. Each rule adds 0 or 1 to
one of the two counters of a `CheckResult`, and several rules may fire on the
same line:

| Rule | Counter | Fires when |
|---|---|---|
| tabs | fixable | ``expand_tabs`` and the line has a tab |
| tabs after other characters | unfixable | not ``expand_tabs`` and a tab follows non-tab content |
| mac line ending | fixable | terminator is a lone ``\\r`` |
| windows line ending | fixable | terminator is ``\\r\\n`` |
| trailing whitespace | fixable | whitespace precedes the terminator |
| line too long | unfixable | visible width exceeds ``line_length`` |
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from whitemark.pipeline.lines import (
    Terminator,
    has_tab,
    has_tab_after_other,
    has_trailing_whitespace,
    split_line,
    visible_length,
)

if TYPE_CHECKING:
    from whitemark.config.model import Config


@dataclass(frozen=True, slots=True)
class CheckResult:
    """Violation counts for a line or a whole file.

    Instances add pointwise; ``CheckResult()`` is the identity, so per-line
    results can be folded into per-file totals with ``sum(results, CheckResult())``.

    Attributes:
        fixable (int): Violations that can be repaired deterministically.
        unfixable (int): Violations that can only be reported.
    """

    fixable: int = 0
    unfixable: int = 0

    def __add__(self, other: CheckResult) -> CheckResult:
        return CheckResult(
            fixable=self.fixable + other.fixable,
            unfixable=self.unfixable + other.unfixable,
        )

    @property
    def is_clean(self) -> bool:
        """True when no violation of either kind was found."""
        return self.fixable == 0 and self.unfixable == 0


def classify_line(config: Config, line: str) -> CheckResult:
    """Count the violations on one line.

    Args:
        config (Config): Effective configuration for the file.
        line (str): One line including its terminator (if any).

    Returns:
        CheckResult: Fixable and unfixable counts for ``line``.
    """
    body, terminator = split_line(line)
    fixable = 0
    unfixable = 0

    if config.expand_tabs:
        if has_tab(body):
            fixable += 1
    elif has_tab_after_other(body):
        unfixable += 1

    if terminator in (Terminator.CR, Terminator.CRLF):
        fixable += 1

    if has_trailing_whitespace(line, body):
        fixable += 1

    if visible_length(body, config.tab_size) > config.line_length:
        unfixable += 1

    return CheckResult(fixable=fixable, unfixable=unfixable)
