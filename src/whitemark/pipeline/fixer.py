# topmark:header:start
#
#   project      : WhiteMark
#   file         : fixer.py
#   file_relpath : src/whitemark/pipeline/fixer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Per-line correction.

`fix_line` first classifies the line with
`whitemark.pipeline.classifier.classify_line`; a line without violations is
returned as the very same ``str`` object with no tags. Otherwise corrections
run in a fixed order, each recording a `Tag`:

1. normalize a ``\\r`` or ``\\r\\n`` terminator to ``\\n``;
2. expand every tab to ``tab_size`` spaces (``expand_tabs``), or flag tabs
   after other characters (not rewritten);
3. strip whitespace before the terminator and end the line with ``\\n``;
4. flag the line as too long if it still is (never rewrapped).

Steps 3 and 4 look at the line as modified by the earlier steps, so the
result re-classifies with no fixable violation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from whitemark.config.logging import get_logger
from whitemark.pipeline.classifier import CheckResult, classify_line
from whitemark.pipeline.lines import (
    TAB,
    Terminator,
    has_tab,
    has_tab_after_other,
    has_trailing_whitespace,
    split_line,
    visible_length,
)
from whitemark.pipeline.tags import Tag

if TYPE_CHECKING:
    from whitemark.config.logging import WhitemarkLogger
    from whitemark.config.model import Config

logger: WhitemarkLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class LineFix:
    """Outcome of fixing a single line.

    Attributes:
        original (str): The input line.
        text (str): The corrected line; the ``original`` object itself when nothing changed.
        tags (tuple[Tag, ...]): Corrections applied and problems detected, in detection order.
    """

    original: str
    text: str
    tags: tuple[Tag, ...] = ()

    @property
    def changed(self) -> bool:
        """True if ``text`` differs from ``original``."""
        return self.text is not self.original

    @property
    def has_tags(self) -> bool:
        """True if anything was fixed or detected on this line."""
        return bool(self.tags)


_LINE_ENDING_TAGS: dict[Terminator, Tag] = {
    Terminator.CR: Tag.MAC_LINE_ENDING,
    Terminator.CRLF: Tag.WINDOWS_LINE_ENDING,
}


def fix_line(config: Config, line: str) -> LineFix:
    """Correct the fixable violations on ``line`` and tag every violation.

    Args:
        config (Config): Effective configuration for the file.
        line (str): One line including its terminator (if any).

    Returns:
        LineFix: The corrected line and the ordered tags.
    """
    result: CheckResult = classify_line(config, line)
    if result.is_clean:
        return LineFix(original=line, text=line)

    tags: list[Tag] = []
    body, terminator = split_line(line)

    # One normalization over the three recognized terminators
    line_ending_tag: Tag | None = _LINE_ENDING_TAGS.get(terminator)
    if line_ending_tag is not None:
        tags.append(line_ending_tag)
        terminator = Terminator.LF

    if config.expand_tabs:
        if has_tab(body):
            body = body.replace(TAB, " " * config.tab_size)
            tags.append(Tag.EXPANDED_TABS)
    elif has_tab_after_other(body):
        tags.append(Tag.TABS_AFTER_OTHER)

    if has_trailing_whitespace(body + terminator.value, body):
        body = body.rstrip()
        terminator = Terminator.LF
        tags.append(Tag.TRAILING_WHITESPACE)

    if visible_length(body, config.tab_size) > config.line_length:
        tags.append(Tag.LINE_TOO_LONG)

    rebuilt: str = body + terminator.value
    text: str = line if rebuilt == line else rebuilt
    logger.trace("fix_line(%r) -> %r %s", line, text, [t.value for t in tags])
    return LineFix(original=line, text=text, tags=tuple(tags))
