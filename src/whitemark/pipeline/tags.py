# topmark:header:start
#
#   project      : WhiteMark
#   file         : tags.py
#   file_relpath : src/whitemark/pipeline/tags.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tags naming each detected or applied per-line correction.

Tag values are part of the diagnostic output contract and appear verbatim in
``path:line: tag, tag`` lines. Members are declared in detection order.
"""

from __future__ import annotations

from enum import Enum


class Tag(str, Enum):
    """Label for one correction applied to, or problem detected on, a line."""

    MAC_LINE_ENDING = "fixed mac line ending"
    WINDOWS_LINE_ENDING = "fixed windows line ending"
    EXPANDED_TABS = "expanded tabs"
    TABS_AFTER_OTHER = "tabs after other characters"
    TRAILING_WHITESPACE = "removed whitespace from end"
    LINE_TOO_LONG = "line too long"

    def __str__(self) -> str:
        return self.value
