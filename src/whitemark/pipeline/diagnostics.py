# topmark:header:start
#
#   project      : WhiteMark
#   file         : diagnostics.py
#   file_relpath : src/whitemark/pipeline/diagnostics.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Per-line diagnostic records emitted by the rewrite pass."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from whitemark.pipeline.tags import Tag


@dataclass(frozen=True, slots=True)
class LineDiagnostic:
    """One diagnostic line: ``<path>:<line_number>: <tag>, <tag>``.

    Attributes:
        path (str): File path as given on the command line (or resolved from a directory).
        line_number (int): 1-based line number.
        tags (tuple[Tag, ...]): Tags in detection order.
    """

    path: str
    line_number: int
    tags: tuple[Tag, ...]

    @property
    def message(self) -> str:
        """Comma-separated tag values."""
        return ", ".join(tag.value for tag in self.tags)

    def __str__(self) -> str:
        return f"{self.path}:{self.line_number}: {self.message}"
