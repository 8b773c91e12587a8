# topmark:header:start
#
#   project      : WhiteMark
#   file         : __init__.py
#   file_relpath : src/whitemark/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""WhiteMark processing pipeline.

Leaf to root: `lines` (terminator split and predicates), `classifier`
(per-line counts), `fixer` (per-line corrections), `scanner` (whole-file
totals), `rewriter` (whole-file rewrite + diagnostics), `writer` (sinks) and
`engine` (per-file orchestration).
"""

from __future__ import annotations

from whitemark.pipeline.classifier import CheckResult, classify_line
from whitemark.pipeline.engine import FileResult, process_file, process_files
from whitemark.pipeline.fixer import LineFix, fix_line
from whitemark.pipeline.status import FileOutcome
from whitemark.pipeline.tags import Tag

__all__ = [
    "CheckResult",
    "FileOutcome",
    "FileResult",
    "LineFix",
    "Tag",
    "classify_line",
    "fix_line",
    "process_file",
    "process_files",
]
