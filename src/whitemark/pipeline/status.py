# topmark:header:start
#
#   project      : WhiteMark
#   file         : status.py
#   file_relpath : src/whitemark/pipeline/status.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Per-file outcome of the WhiteMark pipeline."""

from __future__ import annotations

from yachalk import chalk

from whitemark.rendering.colored_enum import ColoredStrEnum


class FileOutcome(ColoredStrEnum):
    """What happened to one file.

    Members:
        COMPLIANT: No violation found; the file was not touched.
        FIXED: Fixable violations were rewritten in place.
        WOULD_FIX: Fixable violations found, but writing was disabled.
        UNFIXABLE: Only unfixable violations found; reported, file untouched.
        ERROR: Processing failed; the file was left as it was.
    """

    COMPLIANT = ("compliant", chalk.green)
    FIXED = ("fixed", chalk.blue)
    WOULD_FIX = ("would fix", chalk.yellow)
    UNFIXABLE = ("unfixable violations", chalk.red)
    ERROR = ("error", chalk.red_bright)
