# topmark:header:start
#
#   project      : WhiteMark
#   file         : exit_codes.py
#   file_relpath : src/whitemark/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the WhiteMark CLI.

WhiteMark aligns with the BSD `sysexits` convention where practical. The
low codes distinguish the normal outcomes of a run so that CI and pre-commit
hooks can tell "nothing to do" from "files were fixed" from "problems remain".
Click's own usage errors also exit with 2; tests must assert
``result.exception is None`` to disambiguate from `ExitCode.WOULD_CHANGE`.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for WhiteMark.

    When several apply, the highest-precedence one wins:
    ``IO_ERROR`` > ``UNFIXABLE`` > ``FIXED`` / ``WOULD_CHANGE`` > ``SUCCESS``.

    Attributes:
        SUCCESS: Every file is compliant.
        FAILURE: Generic failure.
        WOULD_CHANGE: ``check`` found fixable violations.
        FIXED: ``fix`` rewrote at least one file and nothing unfixable remains.
        UNFIXABLE: Unfixable violations (mixed tabs, long lines) remain.
        USAGE_ERROR: Invalid invocation. Mirrors BSD ``EX_USAGE (64)``.
        IO_ERROR: At least one file could not be processed. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Missing or invalid configuration. Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1
    WOULD_CHANGE = 2
    FIXED = 3
    UNFIXABLE = 4

    USAGE_ERROR = 64  # EX_USAGE
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG
