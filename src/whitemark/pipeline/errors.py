# topmark:header:start
#
#   project      : WhiteMark
#   file         : errors.py
#   file_relpath : src/whitemark/pipeline/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Per-file processing errors.

Any failure while processing one file is raised as `FileProcessingError` and
caught at the per-file boundary in `whitemark.pipeline.engine`, so a single
bad file never aborts the run.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager


class FileProcessingError(Exception):
    """A stage of the per-file pipeline failed.

    Rendered as ``Error <verb> <target>: <reason>``, e.g.
    ``Error reading src/x.c: 'utf-8' codec can't decode byte 0xff ...``.

    Attributes:
        verb (str): Stage that failed (``"opening"``, ``"reading"``, ``"creating"``,
            ``"fixing"``, ``"setting permissions for"``, ``"renaming"``).
        target (str): Path (or ``"<tmp> to <path>"`` for renames) the stage acted on.
        reason (str): Human-readable cause.
    """

    def __init__(self, verb: str, target: str, reason: str) -> None:
        super().__init__(f"Error {verb} {target}: {reason}")
        self.verb = verb
        self.target = target
        self.reason = reason


def describe(exc: BaseException) -> str:
    """Return the most useful message for an I/O or decoding exception."""
    if isinstance(exc, OSError) and exc.strerror:
        return exc.strerror
    return str(exc)


@contextmanager
def stage(verb: str, target: object) -> Iterator[None]:
    """Convert I/O and decoding failures raised in the block into `FileProcessingError`."""
    try:
        yield
    except (OSError, UnicodeError) as exc:
        raise FileProcessingError(verb, str(target), describe(exc)) from exc
