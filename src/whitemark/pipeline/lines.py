# topmark:header:start
#
#   project      : WhiteMark
#   file         : lines.py
#   file_relpath : src/whitemark/pipeline/lines.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""Line anatomy: terminator classification and the shared line predicates.

A *line* is a maximal run of characters up to and including a terminator
(``\n``, ``\r`` or ``\r\n``), or the trailing fragment at end of file. This is
exactly what `io.TextIOBase.readline` yields for a stream opened with
``newline=""``.

Each line is split **once** into ``(body, terminator)`` by `split_line`; the
classifier and the fixer both evaluate the predicates below on that split, so
what is detected is exactly what gets fixed.
"""

from __future__ import annotations

from enum import Enum

TAB = "\t"


class Terminator(str, Enum):
    """Line terminator of a single line."""

    LF = "\n"
    CR = "\r"
    CRLF = "\r\n"
    NONE = ""


def split_line(line: str) -> tuple[str, Terminator]:
    """Split ``line`` into its body and its terminator.

    Args:
        line (str): One line, as produced by ``readline`` with ``newline=""``.

    Returns:
        tuple[str, Terminator]: The line without its terminator, and the terminator.
    """
    if line.endswith("\r\n"):
        return line[:-2], Terminator.CRLF
    if line.endswith("\n"):
        return line[:-1], Terminator.LF
    if line.endswith("\r"):
        return line[:-1], Terminator.CR
    return line, Terminator.NONE


def has_tab(body: str) -> bool:
    """Return True if ``body`` contains a tab."""
    return TAB in body


def has_tab_after_other(body: str) -> bool:
    """Return True if a tab occurs after the leading run of tabs.

    ``"\t\tfoo"`` is fine, ``"\tfoo\tbar"`` and ``"  \tfoo"`` are not.
    """
    return TAB in body.lstrip(TAB)


def has_trailing_whitespace(line: str, body: str) -> bool:
    """Return True if a whitespace character immediately precedes the terminator.

    A line of at most one character never qualifies: there is nothing in
    front of its terminator.

    Args:
        line (str): The full line, including its terminator.
        body (str): The line without its terminator (see `split_line`).
    """
    return len(line) > 1 and body != "" and body[-1].isspace()


def visible_length(body: str, tab_size: int) -> int:
    """Return the column width of ``body`` with tabs counting ``tab_size`` columns."""
    return len(body) + body.count(TAB) * (tab_size - 1)
