# topmark:header:start
#
#   project      : WhiteMark
#   file         : modeline.py
#   file_relpath : src/whitemark/config/modeline.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""In-file configuration overrides (vim-style modelines).

A modeline is any line containing a space, one of ``vim``, ``vi`` or ``ex``,
``": "`` and some free text, e.g.::

    /* vim: et ts=2 */

Every line of the file is scanned and the **last** match wins. The captured
text is split on single spaces and applied left to right:

- ``et`` / ``noet`` set or clear ``expand_tabs``;
- ``ts=N`` sets ``tab_size`` when ``N`` is a positive decimal integer, and is
  otherwise ignored (the previous value is kept);
- anything else (``filetype=c``, ``sw=4``, a trailing ``*/``) is ignored.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from whitemark.config.logging import get_logger
from whitemark.constants import MODELINE_PATTERN

if TYPE_CHECKING:
    from collections.abc import Iterable

    from whitemark.config.logging import WhitemarkLogger
    from whitemark.config.model import Config

logger: WhitemarkLogger = get_logger(__name__)

_MODELINE_RE: re.Pattern[str] = re.compile(MODELINE_PATTERN)
_TAB_SIZE_RE: re.Pattern[str] = re.compile(r"[0-9]+")


def find_modeline(lines: Iterable[str]) -> str | None:
    """Return the text of the last modeline in ``lines``.

    Args:
        lines (Iterable[str]): Lines of a file, with or without terminators
            (a text stream opened with ``newline=""`` works directly).

    Returns:
        str | None: The text captured after ``"vim: "`` (or ``vi``/``ex``) on the
        last matching line, or ``None`` if no line matches.
    """
    modeline: str | None = None
    for line_number, line in enumerate(lines, start=1):
        match: re.Match[str] | None = _MODELINE_RE.search(line.rstrip("\r\n"))
        if match is not None:
            modeline = match.group(1)
            logger.trace("Modeline candidate on line %d: %r", line_number, modeline)
    return modeline


def config_from_modeline(base: Config, modeline: str) -> Config:
    """Resolve the effective configuration for a file from its modeline.

    Args:
        base (Config): Configuration in effect before the override.
        modeline (str): Text captured by `find_modeline`.

    Returns:
        Config: A new configuration; ``base`` is left untouched.
    """
    expand_tabs: bool = base.expand_tabs
    tab_size: int = base.tab_size

    for token in modeline.split(" "):
        if token == "et":
            expand_tabs = True
        elif token == "noet":
            expand_tabs = False
        elif token.startswith("ts="):
            value: str = token[len("ts=") :]
            if _TAB_SIZE_RE.fullmatch(value) and int(value) > 0:
                tab_size = int(value)
            else:
                logger.debug("Ignoring malformed tab size in modeline: %r", token)

    config: Config = base.with_changes(expand_tabs=expand_tabs, tab_size=tab_size)
    logger.debug("Modeline %r resolved to %s", modeline, config)
    return config
