# topmark:header:start
#
#   project      : WhiteMark
#   file         : __main__.py
#   file_relpath : src/whitemark/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running WhiteMark via ``python -m whitemark``.

Delegates to :func:`whitemark.cli.main.cli` so there is a single CLI entry
point regardless of how WhiteMark is launched.

Examples:
    Check a source tree without writing::

        python -m whitemark check src
"""

from __future__ import annotations

from whitemark.cli.main import cli

if __name__ == "__main__":
    cli()
