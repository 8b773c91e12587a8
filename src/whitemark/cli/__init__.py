# topmark:header:start
#
#   project      : WhiteMark
#   file         : __init__.py
#   file_relpath : src/whitemark/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Command-line interface for WhiteMark (Click-based)."""

from __future__ import annotations
