# topmark:header:start
#
#   project      : WhiteMark
#   file         : __init__.py
#   file_relpath : src/whitemark/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""WhiteMark CLI subcommands."""

from __future__ import annotations
