# topmark:header:start
#
#   project      : WhiteMark
#   file         : __init__.py
#   file_relpath : src/whitemark/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""WhiteMark package.

WhiteMark is a whitespace-style checker for text files. It detects tab usage,
non-LF line endings, trailing whitespace and over-long lines, rewrites what can
be fixed unambiguously, and reports every correction it makes.
"""

from __future__ import annotations
