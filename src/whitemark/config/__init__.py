# topmark:header:start
#
#   project      : WhiteMark
#   file         : __init__.py
#   file_relpath : src/whitemark/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration for WhiteMark.

Re-exports the immutable `Config`, its builder `MutableConfig`, and the
modeline helpers that derive a per-file configuration.
"""

from __future__ import annotations

from whitemark.config.model import Config, MutableConfig
from whitemark.config.modeline import config_from_modeline, find_modeline

__all__ = [
    "Config",
    "MutableConfig",
    "config_from_modeline",
    "find_modeline",
]
