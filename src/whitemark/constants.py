# topmark:header:start
#
#   project      : WhiteMark
#   file         : constants.py
#   file_relpath : src/whitemark/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""WhiteMark Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    WHITEMARK_VERSION: str = get_version("whitemark")
except PackageNotFoundError:  # running from a source checkout
    WHITEMARK_VERSION = "0.0.0"

# Runtime defaults for the formatting configuration
DEFAULT_EXPAND_TABS: bool = False
DEFAULT_TAB_SIZE: int = 4
DEFAULT_LINE_LENGTH: int = 80

# Project configuration files
PYPROJECT_TOML_NAME: str = "pyproject.toml"
WHITEMARK_TOML_NAME: str = "whitemark.toml"
TOOL_SECTION: str = "whitemark"

# Modeline: a space, one of vim/vi/ex, a colon and a space, then free text.
MODELINE_PATTERN: str = r" (?:vim|vi|ex): (.+)"

# Suffix of the same-directory temporary file used for atomic replacement
TEMP_FILE_SUFFIX: str = ".tmp"

# Directories never descended into when expanding directory arguments
VCS_DIRECTORIES: frozenset[str] = frozenset({".git", ".hg", ".svn", ".bzr"})

ENV_PREFIX: str = "WHITEMARK"
