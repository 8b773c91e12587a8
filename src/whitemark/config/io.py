# topmark:header:start
#
#   project      : WhiteMark
#   file         : io.py
#   file_relpath : src/whitemark/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML I/O helpers for WhiteMark configuration.

Parsing is done with `tomlkit` and returned as plain ``dict`` structures.
Read and parse failures are logged and yield an empty table, so a broken
config file never aborts a run.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from whitemark.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from whitemark.config.logging import WhitemarkLogger

TomlTable = dict[str, Any]

logger: WhitemarkLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (``whitemark.toml`` or ``pyproject.toml``).

    Returns:
        TomlTable: The parsed TOML content, or an empty dict on failure.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Return the sub-table under ``key`` or an empty dict when absent or not a table."""
    value: Any = table.get(key)
    if isinstance(value, dict):
        return cast("TomlTable", value)
    return {}


def get_bool_value_or_none(table: TomlTable, key: str) -> bool | None:
    """Extract an optional boolean value from a TOML table.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.

    Returns:
        bool | None: The boolean value, or ``None`` if missing or not a boolean.
    """
    value: Any = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    logger.warning("Ignoring non-boolean value for '%s': %r", key, value)
    return None


def get_int_value_or_none(table: TomlTable, key: str) -> int | None:
    """Extract an optional integer value from a TOML table.

    Booleans are rejected even though ``bool`` is an ``int`` subclass.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.

    Returns:
        int | None: The integer value, or ``None`` if missing or not an integer.
    """
    value: Any = table.get(key)
    if value is None:
        return None
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    logger.warning("Ignoring non-integer value for '%s': %r", key, value)
    return None


def to_toml(data: TomlTable) -> str:
    """Render a plain dict as a TOML document string."""
    return tomlkit.dumps(data)
