# topmark:header:start
#
#   project      : WhiteMark
#   file         : test_config_and_version.py
#   file_relpath : tests/cli/test_config_and_version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: ``config`` and ``version`` commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from tests.cli.conftest import assert_IO_ERROR, assert_SUCCESS, run_cli, run_cli_in
from whitemark.constants import WHITEMARK_VERSION

if TYPE_CHECKING:
    from pathlib import Path

pytestmark = pytest.mark.cli


def test_config_shows_base_configuration(isolation: Path) -> None:
    """Defaults merged with options, as TOML."""
    result = run_cli_in(isolation, ["config", "--line-length", "100"])
    assert_SUCCESS(result)
    assert result.output.splitlines() == [
        "expand_tabs = false",
        "tab_size = 4",
        "line_length = 100",
    ]


def test_config_for_file_applies_modeline(isolation: Path) -> None:
    """With a PATH the file's modeline is applied."""
    (isolation / "a.c").write_bytes(b"/* vim: et ts=2 */\n")
    result = run_cli_in(isolation, ["config", "a.c"])
    assert_SUCCESS(result)
    assert "expand_tabs = true" in result.output
    assert "tab_size = 2" in result.output


def test_config_for_missing_file(isolation: Path) -> None:
    """An unreadable PATH is an I/O error."""
    result = run_cli_in(isolation, ["config", "nope.c"])
    assert_IO_ERROR(result)
    assert "Error opening nope.c" in result.output


def test_version() -> None:
    """The version command prints the package version."""
    result = run_cli(["version"])
    assert_SUCCESS(result)
    assert result.output.strip() == f"whitemark {WHITEMARK_VERSION}"
