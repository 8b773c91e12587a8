# topmark:header:start
#
#   project      : WhiteMark
#   file         : test_modeline.py
#   file_relpath : tests/config/test_modeline.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for modeline discovery and per-file configuration overrides."""

from __future__ import annotations

import pytest

from whitemark.config import Config, config_from_modeline, find_modeline


@pytest.mark.parametrize(
    ("lines", "expected"),
    [
        (["/* vim: et ts=2 */\n"], "et ts=2 */"),
        (["# vi: noet\n"], "noet"),
        (["; ex: ts=3\r\n"], "ts=3"),
        (["vim: et\n"], None),
        (["# vim:et\n"], None),
        (["plain text\n"], None),
        ([], None),
    ],
)
def test_find_modeline(lines: list[str], expected: str | None) -> None:
    """A modeline needs a space, the editor name, a colon and a space."""
    assert find_modeline(lines) == expected


def test_last_modeline_wins() -> None:
    """``ts=2`` followed later by ``ts=8`` resolves to 8."""
    lines = ["/* vim: ts=2 */\n", "int x;\n", "/* vim: ts=8 */\n"]
    modeline = find_modeline(lines)
    assert modeline == "ts=8 */"
    assert config_from_modeline(Config(), modeline).tab_size == 8


@pytest.mark.parametrize(
    ("modeline", "expand_tabs", "tab_size"),
    [
        ("et", True, 4),
        ("noet", False, 4),
        ("et noet", False, 4),
        ("ts=2", False, 2),
        ("et ts=8 */", True, 8),
        ("filetype=c sw=2 ts=3", False, 3),
    ],
)
def test_config_from_modeline(modeline: str, expand_tabs: bool, tab_size: int) -> None:
    """Tokens apply left to right; unknown tokens are ignored."""
    config = config_from_modeline(Config(), modeline)
    assert config.expand_tabs is expand_tabs
    assert config.tab_size == tab_size
    assert config.line_length == Config().line_length


@pytest.mark.parametrize("token", ["ts=abc", "ts=", "ts=-1", "ts=+3", "ts=0", "ts=2x"])
def test_malformed_tab_size_keeps_previous_value(token: str) -> None:
    """A bad ``ts=`` value is ignored silently."""
    base = Config(tab_size=6)
    assert config_from_modeline(base, f"ts=3 {token}").tab_size == 3
    assert config_from_modeline(base, token).tab_size == 6


def test_config_from_modeline_does_not_mutate_base() -> None:
    """Overrides produce a new value."""
    base = Config()
    derived = config_from_modeline(base, "et ts=2")
    assert base == Config()
    assert derived is not base
