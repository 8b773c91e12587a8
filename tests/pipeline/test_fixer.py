# topmark:header:start
#
#   project      : WhiteMark
#   file         : test_fixer.py
#   file_relpath : tests/pipeline/test_fixer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for per-line correction and tagging."""

from __future__ import annotations

import pytest

from tests.conftest import make_config
from whitemark.pipeline.classifier import classify_line
from whitemark.pipeline.fixer import LineFix, fix_line
from whitemark.pipeline.tags import Tag

pytestmark = pytest.mark.pipeline


def test_compliant_line_is_returned_as_is() -> None:
    """Fast path: no tags and the very same string object."""
    line = "int main(void)\n"
    fix: LineFix = fix_line(make_config(), line)
    assert fix.text is line
    assert fix.tags == ()
    assert not fix.changed
    assert not fix.has_tags


@pytest.mark.parametrize(
    ("line", "overrides", "text", "tags"),
    [
        ("a\tb\n", {"expand_tabs": True, "tab_size": 4}, "a    b\n", (Tag.EXPANDED_TABS,)),
        ("foo\r\n", {}, "foo\n", (Tag.WINDOWS_LINE_ENDING,)),
        ("foo\r", {}, "foo\n", (Tag.MAC_LINE_ENDING,)),
        ("foo   \n", {}, "foo\n", (Tag.TRAILING_WHITESPACE,)),
        ("foo ", {}, "foo\n", (Tag.TRAILING_WHITESPACE,)),
        (
            "foo \r\n",
            {},
            "foo\n",
            (Tag.WINDOWS_LINE_ENDING, Tag.TRAILING_WHITESPACE),
        ),
        (
            "a\t\r",
            {"expand_tabs": True, "tab_size": 2},
            "a\n",
            (Tag.MAC_LINE_ENDING, Tag.EXPANDED_TABS, Tag.TRAILING_WHITESPACE),
        ),
        ("\t\n", {"expand_tabs": False}, "\n", (Tag.TRAILING_WHITESPACE,)),
    ],
)
def test_fix_line_corrections(
    line: str, overrides: dict[str, object], text: str, tags: tuple[Tag, ...]
) -> None:
    """Fixable violations are corrected and tagged in detection order."""
    fix: LineFix = fix_line(make_config(**overrides), line)
    assert fix.text == text
    assert fix.tags == tags
    assert fix.changed


def test_tabs_after_other_are_reported_not_rewritten() -> None:
    """Mixed tabs are unfixable: tagged, content unchanged."""
    line = "\t\ta\tb\n"
    fix: LineFix = fix_line(make_config(expand_tabs=False), line)
    assert fix.text is line
    assert fix.tags == (Tag.TABS_AFTER_OTHER,)


def test_long_line_is_flagged_not_wrapped() -> None:
    """Over-length lines are only reported."""
    line = "x" * 81 + "\n"
    fix: LineFix = fix_line(make_config(), line)
    assert fix.text is line
    assert fix.tags == (Tag.LINE_TOO_LONG,)


def test_line_length_is_rechecked_after_stripping() -> None:
    """Length is measured on the corrected line."""
    config = make_config(line_length=4)
    assert fix_line(config, "abcd  \n").tags == (Tag.TRAILING_WHITESPACE,)
    assert fix_line(config, "abcde  \n").tags == (Tag.TRAILING_WHITESPACE, Tag.LINE_TOO_LONG)


def test_line_length_is_rechecked_after_expanding() -> None:
    """Expanded tabs keep the same visible width."""
    config = make_config(expand_tabs=True, tab_size=4, line_length=6)
    fix: LineFix = fix_line(config, "\tabc\n")
    assert fix.text == "    abc\n"
    assert fix.tags == (Tag.EXPANDED_TABS, Tag.LINE_TOO_LONG)


def test_trailing_whitespace_created_by_expansion_is_removed() -> None:
    """A trailing tab becomes spaces and is then stripped."""
    fix: LineFix = fix_line(make_config(expand_tabs=True), "a\t\n")
    assert fix.text == "a\n"
    assert fix.tags == (Tag.EXPANDED_TABS, Tag.TRAILING_WHITESPACE)


@pytest.mark.parametrize(
    "line",
    ["foo\r\n", "a\tb \r", "x   ", "\t\tq\t \n", "\t\n"],
)
@pytest.mark.parametrize("expand_tabs", [True, False])
def test_fixed_line_has_no_fixable_violation(line: str, expand_tabs: bool) -> None:
    """Re-classifying a corrected line yields zero fixable violations."""
    config = make_config(expand_tabs=expand_tabs)
    assert classify_line(config, fix_line(config, line).text).fixable == 0


def test_tag_renders_as_its_message() -> None:
    """Tags print as their diagnostic text."""
    assert str(Tag.MAC_LINE_ENDING) == "fixed mac line ending"
    assert str(Tag.WINDOWS_LINE_ENDING) == "fixed windows line ending"
    assert str(Tag.EXPANDED_TABS) == "expanded tabs"
    assert str(Tag.TABS_AFTER_OTHER) == "tabs after other characters"
    assert str(Tag.TRAILING_WHITESPACE) == "removed whitespace from end"
    assert str(Tag.LINE_TOO_LONG) == "line too long"
