# topmark:header:start
#
#   project      : WhiteMark
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running WhiteMark in a controlled working directory.

`run_cli_in` changes the process working directory to the given directory
before invoking the Click CLI, so relative paths, globs and upward config
discovery are resolved against the test directory.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from click.testing import CliRunner, Result

from whitemark.cli.exit_codes import ExitCode
from whitemark.cli.main import cli

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


def run_cli_in(tmp_path: Path, argv: Sequence[str]) -> Result:
    """Invoke the CLI with ``tmp_path`` as the working directory.

    Color is disabled so assertions can match plain text.

    Args:
        tmp_path (Path): Directory used as the CWD for the command invocation.
        argv (Sequence[str]): CLI arguments, e.g. ``["check", "."]``.

    Returns:
        Result: The `click.testing.Result` produced by `click.testing.CliRunner.invoke`.

    Example:
        ```python
        res = run_cli_in(tmp_path, ["fix", "*.c"])  # relative glob in tmp_path
        assert res.exit_code == ExitCode.FIXED
        ```
    """
    runner = CliRunner()
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return runner.invoke(cli, ["--no-color", *argv])
    finally:
        os.chdir(cwd)


def run_cli(argv: Sequence[str]) -> Result:
    """Invoke the CLI without changing the working directory.

    Args:
        argv (Sequence[str]): CLI arguments, e.g. ``["version"]``.

    Returns:
        Result: The `click.testing.Result` produced by `click.testing.CliRunner.invoke`.
    """
    return CliRunner().invoke(cli, ["--no-color", *argv])


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_WOULD_CHANGE(result: Result) -> None:
    """Assert that the command exited with WOULD_CHANGE (code 2).

    Click usage errors also exit with 2, so require that no exception was raised.
    """
    assert result.exit_code == ExitCode.WOULD_CHANGE, result.output
    assert result.exception is None or isinstance(result.exception, SystemExit)


def assert_FIXED(result: Result) -> None:
    """Assert that the command exited with FIXED (code 3)."""
    assert result.exit_code == ExitCode.FIXED, result.output


def assert_UNFIXABLE(result: Result) -> None:
    """Assert that the command exited with UNFIXABLE (code 4)."""
    assert result.exit_code == ExitCode.UNFIXABLE, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64)."""
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output


def assert_IO_ERROR(result: Result) -> None:
    """Assert that the command exited with IO_ERROR (code 74)."""
    assert result.exit_code == ExitCode.IO_ERROR, result.output


def assert_CONFIG_ERROR(result: Result) -> None:
    """Assert that the command exited with CONFIG_ERROR (code 78)."""
    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output
