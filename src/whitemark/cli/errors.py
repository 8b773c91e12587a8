# topmark:header:start
#
#   project      : WhiteMark
#   file         : errors.py
#   file_relpath : src/whitemark/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the WhiteMark CLI.

Raise these from commands to stop with a standardized message and exit code.
They prefer the project console stored on the Click context; without one they
fall back to Click's default error display.
"""

from __future__ import annotations

from typing import IO, Any

import click

from whitemark.cli.exit_codes import ExitCode


class WhitemarkError(click.ClickException):
    """Base class for all WhiteMark CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colors are applied in `show`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(self.format_message(), fg="bright_red"))
                return
        super().show(file)


class WhitemarkUsageError(WhitemarkError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class WhitemarkConfigError(WhitemarkError):
    """Error for configuration errors (missing/invalid config files)."""

    exit_code = ExitCode.CONFIG_ERROR


class WhitemarkIOError(WhitemarkError):
    """Error for I/O errors outside the per-file pipeline."""

    exit_code = ExitCode.IO_ERROR
