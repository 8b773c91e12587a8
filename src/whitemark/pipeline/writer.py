# topmark:header:start
#
#   project      : WhiteMark
#   file         : writer.py
#   file_relpath : src/whitemark/pipeline/writer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Sinks for the rewrite pass.

Sinks
-----
- `AtomicFileSink`: writes to a uniquely named temporary file next to the
  target (suffix ``.tmp``), copies the target's permission bits onto it and
  atomically renames it over the target on `AtomicFileSink.commit`.
- `NullSink`: discards everything (reporting only).

Leaving the ``with`` block without committing removes the temporary file and
leaves the target untouched.
"""

from __future__ import annotations

import os
import shutil
import tempfile
from pathlib import Path
from typing import IO, TYPE_CHECKING

from whitemark.config.logging import get_logger
from whitemark.constants import TEMP_FILE_SUFFIX
from whitemark.pipeline.errors import FileProcessingError, describe, stage

if TYPE_CHECKING:
    from types import TracebackType

    from whitemark.config.logging import WhitemarkLogger

logger: WhitemarkLogger = get_logger(__name__)


class NullSink:
    """Discard sink: accepts and drops all text."""

    def write(self, text: str, /) -> int:
        """Drop ``text`` and report it as written."""
        return len(text)


class AtomicFileSink:
    """Replace ``target`` atomically with the text written to this sink.

    Example:
        ```python
        with AtomicFileSink(path) as sink:
            sink.write("fixed\\n")
            sink.commit()
        ```
    """

    def __init__(self, target: Path) -> None:
        self.target = target
        self.temp_path: Path | None = None
        self._handle: IO[str] | None = None
        self._committed = False

    def __enter__(self) -> AtomicFileSink:
        """Create the temporary file in the target's directory.

        Raises:
            FileProcessingError: If the temporary file cannot be created.
        """
        directory: Path = self.target.parent
        try:
            # Unique name: repeated or parallel runs never collide on the same temp file.
            handle = tempfile.NamedTemporaryFile(
                mode="w",
                encoding="utf-8",
                newline="",
                dir=directory,
                prefix=f".{self.target.name}.",
                suffix=TEMP_FILE_SUFFIX,
                delete=False,
            )
        except OSError as exc:
            raise FileProcessingError(
                "creating", f"{directory / self.target.name}{TEMP_FILE_SUFFIX}", describe(exc)
            ) from exc
        self._handle = handle
        self.temp_path = Path(handle.name)
        logger.debug("Created temporary file %s for %s", self.temp_path, self.target)
        return self

    def write(self, text: str, /) -> int:
        """Write ``text`` to the temporary file."""
        assert self._handle is not None, "AtomicFileSink used outside its with-block"
        return self._handle.write(text)

    def commit(self) -> None:
        """Copy permission bits onto the temporary file and rename it over the target.

        Raises:
            FileProcessingError: If closing, setting permissions or renaming fails.
        """
        assert self._handle is not None and self.temp_path is not None
        with stage("fixing", self.target):
            self._handle.close()
        with stage("setting permissions for", self.temp_path):
            shutil.copymode(self.target, self.temp_path)
        with stage("renaming", f"{self.temp_path} to {self.target}"):
            os.replace(self.temp_path, self.target)
        self._committed = True
        logger.debug("Replaced %s", self.target)

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._committed or self._handle is None or self.temp_path is None:
            return
        try:
            self._handle.close()
        except OSError as close_exc:
            logger.debug("Closing %s failed: %s", self.temp_path, close_exc)
        try:
            self.temp_path.unlink()
        except FileNotFoundError:
            pass
        except OSError as unlink_exc:
            logger.error("Failed to delete %s: %s", self.temp_path, unlink_exc)
