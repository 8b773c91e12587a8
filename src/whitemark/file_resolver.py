# topmark:header:start
#
#   project      : WhiteMark
#   file         : file_resolver.py
#   file_relpath : src/whitemark/file_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve input files from positional paths and include/exclude filters.

Semantics:
  1. **Candidate set**: existing files are kept as given, directories are
     walked recursively (VCS directories such as ``.git`` are skipped) and
     non-existing arguments containing glob characters are expanded relative
     to the current directory. Other missing paths are kept, so processing
     reports them as open errors.
  2. **Include intersection**: with include patterns, keep only files matching
     any of them.
  3. **Exclude subtraction**: drop files matching any exclude pattern.
  4. The result is de-duplicated and sorted for deterministic output.

Patterns use ``.gitignore`` semantics (`pathspec`) and are matched against
paths relative to ``root`` (the current directory by default).
"""

from __future__ import annotations

import glob
import os
from pathlib import Path
from typing import TYPE_CHECKING

from pathspec import PathSpec
from pathspec.patterns.gitwildmatch import GitWildMatchPattern

from whitemark.config.logging import WhitemarkLogger, get_logger
from whitemark.constants import VCS_DIRECTORIES

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

logger: WhitemarkLogger = get_logger(__name__)

_GLOB_CHARS: frozenset[str] = frozenset("*?[")


def _has_glob_chars(arg: str) -> bool:
    return any(c in _GLOB_CHARS for c in arg)


def _walk_files(directory: Path) -> Iterator[Path]:
    """Yield files below ``directory``, skipping VCS directories."""
    for dirpath, dirnames, filenames in os.walk(directory):
        dirnames[:] = sorted(d for d in dirnames if d not in VCS_DIRECTORIES)
        for name in filenames:
            yield Path(dirpath) / name


def _rel_for_match(path: Path, base: Path) -> str:
    """Return a POSIX-style relative path (or the path itself as fallback) for matching."""
    try:
        return path.resolve().relative_to(base.resolve()).as_posix()
    except ValueError:
        return path.as_posix()


def expand_path(arg: str) -> list[Path]:
    """Expand one positional argument into the paths it denotes.

    An existing file or directory is always taken literally, even when its
    name contains glob characters (``a[1].txt``). Only arguments that do not
    exist are expanded as globs.

    Args:
        arg (str): A file, a directory or a glob pattern.

    Returns:
        list[Path]: Files to process. A missing literal path is returned as is so
        that processing it reports an open error; a glob without matches yields
        an empty list.
    """
    p = Path(arg)
    if p.is_dir():
        return list(_walk_files(p))
    if p.exists():
        return [p]
    if _has_glob_chars(arg):
        matches: list[Path] = []
        for hit in sorted(glob.glob(arg, recursive=True)):
            matches.extend(expand_path(hit))
        if not matches:
            logger.warning("No matches for glob pattern: %s", arg)
        return matches
    logger.warning("No such file or directory: %s", p)
    return [p]


def resolve_file_list(
    paths: Iterable[str],
    *,
    include_patterns: Iterable[str] = (),
    exclude_patterns: Iterable[str] = (),
    root: Path | None = None,
) -> list[Path]:
    """Return the sorted list of files to process.

    Args:
        paths (Iterable[str]): Positional arguments (files, directories, globs).
        include_patterns (Iterable[str]): Keep only files matching any of these.
        exclude_patterns (Iterable[str]): Drop files matching any of these.
        root (Path | None): Base for pattern matching (CWD if ``None``).

    Returns:
        list[Path]: De-duplicated, sorted files.
    """
    base: Path = root or Path.cwd()
    candidates: set[Path] = set()
    for arg in paths:
        candidates.update(p for p in expand_path(arg) if not p.is_dir())

    includes: list[str] = list(include_patterns)
    if includes:
        spec: PathSpec = PathSpec.from_lines(GitWildMatchPattern, includes)
        candidates = {p for p in candidates if spec.match_file(_rel_for_match(p, base))}

    excludes: list[str] = list(exclude_patterns)
    if excludes:
        spec = PathSpec.from_lines(GitWildMatchPattern, excludes)
        candidates = {p for p in candidates if not spec.match_file(_rel_for_match(p, base))}

    files: list[Path] = sorted(candidates)
    logger.trace("Files to process: %d -- %s", len(files), files)
    return files
