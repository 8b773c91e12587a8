# topmark:header:start
#
#   project      : WhiteMark
#   file         : model.py
#   file_relpath : src/whitemark/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: the immutable formatting configuration consulted by the
      per-line classifier and fixer.
    - `MutableConfig`: a mutable builder used while layering defaults,
      project config files and CLI options; `MutableConfig.freeze` returns a
      sanitized `Config`.

Immutability:
    A `Config` is never mutated. Per-file modeline overrides produce a *new*
    value (see `whitemark.config.modeline.config_from_modeline`), so one base
    configuration can be shared by any number of files and workers.

Merge order (lowest to highest precedence):
    1) Built-in defaults
    2) Project configs discovered upward, root-most first; within a directory
       ``pyproject.toml`` is merged before ``whitemark.toml``
    3) Extra config files passed explicitly (``--config``)
    4) CLI options and environment variables
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

from whitemark.config.io import (
    TomlTable,
    get_bool_value_or_none,
    get_int_value_or_none,
    get_table_value,
    load_toml_dict,
    to_toml,
)
from whitemark.config.logging import WhitemarkLogger, get_logger
from whitemark.constants import (
    DEFAULT_EXPAND_TABS,
    DEFAULT_LINE_LENGTH,
    DEFAULT_TAB_SIZE,
    PYPROJECT_TOML_NAME,
    TOOL_SECTION,
    WHITEMARK_TOML_NAME,
)

logger: WhitemarkLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable formatting configuration for one file.

    Attributes:
        expand_tabs (bool): Whether tabs must be expanded to spaces.
        tab_size (int): Width of a tab in columns (always positive).
        line_length (int): Maximum visible line width (always positive).
    """

    expand_tabs: bool = DEFAULT_EXPAND_TABS
    tab_size: int = DEFAULT_TAB_SIZE
    line_length: int = DEFAULT_LINE_LENGTH

    def with_changes(self, **changes: Any) -> Config:
        """Return a copy of this config with ``changes`` applied."""
        return replace(self, **changes)

    def to_toml_dict(self) -> TomlTable:
        """Return this config as a ``[tool.whitemark]``-shaped table."""
        return {
            "expand_tabs": self.expand_tabs,
            "tab_size": self.tab_size,
            "line_length": self.line_length,
        }

    def to_toml(self) -> str:
        """Render this config as a ``whitemark.toml`` document."""
        return to_toml(self.to_toml_dict())


@dataclass
class MutableConfig:
    """Mutable configuration builder.

    ``None`` means "not set by this layer"; `merge_with` only lets set values
    override, and `freeze` fills the remaining gaps with the built-in defaults.

    Attributes:
        expand_tabs (bool | None): Layer value for ``expand_tabs``.
        tab_size (int | None): Layer value for ``tab_size``.
        line_length (int | None): Layer value for ``line_length``.
        root (bool): Whether this layer stops upward config discovery.
        config_files (list[Path]): Config files that contributed to this draft.
    """

    expand_tabs: bool | None = None
    tab_size: int | None = None
    line_length: int | None = None
    root: bool = False
    config_files: list[Path] = field(default_factory=lambda: [])

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a draft holding the built-in defaults."""
        return cls(
            expand_tabs=DEFAULT_EXPAND_TABS,
            tab_size=DEFAULT_TAB_SIZE,
            line_length=DEFAULT_LINE_LENGTH,
        )

    @classmethod
    def from_toml_dict(cls, data: TomlTable) -> MutableConfig:
        """Build a draft from a ``[tool.whitemark]``-shaped table.

        Unknown keys are logged and ignored; values of the wrong type are ignored.
        """
        known = {"expand_tabs", "tab_size", "line_length", "root"}
        for key in data:
            if key not in known:
                logger.warning("Ignoring unknown configuration key: %s", key)
        return cls(
            expand_tabs=get_bool_value_or_none(data, "expand_tabs"),
            tab_size=get_int_value_or_none(data, "tab_size"),
            line_length=get_int_value_or_none(data, "line_length"),
            root=bool(get_bool_value_or_none(data, "root")),
        )

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load a draft from ``whitemark.toml`` or ``[tool.whitemark]`` in ``pyproject.toml``.

        Args:
            path (Path): Path to the TOML file.

        Returns:
            MutableConfig | None: The draft, or ``None`` if a ``pyproject.toml`` has
            no ``[tool.whitemark]`` table.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        toml_data: TomlTable = load_toml_dict(path)

        if path.name == PYPROJECT_TOML_NAME:
            toml_data = get_table_value(get_table_value(toml_data, "tool"), TOOL_SECTION)
            if not toml_data:
                logger.debug("No [tool.%s] section in %s", TOOL_SECTION, path)
                return None

        draft: MutableConfig = cls.from_toml_dict(toml_data)
        draft.config_files = [path]
        return draft

    @classmethod
    def discover_local_configs(cls, start: Path) -> list[MutableConfig]:
        """Return config drafts found walking upward from ``start``, root-most first.

        Within one directory ``pyproject.toml`` comes before ``whitemark.toml``
        so the latter wins on merge. A directory whose config sets
        ``root = true`` ends the upward walk. Each file is parsed once; its
        path is recorded in the draft's ``config_files``.

        Args:
            start (Path): Directory (or file) anchoring the discovery.

        Returns:
            list[MutableConfig]: Discovered drafts in merge order.
        """
        anchor: Path = start.resolve()
        if anchor.is_file():
            anchor = anchor.parent

        per_dir: list[list[MutableConfig]] = []
        for directory in (anchor, *anchor.parents):
            found: list[MutableConfig] = []
            for name in (PYPROJECT_TOML_NAME, WHITEMARK_TOML_NAME):
                candidate: Path = directory / name
                if not candidate.is_file():
                    continue
                draft: MutableConfig | None = cls.from_toml_file(candidate)
                if draft is not None:
                    found.append(draft)
            if found:
                per_dir.append(found)
            if any(draft.root for draft in found):
                break

        ordered: list[MutableConfig] = [d for found in reversed(per_dir) for d in found]
        logger.debug("Discovered config files: %s", [d.config_files for d in ordered])
        return ordered

    @classmethod
    def load_merged(
        cls,
        *,
        anchor: Path | None = None,
        extra_config_files: Iterable[Path] | None = None,
        no_config: bool = False,
    ) -> MutableConfig:
        """Discover and merge configuration layers into a draft.

        Args:
            anchor (Path | None): Start of upward discovery (CWD if ``None``).
            extra_config_files (Iterable[Path] | None): Files merged after discovery,
                in the given order.
            no_config (bool): If True, skip discovery of project config files.

        Returns:
            MutableConfig: A draft ready for CLI overrides and `freeze`.
        """
        draft: MutableConfig = cls.from_defaults()

        if not no_config:
            for discovered in cls.discover_local_configs(anchor or Path.cwd()):
                draft = draft.merge_with(discovered)

        for extra in extra_config_files or ():
            layer = cls.from_toml_file(Path(extra))
            if layer is not None:
                draft = draft.merge_with(layer)

        return draft

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values set in ``other`` override this draft."""
        return MutableConfig(
            expand_tabs=other.expand_tabs if other.expand_tabs is not None else self.expand_tabs,
            tab_size=other.tab_size if other.tab_size is not None else self.tab_size,
            line_length=other.line_length if other.line_length is not None else self.line_length,
            root=self.root or other.root,
            config_files=[*self.config_files, *other.config_files],
        )

    def apply_cli_args(self, args: Mapping[str, Any]) -> MutableConfig:
        """Apply CLI overrides in place (``None`` values are ignored) and return self."""
        for key in ("expand_tabs", "tab_size", "line_length"):
            value: Any = args.get(key)
            if value is not None:
                setattr(self, key, value)
        return self

    def freeze(self) -> Config:
        """Return an immutable `Config`, replacing invalid values by defaults.

        Non-positive ``tab_size`` or ``line_length`` values are logged and
        replaced by the built-in defaults.
        """
        tab_size: int = DEFAULT_TAB_SIZE if self.tab_size is None else self.tab_size
        if tab_size < 1:
            logger.warning("Invalid tab_size %d, using %d", tab_size, DEFAULT_TAB_SIZE)
            tab_size = DEFAULT_TAB_SIZE
        line_length: int = DEFAULT_LINE_LENGTH if self.line_length is None else self.line_length
        if line_length < 1:
            logger.warning("Invalid line_length %d, using %d", line_length, DEFAULT_LINE_LENGTH)
            line_length = DEFAULT_LINE_LENGTH
        expand_tabs: bool = DEFAULT_EXPAND_TABS if self.expand_tabs is None else self.expand_tabs
        return Config(expand_tabs=expand_tabs, tab_size=tab_size, line_length=line_length)
