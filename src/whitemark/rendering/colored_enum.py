# topmark:header:start
#
#   project      : WhiteMark
#   file         : colored_enum.py
#   file_relpath : src/whitemark/rendering/colored_enum.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""String enums that carry a colorizer for human-facing output.

`ColoredStrEnum` members are plain ``str`` values (so equality, hashing and
JSON rendering behave as usual) with an extra `ColoredStrEnum.color` callable,
typically a ``yachalk`` style, used by the CLI summary.

Example:
    ```python
    from yachalk import chalk

    class Outcome(ColoredStrEnum):
        OK = ("ok", chalk.green)
        BROKEN = ("broken", chalk.red_bright)

    Outcome.OK.value          # 'ok'
    Outcome.OK.color("fine")  # green "fine"
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol


class Colorizer(Protocol):
    """Callable that decorates a string for display (compatible with ``yachalk``)."""

    def __call__(self, *args: object, sep: str = " ") -> str:
        """Colorize and join ``args`` into a display string."""
        ...


class ColoredStrEnum(str, Enum):
    """Enum whose value is a string and that carries an associated colorizer."""

    _value_: str
    _color: Colorizer

    def __new__(cls, text: str, color: Colorizer) -> ColoredStrEnum:
        """Construct a member from its text and colorizer.

        Args:
            text (str): The textual value of the member.
            color (Colorizer): Callable used to colorize text for display.

        Returns:
            ColoredStrEnum: The new enum member.
        """
        obj: ColoredStrEnum = str.__new__(cls, text)
        obj._value_ = text
        obj._color = color
        return obj

    @property
    def value(self) -> str:
        """Return the textual value of the member."""
        return self._value_

    @property
    def color(self) -> Colorizer:
        """Return the colorizer associated with the member."""
        return self._color
