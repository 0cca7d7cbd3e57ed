# topmark:header:start
#
#   project      : IniMark
#   file         : colored_enum.py
#   file_relpath : src/inimark/rendering/colored_enum.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Color-aware string enum for human-facing status labels.

`ColoredStrEnum` members are plain strings (``.value``) that also carry a
colorizer (``.color``), typically a ``yachalk`` style. The CLI uses the
colorizer; library code only compares members.

Example:
    ```python
    from yachalk import chalk

    class Outcome(ColoredStrEnum):
        OK = ("ok", chalk.green)
        ERROR = ("error", chalk.red_bright)

    print(Outcome.OK.color("hello"))  # green "hello"
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol


class Colorizer(Protocol):
    """Callable that decorates a string for display (compatible with ``yachalk`` styles)."""

    def __call__(self, *args: object, sep: str = " ") -> str: ...


class ColoredStrEnum(str, Enum):
    """Enum whose value is a string and that carries an associated colorizer."""

    _value_: str
    _color: Colorizer

    def __new__(cls, text: str, color: Colorizer) -> ColoredStrEnum:
        obj: ColoredStrEnum = str.__new__(cls, text)
        obj._value_ = text
        obj._color = color
        return obj

    @property
    def value(self) -> str:
        """The textual value of the member."""
        return self._value_

    @property
    def color(self) -> Colorizer:
        """The colorizer associated with the member."""
        return self._color

    def colored(self) -> str:
        """Return the value decorated with the member's colorizer."""
        return self._color(self._value_)
