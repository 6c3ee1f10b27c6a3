# topmark:header:start
#
#   project      : rpf
#   file         : colored_enum.py
#   file_relpath : src/rpf/rendering/colored_enum.py
#   license      : BSD-3-Clause
#   copyright    : (c) 2015 Alberto Corona
#
# topmark:header:end

"""Color-aware enum primitives for human-facing rendering.

This module provides a small base enum that stores a textual value while
attaching a colorizer (callable that decorates strings), plus the
`ClickColorizer` used by rpf's palette.

Key types:
    - `Colorizer`: Protocol describing any callable that decorates text.
    - `ClickColorizer`: Colorizer backed by `click.style` for a single
      foreground color (or none), optionally adding bold/underline.
    - `ColoredStrEnum`: `str, Enum` that stores the enum's text value and a
      colorizer. The enum `.value` remains a plain string, while the colorizer
      is exposed via `.color`.

Example:
    ```python
    class Level(ColoredStrEnum):
        OK    = ("ok", ClickColorizer("green"))
        ERROR = ("error", ClickColorizer("red"))

    print(Level.OK.value)            # 'ok'
    print(Level.OK.color("hello"))   # green "hello"
    ```
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol

import click


class Colorizer(Protocol):
    """Callable that decorates a string for display."""

    def __call__(self, *args: object, sep: str = " ") -> str:
        """Colorize and concatenate provided arguments into a display string.

        Args:
            *args (object): One or more objects to render, typically strings.
            sep (str): Separator between arguments when multiple values
                are provided. Defaults to a single space.

        Returns:
            str: The colorized and concatenated output string.
        """
        ...


@dataclass(frozen=True)
class ClickColorizer:
    """Colorizer applying one foreground color through `click.style`.

    Attributes:
        fg (str | None): Click color name, or None to leave the color untouched.
    """

    fg: str | None = None

    def __call__(
        self,
        *args: object,
        sep: str = " ",
        bold: bool = False,
        underline: bool = False,
    ) -> str:
        """Join *args* and wrap them in the ANSI codes for this color.

        Args:
            *args (object): Objects to render; converted with ``str``.
            sep (str): Separator placed between the rendered arguments.
            bold (bool): Also render the text bold.
            underline (bool): Also render the text underlined.

        Returns:
            str: The decorated text, or the plain text when no style applies.
        """
        text: str = sep.join(str(arg) for arg in args)
        if self.fg is None and not bold and not underline:
            return text
        # click emits explicit "off" codes for False, so unset flags are passed as None
        return click.style(
            text,
            fg=self.fg,
            bold=True if bold else None,
            underline=True if underline else None,
        )


class ColoredStrEnum(str, Enum):
    """Enum whose *value* is a string and that carries an associated colorizer.

    The enum member remains a `str` (so Enum internals, hashing, repr, etc.
    behave normally), and the colorizer is stored separately on the instance.
    """

    _value_: str
    _color: Colorizer

    def __new__(cls, text: str, color: Colorizer) -> ColoredStrEnum:
        """Construct a colored enum member.

        Args:
            text (str): The textual value for the enum member (stored in `_value_`).
            color (Colorizer): A callable used to colorize text for display.

        Returns:
            ColoredStrEnum: The newly constructed enum member.
        """
        obj: ColoredStrEnum = str.__new__(cls, text)
        obj._value_ = text
        obj._color = color
        return obj

    @property
    def value(self) -> str:
        """Return the textual value of the enum member."""
        return self._value_

    @property
    def color(self) -> Colorizer:
        """Return the colorizer associated with this member."""
        return self._color
