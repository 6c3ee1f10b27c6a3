# topmark:header:start
#
#   project      : rpf
#   file         : styled.py
#   file_relpath : src/rpf/rendering/styled.py
#   license      : BSD-3-Clause
#   copyright    : (c) 2015 Alberto Corona
#
# topmark:header:end

"""Styled terminal text: bold, underline and a fixed color palette.

A [`StyledText`][rpf.rendering.styled.StyledText] pairs raw text with a
[`Style`][rpf.rendering.styled.Style]. The raw text is never modified; styling is
only applied when the value is rendered. Applying another style to an already
styled value composes the two (``bold(paint("x", Color.RED))`` is bold *and* red).

Nothing in this module raises for display reasons: an unknown color name falls
back to `Color.NONE`, and rendering with color disabled yields the plain text.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import cast

import click

from rpf.config.logging import get_logger
from rpf.rendering.colored_enum import ClickColorizer, ColoredStrEnum

logger = get_logger(__name__)


class Color(ColoredStrEnum):
    """Foreground colors available to rpf programs.

    `PURPLE` renders as the terminal's magenta; `NONE` leaves the color as is.
    """

    BLACK = ("black", ClickColorizer("black"))
    RED = ("red", ClickColorizer("red"))
    GREEN = ("green", ClickColorizer("green"))
    YELLOW = ("yellow", ClickColorizer("yellow"))
    BLUE = ("blue", ClickColorizer("blue"))
    PURPLE = ("purple", ClickColorizer("magenta"))
    CYAN = ("cyan", ClickColorizer("cyan"))
    WHITE = ("white", ClickColorizer("white"))
    NONE = ("none", ClickColorizer(None))

    @classmethod
    def coerce(cls, color: Color | str | None) -> Color:
        """Return the palette entry for *color*, falling back to `NONE`."""
        if color is None:
            return cls.NONE
        if isinstance(color, cls):
            return color
        try:
            return cls(str(color).strip().lower())
        except ValueError:
            logger.warning("Unknown color %r; rendering without color", color)
            return cls.NONE


@dataclass(frozen=True)
class Style:
    """Rendering attributes for a piece of text.

    Attributes:
        bold (bool): Render with increased weight.
        underline (bool): Render underlined.
        color (Color): Foreground color.
    """

    bold: bool = False
    underline: bool = False
    color: Color = Color.NONE

    def merge(self, other: Style) -> Style:
        """Return a style combining this one with *other*.

        Flags accumulate; *other*'s color wins unless it is `Color.NONE`.
        """
        return Style(
            bold=self.bold or other.bold,
            underline=self.underline or other.underline,
            color=self.color if other.color is Color.NONE else other.color,
        )

    @property
    def is_plain(self) -> bool:
        """True when rendering with this style adds no escape codes."""
        return not self.bold and not self.underline and self.color is Color.NONE


@dataclass(frozen=True)
class StyledText:
    """Raw text paired with the style used to render it.

    ``str(styled)`` renders with ANSI codes; use `plain()` for the raw text.
    """

    text: str
    style: Style = field(default_factory=Style)

    def render(self, enable_color: bool = True) -> str:
        """Return the escape-coded text, or the raw text when color is disabled."""
        if not enable_color or self.style.is_plain:
            return self.text
        colorizer = cast("ClickColorizer", self.style.color.color)
        return colorizer(self.text, bold=self.style.bold, underline=self.style.underline)

    def plain(self) -> str:
        """Return the unstyled text."""
        return self.text

    def with_style(self, style: Style) -> StyledText:
        """Return a copy whose style is merged with *style*."""
        return replace(self, style=self.style.merge(style))

    def bold(self) -> StyledText:
        """Return a bold copy of this value."""
        return self.with_style(Style(bold=True))

    def underline(self) -> StyledText:
        """Return an underlined copy of this value."""
        return self.with_style(Style(underline=True))

    def paint(self, color: Color | str) -> StyledText:
        """Return a copy painted with *color*."""
        return self.with_style(Style(color=Color.coerce(color)))

    def __str__(self) -> str:
        return self.render()

    def __len__(self) -> int:
        return len(self.text)


def _as_styled(text: object) -> StyledText:
    if isinstance(text, StyledText):
        return text
    return StyledText(str(text))


def bold(text: object) -> StyledText:
    """Wrap *text* (any printable value) in bold."""
    return _as_styled(text).bold()


def underline(text: object) -> StyledText:
    """Wrap *text* (any printable value) in an underline."""
    return _as_styled(text).underline()


def paint(text: object, color: Color | str) -> StyledText:
    """Wrap *text* (any printable value) in the foreground *color*.

    Example:
        >>> paint("done", Color.GREEN).plain()
        'done'
    """
    return _as_styled(text).paint(color)


def strip_styles(text: str) -> str:
    """Remove ANSI escape sequences from already rendered *text*."""
    return click.unstyle(text)
