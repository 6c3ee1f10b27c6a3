# topmark:header:start
#
#   project      : rpf
#   file         : __init__.py
#   file_relpath : src/rpf/rendering/__init__.py
#   license      : BSD-3-Clause
#   copyright    : (c) 2015 Alberto Corona
#
# topmark:header:end

"""Terminal text styling for rpf programs."""

from __future__ import annotations

from rpf.rendering.styled import (
    Color,
    Style,
    StyledText,
    bold,
    paint,
    strip_styles,
    underline,
)

__all__ = [
    "Color",
    "Style",
    "StyledText",
    "bold",
    "paint",
    "strip_styles",
    "underline",
]
