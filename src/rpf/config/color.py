# topmark:header:start
#
#   project      : rpf
#   file         : color.py
#   file_relpath : src/rpf/config/color.py
#   license      : BSD-3-Clause
#   copyright    : (c) 2015 Alberto Corona
#
# topmark:header:end

"""Color-mode resolution for rpf program output.

rpf reads no configuration files; whether ANSI styles are emitted is decided
from an explicit caller override, the environment, and TTY detection:

- `ColorMode` enum.
- `resolve_color_mode()` applying the decision precedence.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import TYPE_CHECKING

from rpf.config.logging import get_logger

if TYPE_CHECKING:
    from typing import TextIO

    from rpf.config.logging import RpfLogger


logger: RpfLogger = get_logger(__name__)


class ColorMode(str, Enum):
    """User intent for colorized terminal output.

    Attributes:
        AUTO: Enable color only when appropriate (typically when stdout is a TTY).
        ALWAYS: Force-enable color regardless of TTY status.
        NEVER: Disable color entirely.

    Example:
        >>> resolve_color_mode(color_mode_override=ColorMode.NEVER)
        False
    """

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    color_mode_override: ColorMode | None = None,
    stream: TextIO | None = None,
    stream_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Decision precedence:
        1. **Caller override**: `ALWAYS` → True; `NEVER` → False.
        2. **Environment**:
            - `FORCE_COLOR` (set and not equal to `"0"`) → True
            - `NO_COLOR` (set to any value) → False
        3. **Auto**: `stream.isatty()` (stdout when no stream is given).

    Args:
        color_mode_override: Explicit `ColorMode`; `None` or `AUTO` defers to the
            environment and the terminal.
        stream: Stream whose TTY status decides the auto case.
        stream_isatty: Optional override for TTY detection.

    Returns:
        True if ANSI color should be enabled; False otherwise.
    """
    if color_mode_override == ColorMode.ALWAYS:
        return True
    if color_mode_override == ColorMode.NEVER:
        return False

    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False

    if stream_isatty is None:
        target = stream or sys.stdout
        try:
            stream_isatty = target.isatty()
        except (AttributeError, OSError, ValueError):
            logger.debug("Cannot query TTY status of %r; disabling color", target)
            stream_isatty = False
    return bool(stream_isatty)
