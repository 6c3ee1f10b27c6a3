# topmark:header:start
#
#   project      : rpf
#   file         : console_api.py
#   file_relpath : src/rpf/console_api.py
#   license      : BSD-3-Clause
#   copyright    : (c) 2015 Alberto Corona
#
# topmark:header:end

"""Framework-agnostic console interface for program output.

This protocol defines the small surface used by the exit protocol and the test
harness to emit user-facing output, separate from internal logging.
"""

from __future__ import annotations

from typing import Protocol


class ConsoleLike(Protocol):
    """Minimal interface for a console.

    Implementations may use Click or plain stdlib streams. The purpose is to
    decouple program output from the logging subsystem.
    """

    enable_color: bool
    enable_err_color: bool

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout."""
        ...

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a warning message to stderr."""
        ...

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr."""
        ...

    def flush(self) -> None:
        """Flush both output streams."""
        ...
