# topmark:header:start
#
#   project      : rpf
#   file         : console.py
#   file_relpath : src/rpf/console.py
#   license      : BSD-3-Clause
#   copyright    : (c) 2015 Alberto Corona
#
# topmark:header:end

"""Console abstraction for user-facing program output.

This module provides a `Console` class that separates program output from
internal logging. Use this for messages intended for end users, while
reserving `logging` for diagnostics.
"""

from __future__ import annotations

import sys
from typing import TextIO

import click

from rpf.config.color import ColorMode, resolve_color_mode


class Console:
    """Program-output console, independent from the logger.

    Text handed to a console may already contain ANSI escape sequences; when
    color is disabled `click.echo` strips them so the output degrades to plain text.

    Attributes:
        enable_color (bool): Whether to emit ANSI color codes on `out`.
        enable_err_color (bool): Whether to emit ANSI color codes on `err`.
        out (TextIO): Stream for standard output (defaults to sys.stdout).
        err (TextIO): Stream for error output (defaults to sys.stderr).
    """

    def __init__(
        self,
        *,
        enable_color: bool = True,
        enable_err_color: bool | None = None,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        """Initializes the Console.

        Args:
            enable_color: If True, keeps ANSI color codes in standard output.
                Otherwise, that output is plain text.
            enable_err_color: Same for error output; defaults to `enable_color`.
            out: The text stream to use for standard output.
                Defaults to `sys.stdout`.
            err: The text stream to use for error output.
                Defaults to `sys.stderr`.
        """
        self.enable_color = enable_color
        self.enable_err_color = enable_color if enable_err_color is None else enable_err_color
        self.out = out or sys.stdout
        self.err = err or sys.stderr

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout.

        Args:
            text: Message text.
            nl: If True, append a newline.
        """
        click.echo(text, nl=nl, file=self.out, color=self.enable_color)

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a warning message to stderr.

        Args:
            text: Warning text.
            nl: If True, append a newline.
        """
        click.echo(text, nl=nl, file=self.err, color=self.enable_err_color)

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr.

        Args:
            text: Error text.
            nl: If True, append a newline.
        """
        click.echo(text, nl=nl, file=self.err, color=self.enable_err_color)

    def flush(self) -> None:
        """Flush both output streams."""
        for stream in (self.out, self.err):
            stream.flush()


def default_console(
    color_mode: ColorMode | None = None,
    *,
    stdout_isatty: bool | None = None,
    stderr_isatty: bool | None = None,
) -> Console:
    """Return a console on the process's standard streams.

    Color is resolved separately for stdout and stderr per
    [`resolve_color_mode`][rpf.config.color.resolve_color_mode], so redirecting
    one stream to a file leaves it free of escape codes while the other keeps
    its color.

    Args:
        color_mode: Explicit `ColorMode` applied to both streams.
        stdout_isatty: Optional override for the TTY detection of stdout.
        stderr_isatty: Optional override for the TTY detection of stderr.
    """
    return Console(
        enable_color=resolve_color_mode(
            color_mode_override=color_mode, stream=sys.stdout, stream_isatty=stdout_isatty
        ),
        enable_err_color=resolve_color_mode(
            color_mode_override=color_mode, stream=sys.stderr, stream_isatty=stderr_isatty
        ),
    )
