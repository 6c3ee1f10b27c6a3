# topmark:header:start
#
#   project      : rpf
#   file         : errors.py
#   file_relpath : src/rpf/errors.py
#   license      : BSD-3-Clause
#   copyright    : (c) 2015 Alberto Corona
#
# topmark:header:end

"""Exceptions for rpf and programs built on it.

Usage:
    Raise these exceptions where a program wants recoverable, result-style error
    handling. At the program's outer boundary hand them to
    [`Program.fail`][rpf.program.Program.fail], which prints the message and
    terminates with the exception's exit status. Because they derive from
    `click.ClickException`, a Click command that raises one also exits with the
    right status.
"""

from __future__ import annotations

from typing import IO, Any

import click

from rpf.exit_codes import ExitStatus


class RpfError(click.ClickException):
    """Base class for all rpf errors."""

    exit_code = ExitStatus.ERROR

    def format_message(self) -> str:
        """Return the plain error message text.

        Notes:
            - Unlike Click's default, this method does not add color.
            - Colorization is applied by the program's error reporting.
        """
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error in red on stderr."""
        click.echo(click.style(self.format_message(), fg="red"), file=file, err=True)


class RpfOptionError(RpfError):
    """Error for an invalid or unusable command-line option."""

    exit_code = ExitStatus.OPT_ERROR


class RpfArgumentError(RpfError):
    """Error for missing or malformed command-line arguments."""

    exit_code = ExitStatus.ARG_ERROR


class HarnessError(RpfError):
    """Raised when the filesystem test harness cannot establish a test's premise."""


class UnknownLicenseError(RpfError, ValueError):
    """Raised when a copyright notice is requested for an unsupported license id."""
