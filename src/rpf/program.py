# topmark:header:start
#
#   project      : rpf
#   file         : program.py
#   file_relpath : src/rpf/program.py
#   license      : BSD-3-Clause
#   copyright    : (c) 2015 Alberto Corona
#
# topmark:header:end

"""Program identity and the exit protocol.

A [`Program`][rpf.program.Program] is built once at startup, usually as a module
constant, and passed to whatever needs to report errors:

```python
UTIL = Program(name="util", version="0.1.0", year="2015")

if not args:
    UTIL.require_arguments_or_exit()
```

Every reporting method except `print_copyright` ends the process. They are typed
`NoReturn` and terminate through `os._exit`: no `atexit` handlers, `finally`
blocks or context managers run after them. The standard streams are flushed
first so the message is never lost.

Output:
    Error and usage lines go to stderr; copyright output goes to stdout. Each
    method accepts an optional console, defaulting to one on the process's
    standard streams with color resolved from the environment.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from typing import TYPE_CHECKING, NoReturn

from rpf.config.logging import get_logger
from rpf.console import default_console
from rpf.exit_codes import ExitStatus
from rpf.licenses import License, license_notice
from rpf.paths import as_text
from rpf.rendering import Color, paint

if TYPE_CHECKING:
    from collections.abc import Iterable

    from rpf.config.logging import RpfLogger
    from rpf.console_api import ConsoleLike
    from rpf.errors import RpfError
    from rpf.paths import PathInput

logger: RpfLogger = get_logger(__name__)


def terminate(status: ExitStatus | int, *, console: ConsoleLike | None = None) -> NoReturn:
    """End the process immediately with the code mapped from *status*.

    Only the standard streams (and *console*, if given) are flushed; no other
    cleanup runs.

    Args:
        status (ExitStatus | int): Exit status; plain ints are mapped through
            `ExitStatus` and must be one of its values.
        console (ConsoleLike | None): Console whose streams are flushed as well.
    """
    code = ExitStatus(status)
    logger.debug("Terminating with %s (%d)", code.name, int(code))
    if console is not None:
        console.flush()
    for stream in (sys.stdout, sys.stderr):
        if stream is not None and not stream.closed:
            stream.flush()
    os._exit(int(code))


@dataclass(frozen=True)
class Program:
    """Immutable identity of a command-line program.

    Attributes:
        name (str): Name of the program, used as the prefix of error messages.
        version (str): Version string printed by `print_copyright`.
        year (str): Copyright year.

    Example:
        >>> UTIL = Program(name="util", version="0.1.0", year="2015")
        >>> UTIL.name
        'util'
    """

    name: str
    version: str
    year: str

    def report_error(
        self,
        message: object,
        status: ExitStatus = ExitStatus.ERROR,
        *,
        console: ConsoleLike | None = None,
    ) -> NoReturn:
        """Print ``"{name}: {message}"`` in red to stderr and terminate with *status*."""
        console = console or default_console()
        console.error(
            f"{paint(self.name, Color.RED)}{paint(':', Color.RED)} {paint(message, Color.RED)}"
        )
        terminate(status, console=console)

    def report_path_error(
        self,
        message: object,
        path: PathInput,
        *,
        console: ConsoleLike | None = None,
    ) -> NoReturn:
        """Print ``"{path}: {message}"`` in red to stderr and terminate with `ERROR`."""
        console = console or default_console()
        console.error(
            f"{paint(as_text(path), Color.RED)}{paint(':', Color.RED)} {paint(message, Color.RED)}"
        )
        terminate(ExitStatus.ERROR, console=console)

    def require_arguments_or_exit(self, *, console: ConsoleLike | None = None) -> NoReturn:
        """Print the missing-arguments hint and terminate with `ARG_ERROR`.

        Output:
            ```
            util: Missing arguments
            Try 'util --help' for more information
            ```
        """
        console = console or default_console()
        console.error(f"{self.name}: Missing arguments")
        console.error(f"Try '{self.name} --help' for more information")
        terminate(ExitStatus.ARG_ERROR, console=console)

    def fail(self, error: RpfError, *, console: ConsoleLike | None = None) -> NoReturn:
        """Report *error* and terminate with the exit status it carries."""
        self.report_error(error.format_message(), ExitStatus(error.exit_code), console=console)

    def terminate(
        self, status: ExitStatus = ExitStatus.OK, *, console: ConsoleLike | None = None
    ) -> NoReturn:
        """End the process with *status*; see [`terminate`][rpf.program.terminate]."""
        terminate(status, console=console)

    def print_copyright(
        self,
        license_text: str,
        authors: Iterable[str],
        *,
        console: ConsoleLike | None = None,
    ) -> None:
        """Print version, license and author information to stdout.

        The output is ``"{name} {version}\\n{license_text}Written by {authors}\\n"``,
        with the authors joined by single spaces. *license_text* is printed as
        given, so it should end with its own newline.
        """
        console = console or default_console()
        console.print(f"{self.name} {self.version}\n{license_text}", nl=False)
        console.print(f"Written by {' '.join(authors)}")

    def print_license(
        self,
        license_id: License | str,
        authors: Iterable[str],
        *,
        console: ConsoleLike | None = None,
    ) -> None:
        """Print copyright output using the built-in notice for *license_id*.

        Raises:
            UnknownLicenseError: If *license_id* has no built-in notice.
        """
        self.print_copyright(license_notice(license_id, self), authors, console=console)
