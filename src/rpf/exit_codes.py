# topmark:header:start
#
#   project      : rpf
#   file         : exit_codes.py
#   file_relpath : src/rpf/exit_codes.py
#   license      : BSD-3-Clause
#   copyright    : (c) 2015 Alberto Corona
#
# topmark:header:end

"""Exit statuses shared by programs built on rpf.

The numeric values are part of the public contract: scripts driving an rpf-based
program rely on them, so they must never change.
"""

from enum import IntEnum


class ExitStatus(IntEnum):
    """Process exit statuses with program-wide meaning.

    Attributes:
        OK: The program completed without error.
        ERROR: Generic runtime failure (including path errors).
        OPT_ERROR: An invalid or unusable command-line option was given.
        ARG_ERROR: Required arguments were missing or malformed.

    Usage:
        ```python
        import subprocess
        from rpf.exit_codes import ExitStatus

        result = subprocess.run(["util"])
        if result.returncode == ExitStatus.ARG_ERROR:
            print("util was called without arguments.")
        ```
    """

    OK = 0
    ERROR = 1
    OPT_ERROR = 2
    ARG_ERROR = 3
