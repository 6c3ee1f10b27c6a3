# topmark:header:start
#
#   project      : rpf
#   file         : licenses.py
#   file_relpath : src/rpf/licenses.py
#   license      : BSD-3-Clause
#   copyright    : (c) 2015 Alberto Corona
#
# topmark:header:end

"""License notices for `--version` style copyright output."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from rpf.errors import UnknownLicenseError

if TYPE_CHECKING:
    from rpf.program import Program

_FREE_SOFTWARE = (
    "This is free software: you are free to change and redistribute it.\n"
    "There is NO WARRANTY, to the extent permitted by law.\n"
)


class License(str, Enum):
    """Licenses with a built-in notice, keyed by SPDX identifier."""

    APACHE_2_0 = "Apache-2.0"
    BSD_3_CLAUSE = "BSD-3-Clause"
    GPL_2_0 = "GPL-2.0"
    GPL_3_0 = "GPL-3.0"
    MIT = "MIT"


_SUMMARIES: dict[License, str] = {
    License.APACHE_2_0: (
        "License Apache-2.0: Apache License, Version 2.0 "
        "<https://www.apache.org/licenses/LICENSE-2.0>.\n"
    ),
    License.BSD_3_CLAUSE: (
        "License BSD-3-Clause: BSD 3-Clause License "
        "<https://opensource.org/licenses/BSD-3-Clause>.\n"
    ),
    License.GPL_2_0: (
        "License GPLv2: GNU GPL version 2 <https://gnu.org/licenses/old-licenses/gpl-2.0.html>.\n"
    ),
    License.GPL_3_0: (
        "License GPLv3+: GNU GPL version 3 or later <https://gnu.org/licenses/gpl.html>.\n"
    ),
    License.MIT: "License MIT: MIT License <https://opensource.org/licenses/MIT>.\n",
}


def license_notice(license_id: License | str, program: Program) -> str:
    """Return the copyright and license blurb for *program*.

    The text ends with a blank line so it can be passed straight to
    [`Program.print_copyright`][rpf.program.Program.print_copyright].

    Args:
        license_id (License | str): SPDX identifier such as ``"GPL-3.0"``.
        program (Program): Program whose year and name fill the notice.

    Returns:
        str: The multi-line notice.

    Raises:
        UnknownLicenseError: If *license_id* has no built-in notice.
    """
    try:
        lic = License(license_id)
    except ValueError:
        raise UnknownLicenseError(f"License not specified: {license_id!r}") from None
    return (
        f"Copyright (C) {program.year} {program.name} developers\n"
        f"{_SUMMARIES[lic]}"
        f"{_FREE_SOFTWARE}\n"
    )
