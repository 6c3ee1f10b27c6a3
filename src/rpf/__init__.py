# topmark:header:start
#
#   project      : rpf
#   file         : __init__.py
#   file_relpath : src/rpf/__init__.py
#   license      : BSD-3-Clause
#   copyright    : (c) 2015 Alberto Corona
#
# topmark:header:end

"""rpf package.

rpf is a small toolkit for command-line programs: lexical path helpers, styled
terminal text, and a uniform exit protocol (named exit statuses plus red error
reporting). The filesystem test harness lives in `rpf.testing`.
"""

from __future__ import annotations

from rpf.constants import RPF_VERSION
from rpf.errors import HarnessError, RpfArgumentError, RpfError, RpfOptionError
from rpf.exit_codes import ExitStatus
from rpf.licenses import License, license_notice
from rpf.paths import (
    as_path,
    as_text,
    first_component,
    is_hidden,
    is_symlink,
    last_component,
    relative_to_parent,
)
from rpf.program import Program, terminate
from rpf.rendering import Color, Style, StyledText, bold, paint, underline

__version__: str = RPF_VERSION

__all__ = [
    "Color",
    "ExitStatus",
    "HarnessError",
    "License",
    "Program",
    "RpfArgumentError",
    "RpfError",
    "RpfOptionError",
    "Style",
    "StyledText",
    "as_path",
    "as_text",
    "bold",
    "first_component",
    "is_hidden",
    "is_symlink",
    "last_component",
    "license_notice",
    "paint",
    "relative_to_parent",
    "terminate",
    "underline",
]
