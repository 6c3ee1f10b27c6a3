# topmark:header:start
#
#   project      : rpf
#   file         : __init__.py
#   file_relpath : src/rpf/config/__init__.py
#   license      : BSD-3-Clause
#   copyright    : (c) 2015 Alberto Corona
#
# topmark:header:end

"""Runtime configuration for rpf: logging setup and color-mode resolution.

rpf loads no configuration files. Everything here is driven by explicit
arguments or environment variables (``RPF_LOG_LEVEL``, ``NO_COLOR``,
``FORCE_COLOR``).
"""

from __future__ import annotations

from rpf.config import logging
from rpf.config.color import ColorMode, resolve_color_mode
from rpf.config.logging import RpfLogger, get_logger, setup_logging

__all__ = [
    "ColorMode",
    "RpfLogger",
    "get_logger",
    "logging",
    "resolve_color_mode",
    "setup_logging",
]
