# topmark:header:start
#
#   project      : rpf
#   file         : constants.py
#   file_relpath : src/rpf/constants.py
#   license      : BSD-3-Clause
#   copyright    : (c) 2015 Alberto Corona
#
# topmark:header:end

"""rpf Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

RPF_VERSION: str = get_version("rpf")

HARNESS_PREFIX: str = "test:"
