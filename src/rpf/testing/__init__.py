# topmark:header:start
#
#   project      : rpf
#   file         : __init__.py
#   file_relpath : src/rpf/testing/__init__.py
#   license      : BSD-3-Clause
#   copyright    : (c) 2015 Alberto Corona
#
# topmark:header:end

"""Filesystem test harness: create and remove files, directories and symlinks.

Only test code should import this package. The pytest fixtures live in
[`rpf.testing.fixtures`][rpf.testing.fixtures] so that importing the harness does
not require pytest.
"""

from __future__ import annotations

from rpf.testing.harness import create_dir, create_file, create_symlink, remove
from rpf.testing.links import LinkPlatform

__all__ = [
    "LinkPlatform",
    "create_dir",
    "create_file",
    "create_symlink",
    "remove",
]
