# topmark:header:start
#
#   project      : rpf
#   file         : harness.py
#   file_relpath : src/rpf/testing/harness.py
#   license      : BSD-3-Clause
#   copyright    : (c) 2015 Alberto Corona
#
# topmark:header:end

"""Best-effort filesystem setup for tests.

Each operation reports its outcome on the console as a ``test: ...`` line (the
path in green on success, red on failure) and logs it. Creating and removing
entries never raises on ordinary I/O failures, and creating a file or directory
at a path no filesystem can hold (an embedded NUL) is a reported failure too; the
boolean result is only a convenience. Two conditions do abort the calling test
with [`HarnessError`][rpf.errors.HarnessError]: a symlink that cannot be
created, and a path given to `remove` whose metadata cannot be read for a reason
other than being absent (an invalid path included).

Nothing here is sandboxed. Callers pass paths inside a disposable area (see the
``scratch_dir`` fixture in [`rpf.testing.fixtures`][rpf.testing.fixtures]) and
pair every create with a `remove`.
"""

from __future__ import annotations

import os
import shutil
import stat
from typing import TYPE_CHECKING

from rpf.config.logging import get_logger
from rpf.console import default_console
from rpf.constants import HARNESS_PREFIX
from rpf.errors import HarnessError
from rpf.paths import as_path, as_text
from rpf.rendering import Color, bold, paint
from rpf.testing.links import make_symlink

if TYPE_CHECKING:
    from rpf.config.logging import RpfLogger
    from rpf.console_api import ConsoleLike
    from rpf.paths import PathInput
    from rpf.testing.links import LinkPlatform

logger: RpfLogger = get_logger(__name__)


def _ok(console: ConsoleLike, action: str, path: PathInput) -> None:
    console.print(f"{HARNESS_PREFIX} {action} '{paint(as_text(path), Color.GREEN)}'")


def _failed(console: ConsoleLike, action: str, path: PathInput, exc: Exception) -> None:
    logger.warning("Unable to %s '%s': %s", action, as_text(path), exc)
    console.print(f"{HARNESS_PREFIX} unable to {action} '{paint(as_text(path), Color.RED)}'")


def create_file(path: PathInput, *, console: ConsoleLike | None = None) -> bool:
    """Create an empty file at *path*, truncating an existing one.

    Returns:
        bool: True if the file was created.
    """
    console = console or default_console()
    target = as_path(path)
    try:
        with target.open("wb"):
            pass
    except (OSError, ValueError) as exc:
        _failed(console, "create file", target, exc)
        return False
    logger.debug("Created file %s", target)
    _ok(console, "created file", target)
    return True


def create_dir(path: PathInput, *, console: ConsoleLike | None = None) -> bool:
    """Create a single directory level at *path* (parents are not created).

    Returns:
        bool: True if the directory was created.
    """
    console = console or default_console()
    target = as_path(path)
    try:
        target.mkdir()
    except (OSError, ValueError) as exc:
        _failed(console, "create directory", target, exc)
        return False
    logger.debug("Created directory %s", target)
    _ok(console, "created directory", target)
    return True


def remove(path: PathInput, *, console: ConsoleLike | None = None) -> bool:
    """Remove *path*: directories recursively, any other entry on its own.

    Links are removed themselves, never followed. An absent path is reported and
    logged as a warning and returns False.

    Returns:
        bool: True if the entry was removed.

    Raises:
        HarnessError: If the metadata of *path* cannot be read for a reason other
            than the path not existing, including a path that is not valid
            for the filesystem.
    """
    console = console or default_console()
    target = as_path(path)
    try:
        mode = os.lstat(target).st_mode
    except FileNotFoundError as exc:
        _failed(console, "remove", target, exc)
        return False
    except ValueError as exc:
        raise HarnessError(f"invalid path '{as_text(target)}': {exc}") from exc
    except OSError as exc:
        raise HarnessError(f"cannot read metadata of '{as_text(target)}': {exc}") from exc

    if stat.S_ISDIR(mode):
        try:
            shutil.rmtree(target)
        except OSError as exc:
            _failed(console, "remove directory", target, exc)
            return False
        logger.debug("Removed directory tree %s", target)
        _ok(console, "removed directory", target)
        return True

    try:
        os.unlink(target)
    except OSError as exc:
        _failed(console, "remove file", target, exc)
        return False
    logger.debug("Removed %s", target)
    _ok(console, "removed file", target)
    return True


def create_symlink(
    target: PathInput,
    link_path: PathInput,
    *,
    console: ConsoleLike | None = None,
    platform: LinkPlatform | None = None,
) -> None:
    """Create a symbolic link at *link_path* pointing to *target*.

    Args:
        target (PathInput): What the link points at; it need not exist.
        link_path (PathInput): Where the link is created.
        console (ConsoleLike | None): Console receiving the outcome line.
        platform (LinkPlatform | None): Capability class to use; defaults to the
            running platform.

    Raises:
        HarnessError: If the link cannot be created. A test relying on the link
            cannot proceed without it.
    """
    console = console or default_console()
    src = as_path(target)
    dst = as_path(link_path)
    try:
        make_symlink(src, dst, platform)
    except (OSError, ValueError) as exc:
        message = f"cannot symlink '{as_text(dst)}' to '{as_text(src)}': {exc}"
        logger.error(message)
        raise HarnessError(message) from exc
    logger.debug("Symlinked %s -> %s", dst, src)
    console.print(f"{HARNESS_PREFIX} {bold(as_text(src))} symlinked to {bold(as_text(dst))}")
