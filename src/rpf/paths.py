# topmark:header:start
#
#   project      : rpf
#   file         : paths.py
#   file_relpath : src/rpf/paths.py
#   license      : BSD-3-Clause
#   copyright    : (c) 2015 Alberto Corona
#
# topmark:header:end

"""Lexical helpers for decomposing paths into components.

These helpers operate on any path-like input (``str``, ``bytes`` or
``os.PathLike``) and never touch the filesystem, with the single exception of
[`is_symlink`][rpf.paths.is_symlink]. No canonicalization happens here: symlinks are
not resolved and ``..`` segments are kept as they are.

Key behaviors:
    - ``first_component("/etc/test")`` is ``PurePath("/")``: on a rooted path the
      root marker is the first component.
    - ``last_component`` and ``relative_to_parent`` return ``None`` instead of
      raising when there is nothing to return.
    - ``as_text`` returns ``""`` for paths that are not valid UTF-8 text.
    - A leading ``.`` is a component of its own: ``first_component("./x")`` is
      ``PurePath(".")``. Interior ``.`` segments are dropped.
"""

from __future__ import annotations

import os
import stat
from pathlib import Path, PurePath
from typing import TYPE_CHECKING, Union

from rpf.config.logging import get_logger

if TYPE_CHECKING:
    from rpf.config.logging import RpfLogger

logger: RpfLogger = get_logger(__name__)

PathInput = Union[str, bytes, "os.PathLike[str]", "os.PathLike[bytes]"]


def _decoded(path: PathInput) -> str:
    raw = os.fspath(path)
    if isinstance(raw, bytes):
        return os.fsdecode(raw)
    return raw


def _pure(path: PathInput) -> PurePath:
    """Return a lexical path for *path*, decoding bytes the way ``os`` does."""
    return PurePath(_decoded(path))


def _components(path: PathInput) -> tuple[str, ...]:
    """Return the components of *path*: ``PurePath.parts`` plus a leading ``.``."""
    raw = _decoded(path)
    pure = PurePath(raw)
    if pure.anchor:
        return pure.parts
    prefixes = tuple(os.curdir + sep for sep in (os.sep, os.altsep) if sep)
    if raw == os.curdir or raw.startswith(prefixes):
        return (os.curdir, *pure.parts)
    return pure.parts


def as_path(path: PathInput) -> Path:
    """Return *path* as a concrete :class:`pathlib.Path`.

    Example:
        >>> as_path("/var/log/test") == Path("/var/log/test")
        True
    """
    if isinstance(path, Path):
        return path
    return Path(_pure(path))


def first_component(path: PathInput) -> PurePath | None:
    """Return the first component of *path*, or ``None`` for an empty path.

    On a rooted path this is the root marker (``/`` on POSIX, ``C:\\`` on Windows).
    A leading ``.`` is kept, so ``first_component("./x")`` is ``PurePath(".")``.
    """
    parts = _components(path)
    if not parts:
        return None
    return PurePath(parts[0])


def last_component(path: PathInput) -> PurePath | None:
    """Return the final component of *path*, or ``None`` for an empty path."""
    parts = _components(path)
    if not parts:
        return None
    return PurePath(parts[-1])


def relative_to_parent(path: PathInput) -> PurePath | None:
    """Return *path* expressed relative to its own parent directory.

    Returns ``None`` when *path* has no parent, i.e. for an empty path or a bare
    root. ``"."`` is relative to the empty parent and comes back as ``"."``.
    For every other path ``p.parent / relative_to_parent(p) == p``.

    Example:
        >>> relative_to_parent("/var/log/test")
        PurePosixPath('test')
    """
    if not _components(path):
        return None
    pure = _pure(path)
    if not pure.parts:
        return PurePath(os.curdir)
    parent = pure.parent
    if parent == pure:
        return None
    return pure.relative_to(parent)


def as_text(path: PathInput | None) -> str:
    """Return the string form of *path*, or ``""`` if it is not valid text.

    Bytes that do not decode as UTF-8 and ``str`` paths carrying surrogate-escaped
    bytes both yield an empty string. ``None`` (an absent component) also yields
    an empty string, so ``as_text(last_component(p))`` is always safe.
    """
    if path is None:
        return ""
    raw = os.fspath(path)
    if isinstance(raw, bytes):
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError:
            logger.trace("Path bytes are not valid UTF-8: %r", raw)
            return ""
    try:
        raw.encode("utf-8")
    except UnicodeEncodeError:
        logger.trace("Path string is not valid text: %r", raw)
        return ""
    return raw


def is_hidden(path: PathInput) -> bool:
    """Return True if the final component of *path* starts with a ``.``."""
    return as_text(last_component(path)).startswith(".")


def is_symlink(path: PathInput) -> bool:
    """Return True if *path* exists and is neither a regular file nor a directory.

    The entry itself is inspected (``lstat``), so a link to a directory counts as
    a link. A path that does not exist is reported as ``False``: absence is not a
    symlink, so this cannot be used to tell "missing" from "not a link". A path
    no filesystem can hold (an embedded NUL) is treated the same way. Any other
    ``OSError`` while reading metadata propagates.
    """
    try:
        mode = os.lstat(_pure(path)).st_mode
    except (FileNotFoundError, NotADirectoryError, ValueError):
        logger.debug("is_symlink: %r does not exist", as_text(path))
        return False
    return not (stat.S_ISREG(mode) or stat.S_ISDIR(mode))
