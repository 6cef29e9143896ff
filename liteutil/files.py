"""File system helpers: existence checks, formatted paths and directory creation."""

from __future__ import annotations

import os
from typing import IO, Any


def fexist(path: str | None) -> bool:
    """Return True if *path* exists; broken symlinks do not count."""
    if path is None:
        return False
    return os.access(path, os.F_OK)


def fexistf(fmt: str, *args: Any) -> bool:
    """Like fexist() with the path composed from a printf-style format."""
    return fexist(fmt % args)


def fisdir(path: str | None) -> bool:
    """Return True if *path* exists and is a directory."""
    if path is None:
        return False
    return os.path.isdir(path)


def fisslashdir(path: str | None) -> bool:
    """Return True if *path* is written as a directory, with a trailing slash."""
    return bool(path) and path.endswith("/")


def fopenf(mode: str, fmt: str, *args: Any) -> IO[Any]:
    """Open the file named by a printf-style format with the given *mode*."""
    return open(fmt % args, mode)


def erase(path: str) -> None:
    """Remove a file, or an empty directory."""
    if os.path.isdir(path) and not os.path.islink(path):
        os.rmdir(path)
    else:
        os.remove(path)


def fremove(fmt: str, *args: Any) -> None:
    """Remove the file named by a printf-style format."""
    erase(fmt % args)


def erasef(fmt: str, *args: Any) -> None:
    """Like erase() with the path composed from a printf-style format."""
    erase(fmt % args)


def _parent(path: str) -> str:
    stripped = path.rstrip("/")
    if not stripped:
        return "/"
    head = os.path.dirname(stripped)
    if not head:
        return "."
    return head.rstrip("/") or "/"


def mkpath(path: str, mode: int = 0o777) -> None:
    """Create *path* and every missing directory leading up to it.

    Nothing is done when *path* already exists.  Raises OSError when the
    final directory cannot be created.
    """
    if path is None:
        raise ValueError("mkpath() needs a path")
    if os.path.exists(path):
        return
    parent = _parent(path)
    if parent != path.rstrip("/"):
        try:
            mkpath(parent, mode)
        except OSError:
            pass
    os.mkdir(path, mode)


def fmkpath(mode: int, fmt: str, *args: Any) -> None:
    """Formatted mkpath(); note the mode comes first."""
    mkpath(fmt % args, mode)


def makepath(path: str) -> None:
    """Create all components of *path* with mode 0777."""
    mkpath(path, 0o777)