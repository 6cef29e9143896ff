"""Copying and moving files, and copying data between open streams."""

from __future__ import annotations

import contextlib
import errno
import os
from enum import IntFlag
from typing import IO, Any

from liteutil.files import fisdir, fisslashdir

BUFSIZ = 8192


class CopyOption(IntFlag):
    """Options for copyfile()."""

    SYM = 0x01
    KEEP_MTIME = 0x02


def _adjust_target(src: str, dst: str) -> str:
    """Return *dst*, with the base name of *src* appended if *dst* is a directory.

    A *dst* written with a trailing slash that does not exist yet is
    created as a directory first.
    """
    if not fisdir(dst) and fisslashdir(dst) and not os.path.exists(dst):
        with contextlib.suppress(OSError):
            os.mkdir(dst, 0o755)

    if fisdir(dst):
        name = src.rsplit("/", 1)[-1]
        separator = "" if fisslashdir(dst) else "/"
        return f"{dst}{separator}{name}"
    return dst


def copyfile(
    src: str | os.PathLike[str],
    dst: str | os.PathLike[str],
    length: int = 0,
    opt: CopyOption | int = CopyOption(0),
) -> int:
    """Copy *src* to *dst* and return the number of bytes copied.

    *dst* may be a directory, in which case the base name of *src* is
    used inside it.  A *length* of zero copies the whole file, otherwise
    at most *length* bytes are copied.  With ``CopyOption.SYM`` a symlink
    *src* is recreated at the target instead of being followed, and 1 is
    returned.  With ``CopyOption.KEEP_MTIME`` the access and modification
    times of *src* are carried over.

    Raises IsADirectoryError if *src* is a directory, and OSError for
    any other failure.
    """
    src = os.fspath(src)
    dst = os.fspath(dst)
    opt = CopyOption(opt)

    if fisdir(src):
        raise IsADirectoryError(errno.EISDIR, "source is a directory", src)

    dest = _adjust_target(src, dst)
    st = os.stat(src)

    if CopyOption.SYM in opt and os.path.islink(src):
        # Never fall back to copying the link target: that would race.
        os.symlink(os.readlink(src), dest)
        return 1

    remaining = st.st_size if length == 0 else length
    mode = st.st_mode & 0o7777

    def _opener(path: str, flags: int) -> int:
        return os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, mode)

    copied = 0
    with open(src, "rb") as fin, open(dest, "wb", opener=_opener) as fout:
        while remaining > 0:
            count = min(remaining, BUFSIZ)
            chunk = fin.read(count)
            if not chunk:
                break
            fout.write(chunk)
            copied += len(chunk)
            remaining -= count

    if CopyOption.KEEP_MTIME in opt:
        os.utime(dest, ns=(st.st_atime_ns, st.st_mtime_ns))

    return copied


def movefile(src: str | os.PathLike[str], dst: str | os.PathLike[str]) -> None:
    """Move *src* to *dst*, which may be a directory.

    Works across file system boundaries by copying and then removing
    *src*.  Raises OSError on failure.
    """
    src = os.fspath(src)
    dest = _adjust_target(src, os.fspath(dst))
    try:
        os.rename(src, dest)
    except OSError as exc:
        if exc.errno != errno.EXDEV:
            raise
        copyfile(src, dest, 0, CopyOption.SYM)
        os.remove(src)


def fcopyfile(src: IO[Any] | None, dst: IO[Any] | None) -> None:
    """Copy every remaining line of the open stream *src* to *dst*."""
    if src is None or dst is None:
        raise ValueError("fcopyfile() needs both a source and a destination")
    dst.writelines(src)


def fsendfile(src: IO[Any] | None, dst: IO[Any] | None = None, length: int = 0) -> int:
    """Copy up to *length* units from *src* to *dst* and return how many.

    A *length* of zero copies until end of file.  When *dst* is None the
    data is read and discarded, which skips ahead in streams that cannot
    seek.
    """
    if src is None:
        raise ValueError("fsendfile() needs a source stream")

    total = 0
    while not length or total < length:
        block = BUFSIZ if not length else min(BUFSIZ, length - total)
        chunk = src.read(block)
        if not chunk:
            break
        if dst is not None:
            dst.write(chunk)
        total += len(chunk)
    return total