"""Creating, reading and signalling daemon PID files."""

from __future__ import annotations

import atexit
import os
import re
import signal
import sys
import time
from dataclasses import dataclass

from liteutil.text import chomp

PIDFILE_DIR = "/var/run/"

_POLL_INTERVAL = 0.05
_READ_MAX = 15

_STRTOUL = re.compile(r"\s*([+-]?)(0[xX][0-9a-fA-F]+|0[0-7]*|[1-9][0-9]*)")


@dataclass
class _State:
    path: str | None = None
    pid: int = 0


_state = _State()


def _cleanup() -> None:
    if _state.path is not None and _state.pid == os.getpid():
        try:
            os.unlink(_state.path)
        except OSError:
            pass
        _state.path = None


def _progname() -> str:
    arg0 = sys.argv[0] if sys.argv and sys.argv[0] else "python"
    return arg0.rsplit("/", 1)[-1]


def pidfile(basename: str | None = None, directory: str | None = None) -> None:
    """Create the PID file of this process, or update its mtime.

    *basename* defaults to the program name and is placed in *directory*
    (default /var/run/) as ``<basename>.pid``; a *basename* starting with
    '/' is used as the full path.  If this process already created a PID
    file that is still readable, only its mtime is updated.  The file is
    removed when the process exits.  Raises OSError on failure.
    """
    if basename is None:
        basename = _progname()
    if directory is None:
        directory = PIDFILE_DIR

    pid = os.getpid()
    atexit_already = False

    if _state.path is not None:
        if os.access(_state.path, os.R_OK) and pid == _state.pid:
            os.utime(_state.path)
            return
        _state.path = None
        atexit_already = True

    if basename.startswith("/"):
        path = basename
    else:
        slash = "" if directory.endswith("/") else "/"
        path = f"{directory}{slash}{basename}.pid"

    with open(path, "w") as fp:
        try:
            fp.write(f"{pid}\n")
            fp.flush()
        except OSError:
            try:
                os.unlink(path)
            except OSError:
                pass
            raise
    _state.path = path

    # Only one exit handler is needed, however often we are called.
    if atexit_already:
        return

    _state.pid = pid
    atexit.register(_cleanup)


def pidfile_name() -> str | None:
    """Return the path of the PID file created by pidfile(), if any."""
    return _state.path


def _strtoul(text: str) -> int:
    match = _STRTOUL.match(text)
    if not match:
        return 0
    sign, digits = match.groups()
    value = int(digits, 0) if not (len(digits) > 1 and digits[0] == "0" and digits[1] not in "xX") else int(digits, 8)
    return -value if sign == "-" else value


def pidfile_read(path: str | os.PathLike[str]) -> int:
    """Return the PID stored in *path*.

    An empty file, or one whose contents are not a number, gives 0.
    Raises ValueError if *path* is None and OSError if it cannot be read.
    """
    if path is None:
        raise ValueError("pidfile_read() needs a path")
    with open(path, "r") as fp:
        line = fp.readline(_READ_MAX)
    if not line:
        return 0
    return _strtoul(chomp(line))


def pidfile_poll(path: str | os.PathLike[str], timeout: float = 5.0) -> int:
    """Wait up to *timeout* seconds for *path* to hold a PID and return it.

    Returns 0 on timeout.
    """
    tries = 0
    limit = int(timeout / _POLL_INTERVAL)
    while True:
        try:
            pid = pidfile_read(path)
        except OSError:
            pid = -1
        if pid > 0 or tries >= limit:
            break
        tries += 1
        time.sleep(_POLL_INTERVAL)
    return max(pid, 0)


def pidfile_signal(path: str | os.PathLike[str], sig: int) -> None:
    """Send *sig* to the process named in *path*.

    After a successful SIGKILL the PID file is removed.  Raises
    ValueError when the file holds no valid PID, and OSError when it
    cannot be read or the signal cannot be sent.
    """
    pid = pidfile_read(path)
    if pid <= 0:
        raise ValueError(f"no valid PID in {os.fspath(path)}")
    os.kill(pid, sig)
    if sig == signal.SIGKILL:
        os.remove(path)