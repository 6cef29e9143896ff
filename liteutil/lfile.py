"""Token-based parsing of UNIX /etc style files such as protocols and services."""

from __future__ import annotations

import os
import re
from collections import deque
from typing import Iterator, TextIO

# Lines are read in chunks of at most this many characters.
_LINE_MAX = 255

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    """Parse the leading integer of *text*, or 0 if there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _split(text: str, sep: str) -> list[str]:
    """Split *text* on any character in *sep*, dropping empty tokens."""
    tokens: list[str] = []
    current: list[str] = []
    for char in text:
        if char in sep:
            if current:
                tokens.append("".join(current))
                current = []
        else:
            current.append(char)
    if current:
        tokens.append("".join(current))
    return tokens


class LFile:
    """A token reader over a file, split on a set of separator characters.

    Lines starting with '#' are skipped.  Use as a context manager or call
    close() when done.
    """

    def __init__(self, path: str | os.PathLike[str], sep: str) -> None:
        if path is None or sep is None:
            raise ValueError("LFile needs both a path and separators")
        self.sep = sep
        self._pending: deque[str] = deque()
        self._fp: TextIO | None = open(path, "r")

    @property
    def closed(self) -> bool:
        return self._fp is None

    def close(self) -> None:
        """Close the underlying file."""
        if self._fp is not None:
            self._fp.close()
            self._fp = None

    def tok(self) -> str | None:
        """Return the next token, or None at end of file."""
        if self._fp is None:
            raise ValueError("I/O operation on closed LFile")
        if self._pending:
            return self._pending.popleft()
        while True:
            chunk = self._fp.readline(_LINE_MAX)
            if not chunk:
                return None
            if chunk.startswith("#"):
                continue
            self._pending.extend(_split(chunk, self.sep))
            if self._pending:
                return self._pending.popleft()

    def getkey(self, key: str) -> str | None:
        """Return the token following *key*, searching from the current position.

        Returns None when *key* is not found.
        """
        while (token := self.tok()) is not None:
            if token.startswith("#"):
                continue
            if token == key:
                return self.tok()
        return None

    def getint(self, key: str) -> int:
        """Like getkey() but return the value as an integer, or -1 if not found."""
        token = self.getkey(key)
        if token is None:
            return -1
        return _atoi(token)

    def __iter__(self) -> Iterator[str]:
        while (token := self.tok()) is not None:
            yield token

    def __enter__(self) -> LFile:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


def fgetint(path: str | os.PathLike[str], sep: str, key: str) -> int:
    """Return the integer value for *key* in *path*, or -1 if not found.

    A file that cannot be opened also gives -1.
    """
    try:
        lf = LFile(path, sep)
    except OSError:
        return -1
    with lf:
        return lf.getint(key)