"""Reading logical lines with continuations, comments and escapes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntFlag
from typing import Sequence, TextIO

DEFAULT_DELIMS = "\\\\#"


class ParseFlag(IntFlag):
    """Which escape sequences fparseln() removes from the returned line."""

    UNESCESC = 0x01
    UNESCCONT = 0x02
    UNESCCOMM = 0x04
    UNESCREST = 0x08
    UNESCALL = 0x0F


@dataclass(frozen=True)
class ParsedLine:
    """A logical line and the number of physical reads it took."""

    text: str
    lines: int


def _delim(value: str | None) -> str | None:
    if not value or value == "\0":
        return None
    return value


def _isescaped(line: str, pos: int, esc: str | None) -> bool:
    """Return True if the character at *pos* is preceded by an odd number of *esc*."""
    if esc is None:
        return False
    count = 0
    pos -= 1
    while pos >= 0 and line[pos] == esc:
        count += 1
        pos -= 1
    return count % 2 == 1


def _unescape(text: str, esc: str, con: str | None, com: str | None, flags: int) -> str:
    out: list[str] = []
    i = 0
    n = len(text)
    while i < n:
        j = text.find(esc, i)
        if j < 0:
            out.append(text[i:])
            break
        out.append(text[i:j])
        if j + 1 >= n:
            # A lone escape at the very end is dropped.
            break
        nxt = text[j + 1]
        if nxt not in (com, con, esc):
            skip = bool(flags & ParseFlag.UNESCREST)
        else:
            skip = (
                (nxt == com and bool(flags & ParseFlag.UNESCCOMM))
                or (nxt == con and bool(flags & ParseFlag.UNESCCONT))
                or (nxt == esc and bool(flags & ParseFlag.UNESCESC))
            )
        if not skip:
            out.append(esc)
        out.append(nxt)
        i = j + 2
    return "".join(out)


def fparseln(
    fp: TextIO,
    delims: Sequence[str | None] | None = None,
    flags: int = 0,
) -> ParsedLine | None:
    """Read one logical line from *fp*.

    *delims* holds three characters: escape, continuation and comment,
    by default backslash, backslash and '#'; a NUL or empty entry turns
    that feature off.  Comments are cut, the trailing newline removed and
    lines ending in an unescaped continuation character are joined with
    the next.  Lines holding only a comment are skipped.  *flags* selects
    which escape sequences are removed.  Returns None at end of file.
    """
    if delims is None:
        delims = DEFAULT_DELIMS
    if len(delims) != 3:
        raise ValueError("delims must hold exactly three entries")
    esc, con, com = (_delim(d) for d in delims)

    buf: str | None = None
    lines = 0
    more = True
    while more:
        more = False
        lines += 1

        raw = fp.readline()
        if not raw:
            break

        size = len(raw)
        if com is not None:
            for pos, char in enumerate(raw):
                if char == com and not _isescaped(raw, pos, esc):
                    size = pos
                    more = size == 0 and buf is None
                    break

        if size and raw[size - 1] == "\n":
            size -= 1

        if size and con is not None and raw[size - 1] == con and not _isescaped(raw, size - 1, esc):
            size -= 1
            more = True

        if size == 0 and (more or buf is not None):
            continue

        buf = (buf or "") + raw[:size]

    if buf is None:
        return None

    if flags & ParseFlag.UNESCALL and esc is not None and esc in buf:
        buf = _unescape(buf, esc, con, com, flags)

    return ParsedLine(buf, lines)