"""Helpers for driving VT/ANSI terminals."""

from __future__ import annotations

import os
import re
import select
import sys
from enum import IntEnum
from typing import TextIO

SCREEN_WIDTH = 80
DEFAULT_SIZE = (24, 80)

_CURSOR_REPORT = re.compile(r"\x1b\[(\d+);(\d+)R")


class Attr(IntEnum):
    """Text attributes."""

    RESETATTR = 0
    BRIGHT = 1
    DIM = 2
    UNDERSCORE = 4
    BLINK = 5
    REVERSE = 7
    HIDDEN = 8


class Color(IntEnum):
    """Colours for text and background; bit 0x10 selects the bright variant."""

    BLACK = 0x0
    RED = 0x1
    GREEN = 0x2
    BROWN = 0x3
    BLUE = 0x4
    MAGENTA = 0x5
    CYAN = 0x6
    LIGHTGREY = 0x7
    DARKGREY = 0x10
    LIGHTRED = 0x11
    LIGHTGREEN = 0x12
    YELLOW = 0x13
    LIGHTBLUE = 0x14
    LIGHTMAGENTA = 0x15
    LIGHTCYAN = 0x16
    WHITE = 0x17


def _out(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def clrscr(stream: TextIO | None = None) -> None:
    """Clear the screen and move the cursor to the upper left corner."""
    _out(stream).write("\033[2J\033[1;1H")


def clreol(stream: TextIO | None = None) -> None:
    """Erase from the cursor to the end of the line."""
    _out(stream).write("\033[K")


def delline(stream: TextIO | None = None) -> None:
    """Erase the entire current line."""
    _out(stream).write("\033[2K")


def gotoxy(x: int, y: int, stream: TextIO | None = None) -> None:
    """Move the cursor to column *x*, row *y*."""
    _out(stream).write(f"\033[{int(y)};{int(x)}H")


def hidecursor(stream: TextIO | None = None) -> None:
    """Hide the cursor."""
    _out(stream).write("\033[?25l")


def showcursor(stream: TextIO | None = None) -> None:
    """Show the cursor."""
    _out(stream).write("\033[?25h")


def _set_graphics_mode(attr: int, color: int, base: int, stream: TextIO | None) -> None:
    out = _out(stream)
    color = int(color)
    if not color:
        out.write(f"\033[{int(attr)}m")
    else:
        bright = 1 if color & 0x10 else 0
        out.write(f"\033[{bright};{(color & 0xF) + base}m")


def textattr(attr: int, stream: TextIO | None = None) -> None:
    """Set the text attribute."""
    _set_graphics_mode(attr, 0, 0, stream)


def textcolor(color: int, stream: TextIO | None = None) -> None:
    """Set the text colour."""
    _set_graphics_mode(Attr.RESETATTR, color, 30, stream)


def textbackground(color: int, stream: TextIO | None = None) -> None:
    """Set the background colour."""
    _set_graphics_mode(Attr.RESETATTR, color, 40, stream)


def _probe_size(fd_in: int) -> tuple[int, int] | None:
    response = ""
    while True:
        ready, _, _ = select.select([fd_in], [], [], 0.3)
        if not ready:
            break
        chunk = os.read(fd_in, 32)
        if not chunk:
            break
        response += chunk.decode("ascii", errors="replace")
        if "R" in response:
            break
    match = _CURSOR_REPORT.search(response)
    if not match:
        return None
    return int(match.group(1)), int(match.group(2))


def initscr() -> tuple[int, int]:
    """Probe the terminal size and return ``(rows, columns)``.

    The terminal is asked for its cursor position after moving to the far
    bottom-right corner.  When stdin or stdout is not a terminal, or the
    terminal does not answer, 24x80 is returned.
    """
    try:
        import termios
    except ImportError:
        return DEFAULT_SIZE

    stdin, stdout = sys.stdin, sys.stdout
    if stdin is None or stdout is None or not stdin.isatty() or not stdout.isatty():
        return DEFAULT_SIZE

    fd_in = stdin.fileno()
    fd_out = stdout.fileno()
    saved = termios.tcgetattr(fd_out)
    settings = termios.tcgetattr(fd_out)
    settings[2] |= termios.CLOCAL | termios.CREAD
    settings[3] &= ~(termios.ICANON | termios.ECHO | termios.ECHOE | termios.ISIG)
    termios.tcsetattr(fd_out, termios.TCSANOW, settings)
    try:
        stdout.write("\0337\033[r\033[999;999H\033[6n")
        stdout.flush()
        size = _probe_size(fd_in)
        stdout.write("\0338")
        stdout.flush()
    finally:
        termios.tcsetattr(fd_out, termios.TCSANOW, saved)

    return size if size is not None else DEFAULT_SIZE


def printhdr(
    line: str,
    nl: bool = False,
    attr: int = Attr.REVERSE,
    stream: TextIO | None = None,
) -> None:
    """Print a table heading padded to the screen width.

    An *attr* outside 0..8 falls back to reverse video.
    """
    attr = int(attr)
    if attr < 0 or attr > 8:
        attr = int(Attr.REVERSE)
    padding = " " * abs(SCREEN_WIDTH - len(line))
    lead = "\n" if nl else ""
    _out(stream).write(f"{lead}\033[{attr}m{line}{padding}\033[0m\n")


def printheader(line: str, nl: bool = False, stream: TextIO | None = None) -> None:
    """Print a reverse video table heading."""
    printhdr(line, nl, Attr.REVERSE, stream)