# liteutil

liteutil collects small helpers for UNIX programs. They cover tasks that come up again and again in daemons and tools:

- checking and creating paths
- copying and moving files
- reading configuration files
- managing PID files
- driving an ANSI terminal

Failures are raised as Python exceptions, mostly `OSError` and `ValueError`. None of the functions return status codes.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `liteutil.text`

- `chomp(text)` returns `text` with every trailing newline removed.
- It raises `ValueError` when `text` is empty or `None`.

### `liteutil.files`

- `fexist(path)` tells whether a path exists. A broken symlink counts as not existing, and so does `None`.
- `fexistf(fmt, *args)` is `fexist()` with the path built from a printf-style format.
- `fisdir(path)` tells whether a path is an existing directory.
- `fisslashdir(path)` tells whether a path is written with a trailing slash.
- `fopenf(mode, fmt, *args)` opens the file named by a printf-style format.
- `erase(path)` removes a file or an empty directory. `fremove(fmt, *args)` and `erasef(fmt, *args)` do the same for a formatted path.
- `mkpath(path, mode=0o777)` creates `path` and every missing parent. It does nothing if `path` already exists, and raises `OSError` if the final directory cannot be created.
- `fmkpath(mode, fmt, *args)` is the formatted form of `mkpath()`. Note that the mode comes first.
- `makepath(path)` is `mkpath()` with mode 0777.

### `liteutil.copyfile`

`copyfile(src, dst, length=0, opt=CopyOption(0))` copies a file and returns the number of bytes copied.

- `dst` may be a directory. The base name of `src` is then used inside it.
- A `dst` that ends in `/` and does not exist yet is created as a directory first.
- A `length` of zero copies the whole file.
- `CopyOption.SYM` recreates a symlink `src` at the target instead of following it, and returns 1.
- `CopyOption.KEEP_MTIME` carries the access and modification times of `src` over to the copy.
- It raises `IsADirectoryError` if `src` is a directory.

The other functions in this module:

- `movefile(src, dst)` renames `src` to `dst`, and `dst` may be a directory. Across file systems it copies the file and then removes `src`.
- `fcopyfile(src, dst)` copies every remaining line of one open stream to another.
- `fsendfile(src, dst=None, length=0)` copies up to `length` units between streams and returns how many it copied. A `length` of zero means until end of file. With `dst=None` the data is read and discarded.

### `liteutil.dirlist`

`listdir(path=None, suffix=None, filter=None, strip=False)` returns the sorted entry names in a directory that end in `suffix`, for example `".cfg"`.

- `path` defaults to the current directory.
- An empty `suffix` matches every entry except `.` and `..`.
- `filter` is an optional callable. Only the names for which it returns true are kept.
- `strip=True` removes the file type, from the last dot on, from each name.

### `liteutil.fparseln`

`fparseln(fp, delims=None, flags=0)` reads one logical line from a text stream. It returns a `ParsedLine(text, lines)`, or `None` at end of file.

`delims` holds three characters: escape, continuation and comment. The default is backslash, backslash and `#`. An empty or NUL entry turns that feature off.

When reading a line, `fparseln()` does the following:

- cuts comments off,
- strips the trailing newline,
- joins a line that ends in an unescaped continuation character with the next one,
- skips lines that hold only a comment.

The `ParseFlag` members choose which escape sequences are removed from the result: `UNESCESC`, `UNESCCONT`, `UNESCCOMM`, `UNESCREST` and `UNESCALL`.

### `liteutil.lfile`

`LFile(path, sep)` is a token reader for `/etc`-style files such as `protocols`, `services` and `passwd`. It splits the file on any of the characters in `sep`, and skips lines that start with `#`.

- `tok()` returns the next token, or `None` at end of file.
- `getkey(key)` returns the token that follows `key`, searching from the current position.
- `getint(key)` does the same and returns the value as an integer, or -1 if `key` is not found.
- Iterating over an `LFile` yields its tokens.
- `LFile` works as a context manager. `close()` closes the file.

`fgetint(path, sep, key)` does a single lookup. It returns -1 if the key is missing or the file cannot be opened.

### `liteutil.pidfile`

- `pidfile(basename=None, directory=None)` writes the PID of the current process to `<directory>/<basename>.pid`.
  - `basename` defaults to the program name and `directory` defaults to `/var/run/`.
  - A `basename` that starts with `/` is used as the full path.
  - If the process calls it again, it only updates the file's mtime.
  - The file is removed when the process exits.
- `pidfile_name()` returns the path written by `pidfile()`, or `None` if it has not written one.
- `pidfile_read(path)` returns the PID stored in a file. An empty or non-numeric file gives 0.
- `pidfile_poll(path, timeout=5.0)` waits for a file to hold a PID and returns it. It returns 0 on timeout.
- `pidfile_signal(path, sig)` sends a signal to the PID stored in a file.
  - After a successful `SIGKILL` it removes the file.
  - It raises `ValueError` when the file holds no valid PID.

### `liteutil.conio`

All output functions write to `stdout` unless a `stream` is given.

- `Attr` and `Color` hold the text attributes and colours. In `Color`, bit 0x10 selects the bright variant.
- `clrscr()`, `clreol()`, `delline()`, `gotoxy(x, y)`, `hidecursor()` and `showcursor()` write the matching escape sequences.
- `textattr()`, `textcolor()` and `textbackground()` set the text style.
- `initscr()` asks the terminal for its size and returns `(rows, columns)`. It returns `(24, 80)` when stdin or stdout is not a terminal, or when the terminal does not answer.
- `printhdr(line, nl=False, attr=Attr.REVERSE)` prints a heading padded to 80 columns. An attribute outside 0..8 falls back to reverse video.
- `printheader(line, nl=False)` prints a reverse-video heading.

## Examples

```python
from liteutil.files import makepath, fexist
from liteutil.copyfile import copyfile, CopyOption
from liteutil.lfile import fgetint

makepath("/tmp/demo/a/b")
copyfile("/etc/hostname", "/tmp/demo/", 0, CopyOption.KEEP_MTIME)
assert fexist("/tmp/demo/hostname")

udp = fgetint("/etc/protocols", " \t\n", "udp")
```

```python
from liteutil.lfile import LFile

with LFile("/etc/services", " /\t\n") as lf:
    port = lf.getint("ftp")
```

```python
import io
from liteutil.fparseln import fparseln

line = fparseln(io.StringIO("first \\\nsecond # comment\n"))
print(line.text, line.lines)   # "first second " 2
```

```python
from liteutil.pidfile import pidfile, pidfile_read, pidfile_name

pidfile("mydaemon", "/tmp")       # writes /tmp/mydaemon.pid
print(pidfile_read(pidfile_name()))
```

## What it does not do

liteutil is a library only. It installs no command-line tools.

It does not configure network interfaces, look up programs on `PATH`, or run shell commands.

It targets POSIX systems. `initscr()` needs `termios`, and `pidfile_signal()` relies on POSIX signals.