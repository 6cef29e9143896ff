"""Listing files of a given type in a directory."""

from __future__ import annotations

import os
from typing import Callable


def _matches(name: str, suffix: str, filter: Callable[[str], bool] | None) -> bool:
    if filter is not None and not filter(name):
        return False
    if name in (".", ".."):
        return False
    if not suffix:
        return True
    if "." not in name:
        return False
    return name[name.rindex("."):] == suffix


def listdir(
    path: str | os.PathLike[str] | None = None,
    suffix: str | None = None,
    filter: Callable[[str], bool] | None = None,
    strip: bool = False,
) -> list[str]:
    """Return the sorted names in *path* that end in *suffix*, e.g. ".cfg".

    *path* defaults to the current directory and an empty or missing
    *suffix* matches every entry.  If *filter* is given, only names for
    which it returns true are kept.  With *strip* the file type, from the
    last dot on, is removed from each name.  Raises OSError when the
    directory cannot be read.
    """
    directory = "." if path is None else os.fspath(path)
    wanted = suffix or ""
    names = sorted(name for name in os.listdir(directory) if _matches(name, wanted, filter))
    if strip:
        names = [name.rpartition(".")[0] if "." in name else name for name in names]
    return names