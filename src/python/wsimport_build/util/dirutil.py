# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from __future__ import annotations

import os
from pathlib import Path


def fast_relpath_optional(path: str, start: str) -> str | None:
    """A prefix-based relpath, with no normalization or support for returning `..`.

    Returns None if `start` is not a directory-aware prefix of `path`.
    """
    if len(start) == 0:
        return path

    pref_end = len(start) - 1 if start[-1] == "/" else len(start)
    if pref_end > len(path):
        return None
    elif path[:pref_end] == start[:pref_end] and (len(path) == pref_end or path[pref_end] == "/"):
        return path[pref_end + 1 :]
    return None


def safe_mkdir(directory: str | Path) -> None:
    """Ensure a directory is present.

    If it's not there, create it.  If it is, no-op.
    """
    os.makedirs(directory, exist_ok=True)


def safe_file_dump(filename: str | Path, payload: str = "", makedirs: bool = True) -> None:
    """Write a string to a file, creating its parent directories first when `makedirs` is set."""
    if makedirs:
        safe_mkdir(os.path.dirname(filename) or ".")
    with open(filename, "w") as f:
        f.write(payload)


def touch(path: str | Path) -> None:
    """Equivalent of unix `touch path`, creating parent directories as needed."""
    safe_mkdir(os.path.dirname(path) or ".")
    with open(path, "a"):
        os.utime(path, None)
