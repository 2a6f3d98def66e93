# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path, PurePath
from typing import Iterable, Iterator

from pathspec import PathSpec
from pathspec.patterns.gitwildmatch import GitWildMatchPattern

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FileVisitDetails:
    """A file found while walking a source directory.

    `path` is relative to the source directory the file was found under, `file` is absolute.
    """

    path: PurePath
    file: Path

    @property
    def base_dir(self) -> Path:
        """The source directory the file was found under."""
        if self.path.is_absolute() or not self.file.is_absolute():
            raise ValueError(f"Illegal file visit details {self}")
        return self.file.parents[len(self.path.parts) - 1]


class SourceDirectorySet:
    """A named set of source directories, filtered by include and exclude patterns.

    Patterns use gitignore wildcard syntax and are matched against paths relative to each source
    directory. With no includes, every file is included.
    """

    def __init__(self, name: str, parent_name: str | None = None, *, root: str | Path) -> None:
        self.name = name
        self.parent_name = parent_name
        self._root = Path(root)
        self._src_dirs: list[Path] = []
        self._includes: list[str] = []
        self._excludes: list[str] = []

    def __repr__(self) -> str:
        owner = f"{self.parent_name}:" if self.parent_name else ""
        return f"{type(self).__name__}({owner}{self.name})"

    def _resolve(self, directory: str | PurePath) -> Path:
        return self._root / directory

    @property
    def src_dirs(self) -> tuple[Path, ...]:
        return tuple(self._src_dirs)

    @property
    def includes(self) -> tuple[str, ...]:
        return tuple(self._includes)

    @property
    def excludes(self) -> tuple[str, ...]:
        return tuple(self._excludes)

    def src_dir(self, directory: str | PurePath) -> SourceDirectorySet:
        resolved = self._resolve(directory)
        if resolved not in self._src_dirs:
            self._src_dirs.append(resolved)
        return self

    def set_src_dirs(self, directories: Iterable[str | PurePath]) -> SourceDirectorySet:
        self._src_dirs = []
        for directory in directories:
            self.src_dir(directory)
        return self

    def include(self, *patterns: str) -> SourceDirectorySet:
        self._includes.extend(patterns)
        return self

    def set_includes(self, patterns: Iterable[str]) -> SourceDirectorySet:
        self._includes = list(patterns)
        return self

    def exclude(self, *patterns: str) -> SourceDirectorySet:
        self._excludes.extend(patterns)
        return self

    def as_file_tree(self) -> FileTree:
        return FileTree(self.src_dirs, self.includes, self.excludes)


class FileTree:
    """A lazily walked, filtered view of the files below a list of directories."""

    def __init__(
        self, directories: Iterable[Path], includes: Iterable[str], excludes: Iterable[str]
    ) -> None:
        self.directories = tuple(directories)
        includes = tuple(includes)
        self._include_spec = PathSpec.from_lines(GitWildMatchPattern, includes) if includes else None
        self._exclude_spec = PathSpec.from_lines(GitWildMatchPattern, excludes)

    def _matches(self, relpath: str) -> bool:
        if self._include_spec is not None and not self._include_spec.match_file(relpath):
            return False
        return not self._exclude_spec.match_file(relpath)

    def visit(self) -> Iterator[FileVisitDetails]:
        """Yields every matching file, directory by directory, in sorted path order.

        Directories that do not exist are skipped.
        """
        for directory in self.directories:
            if not directory.is_dir():
                logger.debug("Skipping missing source directory %s", directory)
                continue
            root = directory.absolute()
            matches = []
            for dirpath, _, filenames in os.walk(root):
                for filename in filenames:
                    file = Path(dirpath, filename)
                    relpath = file.relative_to(root).as_posix()
                    if self._matches(relpath):
                        matches.append((relpath, file))
            for relpath, file in sorted(matches):
                yield FileVisitDetails(path=PurePath(relpath), file=file)

    @property
    def files(self) -> tuple[Path, ...]:
        return tuple(details.file for details in self.visit())

    def is_empty(self) -> bool:
        return next(iter(self.visit()), None) is None
