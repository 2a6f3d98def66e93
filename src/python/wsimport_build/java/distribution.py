# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Iterator, Mapping

logger = logging.getLogger(__name__)


def _is_executable(path: str) -> bool:
    return os.path.isfile(path) and os.access(path, os.X_OK)


@dataclass(frozen=True)
class Location:
    home_path: str | None
    bin_path: str

    @classmethod
    def from_home(cls, home: str) -> Location:
        return cls(home_path=home, bin_path=os.path.join(home, "bin"))

    @classmethod
    def from_bin(cls, bin_path: str) -> Location:
        return cls(home_path=None, bin_path=bin_path)


def jvm_locations(env: Mapping[str, str] | None = None) -> Iterator[Location]:
    """Yields candidate java locations: `JDK_HOME`, then `JAVA_HOME`, then each `PATH` entry."""
    env = os.environ if env is None else env
    for home_env_var in ("JDK_HOME", "JAVA_HOME"):
        home = env.get(home_env_var)
        if home:
            yield Location.from_home(home)

    search_path = env.get("PATH")
    if search_path:
        for bin_path in search_path.strip().split(os.pathsep):
            if bin_path:
                yield Location.from_bin(bin_path)


class Distribution:
    """A java distribution installed on the local system, providing access to its `java` command.

    :API: public
    """

    class Error(Exception):
        """Indicates an invalid java distribution."""

    def __init__(self, location: Location) -> None:
        self._location = location
        self._java: str | None = None

    @classmethod
    def locate(cls, home: str | None = None, env: Mapping[str, str] | None = None) -> Distribution:
        """Returns the distribution at `home` if given, otherwise the first valid one found via the
        environment.

        Raises Distribution.Error if no valid distribution can be found.
        """
        if home:
            locations: Iterator[Location] = iter([Location.from_home(home)])
        else:
            locations = jvm_locations(env)
        searched = []
        for location in locations:
            distribution = cls(location)
            try:
                distribution.validate()
                logger.debug("Located %s", distribution)
                return distribution
            except cls.Error:
                searched.append(location.bin_path)
        raise cls.Error(
            f"Failed to locate a java distribution, searched: {', '.join(searched) or 'nothing'}. "
            "Set [wsimport].java_home or JAVA_HOME."
        )

    @property
    def home(self) -> str | None:
        return self._location.home_path

    @property
    def java(self) -> str:
        """Returns the path to this distribution's java command.

        If this distribution has no valid java command raises Distribution.Error.
        """
        self.validate()
        assert self._java is not None
        return self._java

    def validate(self) -> None:
        if self._java:
            return
        exe = os.path.join(self._location.bin_path, "java")
        if not _is_executable(exe):
            raise self.Error(
                f"Failed to locate the java executable, {self} does not appear to be a valid "
                "distribution."
            )
        self._java = exe

    def __repr__(self) -> str:
        return f"Distribution({self._location.bin_path!r})"
