# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from __future__ import annotations

import logging
import os
import subprocess
from abc import ABC, abstractmethod
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Sequence

from wsimport_build.java.distribution import Distribution
from wsimport_build.util.strutil import safe_shlex_join

logger = logging.getLogger(__name__)


class Executor(ABC):
    """Executes java programs."""

    class Error(Exception):
        """Indicates an error launching a java program."""

    def __init__(self, distribution: Distribution) -> None:
        self._distribution = distribution

    @property
    def distribution(self) -> Distribution:
        return self._distribution

    def create_command(
        self,
        classpath: Sequence[str | Path],
        main: str,
        jvm_options: Sequence[str] = (),
        args: Sequence[str] = (),
    ) -> list[str]:
        """Returns the command line that runs `main` on `classpath`."""
        if not main:
            raise ValueError(f"A non-empty main classname is required, given: {main!r}")
        cmd = [self._distribution.java]
        cmd.extend(jvm_options)
        cmd.extend(["-cp", os.pathsep.join(str(entry) for entry in classpath), main])
        cmd.extend(args)
        return cmd

    def execute(
        self,
        classpath: Sequence[str | Path],
        main: str,
        jvm_options: Sequence[str] = (),
        args: Sequence[str] = (),
        cwd: str | Path | None = None,
    ) -> int:
        """Launches the java program defined by the classpath and main.

        Returns the exit code of the java program.
        Raises Executor.Error if there was a problem launching java itself.
        """
        return self._run(self.create_command(classpath, main, jvm_options, args), cwd)

    @abstractmethod
    def _run(self, cmd: list[str], cwd: str | Path | None) -> int:
        """Subclasses run the command and return its exit code."""


class CommandLineGrabber(Executor):
    """Doesn't actually execute anything, just captures the command lines and working dirs."""

    def __init__(self, distribution: Distribution) -> None:
        super().__init__(distribution)
        self.commands: list[tuple[list[str], str | Path | None]] = []

    def _run(self, cmd: list[str], cwd: str | Path | None) -> int:
        self.commands.append((list(cmd), cwd))
        return 0

    @property
    def cmd(self) -> str | None:
        """The most recently captured command line, shell quoted."""
        return safe_shlex_join(self.commands[-1][0]) if self.commands else None


class SubprocessExecutor(Executor):
    """Executes java programs by launching a jvm in a subprocess."""

    # Keep the classpath and jvm options under our control: none of these may leak in from the
    # calling environment.
    _SCRUBBED_ENV = ("CLASSPATH", "_JAVA_OPTIONS", "JAVA_TOOL_OPTIONS")

    @classmethod
    @contextmanager
    def _scrubbed_env(cls) -> Iterator[dict[str, str]]:
        env = dict(os.environ)
        for env_var in cls._SCRUBBED_ENV:
            value = env.pop(env_var, None)
            if value:
                logger.warning("Scrubbing %s=%s", env_var, value)
        yield env

    def _run(self, cmd: list[str], cwd: str | Path | None) -> int:
        with self._scrubbed_env() as env:
            logger.debug("Executing: %s at cwd=%s", safe_shlex_join(cmd), cwd)
            try:
                return subprocess.run(cmd, cwd=cwd, env=env, check=False).returncode
            except OSError as e:
                raise self.Error(f"Problem executing {self._distribution.java}: {e}")
