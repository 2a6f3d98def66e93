# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from __future__ import annotations

from dataclasses import dataclass

from wsimport_build.base.exceptions import ConfigError
from wsimport_build.option.config import GLOBAL_SECTION, Config
from wsimport_build.util.logging import LogLevel


@dataclass(frozen=True)
class GlobalOptions:
    """Options in the `[GLOBAL]` section, which command line flags may override."""

    build_dir: str = "build"
    level: LogLevel = LogLevel.INFO
    colors: bool = True
    print_stacktrace: bool = False

    @classmethod
    def from_config(cls, config: Config) -> GlobalOptions:
        values = config.section(
            GLOBAL_SECTION, allowed_keys=("build_dir", "level", "colors", "print_stacktrace")
        )
        level = values.get("level", cls.level.value)
        try:
            log_level = LogLevel(level)
        except ValueError:
            choices = ", ".join(lvl.value for lvl in LogLevel)
            raise ConfigError(f"Invalid level {level!r} in {config.source}; choose from {choices}.")
        for flag in ("colors", "print_stacktrace"):
            if not isinstance(values.get(flag, False), bool):
                raise ConfigError(f"Expected {flag} in {config.source} to be a boolean.")
        return cls(
            build_dir=str(values.get("build_dir", cls.build_dir)),
            level=log_level,
            colors=values.get("colors", cls.colors),
            print_stacktrace=values.get("print_stacktrace", cls.print_stacktrace),
        )
