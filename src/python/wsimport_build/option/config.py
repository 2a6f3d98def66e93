# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Mapping

import toml

from wsimport_build.base.exceptions import ConfigError
from wsimport_build.util.strutil import softwrap

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "wsimport.toml"
GLOBAL_SECTION = "GLOBAL"
COMPONENTS_SECTION = "components"

_interpolation_re = re.compile(r"%\(([A-Za-z0-9_.]+)\)s")


def _interpolate(value: Any, seed_values: Mapping[str, str], source: str) -> Any:
    if isinstance(value, str):

        def replace(match: re.Match) -> str:
            key = match.group(1)
            if key not in seed_values:
                raise ConfigError(f"Unknown interpolation key %({key})s in {source}.")
            return seed_values[key]

        return _interpolation_re.sub(replace, value)
    if isinstance(value, list):
        return [_interpolate(v, seed_values, source) for v in value]
    if isinstance(value, dict):
        return {k: _interpolate(v, seed_values, source) for k, v in value.items()}
    return value


@dataclass(frozen=True)
class Config:
    """A parsed project configuration file.

    Supports variable substitution using old-style Python format strings: `%(buildroot)s` is the
    project root and `%(env.NAME)s` the value of environment variable `NAME`.
    """

    source: str
    values: Mapping[str, Any]

    @classmethod
    def load(
        cls, path: str | Path, *, buildroot: str | Path, env: Mapping[str, str] | None = None
    ) -> Config:
        path = Path(path)
        try:
            content = path.read_text()
        except OSError as e:
            raise ConfigError(f"Failed to read config file {path}: {e}")
        return cls.parse(content, source=str(path), buildroot=buildroot, env=env)

    @classmethod
    def parse(
        cls,
        content: str,
        *,
        source: str = "<string>",
        buildroot: str | Path,
        env: Mapping[str, str] | None = None,
    ) -> Config:
        try:
            raw = toml.loads(content)
        except toml.TomlDecodeError as e:
            raise ConfigError(f"Config file {source} could not be parsed as TOML:\n  {e}")

        env = os.environ if env is None else env
        seed_values = {"buildroot": str(buildroot)}
        seed_values.update({f"env.{k}": v for k, v in env.items()})
        values = _interpolate(raw, seed_values, source)
        for section, section_values in values.items():
            if not isinstance(section_values, dict):
                raise ConfigError(f"Expected [{section}] in {source} to be a table.")
        logger.debug("Loaded config from %s with sections %s", source, sorted(values))
        return cls(source=source, values=values)

    @classmethod
    def empty(cls) -> Config:
        return cls(source="<defaults>", values={})

    def section(self, name: str, allowed_keys: Iterable[str] | None = None) -> dict[str, Any]:
        """Returns the values of a section, which must only use `allowed_keys` if given."""
        values = dict(self.values.get(name, {}))
        if allowed_keys is not None:
            self.validate_keys(f"[{name}]", values, allowed_keys)
        return values

    def validate_keys(self, where: str, values: Mapping[str, Any], allowed: Iterable[str]) -> None:
        unknown = sorted(set(values) - set(allowed))
        if unknown:
            raise ConfigError(
                softwrap(
                    f"""
                    Invalid option(s) {', '.join(unknown)} under {where} in {self.source}.
                    Valid options are: {', '.join(sorted(allowed))}.
                    """
                )
            )

    def get_list(self, where: str, values: Mapping[str, Any], key: str) -> tuple[str, ...]:
        value = values.get(key, [])
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise ConfigError(f"Expected {key} under {where} in {self.source} to be a string list.")
        return tuple(value)
