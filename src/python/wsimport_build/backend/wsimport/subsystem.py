# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from __future__ import annotations

import glob
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from wsimport_build.base.exceptions import ConfigError
from wsimport_build.option.config import Config

logger = logging.getLogger(__name__)

JAXWS_TOOLS_COORDINATE = "com.sun.xml.ws:jaxws-tools:2.2.10"
WSIMPORT_MAIN = "com.sun.tools.ws.WsImport"


def expand_classpath(root: Path, entries: Iterable[str]) -> tuple[Path, ...]:
    """Resolves classpath entries against `root`, expanding glob patterns in sorted order.

    Entries without glob characters are kept even if they do not exist yet.
    """
    classpath: dict[Path, None] = {}
    for entry in entries:
        path = root / entry
        if any(c in entry for c in "*?["):
            matches = sorted(glob.glob(str(path), recursive=True))
            if not matches:
                logger.warning("Classpath pattern %s matched no files", entry)
            classpath.update(dict.fromkeys(Path(m) for m in matches))
        else:
            classpath[path] = None
    return tuple(classpath)


@dataclass(frozen=True)
class WsimportSubsystem:
    """Options for the wsimport tool, from the `[wsimport]` section.

    The `jaxws_classpath` must provide the `jaxws-tools` artifact and its dependencies; the
    `xjc_classpath` holds xjc plugins used by source set extensions.
    """

    options_scope = "wsimport"

    java_home: str | None = None
    jvm_options: tuple[str, ...] = ()
    main: str = WSIMPORT_MAIN
    jaxws_classpath: tuple[str, ...] = ()
    xjc_classpath: tuple[str, ...] = ()
    compile_classpath: tuple[str, ...] = ()

    @classmethod
    def from_config(cls, config: Config) -> WsimportSubsystem:
        values = config.section(
            cls.options_scope,
            allowed_keys=(
                "java_home",
                "jvm_options",
                "main",
                "jaxws_classpath",
                "xjc_classpath",
                "compile_classpath",
            ),
        )
        where = f"[{cls.options_scope}]"
        for key in ("java_home", "main"):
            if key in values and not isinstance(values[key], str):
                raise ConfigError(f"Expected {key} under {where} in {config.source} to be a string.")
        return cls(
            java_home=values.get("java_home"),
            jvm_options=config.get_list(where, values, "jvm_options"),
            main=values.get("main", WSIMPORT_MAIN),
            jaxws_classpath=config.get_list(where, values, "jaxws_classpath"),
            xjc_classpath=config.get_list(where, values, "xjc_classpath"),
            compile_classpath=config.get_list(where, values, "compile_classpath"),
        )
