# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterable

from wsimport_build.engine.container import NamedContainer
from wsimport_build.source.filespec import SourceDirectorySet


class XjcOptions:
    """Options passed on to the XML binding compiler run by wsimport."""

    def __init__(self) -> None:
        self._extensions: list[str] = []

    @property
    def extensions(self) -> tuple[str, ...]:
        """Names of xjc plugins to enable, e.g. `Xfluent-api` is passed as `-B-XXfluent-api`."""
        return tuple(self._extensions)

    @extensions.setter
    def extensions(self, extensions: Iterable[str]) -> None:
        self._extensions = list(extensions)


class WsdlSourceSet:
    """WSDL files of a component, the external binding files that customize them, and xjc
    options."""

    def __init__(self, name: str, parent_name: str, root: Path) -> None:
        self.name = name
        self.parent_name = parent_name
        self.source = SourceDirectorySet(name, parent_name, root=root)
        self.bindings = SourceDirectorySet(f"{name}Bindings", parent_name, root=root)
        self.xjc = XjcOptions()

    def __str__(self) -> str:
        return f"WSDL source '{self.parent_name}:{self.name}'"

    def __repr__(self) -> str:
        return f"WsdlSourceSet({self.parent_name}:{self.name})"


class WsimportComponent:
    """A named group of WSDL source sets. Component names must start with `wsdl`."""

    def __init__(
        self, name: str, root: Path, source_set_hooks: Iterable[Callable[[WsdlSourceSet], None]]
    ) -> None:
        self.name = name
        self.sources: NamedContainer[WsdlSourceSet] = NamedContainer(
            "WSDL source set", lambda source_name: WsdlSourceSet(source_name, name, root)
        )
        for hook in source_set_hooks:
            self.sources.on_create(hook)

    def __repr__(self) -> str:
        return f"WsimportComponent({self.name})"
