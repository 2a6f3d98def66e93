# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Callable, Iterable, Protocol

from wsimport_build.base.exceptions import ModelStateError
from wsimport_build.engine.container import NamedContainer
from wsimport_build.engine.model import ModelPhase, ModelRuleFunc, ModelRules
from wsimport_build.engine.tasks import TaskContainer, TaskGraph

logger = logging.getLogger(__name__)


class Plugin(Protocol):
    def apply(self, project: Project) -> None:
        ...


class Configuration:
    """A named classpath: its own files, its declared coordinates, and the configurations it
    extends."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.description: str | None = None
        self.visible = True
        self.transitive = True
        self.files: list[Path] = []
        self.dependencies: list[str] = []
        self._extends_from: list[Configuration] = []

    def __repr__(self) -> str:
        return f"Configuration({self.name})"

    def extends_from(self, *configurations: Configuration) -> Configuration:
        self._extends_from.extend(configurations)
        return self

    def resolve(self) -> tuple[Path, ...]:
        """Returns this configuration's files followed by those of the configurations it extends."""
        resolved: dict[Path, None] = dict.fromkeys(self.files)
        for parent in self._extends_from:
            resolved.update(dict.fromkeys(parent.resolve()))
        return tuple(resolved)

    def as_path(self) -> str:
        return os.pathsep.join(str(f) for f in self.resolve())


class Project:
    """A project: its directories, configurations, model elements and tasks.

    Plugins are applied first, then the project is configured, and finally `evaluate` runs the
    model rules plugins installed, which may create and wire tasks.

    :API: public
    """

    def __init__(self, root: str | Path, build_dir: str | Path = "build", name: str | None = None):
        self.root = Path(root).absolute()
        self.build_dir = self.root / build_dir
        self.name = name or self.root.name
        self.tasks = TaskContainer(self)
        self.configurations: NamedContainer[Configuration] = NamedContainer(
            "configuration", Configuration
        )
        self.extensions: dict[str, Any] = {}
        self._rules = ModelRules()
        self._plugins: dict[type, Plugin] = {}
        self._evaluated = False

    def __repr__(self) -> str:
        return f"Project({self.name})"

    def file(self, path: str | Path) -> Path:
        """Resolves `path` against the project root."""
        return self.root / path

    def apply(self, plugin_type: Callable[[], Plugin]) -> Plugin:
        """Applies a plugin once; applying the same plugin type again returns the first instance."""
        existing = self._plugins.get(plugin_type)  # type: ignore[arg-type]
        if existing is not None:
            return existing
        plugin = plugin_type()
        self._plugins[plugin_type] = plugin  # type: ignore[index]
        logger.debug("Applying plugin %s to %s", type(plugin).__name__, self)
        plugin.apply(self)
        return plugin

    def rule(self, phase: ModelPhase, func: ModelRuleFunc) -> None:
        if self._evaluated:
            raise ModelStateError(f"Cannot add a {phase.value} rule to evaluated {self}.")
        self._rules.add(phase, func)

    @property
    def evaluated(self) -> bool:
        return self._evaluated

    def evaluate(self) -> Project:
        if self._evaluated:
            raise ModelStateError(f"{self} has already been evaluated.")
        self._evaluated = True
        self._rules.run(self)
        logger.debug("Evaluated %s with tasks: %s", self, ", ".join(self.tasks.names))
        return self

    def task_graph(self) -> TaskGraph:
        if not self._evaluated:
            raise ModelStateError(f"{self} must be evaluated before its tasks can be executed.")
        return TaskGraph(self.tasks)

    def execute(self, task_names: Iterable[str]) -> None:
        self.task_graph().execute(task_names)
