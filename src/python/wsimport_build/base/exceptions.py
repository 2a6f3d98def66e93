# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from __future__ import annotations

from typing import Iterable


class WsimportBuildException(Exception):
    """Base exception type for wsimport-build."""


class BuildConfigurationError(WsimportBuildException):
    """Indicates an error in a project's build configuration."""


class ConfigError(BuildConfigurationError):
    """Indicates a missing, malformed or invalid configuration file."""


class InvalidComponentNameError(BuildConfigurationError):
    """Indicates a component whose name violates the naming convention."""

    def __init__(self, component_name: str, msg: str) -> None:
        super().__init__(msg)
        self.component_name = component_name


class DuplicateTaskError(BuildConfigurationError):
    """Indicates a second task was created under an existing name."""


class DuplicateComponentError(BuildConfigurationError):
    """Indicates a second component or source set was created under an existing name."""


class ModelStateError(BuildConfigurationError):
    """Indicates the project model was mutated or evaluated at the wrong time."""


class TaskError(WsimportBuildException):
    """Indicates a task has failed.

    :API: public
    """

    def __init__(
        self, *args, exit_code: int = 1, failed_tasks: Iterable[str] | None = None, **kwargs
    ) -> None:
        """
        :param int exit_code: an optional exit code (default=1)
        :param failed_tasks: an optional iterable of names of the tasks that failed
        """
        super().__init__(*args, **kwargs)
        self._exit_code = exit_code
        self._failed_tasks = tuple(failed_tasks or ())

    @property
    def exit_code(self) -> int:
        return self._exit_code

    @property
    def failed_tasks(self) -> tuple[str, ...]:
        return self._failed_tasks


class UnknownTaskError(TaskError):
    """Indicates a task was requested that the project does not define."""


class TaskCycleError(TaskError):
    """Indicates there is a cycle in the task dependency graph."""
