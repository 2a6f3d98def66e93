# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Iterable, Iterator, TypeVar

from wsimport_build.base.exceptions import (
    DuplicateTaskError,
    TaskCycleError,
    TaskError,
    UnknownTaskError,
)
from wsimport_build.util.strutil import bullet_list, pluralize

if TYPE_CHECKING:
    from wsimport_build.project import Project

logger = logging.getLogger(__name__)

_T = TypeVar("_T", bound="Task")


class Task:
    """A named unit of build work, with ordered dependencies on other tasks by name.

    Subclasses override `execute`. A plain `Task` has no action and only aggregates its
    dependencies.

    :API: public
    """

    def __init__(self, name: str, project: Project) -> None:
        self.name = name
        self.project = project
        self.description: str | None = None
        self.group: str | None = None
        self._dependencies: dict[str, None] = {}

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name})"

    @property
    def dependencies(self) -> tuple[str, ...]:
        return tuple(self._dependencies)

    def depends_on(self, *task_names: str) -> Task:
        for task_name in task_names:
            self._dependencies[task_name] = None
        return self

    @property
    def has_action(self) -> bool:
        return type(self).execute is not Task.execute

    def execute(self) -> None:
        """Performs this task's work; a no-op for lifecycle tasks."""


class TaskContainer:
    """The named tasks of a project, in creation order."""

    def __init__(self, project: Project) -> None:
        self._project = project
        self._tasks: dict[str, Task] = {}

    def create(
        self,
        name: str,
        task_type: type[_T] = Task,  # type: ignore[assignment]
        configure: Callable[[_T], None] | None = None,
    ) -> _T:
        if name in self._tasks:
            raise DuplicateTaskError(
                f"Cannot add task '{name}' as a task with that name already exists."
            )
        task = task_type(name, self._project)
        if configure is not None:
            configure(task)
        self._tasks[name] = task
        logger.debug("Created task %s", task)
        return task

    def get(self, name: str) -> Task:
        try:
            return self._tasks[name]
        except KeyError:
            raise UnknownTaskError(f"Task '{name}' not found in {self._project}.")

    def __contains__(self, name: object) -> bool:
        return name in self._tasks

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks.values())

    def __len__(self) -> int:
        return len(self._tasks)

    def with_type(self, task_type: type[_T]) -> list[_T]:
        return [task for task in self if isinstance(task, task_type)]

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self._tasks)


class TaskGraph:
    """Orders and executes tasks according to their dependencies."""

    def __init__(self, tasks: TaskContainer) -> None:
        self._tasks = tasks

    def execution_plan(self, requested: Iterable[str]) -> list[Task]:
        """Returns the requested tasks and their transitive dependencies, dependencies first.

        Each task appears once. Dependencies are visited in declaration order.
        """
        plan: dict[str, Task] = {}
        visiting: list[str] = []

        def visit(name: str) -> None:
            if name in plan:
                return
            if name in visiting:
                cycle = visiting[visiting.index(name) :] + [name]
                raise TaskCycleError(
                    "Cycle detected in task dependencies:\n\n"
                    + bullet_list(f"{a} -> {b}" for a, b in zip(cycle, cycle[1:])),
                    failed_tasks=cycle[:-1],
                )
            task = self._tasks.get(name)
            visiting.append(name)
            for dependency in task.dependencies:
                visit(dependency)
            visiting.pop()
            plan[name] = task

        requested = tuple(requested)
        if not requested:
            raise TaskError("No tasks to execute.")
        for name in requested:
            visit(name)
        return list(plan.values())

    def execute(self, requested: Iterable[str]) -> list[Task]:
        """Executes the requested tasks after their dependencies, stopping at the first failure."""
        plan = self.execution_plan(requested)
        logger.info("Executing %s: %s", pluralize(len(plan), "task"), ", ".join(t.name for t in plan))
        for task in plan:
            if not task.has_action:
                logger.debug("Task %s has no action", task.name)
                continue
            logger.info("> %s", task.name)
            try:
                task.execute()
            except TaskError as e:
                if task.name in e.failed_tasks:
                    raise
                raise TaskError(
                    f"Task '{task.name}' failed: {e}",
                    exit_code=e.exit_code,
                    failed_tasks=(task.name, *e.failed_tasks),
                ) from e
        return plan
