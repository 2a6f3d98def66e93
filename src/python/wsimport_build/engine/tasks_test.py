# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from __future__ import annotations

from pathlib import Path

import pytest

from wsimport_build.base.exceptions import (
    DuplicateTaskError,
    TaskCycleError,
    TaskError,
    UnknownTaskError,
)
from wsimport_build.engine.tasks import Task, TaskContainer, TaskGraph
from wsimport_build.project import Project


class RecordingTask(Task):
    executed: list[str] = []

    def execute(self) -> None:
        RecordingTask.executed.append(self.name)


class FailingTask(Task):
    def execute(self) -> None:
        raise TaskError("tool exited with 2", exit_code=2)


@pytest.fixture
def tasks(tmp_path: Path) -> TaskContainer:
    RecordingTask.executed = []
    return TaskContainer(Project(tmp_path))


def test_create_and_get(tasks: TaskContainer) -> None:
    task = tasks.create("generate", configure=lambda t: setattr(t, "group", "generated"))
    assert task is tasks.get("generate")
    assert "generated" == task.group
    assert "generate" in tasks
    assert ("generate",) == tasks.names
    assert 1 == len(tasks)
    assert not task.has_action


def test_duplicate_task(tasks: TaskContainer) -> None:
    tasks.create("generate")
    with pytest.raises(DuplicateTaskError, match="'generate'"):
        tasks.create("generate")


def test_unknown_task(tasks: TaskContainer) -> None:
    with pytest.raises(UnknownTaskError, match="'missing'"):
        tasks.get("missing")


def test_with_type(tasks: TaskContainer) -> None:
    tasks.create("a")
    recording = tasks.create("b", RecordingTask)
    assert [recording] == tasks.with_type(RecordingTask)
    assert recording.has_action


def test_depends_on_is_ordered_and_deduplicated(tasks: TaskContainer) -> None:
    task = tasks.create("compile").depends_on("b", "a").depends_on("b", "c")
    assert ("b", "a", "c") == task.dependencies


def test_execution_plan(tasks: TaskContainer) -> None:
    tasks.create("a")
    tasks.create("b").depends_on("a")
    tasks.create("c").depends_on("a")
    tasks.create("d").depends_on("c", "b")

    plan = TaskGraph(tasks).execution_plan(["d", "a"])
    assert ["a", "c", "b", "d"] == [t.name for t in plan]


def test_execution_plan_cycle(tasks: TaskContainer) -> None:
    tasks.create("a").depends_on("b")
    tasks.create("b").depends_on("c")
    tasks.create("c").depends_on("a")

    with pytest.raises(TaskCycleError) as exc:
        TaskGraph(tasks).execution_plan(["a"])
    assert "a -> b" in str(exc.value)
    assert "c -> a" in str(exc.value)
    assert ("a", "b", "c") == exc.value.failed_tasks


def test_execution_plan_unknown_dependency(tasks: TaskContainer) -> None:
    tasks.create("a").depends_on("missing")
    with pytest.raises(UnknownTaskError):
        TaskGraph(tasks).execution_plan(["a"])


def test_execution_plan_requires_tasks(tasks: TaskContainer) -> None:
    with pytest.raises(TaskError, match="No tasks"):
        TaskGraph(tasks).execution_plan([])


def test_execute(tasks: TaskContainer) -> None:
    tasks.create("first", RecordingTask)
    tasks.create("second", RecordingTask).depends_on("first")
    tasks.create("all").depends_on("second")

    plan = TaskGraph(tasks).execute(["all"])
    assert ["first", "second", "all"] == [t.name for t in plan]
    assert ["first", "second"] == RecordingTask.executed


def test_execute_stops_at_failure(tasks: TaskContainer) -> None:
    tasks.create("broken", FailingTask)
    tasks.create("after", RecordingTask).depends_on("broken")

    with pytest.raises(TaskError) as exc:
        TaskGraph(tasks).execute(["after"])
    assert 2 == exc.value.exit_code
    assert ("broken",) == exc.value.failed_tasks
    assert "Task 'broken' failed: tool exited with 2" == str(exc.value)
    assert [] == RecordingTask.executed
