# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from __future__ import annotations

from pathlib import Path
from typing import TypeVar

from wsimport_build.engine.tasks import Task
from wsimport_build.source.filespec import SourceDirectorySet
from wsimport_build.util.case_format import CaseFormat

MAIN_SOURCE_SET_NAME = "main"
TEST_SOURCE_SET_NAME = "test"

_upper_camel = CaseFormat.LOWER_CAMEL.converter_to(CaseFormat.UPPER_CAMEL)

_S = TypeVar("_S", bound=SourceDirectorySet)


def task_name(verb: str, source_set_name: str, target: str = "") -> str:
    """Returns the name of the task performing `verb` on `target` of a source set.

    The `main` source set is implied, so `task_name("compile", "main", "java")` is `compileJava`
    while `task_name("compile", "test", "java")` is `compileTestJava`.
    """
    name = verb
    if source_set_name != MAIN_SOURCE_SET_NAME:
        name += _upper_camel(source_set_name)
    return name + _upper_camel(target)


class JavaSourceSet(SourceDirectorySet):
    """Java sources compiled into a JVM binary."""


class JvmResourceSet(SourceDirectorySet):
    """Resources copied onto the classpath of a JVM binary."""


class JvmBinarySpec:
    """A JVM binary (`main`, `test`) and the source sets it is built from."""

    def __init__(self, name: str, root: Path) -> None:
        self.name = name
        self.inputs: list[SourceDirectorySet] = [
            JavaSourceSet("java", name, root=root).include("**/*.java"),
            JvmResourceSet("resources", name, root=root),
        ]

    def __repr__(self) -> str:
        return f"JvmBinarySpec({self.name})"

    def inputs_with_type(self, source_set_type: type[_S]) -> list[_S]:
        return [s for s in self.inputs if isinstance(s, source_set_type)]


class JavaCompile(Task):
    """Compiles a binary's Java sources; the sources are its only model."""

    source: JavaSourceSet


class GenerateEclipseClasspath(Task):
    """Generates the Eclipse `.classpath` for a project."""
