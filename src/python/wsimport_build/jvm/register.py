# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

"""The JVM base plugin: binaries with Java sources and resources, their compile tasks and the
Eclipse classpath task.

Other plugins hook into the compile graph by adding source directories to a binary's inputs and by
adding dependencies to the compile tasks.
"""

from __future__ import annotations

from wsimport_build.engine.container import NamedContainer
from wsimport_build.jvm.target_types import (
    MAIN_SOURCE_SET_NAME,
    TEST_SOURCE_SET_NAME,
    GenerateEclipseClasspath,
    JavaCompile,
    JavaSourceSet,
    JvmBinarySpec,
    JvmResourceSet,
    task_name,
)
from wsimport_build.project import Project

BINARIES_EXTENSION = "binaries"
COMPILE_CLASSPATH = "compileClasspath"
ECLIPSE_CLASSPATH_TASK = "eclipseClasspath"


def jvm_binaries(project: Project) -> NamedContainer[JvmBinarySpec]:
    return project.extensions[BINARIES_EXTENSION]


def _create_binary(project: Project, binaries: NamedContainer[JvmBinarySpec], name: str) -> None:
    binary = binaries.create(name)
    (java,) = binary.inputs_with_type(JavaSourceSet)
    java.src_dir(f"src/{name}/java")
    (resources,) = binary.inputs_with_type(JvmResourceSet)
    resources.src_dir(f"src/{name}/resources")

    def configure_compile(task: JavaCompile) -> None:
        task.description = f"Compiles {name} Java source."
        task.group = "build"
        task.source = java

    project.tasks.create(task_name("compile", name, "java"), JavaCompile, configure_compile)


class JvmBasePlugin:
    def apply(self, project: Project) -> None:
        compile_classpath = project.configurations.create(COMPILE_CLASSPATH)
        compile_classpath.description = "Compile classpath for the main source set."

        binaries: NamedContainer[JvmBinarySpec] = NamedContainer(
            "binary", lambda name: JvmBinarySpec(name, project.root)
        )
        project.extensions[BINARIES_EXTENSION] = binaries
        for name in (MAIN_SOURCE_SET_NAME, TEST_SOURCE_SET_NAME):
            _create_binary(project, binaries, name)

        def configure_eclipse(task: GenerateEclipseClasspath) -> None:
            task.description = "Generates the Eclipse classpath file."
            task.group = "IDE"

        project.tasks.create(ECLIPSE_CLASSPATH_TASK, GenerateEclipseClasspath, configure_eclipse)
