# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

"""Model rules of the wsimport plugin.

Source set defaults are applied as each source set is created; the remaining rules run when the
project is evaluated, in phase order: finalize, validate, mutate.
"""

from __future__ import annotations

import logging
from typing import Callable

from wsimport_build.backend.wsimport.naming import (
    DEFAULT_SOURCE_SET_NAMES,
    WSDL_PREFIX,
    compile_task_name,
    generated_sources_directory,
    source_directory,
    standard_component_name,
    wsdl_component_name,
    wsimport_task_name,
)
from wsimport_build.backend.wsimport.subsystem import WsimportSubsystem
from wsimport_build.backend.wsimport.target_types import WsdlSourceSet, WsimportComponent
from wsimport_build.backend.wsimport.wsimport_task import WsimportTask
from wsimport_build.base.exceptions import InvalidComponentNameError
from wsimport_build.engine.container import NamedContainer
from wsimport_build.engine.model import ModelPhase
from wsimport_build.jvm.register import jvm_binaries
from wsimport_build.jvm.target_types import GenerateEclipseClasspath, JavaSourceSet, JvmResourceSet
from wsimport_build.project import Project

logger = logging.getLogger(__name__)

COMPONENTS_EXTENSION = "wsimport_components"
SUBSYSTEM_EXTENSION = "wsimport"
GENERATED_GROUP = "generated"


def wsimport_components(project: Project) -> NamedContainer[WsimportComponent]:
    return project.extensions[COMPONENTS_EXTENSION]


def wsimport_subsystem(project: Project) -> WsimportSubsystem:
    return project.extensions.get(SUBSYSTEM_EXTENSION) or WsimportSubsystem()


def initialize_wsdl_source_set(wsdl_source: WsdlSourceSet) -> None:
    """Points a new source set at its conventional directory, before user configuration."""
    component_name = standard_component_name(wsdl_source.parent_name)
    directory = source_directory(component_name, wsdl_source.name)

    wsdl_source.source.src_dir(directory)
    wsdl_source.source.include("**/*.wsdl")

    wsdl_source.bindings.src_dir(directory)
    wsdl_source.bindings.include("**/*.xjb")


def validate_wsimport_component(component: WsimportComponent) -> None:
    if not component.name.startswith(WSDL_PREFIX):
        raise InvalidComponentNameError(
            component.name,
            f"Wsimport component name must start with '{WSDL_PREFIX}', got '{component.name}'.",
        )


def validate_wsimport_components(project: Project) -> None:
    for component in wsimport_components(project):
        validate_wsimport_component(component)


def create_wsdl_source_sets(project: Project) -> None:
    """Ensures the `main` and `test` components exist, with a `wsdl` source set whenever the
    conventional `src/<name>/wsdl` directory does."""
    components = wsimport_components(project)
    for component_name in DEFAULT_SOURCE_SET_NAMES:
        directory = project.file(source_directory(component_name, "wsdl"))
        component = components.maybe_create(wsdl_component_name(component_name))
        if directory.is_dir() and "wsdl" not in component.sources:
            logger.debug("Found WSDL directory %s for %s", directory, component)
            component.sources.create("wsdl", lambda s: s.source.set_src_dirs([directory]))


def create_wsimport_tasks(project: Project) -> None:
    components = wsimport_components(project)
    subsystem = wsimport_subsystem(project)
    task_names: dict[str, list[str]] = {}

    for component in components:
        component_name = standard_component_name(component.name)
        for wsdl_source in component.sources:
            task = project.tasks.create(
                wsimport_task_name(component_name, wsdl_source.name),
                WsimportTask,
                _configure_wsimport_task(project, subsystem, component_name, wsdl_source),
            )
            task_names.setdefault(component.name, []).append(task.name)

    for name, wsimport_tasks in task_names.items():
        aggregate = project.tasks.create(wsimport_task_name(standard_component_name(name), ""))
        aggregate.description = f"Run wsimport on component {name}"
        aggregate.group = GENERATED_GROUP
        aggregate.depends_on(*wsimport_tasks)

    for name, wsimport_tasks in task_names.items():
        compile_task = compile_task_name(standard_component_name(name), "java")
        if compile_task in project.tasks:
            project.tasks.get(compile_task).depends_on(*wsimport_tasks)


def _configure_wsimport_task(
    project: Project,
    subsystem: WsimportSubsystem,
    component_name: str,
    wsdl_source: WsdlSourceSet,
) -> Callable[[WsimportTask], None]:
    def configure(task: WsimportTask) -> None:
        task.description = f"Run wsimport on {wsdl_source}"
        task.group = GENERATED_GROUP
        task.destination_dir = generated_sources_directory(
            project.build_dir, component_name, wsdl_source.name
        )
        task.wsdls = wsdl_source.source.as_file_tree()
        task.bindings = wsdl_source.bindings.as_file_tree()
        task.xjc_extensions = wsdl_source.xjc.extensions
        task.subsystem = subsystem

    return configure


def configure_generate_eclipse_task(project: Project) -> None:
    wsimport_tasks = [
        wsimport_task_name(standard_component_name(component.name), source.name)
        for component in wsimport_components(project)
        for source in component.sources
    ]
    for eclipse_task in project.tasks.with_type(GenerateEclipseClasspath):
        eclipse_task.depends_on(*wsimport_tasks)


def configure_jvm_binaries(project: Project) -> None:
    """Compiles generated sources with each binary's Java sources, and ships the WSDLs as its
    resources."""
    components = wsimport_components(project)
    for binary in jvm_binaries(project):
        component = components.get(wsdl_component_name(binary.name))
        if component is None:
            continue
        for java in binary.inputs_with_type(JavaSourceSet):
            if java.name == "java":
                for wsdl_source in component.sources:
                    java.src_dir(
                        generated_sources_directory(
                            project.build_dir, binary.name, wsdl_source.name
                        )
                    )
        for resources in binary.inputs_with_type(JvmResourceSet):
            if resources.name == "resources":
                for wsdl_source in component.sources:
                    for directory in wsdl_source.source.src_dirs:
                        resources.src_dir(directory)


def install_rules(project: Project) -> None:
    project.rule(ModelPhase.FINALIZE, create_wsdl_source_sets)
    project.rule(ModelPhase.VALIDATE, validate_wsimport_components)
    project.rule(ModelPhase.MUTATE, create_wsimport_tasks)
    project.rule(ModelPhase.MUTATE, configure_generate_eclipse_task)
    project.rule(ModelPhase.MUTATE, configure_jvm_binaries)
