# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

"""Naming conventions tying WSDL components, source sets, tasks and directories together.

A JVM binary such as `main` or `integrationTest` owns the WSDL component `wsdlMain` or
`wsdlIntegrationTest`. A source set `weather` of that component lives in
`src/main/weather` (`src/integration-test/weather`), is generated by the task
`wsimportWeather` (`wsimportIntegrationTestWeather`) into
`<build dir>/generated/wsimport/main/weather`, and all of the component's generation tasks are
aggregated by `wsimport` (`wsimportIntegrationTest`).
"""

from __future__ import annotations

from pathlib import Path, PurePath

from wsimport_build.jvm.target_types import MAIN_SOURCE_SET_NAME, TEST_SOURCE_SET_NAME, task_name
from wsimport_build.util.case_format import CaseFormat
from wsimport_build.util.strutil import strip_prefix

WSDL_PREFIX = "wsdl"
WSIMPORT_PREFIX = "wsimport"
COMPILE_PREFIX = "compile"

DEFAULT_SOURCE_SET_NAMES = (MAIN_SOURCE_SET_NAME, TEST_SOURCE_SET_NAME)

task_name_case = CaseFormat.LOWER_CAMEL.converter_to(CaseFormat.UPPER_CAMEL)
component_name_case = CaseFormat.UPPER_CAMEL.converter_to(CaseFormat.LOWER_CAMEL)
directory_name = CaseFormat.LOWER_CAMEL.converter_to(CaseFormat.LOWER_HYPHEN)


def source_directory(component_name: str, source_name: str) -> PurePath:
    """The source directory of a source set, relative to the project root."""
    return PurePath("src", directory_name(component_name), directory_name(source_name))


def generated_sources_directory(build_dir: Path, component_name: str, source_name: str) -> Path:
    return build_dir.joinpath(
        "generated", WSIMPORT_PREFIX, directory_name(component_name), directory_name(source_name)
    )


def wsimport_task_name(component_name: str, source_name: str) -> str:
    """The generation task of a source set, or with an empty `source_name` the aggregate task of a
    component."""
    return task_name(WSIMPORT_PREFIX, component_name, source_name)


def compile_task_name(component_name: str, source_name: str) -> str:
    return task_name(COMPILE_PREFIX, component_name, source_name)


def wsdl_component_name(component_name: str) -> str:
    return WSDL_PREFIX + task_name_case(component_name)


def standard_component_name(component_name: str) -> str:
    if component_name.startswith(WSDL_PREFIX):
        return component_name_case(strip_prefix(component_name, WSDL_PREFIX))
    return component_name
