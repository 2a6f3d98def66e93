# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from __future__ import annotations

from pathlib import Path

import pytest

from wsimport_build.backend.wsimport.register import WsimportPlugin
from wsimport_build.backend.wsimport.rules import GENERATED_GROUP, wsimport_components
from wsimport_build.backend.wsimport.wsimport_task import WsimportTask
from wsimport_build.base.exceptions import InvalidComponentNameError
from wsimport_build.jvm.register import jvm_binaries
from wsimport_build.jvm.target_types import JavaSourceSet, JvmResourceSet
from wsimport_build.project import Project
from wsimport_build.testutil.project_util import create_wsdls


def wsimport_project(root: Path) -> Project:
    project = Project(root)
    project.apply(WsimportPlugin)
    return project


def generation_tasks(project: Project) -> list[str]:
    return [task.name for task in project.tasks.with_type(WsimportTask)]


def test_no_wsdl_directories(tmp_path: Path) -> None:
    project = wsimport_project(tmp_path).evaluate()

    assert ("wsdlMain", "wsdlTest") == wsimport_components(project).names
    assert [] == generation_tasks(project)
    assert ("compileJava", "compileTestJava", "eclipseClasspath") == project.tasks.names
    assert () == project.tasks.get("compileJava").dependencies


def test_conventional_wsdl_directories(tmp_path: Path) -> None:
    create_wsdls(tmp_path, "src/main/wsdl/hello.wsdl", "src/test/wsdl/stub.wsdl")
    project = wsimport_project(tmp_path).evaluate()
    root = tmp_path.absolute()

    components = wsimport_components(project)
    main_wsdl = components["wsdlMain"].sources["wsdl"]
    assert (root / "src/main/wsdl",) == main_wsdl.source.src_dirs
    assert ("**/*.wsdl",) == main_wsdl.source.includes
    assert (root / "src/main/wsdl",) == main_wsdl.bindings.src_dirs
    assert ("**/*.xjb",) == main_wsdl.bindings.includes

    assert ["wsimportWsdl", "wsimportTestWsdl"] == generation_tasks(project)

    task = project.tasks.get("wsimportWsdl")
    assert isinstance(task, WsimportTask)
    assert "Run wsimport on WSDL source 'wsdlMain:wsdl'" == task.description
    assert GENERATED_GROUP == task.group
    assert root / "build/generated/wsimport/main/wsdl" == task.destination_dir
    assert task.wsdls is not None
    assert (root / "src/main/wsdl/hello.wsdl",) == task.wsdls.files

    test_task = project.tasks.get("wsimportTestWsdl")
    assert isinstance(test_task, WsimportTask)
    assert root / "build/generated/wsimport/test/wsdl" == test_task.destination_dir

    aggregate = project.tasks.get("wsimport")
    assert "Run wsimport on component wsdlMain" == aggregate.description
    assert GENERATED_GROUP == aggregate.group
    assert ("wsimportWsdl",) == aggregate.dependencies
    assert ("wsimportTestWsdl",) == project.tasks.get("wsimportTest").dependencies

    assert ("wsimportWsdl",) == project.tasks.get("compileJava").dependencies
    assert ("wsimportTestWsdl",) == project.tasks.get("compileTestJava").dependencies
    assert ("wsimportWsdl", "wsimportTestWsdl") == (
        project.tasks.get("eclipseClasspath").dependencies
    )


def test_one_task_per_source_set_and_one_aggregate_per_component(tmp_path: Path) -> None:
    create_wsdls(tmp_path, "src/main/wsdl/hello.wsdl")
    project = wsimport_project(tmp_path)
    components = wsimport_components(project)
    main = components.create("wsdlMain")
    main.sources.create("weather")
    main.sources.create("billing")
    components.create("wsdlIntegrationTest").sources.create("pingPong")
    project.evaluate()

    assert [
        "wsimportWeather",
        "wsimportBilling",
        "wsimportWsdl",
        "wsimportIntegrationTestPingPong",
    ] == generation_tasks(project)
    assert ("wsimportWeather", "wsimportBilling", "wsimportWsdl") == (
        project.tasks.get("wsimport").dependencies
    )
    assert ("wsimportIntegrationTestPingPong",) == (
        project.tasks.get("wsimportIntegrationTest").dependencies
    )
    # wsdlTest has no source sets, so it gets no aggregate task.
    assert "wsimportTest" not in project.tasks
    assert ("wsimportWeather", "wsimportBilling", "wsimportWsdl") == (
        project.tasks.get("compileJava").dependencies
    )
    assert "wsimportIntegrationTestPingPong" in project.tasks.get("eclipseClasspath").dependencies

    pong = project.tasks.get("wsimportIntegrationTestPingPong")
    assert isinstance(pong, WsimportTask)
    root = tmp_path.absolute()
    assert root / "build/generated/wsimport/integration-test/ping-pong" == pong.destination_dir
    assert pong.wsdls is not None
    assert (root / "src/integration-test/ping-pong",) == pong.wsdls.directories


def test_user_configuration_overrides_defaults(tmp_path: Path) -> None:
    create_wsdls(tmp_path, "src/main/wsdl/hello.wsdl", "wsdls/other.wsdl")
    project = wsimport_project(tmp_path)

    def configure(wsdl_source) -> None:
        wsdl_source.source.set_src_dirs(["wsdls"])
        wsdl_source.xjc.extensions = ["Xfluent-api"]

    wsimport_components(project).create("wsdlMain").sources.create("wsdl", configure)
    project.evaluate()

    task = project.tasks.get("wsimportWsdl")
    assert isinstance(task, WsimportTask)
    assert task.wsdls is not None
    assert (tmp_path.absolute() / "wsdls/other.wsdl",) == task.wsdls.files
    assert ("Xfluent-api",) == task.xjc_extensions
    assert ["wsimportWsdl"] == generation_tasks(project)


def test_component_name_must_have_prefix(tmp_path: Path) -> None:
    project = wsimport_project(tmp_path)
    wsimport_components(project).create("soap")
    with pytest.raises(InvalidComponentNameError) as exc:
        project.evaluate()
    assert "Wsimport component name must start with 'wsdl', got 'soap'." == str(exc.value)
    assert "soap" == exc.value.component_name


def test_jvm_binaries_wiring(tmp_path: Path) -> None:
    create_wsdls(tmp_path, "src/main/wsdl/hello.wsdl")
    project = wsimport_project(tmp_path).evaluate()
    root = tmp_path.absolute()

    main = jvm_binaries(project)["main"]
    (java,) = main.inputs_with_type(JavaSourceSet)
    assert (root / "src/main/java", root / "build/generated/wsimport/main/wsdl") == java.src_dirs
    (resources,) = main.inputs_with_type(JvmResourceSet)
    assert (root / "src/main/resources", root / "src/main/wsdl") == resources.src_dirs

    test = jvm_binaries(project)["test"]
    (test_java,) = test.inputs_with_type(JavaSourceSet)
    assert (root / "src/test/java",) == test_java.src_dirs


def test_configurations(tmp_path: Path) -> None:
    project = wsimport_project(tmp_path)
    jaxws = project.configurations["jaxws"]
    assert not jaxws.visible
    assert ["com.sun.xml.ws:jaxws-tools:2.2.10"] == jaxws.dependencies
    project.configurations["compileClasspath"].files.append(Path("api.jar"))
    assert (Path("api.jar"),) == jaxws.resolve()
    assert "xjc" in project.configurations
