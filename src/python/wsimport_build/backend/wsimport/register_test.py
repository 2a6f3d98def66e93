# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from __future__ import annotations

from pathlib import Path
from textwrap import dedent

import pytest

from wsimport_build.backend.wsimport.register import (
    WsimportPlugin,
    configure_components,
    configure_subsystem,
)
from wsimport_build.backend.wsimport.rules import wsimport_components, wsimport_subsystem
from wsimport_build.backend.wsimport.subsystem import WsimportSubsystem
from wsimport_build.base.exceptions import ConfigError, DuplicateComponentError
from wsimport_build.option.config import Config
from wsimport_build.project import Project
from wsimport_build.util.dirutil import touch


def parse(content: str, root: Path) -> Config:
    return Config.parse(dedent(content), source="wsimport.toml", buildroot=root, env={})


def test_configure_components(tmp_path: Path) -> None:
    project = Project(tmp_path)
    project.apply(WsimportPlugin)
    config = parse(
        """\
        [components.wsdlMain.sources.weather]
        extensions = ["Xfluent-api"]
        source_dirs = ["wsdl/weather"]
        binding_dirs = ["bindings"]
        includes = ["*.wsdl"]
        excludes = ["legacy/"]

        [components.wsdlIntegrationTest.sources.pingPong]
        """,
        tmp_path,
    )
    configure_components(project, config)

    root = tmp_path.absolute()
    components = wsimport_components(project)
    assert ("wsdlMain", "wsdlIntegrationTest") == components.names

    weather = components["wsdlMain"].sources["weather"]
    assert (root / "wsdl/weather",) == weather.source.src_dirs
    assert ("*.wsdl",) == weather.source.includes
    assert ("legacy/",) == weather.source.excludes
    assert (root / "bindings",) == weather.bindings.src_dirs
    assert ("**/*.xjb",) == weather.bindings.includes
    assert ("Xfluent-api",) == weather.xjc.extensions

    ping_pong = components["wsdlIntegrationTest"].sources["pingPong"]
    assert (root / "src/integration-test/ping-pong",) == ping_pong.source.src_dirs
    assert ("**/*.wsdl",) == ping_pong.source.includes
    assert () == ping_pong.xjc.extensions


@pytest.mark.parametrize(
    "content, match",
    [
        ("[components]\nwsdlMain = 1\n", r"\[components.wsdlMain\]"),
        ("[components.wsdlMain]\nwsdl_dir = 'x'\n", "wsdl_dir"),
        ("[components.wsdlMain]\nsources = 1\n", "sources"),
        ("[components.wsdlMain.sources]\nwsdl = 1\n", r"\[components.wsdlMain.sources.wsdl\]"),
        ("[components.wsdlMain.sources.wsdl]\nsrc = ['a']\n", "src"),
        ("[components.wsdlMain.sources.wsdl]\nextensions = 'Xfoo'\n", "string list"),
    ],
)
def test_configure_components_invalid(tmp_path: Path, content: str, match: str) -> None:
    project = Project(tmp_path)
    project.apply(WsimportPlugin)
    with pytest.raises(ConfigError, match=match):
        configure_components(project, parse(content, tmp_path))


def test_configure_components_twice(tmp_path: Path) -> None:
    project = Project(tmp_path)
    project.apply(WsimportPlugin)
    config = parse("[components.wsdlMain.sources.wsdl]\n", tmp_path)
    configure_components(project, config)
    with pytest.raises(DuplicateComponentError):
        configure_components(project, config)


def test_configure_subsystem(tmp_path: Path) -> None:
    touch(tmp_path / "lib/jaxws/jaxws-tools.jar")
    touch(tmp_path / "lib/jaxws/jaxws-rt.jar")
    project = Project(tmp_path)
    project.apply(WsimportPlugin)
    subsystem = WsimportSubsystem(
        jaxws_classpath=("lib/jaxws/*.jar",),
        xjc_classpath=("lib/xjc.jar",),
        compile_classpath=("lib/api.jar",),
    )
    configure_subsystem(project, subsystem)

    root = tmp_path.absolute()
    assert subsystem is wsimport_subsystem(project)
    assert (
        root / "lib/jaxws/jaxws-rt.jar",
        root / "lib/jaxws/jaxws-tools.jar",
        root / "lib/api.jar",
    ) == project.configurations["jaxws"].resolve()
    assert str(root / "lib/xjc.jar") == project.configurations["xjc"].as_path()
