# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from __future__ import annotations

from pathlib import Path

import pytest

from wsimport_build.backend.wsimport.rules import wsimport_components
from wsimport_build.backend.wsimport.wsimport_task import WsimportTask
from wsimport_build.base.exceptions import ConfigError
from wsimport_build.init.project_loader import load_config, load_project
from wsimport_build.option.config import Config
from wsimport_build.option.global_options import GlobalOptions
from wsimport_build.testutil.project_util import create_files, create_wsdls

EXAMPLES = Path(__file__).parents[4] / "examples"


def test_load_config_defaults(tmp_path: Path) -> None:
    assert Config.empty() == load_config(tmp_path)


def test_load_config_explicit_file_must_exist(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_config(tmp_path, "custom.toml")


def test_load_project(tmp_path: Path) -> None:
    create_wsdls(tmp_path, "src/main/wsdl/hello.wsdl", "wsdl/extra/extra.wsdl")
    create_files(
        tmp_path,
        {
            "build.toml": """\
[GLOBAL]
build_dir = "out"

[wsimport]
jaxws_classpath = ["lib/jaxws-tools.jar"]

[components.wsdlMain.sources.extra]
source_dirs = ["wsdl/extra"]
""",
        },
    )
    config = load_config(tmp_path, "build.toml")
    project = load_project(tmp_path, config, GlobalOptions.from_config(config))

    assert project.evaluated
    assert tmp_path.absolute() / "out" == project.build_dir
    assert ("extra", "wsdl") == wsimport_components(project)["wsdlMain"].sources.names
    assert ["wsimportExtra", "wsimportWsdl"] == [
        t.name for t in project.tasks.with_type(WsimportTask)
    ]
    extra = project.tasks.get("wsimportExtra")
    assert isinstance(extra, WsimportTask)
    assert tmp_path.absolute() / "out/generated/wsimport/main/extra" == extra.destination_dir
    assert (tmp_path.absolute() / "lib/jaxws-tools.jar",) == (
        project.configurations["jaxws"].resolve()
    )


@pytest.mark.parametrize(
    "example, wsdl",
    [
        ("wsimport-hello", "com/example/hello/client/PingPong.wsdl"),
        ("wsimport-weather", "Weather.wsdl"),
    ],
)
def test_examples(example: str, wsdl: str) -> None:
    root = EXAMPLES / example
    config = load_config(root)
    project = load_project(root, config, GlobalOptions.from_config(config))

    task = project.tasks.get("wsimportWsdl")
    assert isinstance(task, WsimportTask)
    assert task.wsdls is not None
    assert (root.absolute() / "src/main/wsdl" / wsdl,) == task.wsdls.files
    assert ("wsimportWsdl",) == project.tasks.get("compileJava").dependencies
