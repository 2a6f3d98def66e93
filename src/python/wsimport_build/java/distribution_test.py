# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

import os
from pathlib import Path

import pytest

from wsimport_build.java.distribution import Distribution, Location, jvm_locations
from wsimport_build.java.testutil import fake_java_home


def test_jvm_locations_order() -> None:
    env = {
        "JAVA_HOME": "/opt/java",
        "JDK_HOME": "/opt/jdk",
        "PATH": os.pathsep.join(["/usr/local/bin", "", "/usr/bin"]),
    }
    assert [
        Location("/opt/jdk", "/opt/jdk/bin"),
        Location("/opt/java", "/opt/java/bin"),
        Location(None, "/usr/local/bin"),
        Location(None, "/usr/bin"),
    ] == list(jvm_locations(env))


def test_locate_explicit_home(tmp_path: Path) -> None:
    home = fake_java_home(tmp_path)
    distribution = Distribution.locate(str(home))
    assert str(home / "bin" / "java") == distribution.java
    assert str(home) == distribution.home


def test_locate_from_path(tmp_path: Path) -> None:
    home = fake_java_home(tmp_path)
    env = {"PATH": os.pathsep.join([str(tmp_path / "empty"), str(home / "bin")])}
    assert str(home / "bin" / "java") == Distribution.locate(env=env).java


def test_locate_failure(tmp_path: Path) -> None:
    with pytest.raises(Distribution.Error, match="Failed to locate a java distribution"):
        Distribution.locate(env={"JAVA_HOME": str(tmp_path)})


def test_invalid_distribution(tmp_path: Path) -> None:
    distribution = Distribution(Location.from_home(str(tmp_path)))
    with pytest.raises(Distribution.Error):
        distribution.java
