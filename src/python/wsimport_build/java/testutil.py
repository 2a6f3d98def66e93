# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from __future__ import annotations

import os
from pathlib import Path

from wsimport_build.util.dirutil import safe_file_dump


def fake_java_home(root: Path, exit_code: int = 0) -> Path:
    """Creates a java home whose `java` records its working directory and arguments.

    Each invocation appends `<cwd> <args...>` as one line to `<home>/invocations.log` and exits
    with `exit_code`.
    """
    home = root / "fake-jdk"
    java = home / "bin" / "java"
    log = home / "invocations.log"
    safe_file_dump(
        java,
        f'#!/bin/sh\necho "$(pwd) $*" >> "{log}"\nexit {exit_code}\n',
    )
    os.chmod(java, 0o755)
    return home


def recorded_invocations(home: Path) -> list[str]:
    log = home / "invocations.log"
    return log.read_text().splitlines() if log.exists() else []
