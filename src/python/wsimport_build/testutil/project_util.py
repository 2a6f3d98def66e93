# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from __future__ import annotations

from pathlib import Path
from typing import Mapping

from wsimport_build.util.dirutil import safe_file_dump

MINIMAL_WSDL = """\
<?xml version="1.0" encoding="UTF-8"?>
<definitions xmlns="http://schemas.xmlsoap.org/wsdl/" name="Minimal"/>
"""


def create_files(root: str | Path, files: Mapping[str, str]) -> None:
    """Lay out `files` (relative path to content) below `root`."""
    for relpath, content in files.items():
        safe_file_dump(Path(root, relpath), content)


def create_wsdls(root: str | Path, *relpaths: str) -> None:
    """Create placeholder WSDL (or binding) files at the given paths below `root`."""
    create_files(root, {relpath: MINIMAL_WSDL for relpath in relpaths})
