# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from __future__ import annotations

import sys
from typing import Callable, TextIO

from colors import cyan, green, red, yellow


class Console:
    """Writes command output, colored only when colors are enabled."""

    def __init__(self, stdout: TextIO | None = None, use_colors: bool = True) -> None:
        self._stdout = stdout or sys.stdout
        self._use_colors = use_colors

    @property
    def use_colors(self) -> bool:
        return self._use_colors

    def print_stdout(self, payload: str, end: str = "\n") -> None:
        self._stdout.write(f"{payload}{end}")

    def flush(self) -> None:
        self._stdout.flush()

    def _safe_color(self, text: str, color: Callable[[str], str]) -> str:
        return color(text) if self._use_colors else text

    def cyan(self, text: str) -> str:
        return self._safe_color(text, cyan)

    def green(self, text: str) -> str:
        return self._safe_color(text, green)

    def red(self, text: str) -> str:
        return self._safe_color(text, red)

    def yellow(self, text: str) -> str:
        return self._safe_color(text, yellow)
