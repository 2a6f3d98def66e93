# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from __future__ import annotations

import re
import textwrap
from typing import Iterable

_shell_unsafe_chars_pattern = re.compile(r"[^\w@%+=:,./-]").search
_paragraph_break_re = re.compile(r"\n\s*\n")


def strip_prefix(string: str, prefix: str) -> str:
    """Returns a copy of the string from which the multi-character prefix has been stripped.

    Use strip_prefix() instead of lstrip() to remove a substring (instead of individual characters)
    from the beginning of a string, if the substring is present.
    """
    if string.startswith(prefix):
        return string[len(prefix) :]
    return string


def shell_quote(s: str) -> str:
    """Return a shell-escaped version of the string *s*."""
    if not s:
        return "''"
    if _shell_unsafe_chars_pattern(s) is None:
        return s
    return "'" + s.replace("'", "'\"'\"'") + "'"


def safe_shlex_join(arg_list: Iterable[str]) -> str:
    """Join a list of strings into a shlex-able string."""
    return " ".join(shell_quote(arg) for arg in arg_list)


def pluralize(count: int, item_type: str, include_count: bool = True) -> str:
    """Pluralizes the item_type if the count does not equal one.

    For example `pluralize(1, 'task')` returns '1 task', while `pluralize(0, 'task')` returns
    '0 tasks'.
    """
    if count == 1:
        pluralized = item_type
    elif item_type.endswith("s"):
        pluralized = item_type + "es"
    elif item_type.endswith("y"):
        pluralized = item_type[:-1] + "ies"
    else:
        pluralized = item_type + "s"
    return f"{count} {pluralized}" if include_count else pluralized


def bullet_list(elements: Iterable[str]) -> str:
    """Format a bullet list with padding.

    Callers should normally use `\n\n` before this so that the bullets appear as a distinct section.
    """
    elements = tuple(elements)
    if not elements:
        return ""
    sep = "\n  * "
    return f"  * {sep.join(elements)}"


def softwrap(text: str) -> str:
    """Turns a multiline-ish source string into a softwrapped string.

    The text is dedented, single newlines inside a paragraph become spaces and paragraphs stay
    separated by exactly one blank line.
    """
    if not text:
        return text
    paragraphs = _paragraph_break_re.split(textwrap.dedent(text).strip())
    return "\n\n".join(" ".join(line.strip() for line in p.splitlines()) for p in paragraphs)
