# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from __future__ import annotations

from enum import Enum
from typing import Callable


def _lower(word: str) -> str:
    return word.lower()


def _upper(word: str) -> str:
    return word.upper()


def _first_char_only_to_upper(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def _is_upper_ascii(c: str) -> bool:
    return "A" <= c <= "Z"


class CaseFormat(Enum):
    """Naming formats for identifiers, with conversions between them.

    Words are separated at the format's word boundary: an upper case ASCII letter for the camel
    formats, or the separator character otherwise. A boundary at the very first character does not
    start a new word, so `UPPER_CAMEL` names convert cleanly.
    """

    LOWER_HYPHEN = ("lower-hyphen", "-", _lower, _lower)
    LOWER_UNDERSCORE = ("lower_underscore", "_", _lower, _lower)
    LOWER_CAMEL = ("lowerCamel", "", _first_char_only_to_upper, _lower)
    UPPER_CAMEL = ("UpperCamel", "", _first_char_only_to_upper, _first_char_only_to_upper)
    UPPER_UNDERSCORE = ("UPPER_UNDERSCORE", "_", _upper, _upper)

    _separator: str
    _normalize_word: Callable[[str], str]
    _normalize_first_word: Callable[[str], str]

    def __new__(
        cls,
        value: str,
        separator: str,
        normalize_word: Callable[[str], str],
        normalize_first_word: Callable[[str], str],
    ) -> CaseFormat:
        member: CaseFormat = object.__new__(cls)
        member._value_ = value
        member._separator = separator
        member._normalize_word = normalize_word
        member._normalize_first_word = normalize_first_word
        return member

    def _is_boundary(self, c: str) -> bool:
        if self._separator:
            return c == self._separator
        return _is_upper_ascii(c)

    def words(self, s: str) -> list[str]:
        """Split `s`, which is assumed to be in this format, into its words."""
        words = []
        start = 0
        for i, c in enumerate(s):
            if i > 0 and self._is_boundary(c):
                words.append(s[start:i])
                start = i + len(self._separator)
        words.append(s[start:])
        return words

    def to(self, target: CaseFormat, s: str) -> str:
        """Convert `s` from this format into the `target` format."""
        if target is self:
            return s
        first, *rest = self.words(s)
        normalized = [target._normalize_first_word(first)]
        normalized.extend(target._normalize_word(word) for word in rest)
        return target._separator.join(normalized)

    def converter_to(self, target: CaseFormat) -> Callable[[str], str]:
        return lambda s: self.to(target, s)
