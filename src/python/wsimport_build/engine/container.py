# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from __future__ import annotations

from typing import Callable, Generic, Iterator, TypeVar

from wsimport_build.base.exceptions import DuplicateComponentError

_T = TypeVar("_T")


class NamedContainer(Generic[_T]):
    """An ordered collection of uniquely named model elements.

    Elements are built by the container's factory. Hooks registered with `on_create` run against
    every new element before the caller's own configure callback, so they act as defaults the
    caller may override.
    """

    def __init__(self, kind: str, factory: Callable[[str], _T]) -> None:
        self._kind = kind
        self._factory = factory
        self._elements: dict[str, _T] = {}
        self._create_hooks: list[Callable[[_T], None]] = []

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._kind}: {', '.join(self._elements)})"

    def on_create(self, hook: Callable[[_T], None]) -> None:
        self._create_hooks.append(hook)

    def create(self, name: str, configure: Callable[[_T], None] | None = None) -> _T:
        if name in self._elements:
            raise DuplicateComponentError(
                f"Cannot create {self._kind} '{name}' as one with that name already exists."
            )
        element = self._factory(name)
        for hook in self._create_hooks:
            hook(element)
        if configure is not None:
            configure(element)
        self._elements[name] = element
        return element

    def maybe_create(self, name: str, configure: Callable[[_T], None] | None = None) -> _T:
        """Returns the element named `name`, configuring it, and creating it first if needed."""
        element = self._elements.get(name)
        if element is None:
            return self.create(name, configure)
        if configure is not None:
            configure(element)
        return element

    def get(self, name: str) -> _T | None:
        return self._elements.get(name)

    def __getitem__(self, name: str) -> _T:
        return self._elements[name]

    def __contains__(self, name: object) -> bool:
        return name in self._elements

    def __iter__(self) -> Iterator[_T]:
        return iter(tuple(self._elements.values()))

    def __len__(self) -> int:
        return len(self._elements)

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self._elements)
