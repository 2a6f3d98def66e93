# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from wsimport_build.project import Project

logger = logging.getLogger(__name__)


class ModelPhase(Enum):
    """The phases in which model rules run when a project is evaluated, in order.

    Defaults for individual elements are installed as container creation hooks instead, since they
    must run before user configuration.
    """

    FINALIZE = "finalize"
    VALIDATE = "validate"
    MUTATE = "mutate"


ModelRuleFunc = Callable[["Project"], None]


@dataclass(frozen=True)
class ModelRule:
    phase: ModelPhase
    func: ModelRuleFunc

    @property
    def name(self) -> str:
        return getattr(self.func, "__qualname__", repr(self.func))


class ModelRules:
    """The model rules plugins have installed into a project."""

    def __init__(self) -> None:
        self._rules: list[ModelRule] = []

    def add(self, phase: ModelPhase, func: ModelRuleFunc) -> None:
        self._rules.append(ModelRule(phase, func))

    def for_phase(self, phase: ModelPhase) -> tuple[ModelRule, ...]:
        return tuple(rule for rule in self._rules if rule.phase == phase)

    def run(self, project: Project) -> None:
        for phase in ModelPhase:
            for rule in self.for_phase(phase):
                logger.debug("Running %s rule %s", phase.value, rule.name)
                rule.func(project)
