# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from __future__ import annotations

import logging
from pathlib import Path

from wsimport_build.backend.wsimport.register import (
    WsimportPlugin,
    configure_components,
    configure_subsystem,
)
from wsimport_build.backend.wsimport.subsystem import WsimportSubsystem
from wsimport_build.option.config import DEFAULT_CONFIG_FILE, Config
from wsimport_build.option.global_options import GlobalOptions
from wsimport_build.project import Project

logger = logging.getLogger(__name__)


def load_config(root: Path, config_file: str | Path | None = None) -> Config:
    """Loads the project's config file; a missing default config file means all defaults."""
    if config_file is None:
        path = root / DEFAULT_CONFIG_FILE
        if not path.is_file():
            logger.debug("No %s in %s, using defaults", DEFAULT_CONFIG_FILE, root)
            return Config.empty()
    else:
        path = root / config_file
    return Config.load(path, buildroot=root)


def load_project(root: str | Path, config: Config, global_options: GlobalOptions) -> Project:
    """Creates the project at `root`, applies the wsimport plugin, configures and evaluates it."""
    project = Project(root, build_dir=global_options.build_dir)
    project.apply(WsimportPlugin)
    configure_subsystem(project, WsimportSubsystem.from_config(config))
    configure_components(project, config)
    return project.evaluate()
