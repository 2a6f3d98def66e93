# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from __future__ import annotations

import logging
from pathlib import Path, PurePath
from typing import TYPE_CHECKING, Iterable, Union

from wsimport_build.backend.wsimport.subsystem import WsimportSubsystem
from wsimport_build.base.exceptions import TaskError
from wsimport_build.engine.tasks import Task
from wsimport_build.java.distribution import Distribution
from wsimport_build.java.executor import CommandLineGrabber, Executor, SubprocessExecutor
from wsimport_build.source.filespec import FileTree, FileVisitDetails
from wsimport_build.util.dirutil import safe_mkdir
from wsimport_build.util.strutil import pluralize, safe_shlex_join

if TYPE_CHECKING:
    from wsimport_build.project import Project

logger = logging.getLogger(__name__)

JAXWS_CONFIGURATION = "jaxws"
XJC_CONFIGURATION = "xjc"

# `True` renders a bare flag; `None` drops the option.
OptionValue = Union[str, Path, bool, None]


def package_name(wsdl_file: PurePath) -> str | None:
    """The Java package for a WSDL file, from its directory relative to the source root."""
    parent = wsdl_file.parent
    if parent == PurePath("."):
        return None
    return ".".join(parent.parts)


def create_arguments(options: Iterable[tuple[str, OptionValue]]) -> list[str]:
    arguments = []
    for name, value in options:
        if value is None or value is False:
            continue
        arguments.append(f"-{name}")
        if value is not True:
            arguments.append(str(value))
    return arguments


class WsimportTask(Task):
    """Runs wsimport on each WSDL file of a source set.

    Each file is compiled from the source directory it was found in, so the Java package follows
    the file's directory and the generated `wsdlLocation` is just its file name.
    """

    def __init__(self, name: str, project: Project) -> None:
        super().__init__(name, project)
        self.destination_dir: Path | None = None
        self.wsdls: FileTree | None = None
        self.bindings: FileTree | None = None
        self.subsystem = WsimportSubsystem()
        self._xjc_extensions: tuple[str, ...] = ()

    @property
    def xjc_extensions(self) -> tuple[str, ...]:
        return self._xjc_extensions

    @xjc_extensions.setter
    def xjc_extensions(self, extensions: Iterable[str]) -> None:
        self._xjc_extensions = tuple(extensions)

    def _visit_wsdls(self) -> list[FileVisitDetails]:
        if self.wsdls is None or self.bindings is None or self.destination_dir is None:
            raise TaskError(
                f"Task {self.name} needs WSDLs, bindings and a destination directory.",
                failed_tasks=[self.name],
            )
        return list(self.wsdls.visit())

    def _distribution(self) -> Distribution:
        try:
            return Distribution.locate(self.subsystem.java_home)
        except Distribution.Error as e:
            raise TaskError(str(e), failed_tasks=[self.name])

    def execute(self) -> None:
        wsdls = self._visit_wsdls()
        if not wsdls:
            logger.info("%s: no WSDL files found", self.name)
            return

        executor = SubprocessExecutor(self._distribution())
        assert self.destination_dir is not None
        safe_mkdir(self.destination_dir)
        logger.info("%s: generating sources for %s", self.name, pluralize(len(wsdls), "WSDL file"))
        for details in wsdls:
            self.run_wsimport(executor, details.base_dir, details.path)

    def command_lines(self) -> list[tuple[list[str], str | Path | None]]:
        """Returns the command lines and working directories `execute` would run, without running
        anything."""
        wsdls = self._visit_wsdls()
        if not wsdls:
            return []
        grabber = CommandLineGrabber(self._distribution())
        for details in wsdls:
            self.run_wsimport(grabber, details.base_dir, details.path)
        return grabber.commands

    def wsimport_arguments(self, wsdl_file: PurePath) -> list[str]:
        """Returns the wsimport arguments compiling `wsdl_file`, a path relative to its source
        directory."""
        assert self.bindings is not None
        xjc_classpath = self.project.configurations[XJC_CONFIGURATION].as_path()

        options: list[tuple[str, OptionValue]] = [
            ("p", package_name(wsdl_file)),
            ("wsdllocation", wsdl_file.name),
            ("s", self.destination_dir),
            ("extension", True),
            ("Xnocompile", True),
            ("B-classpath", xjc_classpath or None),
        ]
        options.extend((f"B-X{extension}", True) for extension in self.xjc_extensions)
        if logger.isEnabledFor(logging.DEBUG):
            options.append(("Xdebug", True))
        else:
            options.append(("quiet", True))
        options.extend(("b", binding) for binding in self.bindings.files if binding.is_file())

        arguments = create_arguments(options)
        arguments.append(str(wsdl_file))
        return arguments

    def run_wsimport(self, executor: Executor, base_dir: Path, wsdl_file: PurePath) -> None:
        arguments = self.wsimport_arguments(wsdl_file)
        logger.debug("Running wsimport with arguments %s", safe_shlex_join(arguments))

        try:
            exit_code = executor.execute(
                classpath=self.project.configurations[JAXWS_CONFIGURATION].resolve(),
                main=self.subsystem.main,
                jvm_options=self.subsystem.jvm_options,
                args=arguments,
                cwd=base_dir,
            )
        except Executor.Error as e:
            raise TaskError(str(e), failed_tasks=[self.name])
        if exit_code != 0:
            raise TaskError(
                f"Error running wsimport on {base_dir / wsdl_file}",
                exit_code=exit_code,
                failed_tasks=[self.name],
            )
