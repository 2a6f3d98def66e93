# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

"""The `wsimport-build` command line: lists, describes and runs a project's tasks."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import TextIO

from wsimport_build.backend.wsimport.naming import (
    generated_sources_directory,
    standard_component_name,
)
from wsimport_build.backend.wsimport.rules import GENERATED_GROUP, wsimport_components
from wsimport_build.backend.wsimport.wsimport_task import WsimportTask
from wsimport_build.base.exceptions import ConfigError, WsimportBuildException
from wsimport_build.engine.console import Console
from wsimport_build.init.logging import initialize_logging
from wsimport_build.init.project_loader import load_config, load_project
from wsimport_build.option.config import Config
from wsimport_build.option.global_options import GlobalOptions
from wsimport_build.project import Project
from wsimport_build.util.dirutil import fast_relpath_optional
from wsimport_build.util.logging import LogLevel
from wsimport_build.util.strutil import safe_shlex_join
from wsimport_build.version import VERSION

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wsimport-build",
        description="Generates JAX-WS client sources from a project's WSDL files.",
    )
    parser.add_argument("--version", action="version", version=str(VERSION))
    parser.add_argument(
        "--root", type=Path, default=Path("."), help="The project root. Default: %(default)s."
    )
    parser.add_argument("--config", help="The config file, relative to the project root.")
    parser.add_argument(
        "-l",
        "--level",
        choices=[level.value for level in LogLevel],
        help="Overrides the log level of the config file.",
    )
    parser.add_argument(
        "--no-colors", dest="colors", action="store_false", default=None, help="Disable colors."
    )
    parser.add_argument(
        "--print-stacktrace",
        action="store_true",
        default=None,
        help="Log stack traces along with errors.",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    tasks = subparsers.add_parser("tasks", help="List the generation tasks.")
    tasks.add_argument("--all", action="store_true", help="List the tasks of every group.")

    subparsers.add_parser("components", help="List the WSDL components and their source sets.")

    run = subparsers.add_parser("run", help="Run tasks and the tasks they depend on.")
    run.add_argument("tasks", nargs="+", metavar="TASK")
    run.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the wsimport command lines instead of running them.",
    )
    return parser


def _global_options(args: argparse.Namespace, config: Config) -> GlobalOptions:
    global_options = GlobalOptions.from_config(config)
    overrides = {
        "level": LogLevel(args.level) if args.level else None,
        "colors": args.colors,
        "print_stacktrace": args.print_stacktrace,
    }
    return replace(global_options, **{k: v for k, v in overrides.items() if v is not None})


def _display_path(project: Project, path: Path) -> str:
    return fast_relpath_optional(str(path), str(project.root)) or str(path)


def list_tasks(project: Project, console: Console, all_tasks: bool) -> None:
    groups: dict[str, list[str]] = {}
    for task in project.tasks:
        group = task.group or "other"
        if not all_tasks and group != GENERATED_GROUP:
            continue
        groups.setdefault(group, []).append(
            f"{task.name} - {task.description}" if task.description else task.name
        )
    for group, lines in groups.items():
        title = f"{group.capitalize()} tasks"
        console.print_stdout(console.cyan(title))
        console.print_stdout("-" * len(title))
        for line in lines:
            console.print_stdout(line)
        console.print_stdout("")


def list_components(project: Project, console: Console) -> None:
    for component in wsimport_components(project):
        console.print_stdout(console.cyan(component.name))
        if not len(component.sources):
            console.print_stdout("  (no source sets)")
        for wsdl_source in component.sources:
            generated = generated_sources_directory(
                project.build_dir, standard_component_name(component.name), wsdl_source.name
            )
            console.print_stdout(f"  {console.green(wsdl_source.name)}")
            for label, paths in (
                ("sources", wsdl_source.source.src_dirs),
                ("bindings", wsdl_source.bindings.src_dirs),
            ):
                rendered = ", ".join(_display_path(project, p) for p in paths)
                console.print_stdout(f"    {label}: {rendered}")
            if wsdl_source.xjc.extensions:
                console.print_stdout(f"    extensions: {', '.join(wsdl_source.xjc.extensions)}")
            console.print_stdout(f"    generated: {_display_path(project, generated)}")


def run_tasks(project: Project, console: Console, task_names: list[str], dry_run: bool) -> None:
    if not dry_run:
        project.execute(task_names)
        return
    for task in project.task_graph().execution_plan(task_names):
        if not isinstance(task, WsimportTask):
            continue
        for cmd, cwd in task.command_lines():
            console.print_stdout(console.yellow(f"# {task.name} (in {cwd})"))
            console.print_stdout(safe_shlex_join(cmd))


def main(argv: list[str] | None = None, stdout: TextIO | None = None) -> int:
    args = create_parser().parse_args(argv)
    root = args.root.absolute()
    try:
        config = load_config(root, args.config)
        global_options = _global_options(args, config)
    except ConfigError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1

    console = Console(stdout=stdout, use_colors=global_options.colors)
    with initialize_logging(
        global_options.level,
        use_color=global_options.colors,
        print_stacktrace=global_options.print_stacktrace,
    ):
        try:
            project = load_project(root, config, global_options)
            if args.command == "tasks":
                list_tasks(project, console, args.all)
            elif args.command == "components":
                list_components(project, console)
            else:
                run_tasks(project, console, args.tasks, args.dry_run)
        except WsimportBuildException as e:
            logger.error("%s", e, exc_info=True)
            return 1
        finally:
            console.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
