# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

"""Generates JAX-WS client stubs from WSDL files with wsimport.

Applying the plugin also applies the JVM base plugin. Generated sources are compiled with the
binary's Java sources and the WSDL files are shipped as its resources.
"""

from __future__ import annotations

import functools

from wsimport_build.backend.wsimport.rules import (
    COMPONENTS_EXTENSION,
    SUBSYSTEM_EXTENSION,
    initialize_wsdl_source_set,
    install_rules,
    wsimport_components,
)
from wsimport_build.backend.wsimport.subsystem import (
    JAXWS_TOOLS_COORDINATE,
    WsimportSubsystem,
    expand_classpath,
)
from wsimport_build.backend.wsimport.target_types import WsdlSourceSet, WsimportComponent
from wsimport_build.backend.wsimport.wsimport_task import JAXWS_CONFIGURATION, XJC_CONFIGURATION
from wsimport_build.base.exceptions import ConfigError
from wsimport_build.engine.container import NamedContainer
from wsimport_build.jvm.register import COMPILE_CLASSPATH, JvmBasePlugin
from wsimport_build.option.config import COMPONENTS_SECTION, Config
from wsimport_build.project import Project


class WsimportPlugin:
    def apply(self, project: Project) -> None:
        project.apply(JvmBasePlugin)

        jaxws = project.configurations.create(JAXWS_CONFIGURATION)
        jaxws.description = "The JAX-WS libraries used."
        jaxws.visible = False
        jaxws.transitive = True
        jaxws.extends_from(project.configurations[COMPILE_CLASSPATH])
        jaxws.dependencies.append(JAXWS_TOOLS_COORDINATE)

        xjc = project.configurations.create(XJC_CONFIGURATION)
        xjc.description = "The plugin libraries used for xjc."
        xjc.visible = False
        xjc.transitive = True

        project.extensions[COMPONENTS_EXTENSION] = NamedContainer(
            "wsimport component",
            lambda name: WsimportComponent(name, project.root, [initialize_wsdl_source_set]),
        )
        install_rules(project)


def configure_subsystem(project: Project, subsystem: WsimportSubsystem) -> None:
    """Installs the tool options and fills the classpath configurations from them."""
    project.extensions[SUBSYSTEM_EXTENSION] = subsystem
    configurations = project.configurations
    configurations[JAXWS_CONFIGURATION].files.extend(
        expand_classpath(project.root, subsystem.jaxws_classpath)
    )
    configurations[XJC_CONFIGURATION].files.extend(
        expand_classpath(project.root, subsystem.xjc_classpath)
    )
    configurations[COMPILE_CLASSPATH].files.extend(
        expand_classpath(project.root, subsystem.compile_classpath)
    )


_SOURCE_SET_KEYS = ("extensions", "source_dirs", "binding_dirs", "includes", "excludes")


def configure_components(project: Project, config: Config) -> None:
    """Declares the components and source sets of the `[components]` section.

    Each `[components.<component>.sources.<source set>]` table may override the conventional
    directories and patterns, and lists the xjc extensions to enable.
    """
    components = wsimport_components(project)
    for component_name, component_values in config.section(COMPONENTS_SECTION).items():
        where = f"[{COMPONENTS_SECTION}.{component_name}]"
        if not isinstance(component_values, dict):
            raise ConfigError(f"Expected {where} in {config.source} to be a table.")
        config.validate_keys(where, component_values, ("sources",))
        sources = component_values.get("sources", {})
        if not isinstance(sources, dict):
            raise ConfigError(f"Expected sources under {where} in {config.source} to be a table.")
        component = components.maybe_create(component_name)

        for source_name, values in sources.items():
            source_where = f"{where[:-1]}.sources.{source_name}]"
            if not isinstance(values, dict):
                raise ConfigError(f"Expected {source_where} in {config.source} to be a table.")
            config.validate_keys(source_where, values, _SOURCE_SET_KEYS)
            options = {key: config.get_list(source_where, values, key) for key in values}
            component.sources.create(source_name, functools.partial(_configure, options))


def _configure(options: dict[str, tuple[str, ...]], wsdl_source: WsdlSourceSet) -> None:
    if "source_dirs" in options:
        wsdl_source.source.set_src_dirs(options["source_dirs"])
    if "binding_dirs" in options:
        wsdl_source.bindings.set_src_dirs(options["binding_dirs"])
    if "includes" in options:
        wsdl_source.source.set_includes(options["includes"])
    wsdl_source.source.exclude(*options.get("excludes", ()))
    wsdl_source.xjc.extensions = options.get("extensions", ())
