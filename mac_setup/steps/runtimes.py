"""Language runtimes through asdf: add the plugin, install a version, pin it globally."""

from __future__ import annotations

from ..lib import asdf
from ..system import System
from .base import BaseStep


class AsdfPluginStep(BaseStep):
    def __init__(self, plugin: str):
        self.plugin = plugin
        self.step_id = f"asdf:plugin:{plugin}"
        self.name = f"Add asdf plugin {plugin}"

    def is_present(self, system: System) -> bool:
        return self.plugin in asdf.plugin_list(system)

    def install(self, system: System) -> None:
        asdf.plugin_add(system, self.plugin)

    def satisfied_message(self, system: System) -> str:
        return f"asdf plugin {self.plugin} is already added."


class AsdfInstallStep(BaseStep):
    def __init__(self, plugin: str, version: str):
        self.plugin = plugin
        self.version = version
        self.step_id = f"asdf:install:{plugin}"
        self.name = f"Install {plugin} {version}"

    def is_present(self, system: System) -> bool:
        version = asdf.resolve_version(system, self.plugin, self.version)
        return asdf.has_version(system, self.plugin, version)

    def install(self, system: System) -> None:
        version = asdf.resolve_version(system, self.plugin, self.version)
        asdf.install_version(system, self.plugin, version)

    def satisfied_message(self, system: System) -> str:
        return f"{self.plugin} {self.version} is already installed."


class AsdfGlobalStep(BaseStep):
    def __init__(self, plugin: str, version: str):
        self.plugin = plugin
        self.version = version
        self.step_id = f"asdf:global:{plugin}"
        self.name = f"Set global {plugin} version"

    def is_present(self, system: System) -> bool:
        version = asdf.resolve_version(system, self.plugin, self.version)
        return asdf.global_version(system, self.plugin) == version

    def install(self, system: System) -> None:
        version = asdf.resolve_version(system, self.plugin, self.version)
        asdf.set_global(system, self.plugin, version)

    def satisfied_message(self, system: System) -> str:
        return f"Global {self.plugin} is already {asdf.global_version(system, self.plugin)}."
