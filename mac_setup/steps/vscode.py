from __future__ import annotations

from ..lib.vscode import install_extension, list_extensions
from ..system import System
from .base import BaseStep


class VSCodeExtensionStep(BaseStep):
    def __init__(self, extension_id: str):
        self.extension_id = extension_id
        self.step_id = f"vscode:{extension_id}"
        self.name = f"Install VS Code extension {extension_id}"

    def is_present(self, system: System) -> bool:
        return self.extension_id.lower() in list_extensions(system)

    def install(self, system: System) -> None:
        install_extension(system, self.extension_id)

    def satisfied_message(self, system: System) -> str:
        return f"{self.extension_id} is already installed."
