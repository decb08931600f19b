from __future__ import annotations

import logging

from ..lib.brew import brew_has_cask, brew_has_formula, brew_install, find_brew, install_homebrew
from ..system import System
from .base import BaseStep

logger = logging.getLogger(__name__)


class InstallHomebrewStep(BaseStep):
    step_id = "homebrew"
    name = "Install Homebrew"

    def is_present(self, system: System) -> bool:
        return find_brew(system) is not None

    def install(self, system: System) -> None:
        install_homebrew(system)

    def satisfied_message(self, system: System) -> str:
        return "Homebrew is already installed."


class BrewFormulaStep(BaseStep):
    def __init__(self, package: str):
        self.package = package
        self.step_id = f"brew:{package}"
        self.name = f"Install {package}"

    def is_present(self, system: System) -> bool:
        return brew_has_formula(system, self.package)

    def install(self, system: System) -> None:
        brew_install(system, self.package)

    def satisfied_message(self, system: System) -> str:
        return f"{self.package} is already installed."


class BrewCaskStep(BaseStep):
    """A GUI application from the Homebrew cask catalog."""

    def __init__(self, app: str):
        self.app = app
        self.step_id = f"cask:{app}"
        self.name = f"Install {app}"

    def is_present(self, system: System) -> bool:
        return brew_has_cask(system, self.app)

    def install(self, system: System) -> None:
        brew_install(system, self.app, cask=True)

    def satisfied_message(self, system: System) -> str:
        return f"{self.app} is already installed."
