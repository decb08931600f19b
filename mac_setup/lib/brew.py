from __future__ import annotations

import logging
import os
from typing import Optional

from ..system import System
from .env import HOMEBREW_INSTALL_URL, PATHS

logger = logging.getLogger(__name__)


def find_brew(system: System) -> Optional[str]:
    """Locate the brew binary.

    Right after a fresh install brew is usually not on this process's PATH
    yet, so the standard prefixes are probed as well.
    """
    found = system.which("brew")
    if found:
        return found
    for prefix in PATHS.brew_prefixes:
        candidate = os.path.join(prefix, "brew")
        if system.is_executable(candidate):
            return candidate
    return None


def _brew(system: System) -> str:
    # Fall back to the bare name so the failure reads "brew: command not found".
    return find_brew(system) or "brew"


def install_homebrew(system: System) -> None:
    r = system.run(["curl", "-fsSL", HOMEBREW_INSTALL_URL])
    if system.dry_run:
        return
    script = r.stdout
    if not script.strip():
        raise RuntimeError(f"Empty Homebrew installer downloaded from {HOMEBREW_INSTALL_URL}")
    # The installer asks for sudo and confirmation on the terminal.
    system.run(["/bin/bash", "-c", script], interactive=True)


def brew_has_formula(system: System, name: str) -> bool:
    return system.query([_brew(system), "list", name]).ok


def brew_has_cask(system: System, name: str) -> bool:
    return system.query([_brew(system), "list", "--cask", name]).ok


def brew_install(system: System, name: str, *, cask: bool = False) -> None:
    argv = [_brew(system), "install"]
    if cask:
        argv.append("--cask")
    system.run([*argv, name], interactive=True)
