from __future__ import annotations

import logging

from ..system import System
from .base import BaseStep

logger = logging.getLogger(__name__)


class CreateDirectoryStep(BaseStep):
    def __init__(self, path: str, label: str = "Projects"):
        self.path = path
        self.label = label
        self.step_id = f"dir:{label.lower()}"
        self.name = f"Create {label} directory"

    def is_present(self, system: System) -> bool:
        return system.expand(self.path).is_dir()

    def install(self, system: System) -> None:
        p = system.expand(self.path)
        if p.exists():
            raise FileExistsError(f"{p} exists and is not a directory")
        logger.info("📂 Creating %s directory at %s...", self.label, p)
        system.make_dirs(p)

    def satisfied_message(self, system: System) -> str:
        return f"{self.label} directory already exists."
