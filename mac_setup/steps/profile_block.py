from __future__ import annotations

from ..profile import ProfileAppender, ProfileBlock
from ..system import System
from .base import BaseStep


class ProfileBlockStep(BaseStep):
    def __init__(self, step_id: str, name: str, block: ProfileBlock, appender: ProfileAppender):
        self.step_id = step_id
        self.name = name
        self.block = block
        self.appender = appender

    def is_present(self, system: System) -> bool:
        return self.appender.contains(self.block.marker)

    def install(self, system: System) -> None:
        self.appender.ensure_block(self.block)

    def satisfied_message(self, system: System) -> str:
        return f"{self.name}: already present in {self.appender.path}."
