from __future__ import annotations

from ..system import System


class BaseStep:
    step_id: str
    name: str

    def is_present(self, system: System) -> bool:
        raise NotImplementedError

    def install(self, system: System) -> None:
        raise NotImplementedError

    def satisfied_message(self, system: System) -> str:
        return f"{self.name} is already done."

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.step_id}>"
