from __future__ import annotations

import logging

from ..identity import IdentitySource
from ..lib.git import git_config_get, git_config_set
from ..system import System
from .base import BaseStep

logger = logging.getLogger(__name__)


class GitIdentityStep(BaseStep):
    """Set the global git user.name/user.email once.

    Values are not validated here; git itself decides what it accepts.
    """

    step_id = "git:identity"
    name = "Configure Git identity"

    def __init__(self, source: IdentitySource):
        self.source = source

    def is_present(self, system: System) -> bool:
        return bool(git_config_get(system, "user.name")) and bool(git_config_get(system, "user.email"))

    def install(self, system: System) -> None:
        name = self.source.name()
        git_config_set(system, "user.name", name)
        email = self.source.email()
        git_config_set(system, "user.email", email)
        logger.info("✅ Git configured with username '%s' and email '%s'.", name, email)

    def satisfied_message(self, system: System) -> str:
        return (
            "Git is already configured with:\n"
            f"   Username: {git_config_get(system, 'user.name')}\n"
            f"   Email: {git_config_get(system, 'user.email')}"
        )
