from __future__ import annotations

import logging
from typing import Optional, Protocol

from .system import System

logger = logging.getLogger(__name__)


class IdentityUnavailableError(RuntimeError):
    pass


class IdentitySource(Protocol):
    def name(self) -> str:
        ...

    def email(self) -> str:
        ...


class PromptIdentitySource:
    """Ask the operator on the console (blocks until a line is entered)."""

    def __init__(self, system: System):
        self.system = system

    def name(self) -> str:
        return self.system.ask("Enter your Git username: ")

    def email(self) -> str:
        return self.system.ask("Enter your Git email: ")


class ConfiguredIdentitySource:
    """Values from the config file or environment, prompting for what is missing.

    With fallback=None (non-interactive runs) a missing value is an error.
    """

    def __init__(
        self,
        name: Optional[str],
        email: Optional[str],
        fallback: Optional[IdentitySource] = None,
    ):
        self._name = name
        self._email = email
        self.fallback = fallback

    def _value(self, value: Optional[str], what: str) -> str:
        if value:
            return value
        if self.fallback is None:
            raise IdentityUnavailableError(
                f"git {what} is not configured and prompting is disabled "
                f"(set git.{what} in the config or MAC_SETUP_GIT_{what.upper()})"
            )
        return getattr(self.fallback, what)()

    def name(self) -> str:
        return self._value(self._name, "name")

    def email(self) -> str:
        return self._value(self._email, "email")
